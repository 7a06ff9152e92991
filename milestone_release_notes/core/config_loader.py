import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

from .config import (
	FooterConfig,
	GitHubConfig,
	LabelConfig,
	ReleaseNotesConfig,
)


class ConfigLoader(ABC):
	@abstractmethod
	def load(self) -> ReleaseNotesConfig:
		"""Load configuration from source."""
		pass


def _build_labels(include: list[str] | None, exclude: list[str] | None) -> LabelConfig:
	labels = LabelConfig()
	return LabelConfig(
		include=list(include) if include is not None else labels.include,
		exclude=list(exclude) if exclude is not None else labels.exclude,
	)


def _build_footer(
	paths: list[str] | None,
	download_site: str | None,
	download_url_template: str | None,
) -> FooterConfig:
	footer = FooterConfig()
	return FooterConfig(
		paths=[Path(path) for path in paths] if paths is not None else footer.paths,
		download_site=download_site or footer.download_site,
		download_url_template=download_url_template or footer.download_url_template,
	)


class DictConfigLoader(ConfigLoader):
	"""Load from dictionary (for programmatic usage)."""

	def __init__(self, config_dict: dict[str, Any]):
		self.config_dict = config_dict

	def load(self) -> ReleaseNotesConfig:
		return ReleaseNotesConfig(
			github=GitHubConfig(
				token=self.config_dict["github_token"],
				owner=self.config_dict.get("github_owner"),
			),
			labels=_build_labels(
				self.config_dict.get("include_labels"),
				self.config_dict.get("exclude_labels"),
			),
			footer=_build_footer(
				self.config_dict.get("footer_paths"),
				self.config_dict.get("download_site"),
				self.config_dict.get("download_url_template"),
			),
		)


class EnvConfigLoader(ConfigLoader):
	"""Load from .env file."""

	def __init__(self, env_path: str = ".env"):
		self.env_path = env_path

	def load(self) -> ReleaseNotesConfig:
		config = dotenv_values(self.env_path)

		github_token = config.get("GH_TOKEN")
		if not github_token:
			raise ValueError("GH_TOKEN is required in .env file")

		return ReleaseNotesConfig(
			github=GitHubConfig(token=github_token, owner=config.get("DEFAULT_OWNER")),
			labels=_build_labels(
				self._parse_list(config.get("ISSUE_LABELS_INCLUDE")),
				self._parse_list(config.get("ISSUE_LABELS_EXCLUDE")),
			),
			footer=_build_footer(
				self._parse_list(config.get("FOOTER_PATHS")),
				config.get("DOWNLOAD_SITE"),
				config.get("DOWNLOAD_URL_TEMPLATE"),
			),
		)

	def _parse_list(self, value: str | None) -> list[str] | None:
		"""Split a comma separated value, keeping order. Unset values fall back to defaults."""
		if value is None:
			return None
		return [item.strip() for item in value.split(",") if item.strip()]


class TomlConfigLoader(ConfigLoader):
	"""Load from TOML file (default config format)."""

	DEFAULT_CONFIG_PATH = Path.home() / ".milestone-release-notes" / "config.toml"

	def __init__(self, config_path: Path | str | None = None):
		"""Initialize TOML config loader.

		Args:
			config_path: Path to config file. If None, uses DEFAULT_CONFIG_PATH.
		"""
		if config_path is None:
			self.config_path = self.DEFAULT_CONFIG_PATH
		else:
			self.config_path = Path(config_path)

	def load(self) -> ReleaseNotesConfig:
		"""Load configuration from TOML file.

		Raises:
			FileNotFoundError: If config file doesn't exist
			ValueError: If required fields are missing or invalid
		"""
		if not self.config_path.exists():
			raise FileNotFoundError(
				f"Config file not found at {self.config_path}. "
				f"Create it with the required fields or use --config-path to specify a different location."
			)

		with open(self.config_path, "rb") as f:
			config = tomllib.load(f)

		github_config = config.get("github", {})
		labels_config = config.get("labels", {})
		footer_config = config.get("footer", {})

		github_token = github_config.get("token")
		if not github_token:
			raise ValueError("github.token is required in config file")

		return ReleaseNotesConfig(
			github=GitHubConfig(
				token=github_token,
				owner=github_config.get("owner"),
			),
			labels=_build_labels(labels_config.get("include"), labels_config.get("exclude")),
			footer=_build_footer(
				footer_config.get("paths"),
				footer_config.get("download_site"),
				footer_config.get("download_url_template"),
			),
		)
