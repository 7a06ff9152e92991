"""High-level API for library usage of milestone_release_notes."""

from pathlib import Path

from .assembler import assemble_release_notes
from .core.config import (
	FooterConfig,
	GitHubConfig,
	LabelConfig,
	ReleaseNotesConfig,
)
from .core.interfaces import HostingClient, NullProgressReporter, ProgressEvent, ProgressReporter
from .footer import FileFooterSource
from .github_client import GitHubClient
from .models import ReleaseNotesRequest, Repository


class ReleaseNotesClient:
	"""High-level client for generating release notes."""

	def __init__(
		self,
		config: ReleaseNotesConfig,
		progress_reporter: ProgressReporter | None = None,
		hosting_client: HostingClient | None = None,
	):
		self.config = config
		self.progress_reporter = progress_reporter or NullProgressReporter()
		self.github = hosting_client or GitHubClient(config.github.token)

	def generate_release_notes(
		self,
		owner: str,
		repo: str,
		milestone: str,
	) -> str:
		"""Generate release notes for the milestone of a repository.

		Args:
			owner: Repository owner
			repo: Repository name
			milestone: Title of the milestone

		Returns:
			Formatted release notes as markdown
		"""
		return assemble_release_notes(
			ReleaseNotesRequest(Repository(owner, repo), milestone),
			self.config.labels,
			self.github,
			footer_source=FileFooterSource(self.config.footer.paths),
			footer=self.config.footer,
			progress_reporter=self.progress_reporter,
		)

	def publish_release(
		self,
		owner: str,
		repo: str,
		milestone: str,
		notes: str,
	) -> str:
		"""Create a draft release on GitHub, tagged and named after the milestone.

		Returns:
			URL of the created release
		"""
		if not isinstance(self.github, GitHubClient):
			raise TypeError("Publishing releases requires a GitHubClient")

		release = self.github.create_release(Repository(owner, repo), tag=milestone, name=milestone, body=notes)
		self.progress_reporter.report(ProgressEvent("success", f"Created draft release {release['html_url']}"))
		return release["html_url"]


class ReleaseNotesBuilder:
	"""Builder pattern for constructing ReleaseNotesClient."""

	def __init__(self):
		self._github_token = None
		self._github_owner = None
		self._include_labels = None
		self._exclude_labels = None
		self._footer_paths = None
		self._download_site = None
		self._download_url_template = None
		self._progress_reporter = None
		self._hosting_client = None

	def with_github_token(self, token: str, owner: str | None = None) -> "ReleaseNotesBuilder":
		"""Set GitHub authentication token."""
		self._github_token = token
		self._github_owner = owner
		return self

	def with_labels(
		self,
		include: list[str] | None = None,
		exclude: list[str] | None = None,
	) -> "ReleaseNotesBuilder":
		"""Set the labels that categorise issues. Include labels are rendered in the given order."""
		if include is not None:
			self._include_labels = include
		if exclude is not None:
			self._exclude_labels = exclude
		return self

	def with_footer_file(self, *paths: Path) -> "ReleaseNotesBuilder":
		"""Set the candidate footer files, the first existing one is used."""
		self._footer_paths = list(paths)
		return self

	def with_download_link(self, site: str, url_template: str) -> "ReleaseNotesBuilder":
		"""Set the link of the default footer."""
		self._download_site = site
		self._download_url_template = url_template
		return self

	def with_progress_reporter(self, reporter: ProgressReporter) -> "ReleaseNotesBuilder":
		"""Set custom progress reporter."""
		self._progress_reporter = reporter
		return self

	def with_hosting_client(self, client: HostingClient) -> "ReleaseNotesBuilder":
		"""Use another hosting client instead of the GitHub API."""
		self._hosting_client = client
		return self

	def build(self) -> ReleaseNotesClient:
		"""Build the client with configured options.

		Raises:
			ValueError: If required configuration is missing
		"""
		if not self._github_token:
			raise ValueError("GitHub token is required")

		labels = LabelConfig()
		footer = FooterConfig()
		config = ReleaseNotesConfig(
			github=GitHubConfig(token=self._github_token, owner=self._github_owner),
			labels=LabelConfig(
				include=self._include_labels if self._include_labels is not None else labels.include,
				exclude=self._exclude_labels if self._exclude_labels is not None else labels.exclude,
			),
			footer=FooterConfig(
				paths=self._footer_paths if self._footer_paths is not None else footer.paths,
				download_site=self._download_site or footer.download_site,
				download_url_template=self._download_url_template or footer.download_url_template,
			),
		)

		return ReleaseNotesClient(config, self._progress_reporter, self._hosting_client)
