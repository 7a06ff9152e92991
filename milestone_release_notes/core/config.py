from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class GitHubConfig:
	token: str
	owner: str | None = None

	def __post_init__(self):
		if not self.token:
			raise ValueError("GitHub token is required")


@dataclass
class LabelConfig:
	"""Labels used to categorise the issues of a milestone.

	Attributes:
		include: Labels that produce a section in the release notes, in display order.
		exclude: Labels that are valid on an issue but never rendered.
	"""

	include: list[str] = field(default_factory=lambda: ["Bug", "Feature", "Improvement"])
	exclude: list[str] = field(default_factory=lambda: ["Internal Refactoring"])

	def __post_init__(self):
		if not self.include:
			raise ValueError("At least one include label is required")
		if len(set(self.include)) != len(self.include):
			raise ValueError(f"Duplicate include labels: {self.include}")

	@property
	def legal_labels(self) -> list[str]:
		"""Union of include and exclude labels, in declaration order."""
		return list(dict.fromkeys([*self.include, *self.exclude]))


@dataclass
class FooterConfig:
	"""Where to look for a footer file and how to build the default footer.

	Attributes:
		paths: Candidate footer files, the first existing one wins.
		download_site: Link text of the default footer.
		download_url_template: URL of the default footer. Formatted with
			`repository` (repository name) and `milestone` (milestone title).
	"""

	paths: list[Path] = field(default_factory=lambda: [Path("footer.md"), Path("footer.txt")])
	download_site: str = "chocolatey"
	download_url_template: str = "https://chocolatey.org/packages/{repository}/{milestone}"

	def get_download_url(self, repository: str, milestone: str) -> str:
		return self.download_url_template.format(repository=repository, milestone=milestone)


@dataclass
class ReleaseNotesConfig:
	github: GitHubConfig
	labels: LabelConfig = field(default_factory=LabelConfig)
	footer: FooterConfig = field(default_factory=FooterConfig)
