from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ._utils import pluralize
from .issue import Issue
from .milestone import Milestone
from .repository import Repository

if TYPE_CHECKING:
	from ..core.config import FooterConfig, LabelConfig


@dataclass(frozen=True)
class ReleaseNotesRequest:
	repository: Repository
	milestone_title: str


@dataclass(frozen=True)
class ReleaseNotes:
	"""Everything needed to render the release notes of one milestone."""

	repository: Repository
	milestone: Milestone
	labels: "LabelConfig"
	footer: "FooterConfig"
	issues: list[Issue] = field(default_factory=list)
	previous_milestone: Milestone | None = None
	commit_count: int = 0
	footer_text: str | None = None

	@property
	def commits_link(self) -> str:
		"""Link to the commits of this release.

		Compares against the previous milestone if there is one, else lists
		all commits up to this milestone.
		"""
		if self.previous_milestone is None:
			return f"{self.repository.html_url}/commits/{self.milestone.title}"

		return f"{self.repository.html_url}/compare/{self.previous_milestone.title}...{self.milestone.title}"

	def get_issues_with_label(self, label: str) -> list[Issue]:
		return [issue for issue in self.issues if issue.has_label(label)]

	def serialize(self) -> str:
		notes = self._serialize_summary()
		notes += f"{self.milestone.description}\n\n"

		for label in self.labels.include:
			notes += self._serialize_section(label)

		notes += self._serialize_footer()
		return notes

	def _serialize_summary(self) -> str:
		issues_text = pluralize(len(self.issues), "issue")
		commits_text = pluralize(self.commit_count, "commit")

		if self.issues and self.commit_count > 0:
			return (
				f"As part of this release we had [{commits_text}]({self.commits_link}) "
				f"which resulted in [{issues_text}]({self.milestone.html_url}) being closed.\n"
			)

		if self.issues:
			return f"As part of this release we had [{issues_text}]({self.milestone.html_url}) closed.\n"

		if self.commit_count > 0:
			return f"As part of this release we had [{commits_text}]({self.commits_link}).\n"

		return ""

	def _serialize_section(self, label: str) -> str:
		issues = self.get_issues_with_label(label)
		if not issues:
			return ""

		heading = label if len(issues) == 1 else f"{label}s"
		lines = "".join(f"{issue}\n" for issue in issues)
		return f"__{heading}__\n\n{lines}\n"

	def _serialize_footer(self) -> str:
		if self.footer_text is not None:
			return self.footer_text

		download_url = self.footer.get_download_url(self.repository.name, self.milestone.title)
		return f"### Where to get it\nYou can download this release from [{self.footer.download_site}]({download_url})"
