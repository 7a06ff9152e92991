from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
	from milestone_release_notes.models import Issue, Milestone, Repository


class HostingClient(Protocol):
	"""Read access to milestones, issues and commits on the hosting service."""

	def get_milestones(self, repository: "Repository") -> list["Milestone"]:
		"""Return all milestones of the repository, in no particular order."""
		...

	def get_issues(self, repository: "Repository", milestone: "Milestone") -> list["Issue"]:
		"""Return the closed issues of a milestone."""
		...

	def count_commits_between(
		self,
		repository: "Repository",
		previous: "Milestone | None",
		target: "Milestone",
	) -> int:
		"""Count commits reachable from `target` but not from `previous`.

		Without a previous milestone, count all commits up to `target`.
		"""
		...


class FooterSource(Protocol):
	def read(self) -> str | None:
		"""Return the footer text, or None to use the default footer."""
		...


@dataclass
class ProgressEvent:
	type: str  # "info", "success", "error", "markdown"
	message: str
	metadata: dict[str, Any] | None = None


class ProgressReporter(ABC):
	@abstractmethod
	def report(self, event: ProgressEvent) -> None:
		"""Report a progress event."""
		pass


class NullProgressReporter(ProgressReporter):
	"""No-op reporter for library usage."""

	def report(self, event: ProgressEvent) -> None:
		pass


class CompositeProgressReporter(ProgressReporter):
	"""Combine multiple reporters."""

	def __init__(self, reporters: list[ProgressReporter]):
		self.reporters = reporters

	def report(self, event: ProgressEvent) -> None:
		for reporter in self.reporters:
			reporter.report(event)
