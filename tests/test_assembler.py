"""Tests for assembling release notes from milestones, issues and commits."""

import pytest

from milestone_release_notes.assembler import (
	assemble_release_notes,
	build_release_notes,
	find_previous_milestone,
	find_target_milestone,
	validate_issue_labels,
)
from milestone_release_notes.core.config import FooterConfig, LabelConfig
from milestone_release_notes.core.errors import (
	InvalidIssueLabeling,
	InvalidMilestoneVersion,
	MilestoneNotFound,
)
from milestone_release_notes.core.interfaces import ProgressEvent, ProgressReporter
from milestone_release_notes.models import Issue, Milestone, ReleaseNotesRequest, Repository

REPOSITORY = Repository(owner="octo", name="widgets")


def make_milestone(number: int, title: str, description: str = "") -> Milestone:
	return Milestone(
		number=number,
		title=title,
		html_url=f"https://github.com/octo/widgets/milestone/{number}?closed=1",
		description=description,
	)


def make_issue(number: int, title: str, *labels: str) -> Issue:
	return Issue(
		number=number,
		title=title,
		html_url=f"https://github.com/octo/widgets/issues/{number}",
		labels=frozenset(labels),
	)


class FakeHostingClient:
	"""Serve canned milestones, issues and commit counts, recording every call."""

	def __init__(self, milestones, issues=None, commit_count=0):
		self.milestones = milestones
		self.issues = issues or []
		self.commit_count = commit_count
		self.calls = []

	def get_milestones(self, repository):
		self.calls.append(("get_milestones", repository))
		return list(self.milestones)

	def get_issues(self, repository, milestone):
		self.calls.append(("get_issues", milestone.title))
		return list(self.issues)

	def count_commits_between(self, repository, previous, target):
		self.calls.append(("count_commits_between", previous.title if previous else None, target.title))
		return self.commit_count


class FakeFooterSource:
	def __init__(self, text):
		self.text = text

	def read(self):
		return self.text


LABELS = LabelConfig(include=["Bug", "Enhancement"], exclude=["duplicate", "wontfix"])


class TestFindTargetMilestone:
	def test_returns_milestone_with_exact_title(self):
		milestones = [make_milestone(1, "1.0.0"), make_milestone(2, "1.1.0")]
		assert find_target_milestone(milestones, "1.1.0") is milestones[1]

	def test_missing_title_raises(self):
		milestones = [make_milestone(1, "1.0.0")]
		with pytest.raises(MilestoneNotFound, match="Could not find milestone for '2.0.0'.") as exc_info:
			find_target_milestone(milestones, "2.0.0")

		assert exc_info.value.title == "2.0.0"

	def test_no_milestones_raises(self):
		with pytest.raises(MilestoneNotFound):
			find_target_milestone([], "1.0.0")

	def test_title_must_match_exactly(self):
		milestones = [make_milestone(1, "1.0.0")]
		with pytest.raises(MilestoneNotFound):
			find_target_milestone(milestones, "1.0")


class TestFindPreviousMilestone:
	def setup_method(self):
		self.milestones = [
			make_milestone(2, "1.1"),
			make_milestone(3, "1.2"),
			make_milestone(1, "1.0"),
		]

	def test_previous_of_latest(self):
		previous = find_previous_milestone(self.milestones, self.milestones[1])
		assert previous.title == "1.1"

	def test_earliest_has_no_previous(self):
		assert find_previous_milestone(self.milestones, self.milestones[2]) is None

	def test_versions_are_compared_numerically(self):
		milestones = [make_milestone(1, "0.9.0"), make_milestone(2, "0.10.0"), make_milestone(3, "0.11.0")]
		assert find_previous_milestone(milestones, milestones[2]).title == "0.10.0"

	def test_duplicates_are_skipped(self):
		duplicate = make_milestone(2, "1.1")
		milestones = [*self.milestones, duplicate]
		assert find_previous_milestone(milestones, self.milestones[1]) == duplicate

	def test_same_version_is_not_previous(self):
		milestones = [make_milestone(1, "1.0"), make_milestone(2, "v1.0.0"), make_milestone(3, "0.9")]
		assert find_previous_milestone(milestones, milestones[0]).title == "0.9"

	def test_four_part_versions_raise(self):
		milestones = [make_milestone(1, "1.1.0.0"), make_milestone(2, "1.2.0.1"), make_milestone(3, "1.2.0.2")]
		with pytest.raises(InvalidMilestoneVersion, match="1.2.0.2"):
			find_previous_milestone(milestones, milestones[2])

	def test_invalid_title_raises(self):
		milestones = [*self.milestones, make_milestone(4, "Backlog")]
		with pytest.raises(InvalidMilestoneVersion, match="Backlog"):
			find_previous_milestone(milestones, self.milestones[1])


class TestValidateIssueLabels:
	def test_single_include_label_is_valid(self):
		validate_issue_labels(make_issue(1, "Crash", "Bug"), LABELS)

	def test_include_label_with_exclude_labels_is_valid(self):
		validate_issue_labels(make_issue(1, "Crash", "Bug", "duplicate", "wontfix"), LABELS)

	def test_unrelated_labels_are_ignored(self):
		validate_issue_labels(make_issue(1, "Crash", "Bug", "good first issue"), LABELS)

	def test_no_label_is_invalid(self):
		issue = make_issue(7, "Crash")
		with pytest.raises(InvalidIssueLabeling) as exc_info:
			validate_issue_labels(issue, LABELS)

		assert exc_info.value.issue_url == issue.html_url
		assert exc_info.value.legal_labels == ["Bug", "Enhancement", "duplicate", "wontfix"]
		assert str(exc_info.value) == (
			"Bad issue https://github.com/octo/widgets/issues/7 expected to find a single label "
			"with either Bug, Enhancement, duplicate or wontfix."
		)

	def test_only_exclude_label_is_invalid(self):
		with pytest.raises(InvalidIssueLabeling):
			validate_issue_labels(make_issue(1, "Dup", "duplicate"), LABELS)

	def test_two_include_labels_are_invalid(self):
		with pytest.raises(InvalidIssueLabeling):
			validate_issue_labels(make_issue(1, "Crash", "Bug", "Enhancement"), LABELS)

	def test_message_with_single_legal_label(self):
		labels = LabelConfig(include=["Bug"], exclude=[])
		with pytest.raises(InvalidIssueLabeling, match=r"with Bug\.$"):
			validate_issue_labels(make_issue(1, "Crash"), labels)


class TestAssembleReleaseNotes:
	def setup_method(self):
		self.previous = make_milestone(1, "1.1.0")
		self.target = make_milestone(2, "1.2.0", description="Bug fixes")
		self.issues = [
			make_issue(10, "Fix crash on start", "Bug"),
			make_issue(11, "Faster startup", "Enhancement"),
		]

	def assemble(self, client, footer_source=None, title="1.2.0"):
		return assemble_release_notes(
			ReleaseNotesRequest(REPOSITORY, title),
			LABELS,
			client,
			footer_source=footer_source,
		)

	def test_end_to_end(self):
		client = FakeHostingClient([self.previous, self.target], self.issues, commit_count=5)
		notes = self.assemble(client, FakeFooterSource("Thanks!"))

		assert notes == (
			"As part of this release we had [5 commits](https://github.com/octo/widgets/compare/1.1.0...1.2.0) "
			"which resulted in [2 issues](https://github.com/octo/widgets/milestone/2?closed=1) being closed.\n"
			"Bug fixes\n\n"
			"__Bug__\n\n"
			"- [#10](https://github.com/octo/widgets/issues/10) Fix crash on start\n\n"
			"__Enhancement__\n\n"
			"- [#11](https://github.com/octo/widgets/issues/11) Faster startup\n\n"
			"Thanks!"
		)

	def test_collaborator_calls_are_sequential(self):
		client = FakeHostingClient([self.previous, self.target], self.issues, commit_count=5)
		self.assemble(client)

		assert client.calls == [
			("get_milestones", REPOSITORY),
			("get_issues", "1.2.0"),
			("count_commits_between", "1.1.0", "1.2.0"),
		]

	def test_missing_milestone_aborts_before_fetching_issues(self):
		client = FakeHostingClient([self.previous, self.target], self.issues)

		with pytest.raises(MilestoneNotFound):
			self.assemble(client, title="9.9.9")

		assert client.calls == [("get_milestones", REPOSITORY)]

	def test_invalid_issue_aborts_without_counting_commits(self):
		issues = [*self.issues, make_issue(12, "Unlabelled")]
		client = FakeHostingClient([self.previous, self.target], issues, commit_count=5)

		with pytest.raises(InvalidIssueLabeling, match="issues/12"):
			self.assemble(client)

		assert ("count_commits_between", "1.1.0", "1.2.0") not in client.calls

	def test_first_milestone_links_to_all_commits(self):
		client = FakeHostingClient([self.target], self.issues, commit_count=1)
		notes = self.assemble(client)

		assert notes.startswith(
			"As part of this release we had [1 commit](https://github.com/octo/widgets/commits/1.2.0) "
			"which resulted in [2 issues]"
		)
		assert client.calls[-1] == ("count_commits_between", None, "1.2.0")

	def test_default_footer(self):
		client = FakeHostingClient([self.previous, self.target], self.issues, commit_count=5)
		notes = self.assemble(client, FakeFooterSource(None))

		assert notes.endswith(
			"### Where to get it\n"
			"You can download this release from [chocolatey](https://chocolatey.org/packages/widgets/1.2.0)"
		)

	def test_idempotent(self):
		client = FakeHostingClient([self.previous, self.target], self.issues, commit_count=5)
		assert self.assemble(client) == self.assemble(client)

	def test_build_returns_model(self):
		client = FakeHostingClient([self.previous, self.target], self.issues, commit_count=5)
		release_notes = build_release_notes(
			ReleaseNotesRequest(REPOSITORY, "1.2.0"),
			LABELS,
			client,
			footer=FooterConfig(download_site="PyPI", download_url_template="https://pypi.org/project/{repository}/{milestone}"),
		)

		assert release_notes.milestone == self.target
		assert release_notes.previous_milestone == self.previous
		assert release_notes.commit_count == 5
		assert release_notes.issues == self.issues
		assert release_notes.serialize().endswith("[PyPI](https://pypi.org/project/widgets/1.2.0)")

	def test_progress_is_reported(self):
		class EventCapturingReporter(ProgressReporter):
			def __init__(self):
				self.events = []

			def report(self, event: ProgressEvent) -> None:
				self.events.append(event)

		reporter = EventCapturingReporter()
		client = FakeHostingClient([self.previous, self.target], self.issues, commit_count=5)
		assemble_release_notes(ReleaseNotesRequest(REPOSITORY, "1.2.0"), LABELS, client, progress_reporter=reporter)

		assert [event.type for event in reporter.events] == ["info", "info"]
		assert reporter.events[1].metadata == {"issues": 2, "commits": 5}

	def test_hosting_client_errors_propagate(self):
		class FailingClient(FakeHostingClient):
			def count_commits_between(self, repository, previous, target):
				raise ConnectionError("boom")

		client = FailingClient([self.previous, self.target], self.issues)
		with pytest.raises(ConnectionError, match="boom"):
			self.assemble(client)
