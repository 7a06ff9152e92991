"""Assemble release notes from the milestones, issues and commits of a repository."""

import logging

from .core.config import FooterConfig, LabelConfig
from .core.errors import InvalidIssueLabeling, MilestoneNotFound
from .core.interfaces import (
	FooterSource,
	HostingClient,
	NullProgressReporter,
	ProgressEvent,
	ProgressReporter,
)
from .models import Issue, Milestone, ReleaseNotes, ReleaseNotesRequest

logger = logging.getLogger(__name__)


def find_target_milestone(milestones: list[Milestone], title: str) -> Milestone:
	"""Return the milestone with exactly this title.

	Raises:
		MilestoneNotFound: If no milestone has this title.
	"""
	for milestone in milestones:
		if milestone.title == title:
			return milestone

	raise MilestoneNotFound(title)


def find_previous_milestone(milestones: list[Milestone], target: Milestone) -> Milestone | None:
	"""Return the milestone with the highest version below the target's version.

	Raises:
		InvalidMilestoneVersion: If any milestone title doesn't contain a version.
	"""
	target_version = target.version
	seen: set[int] = set()

	for milestone in sorted(milestones, key=lambda m: m.version, reverse=True):
		if milestone.number in seen:
			continue
		seen.add(milestone.number)

		if milestone.version < target_version:
			return milestone

	return None


def validate_issue_labels(issue: Issue, labels: LabelConfig) -> None:
	"""Check that the issue carries exactly one include label.

	Exclude labels are not counted, so an issue with one include label and
	any number of exclude labels is valid.

	Raises:
		InvalidIssueLabeling: If the issue has no include label or more than one.
	"""
	count = sum(1 for label in labels.include if issue.has_label(label))
	if count != 1:
		raise InvalidIssueLabeling(issue.html_url, labels.legal_labels)


def build_release_notes(
	request: ReleaseNotesRequest,
	labels: LabelConfig,
	hosting_client: HostingClient,
	footer_source: FooterSource | None = None,
	footer: FooterConfig | None = None,
	progress_reporter: ProgressReporter | None = None,
) -> ReleaseNotes:
	"""Fetch and validate everything needed to render the release notes of a milestone.

	Errors of the hosting client propagate unchanged. Nothing is returned
	unless every issue passed validation.
	"""
	reporter = progress_reporter or NullProgressReporter()
	repository = request.repository

	milestones = hosting_client.get_milestones(repository)
	logger.debug("Loaded %d milestones of %s", len(milestones), repository)

	target = find_target_milestone(milestones, request.milestone_title)
	reporter.report(ProgressEvent("info", f"Building release notes for milestone {target.title}"))

	issues = hosting_client.get_issues(repository, target)
	for issue in issues:
		validate_issue_labels(issue, labels)

	previous = find_previous_milestone(milestones, target)
	logger.debug("Previous milestone of %s is %s", target.title, previous.title if previous else None)

	commit_count = hosting_client.count_commits_between(repository, previous, target)
	reporter.report(
		ProgressEvent(
			"info",
			f"Found {len(issues)} closed issues and {commit_count} commits",
			metadata={"issues": len(issues), "commits": commit_count},
		)
	)

	return ReleaseNotes(
		repository=repository,
		milestone=target,
		labels=labels,
		footer=footer or FooterConfig(),
		issues=list(issues),
		previous_milestone=previous,
		commit_count=commit_count,
		footer_text=footer_source.read() if footer_source else None,
	)


def assemble_release_notes(
	request: ReleaseNotesRequest,
	labels: LabelConfig,
	hosting_client: HostingClient,
	footer_source: FooterSource | None = None,
	footer: FooterConfig | None = None,
	progress_reporter: ProgressReporter | None = None,
) -> str:
	"""Return the release notes of a milestone as markdown.

	Raises:
		MilestoneNotFound: If the requested milestone doesn't exist.
		InvalidIssueLabeling: If an issue doesn't carry exactly one include label.
		InvalidMilestoneVersion: If a milestone title doesn't contain a version.
	"""
	release_notes = build_release_notes(
		request,
		labels,
		hosting_client,
		footer_source=footer_source,
		footer=footer,
		progress_reporter=progress_reporter,
	)
	return release_notes.serialize()
