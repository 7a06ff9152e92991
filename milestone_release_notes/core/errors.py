class ReleaseNotesError(Exception):
	"""Base class for errors that stop release notes from being built."""


class MilestoneNotFound(ReleaseNotesError):
	def __init__(self, title: str):
		self.title = title
		super().__init__(f"Could not find milestone for '{title}'.")


class InvalidIssueLabeling(ReleaseNotesError):
	"""An issue does not carry exactly one of the configured include labels."""

	def __init__(self, issue_url: str, legal_labels: list[str]):
		self.issue_url = issue_url
		self.legal_labels = legal_labels

		if len(legal_labels) > 1:
			choices = f"either {', '.join(legal_labels[:-1])} or {legal_labels[-1]}"
		else:
			choices = ", ".join(legal_labels)

		super().__init__(f"Bad issue {issue_url} expected to find a single label with {choices}.")


class InvalidMilestoneVersion(ReleaseNotesError):
	def __init__(self, title: str):
		self.title = title
		super().__init__(f"Milestone '{title}' does not contain a valid version.")
