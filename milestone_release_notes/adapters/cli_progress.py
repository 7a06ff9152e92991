"""CLI adapter for progress reporting."""

from ..core.interfaces import ProgressEvent, ProgressReporter
from ..ui import CLI


class CLIProgressReporter(ProgressReporter):
	"""Adapt ProgressReporter interface to the CLI class."""

	def __init__(self, cli: CLI):
		self.cli = cli

	def report(self, event: ProgressEvent) -> None:
		"""Route progress events to appropriate CLI methods."""
		metadata = event.metadata or {}
		if event.type == "success":
			self.cli.show_success(event.message)
		elif event.type == "error":
			self.cli.show_error(event.message)
		elif "issues" in metadata and "commits" in metadata:
			self.cli.show_totals(metadata["issues"], metadata["commits"])
		elif event.type in ("info", "markdown"):
			self.cli.show_markdown_text(event.message)
