"""Logging adapter for progress reporting."""

import logging

from ..core.interfaces import ProgressEvent, ProgressReporter

logger = logging.getLogger("milestone_release_notes.progress")


class LoggingProgressReporter(ProgressReporter):
	"""Write progress events to the log, errors as errors and everything else as debug."""

	def report(self, event: ProgressEvent) -> None:
		level = logging.ERROR if event.type == "error" else logging.DEBUG
		logger.log(level, "[%s] %s", event.type, event.message)
