import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileFooterSource:
	"""Read the release notes footer from the first existing file."""

	def __init__(self, paths: list[Path]):
		self.paths = paths

	def read(self) -> str | None:
		for path in self.paths:
			if not path.is_file():
				continue

			logger.debug("Using footer from %s", path)
			with open(path, encoding="utf-8") as f:
				return f.read()

		return None
