from dataclasses import dataclass

import semver

from ..core.errors import InvalidMilestoneVersion
from ._utils import parse_version


@dataclass(frozen=True)
class Milestone:
	number: int
	title: str
	html_url: str
	description: str = ""
	state: str = "closed"

	@property
	def version(self) -> semver.Version:
		"""Return the version encoded in the title.

		Raises:
			InvalidMilestoneVersion: If the title doesn't contain a version.
		"""
		version = parse_version(self.title)
		if version is None:
			raise InvalidMilestoneVersion(self.title)
		return version

	@classmethod
	def from_dict(cls, data: dict) -> "Milestone":
		return cls(
			number=data["number"],
			title=data["title"],
			html_url=data["html_url"],
			description=data.get("description") or "",
			state=data.get("state", "closed"),
		)
