import re

import semver

# First version-like token in a milestone title, e.g. "v1.2", "Release 0.11.3" or "2.0.0-beta.1".
# A token with more than three numeric parts, such as "1.2.0.1", does not match.
VERSION_TOKEN = re.compile(r"(?<![\d.])v?(\d+(?:\.\d+){0,2})(?!\.?\d)((?:-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?)")


def parse_version(title: str) -> semver.Version | None:
	"""Parse the version out of a milestone title.

	Missing minor and patch parts are filled with zero and leading zeroes are
	dropped, so that loosely written titles still order correctly.

	Examples:
	'1.2.0' -> Version(1, 2, 0)
	'v0.11' -> Version(0, 11, 0)
	'Release 2.0.0-beta.1' -> Version(2, 0, 0, 'beta.1')
	'1.2.0.1' -> None
	'Backlog' -> None
	"""
	if not title:
		return None

	match = VERSION_TOKEN.search(title)
	if not match:
		return None

	numeric, suffix = match.groups()
	parts = [str(int(part)) for part in numeric.split(".")]
	parts += ["0"] * (3 - len(parts))

	try:
		return semver.Version.parse(".".join(parts) + suffix)
	except ValueError:
		return None


def pluralize(count: int, noun: str) -> str:
	"""Return the count followed by the noun, plural unless the count is one.

	Examples:
	(1, 'issue') -> '1 issue'
	(0, 'commit') -> '0 commits'
	"""
	return f"{count} {noun}" if count == 1 else f"{count} {noun}s"
