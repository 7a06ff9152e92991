from dataclasses import dataclass


@dataclass(frozen=True)
class Repository:
	owner: str
	name: str

	@property
	def url(self) -> str:
		"""REST API URL of the repository."""
		return f"https://api.github.com/repos/{self.owner}/{self.name}"

	@property
	def html_url(self) -> str:
		return f"https://github.com/{self.owner}/{self.name}"

	@classmethod
	def from_dict(cls, data: dict) -> "Repository":
		return cls(
			owner=data["owner"]["login"],
			name=data["name"],
		)

	def __str__(self):
		return f"{self.owner}/{self.name}"
