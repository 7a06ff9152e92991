from dataclasses import dataclass, field


@dataclass(frozen=True)
class Issue:
	number: int
	title: str
	html_url: str
	labels: frozenset[str] = field(default_factory=frozenset)

	def has_label(self, label: str) -> bool:
		return label in self.labels

	@classmethod
	def from_dict(cls, data: dict) -> "Issue":
		return cls(
			number=data["number"],
			title=data["title"],
			html_url=data["html_url"],
			labels=frozenset(label["name"] for label in data.get("labels", [])),
		)

	def __str__(self):
		return f"- [#{self.number}]({self.html_url}) {self.title}"
