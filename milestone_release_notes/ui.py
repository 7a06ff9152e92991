import typer
from rich.console import Console
from rich.markdown import Markdown

from .models._utils import pluralize


class CLI:
	def __init__(self):
		self.console = Console()

	def show_markdown_text(self, text: str) -> None:
		self.console.print(Markdown(text))

	def show_release_notes(self, milestone: str, release_notes: str) -> None:
		"""Show the release notes of a milestone below a heading naming it."""
		self.console.rule(f"Release Notes for {milestone}")
		self.show_markdown_text(release_notes)

	def show_totals(self, issues: int, commits: int) -> None:
		"""Show how many closed issues and commits went into the release."""
		self.console.print(
			f"Found [bold]{pluralize(issues, 'closed issue')}[/bold] and [bold]{pluralize(commits, 'commit')}[/bold]"
		)

	def show_error(self, message: str) -> None:
		"""Show a red error message, to stderr."""
		typer.secho(message, err=True, fg=typer.colors.RED)

	def show_success(self, message: str) -> None:
		typer.secho(message, fg=typer.colors.GREEN)
