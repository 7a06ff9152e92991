#!/usr/bin/env python
"""Milestone Release Notes CLI."""

import logging
import time
from pathlib import Path

import typer
from rich.logging import RichHandler

from .adapters.cli_progress import CLIProgressReporter
from .adapters.logging_progress import LoggingProgressReporter
from .api import ReleaseNotesClient
from .core.config_loader import TomlConfigLoader
from .core.errors import ReleaseNotesError
from .core.interfaces import CompositeProgressReporter
from .ui import CLI

app = typer.Typer(
	help="Build release notes from the issues of a GitHub milestone",
	invoke_without_command=True,
	no_args_is_help=True,
)


@app.callback()
def callback(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")):
	"""Build release notes from the issues of a GitHub milestone."""
	logging.basicConfig(
		level=logging.DEBUG if verbose else logging.WARNING,
		format="%(message)s",
		handlers=[RichHandler(show_path=False)],
	)


@app.command()
def generate(
	repo: str,
	milestone: str,
	owner: str | None = None,
	config_path: Path | None = None,
	output_path: Path | None = None,
	publish: bool = False,
):
	"""Generate release notes for a milestone of a GitHub repository.

	Configuration is loaded from ~/.milestone-release-notes/config.toml by default.
	Use --config-path to specify a different location.
	"""
	start_time = time.time()

	loader = TomlConfigLoader(config_path)
	config = loader.load()

	repo_owner = owner or config.github.owner
	if not repo_owner:
		raise typer.BadParameter("Owner must be specified either via --owner or github.owner in the config file")

	cli = CLI()
	progress_reporter = CompositeProgressReporter([CLIProgressReporter(cli), LoggingProgressReporter()])
	client = ReleaseNotesClient(config, progress_reporter)

	try:
		notes = client.generate_release_notes(repo_owner, repo, milestone)
	except ReleaseNotesError as e:
		cli.show_error(str(e))
		raise typer.Exit(code=1) from e

	cli.show_release_notes(milestone, notes)

	if output_path:
		output_path.write_text(notes, encoding="utf-8")
		cli.show_success(f"Wrote release notes to {output_path}")

	end_time = time.time()
	cli.show_success(f"Generated release notes in {end_time - start_time:.2f} seconds total.")

	if publish:
		client.publish_release(repo_owner, repo, milestone, notes)


if __name__ == "__main__":
	app()
