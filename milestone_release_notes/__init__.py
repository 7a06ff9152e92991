"""Milestone Release Notes - Build release notes from the issues of a GitHub milestone."""

# Public API exports for library usage
from .api import ReleaseNotesBuilder, ReleaseNotesClient
from .assembler import assemble_release_notes, build_release_notes
from .core.config import (
	FooterConfig,
	GitHubConfig,
	LabelConfig,
	ReleaseNotesConfig,
)
from .core.errors import (
	InvalidIssueLabeling,
	InvalidMilestoneVersion,
	MilestoneNotFound,
	ReleaseNotesError,
)
from .core.interfaces import (
	CompositeProgressReporter,
	FooterSource,
	HostingClient,
	NullProgressReporter,
	ProgressEvent,
	ProgressReporter,
)

__version__ = "1.0.0"

__all__ = [
	# Client classes
	"ReleaseNotesBuilder",
	"ReleaseNotesClient",
	# Assembly
	"assemble_release_notes",
	"build_release_notes",
	"HostingClient",
	"FooterSource",
	# Configuration
	"ReleaseNotesConfig",
	"GitHubConfig",
	"LabelConfig",
	"FooterConfig",
	# Errors
	"ReleaseNotesError",
	"MilestoneNotFound",
	"InvalidIssueLabeling",
	"InvalidMilestoneVersion",
	# Progress reporting
	"ProgressReporter",
	"ProgressEvent",
	"NullProgressReporter",
	"CompositeProgressReporter",
]
