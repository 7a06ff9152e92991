from .issue import Issue
from .milestone import Milestone
from .release_notes import ReleaseNotes, ReleaseNotesRequest
from .repository import Repository

__all__ = [
	"Issue",
	"Milestone",
	"Repository",
	"ReleaseNotes",
	"ReleaseNotesRequest",
]
