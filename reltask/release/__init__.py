"""Release workflow: changelog discard, release tool, changelog regeneration."""

from .errors import ReleaseError
from .model import HookRequest, ReleaseRequest, ReleaseSettings
from .tasks import release, release_hook
from .tools import ProcessReleaseTools, ReleaseTools

__all__ = [
    "HookRequest",
    "ProcessReleaseTools",
    "ReleaseError",
    "ReleaseRequest",
    "ReleaseSettings",
    "ReleaseTools",
    "release",
    "release_hook",
]
