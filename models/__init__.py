"""Models package for the GitLab external status checks API."""

from .status_checks import MergeStatusCheck, ProjectStatusCheck, StatusCheckProtectedBranch
from .options import (
    ListOptions,
    SetExternalStatusCheckStatusOptions,
    CreateExternalStatusCheckOptions,
    UpdateExternalStatusCheckOptions,
)

__all__ = [
    'MergeStatusCheck',
    'ProjectStatusCheck',
    'StatusCheckProtectedBranch',
    'ListOptions',
    'SetExternalStatusCheckStatusOptions',
    'CreateExternalStatusCheckOptions',
    'UpdateExternalStatusCheckOptions',
]
