"""Services package for the GitLab API."""

from .external_status_checks import ExternalStatusChecksService

__all__ = [
    'ExternalStatusChecksService',
]
