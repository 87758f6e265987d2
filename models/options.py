"""Option structs for the external status checks endpoints.

Every field defaults to ``None`` which means "absent": the field is left out of
the request. Any other value, including ``""``, ``0`` and ``[]``, is sent.
Fields listed in ``required_fields`` must be present when the request is built.
"""

from typing import ClassVar, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Options(BaseModel):
    """Base class for request options."""
    model_config = ConfigDict(extra='forbid')

    required_fields: ClassVar[Tuple[str, ...]] = ()


class ListOptions(Options):
    """Pagination options shared by list endpoints."""
    page: Optional[int] = Field(default=None, ge=1)
    per_page: Optional[int] = Field(default=None, ge=1, le=100)


class SetExternalStatusCheckStatusOptions(Options):
    required_fields: ClassVar[Tuple[str, ...]] = ('sha', 'external_status_check_id')

    sha: Optional[str] = None
    external_status_check_id: Optional[int] = None
    status: Optional[str] = None


class CreateExternalStatusCheckOptions(Options):
    required_fields: ClassVar[Tuple[str, ...]] = ('name', 'external_url')

    name: Optional[str] = None
    external_url: Optional[str] = None
    protected_branch_ids: Optional[List[int]] = None


class UpdateExternalStatusCheckOptions(Options):
    name: Optional[str] = None
    external_url: Optional[str] = None
    protected_branch_ids: Optional[List[int]] = None
