from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class StatusCheckProtectedBranch(BaseModel):
    """A protected branch an external status check is scoped to."""
    id: int
    project_id: int
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    code_owner_approval_required: bool = False


class ProjectStatusCheck(BaseModel):
    """An external status check defined on a project."""
    id: int
    name: str
    project_id: int
    external_url: str
    protected_branches: List[StatusCheckProtectedBranch] = Field(default_factory=list)


class MergeStatusCheck(BaseModel):
    """An external status check as it applies to one merge request."""
    id: int
    name: str
    external_url: str
    # pending, passed, failed... the value is owned by the server
    status: str
