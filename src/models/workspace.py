"""
Workspace models.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class WorkspaceResponse(BaseModel):
    """Response model for a workspace."""
    id: int
    workspace_id: str
    admin_id: str
    name: str
    guest_ids: List[str] = Field(default_factory=list)
    test_ids: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
