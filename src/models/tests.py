"""
Test models.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TestResponse(BaseModel):
    """Response model for a test."""
    __test__ = False

    id: int
    test_id: str
    admin_id: str
    workspace_id: str
    subjects: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
