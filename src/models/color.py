"""
Color models.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ColorResponse(BaseModel):
    """Response model for a guest's display color within a workspace."""
    id: int
    color_id: str
    workspace_id: str
    guest_id: str
    hex: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
