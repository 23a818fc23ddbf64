"""
Invitation models.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class InvitationResponse(BaseModel):
    """Response model for an invitation. ``item_id`` is a workspace or test id."""
    id: int
    invitation_id: str
    item_id: str
    admin_id: str
    guest_id: str
    type: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
