"""
User models.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """
    Response model for a user.

    The numeric row id and the password hash are deliberately absent, so
    they are dropped when a row is validated into this model.
    """
    user_id: str
    email: str
    role: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
