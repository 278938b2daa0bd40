"""
Pydantic models for user data.

Neither ``username`` nor ``email`` is required to be unique.  A user
record is owned by the caller whose identity equals the record's own
``id``: only that caller may update or delete it.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    username: str = Field(..., examples=["alice"])
    email: str = Field(..., examples=["alice@example.com"])


class UserUpdate(BaseModel):
    """Schema for updating a user.

    All fields are optional; only provided fields will be updated.
    """

    model_config = ConfigDict(extra="forbid")

    username: Optional[str] = None
    email: Optional[str] = None


class UserRecord(UserCreate):
    """A stored user."""

    id: str
    created_at: int
    updated_at: Optional[int] = None

    @property
    def owner(self) -> str:
        return self.id
