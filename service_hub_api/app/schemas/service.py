"""
Pydantic models for services offered by providers.

``ServiceCreate`` is the payload accepted by ``add_service``;
``ServiceUpdate`` is the partial payload accepted by
``update_service``.  Only the fields declared on ``ServiceUpdate`` can
ever change after creation; in particular ``provider`` (the owner
field) is fixed.  ``ServiceRecord`` is the stored shape.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ServiceCreate(BaseModel):
    name: str = Field(..., examples=["Guided city walk"])
    category: str = Field(..., examples=["Tours"])
    provider: str = Field(..., description="Identity of the provider; owns the record")
    date: str = Field(..., examples=["2024-01-15"], description="ISO 8601 date, compared lexicographically")
    start_time: str = Field(..., examples=["10:00"])
    end_time: str = Field(..., examples=["12:00"])
    location: str = Field(..., examples=["Main square"])
    description: str = Field(..., examples=["Two hour walk through the old town"])


class ServiceUpdate(BaseModel):
    """Schema for updating a service.

    All fields are optional; only provided fields are merged into the
    stored record.  Unknown fields (including ``provider``) are
    rejected.
    """

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    category: Optional[str] = None
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None


class ServiceLocationUpdate(BaseModel):
    location: str


class ServiceDescriptionUpdate(BaseModel):
    description: str


class ServiceRecord(ServiceCreate):
    """A stored service."""

    id: str
    created_at: int
    updated_at: Optional[int] = None

    @property
    def owner(self) -> str:
        return self.provider
