"""
Pydantic schemas for service reviews.

Reviews are immutable once created: there is no update schema, only
creation and the stored record.  ``service_id`` must name an existing
service when the review is created; afterwards the link is a plain id
copy and may dangle if the service is deleted.
"""

from pydantic import BaseModel, Field


class ReviewCreate(BaseModel):
    """Schema for creating a new review."""

    service_id: str = Field(..., description="Identifier of the service being reviewed")
    user_id: str = Field(..., description="Identity of the reviewer; owns the review")
    # Strict: ints are accepted, numeric strings and booleans are not.
    rating: float = Field(..., strict=True, description="Rating from 0 to 5 inclusive")
    comment: str = Field(..., description="Textual comment")


class ReviewRecord(ReviewCreate):
    """A stored review."""

    id: str
    created_at: int

    @property
    def owner(self) -> str:
        return self.user_id
