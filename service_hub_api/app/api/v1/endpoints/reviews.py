"""
API endpoints for service reviews.

These endpoints allow callers to submit reviews for existing services,
list and inspect reviews, and delete their own reviews.  The
per-service listing and average rating live under ``/services`` so
this router is mounted without a prefix.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from service_hub_api.app.api.deps import get_registry, unwrap
from service_hub_api.app.core.security import get_caller
from service_hub_api.app.registry import Registry
from service_hub_api.app.schemas.review import ReviewCreate, ReviewRecord


router = APIRouter()


@router.post(
    "/reviews",
    response_model=ReviewRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a review",
)
def add_review(
    data: ReviewCreate,
    caller: str = Depends(get_caller),
    registry: Registry = Depends(get_registry),
) -> ReviewRecord:
    """Create a review for an existing service.

    The rating must be between 0 and 5 inclusive.  Returns 404 when
    the service does not exist.
    """
    return unwrap(registry.reviews.add_review(data, caller))


@router.get("/reviews", response_model=List[ReviewRecord], summary="List reviews")
def get_all_reviews(registry: Registry = Depends(get_registry)) -> List[ReviewRecord]:
    return unwrap(registry.reviews.get_all_reviews())


@router.get("/reviews/{review_id}", response_model=ReviewRecord, summary="Get a single review")
def get_review(review_id: str, registry: Registry = Depends(get_registry)) -> ReviewRecord:
    return unwrap(registry.reviews.get_review(review_id))


@router.delete("/reviews/{review_id}", response_model=ReviewRecord, summary="Delete a review")
def delete_review(
    review_id: str,
    caller: str = Depends(get_caller),
    registry: Registry = Depends(get_registry),
) -> ReviewRecord:
    """Delete a review written by the caller and return it."""
    return unwrap(registry.reviews.delete_review(review_id, caller))


@router.get("/services/{service_id}/reviews", response_model=List[ReviewRecord])
def get_service_reviews(service_id: str, registry: Registry = Depends(get_registry)) -> List[ReviewRecord]:
    return unwrap(registry.reviews.get_service_reviews(service_id))


@router.get("/services/{service_id}/rating", response_model=dict)
def get_service_average_rating(service_id: str, registry: Registry = Depends(get_registry)) -> dict:
    """Average rating of a service; 404 when it has no reviews."""
    average = unwrap(registry.reviews.get_service_average_rating(service_id))
    return {"service_id": service_id, "average_rating": average}
