"""
Business logic for reviews.

This service manages user reviews for services: creation, deletion,
retrieval and the per-service listing and average rating.  A review
can only be created for a service that exists at that moment; the
service may be deleted later without touching its reviews.  Reviews
are never edited.  Only the reviewer (``user_id``) may delete one.
"""

import logging
from typing import Any, List, Mapping, Union

from ..core.result import Result, capture
from ..core.security import owner_check
from ..schemas.review import ReviewCreate, ReviewRecord
from . import queries
from .repository import ReviewRepository, ServiceRepository
from .validation import REVIEW_INVALID, parse_payload, validate_review


logger = logging.getLogger(__name__)


class ReviewService:
    """Operations on review records."""

    def __init__(self, reviews: ReviewRepository, services: ServiceRepository) -> None:
        self.reviews = reviews
        # Read-only: used to check the reviewed service exists.
        self.services = services

    def add_review(self, payload: Union[ReviewCreate, Mapping[str, Any]], caller: str) -> Result[ReviewRecord]:
        def run() -> ReviewRecord:
            data = parse_payload(ReviewCreate, payload, REVIEW_INVALID)
            validate_review(data, self.services)
            record = self.reviews.insert(data)
            logger.info(
                "Caller %s submitted review %s for service %s", caller, record.id, record.service_id
            )
            return record

        return capture("add_review", run)

    def delete_review(self, review_id: str, caller: str) -> Result[ReviewRecord]:
        return capture(
            "delete_review",
            lambda: self.reviews.remove(
                review_id, authorize=owner_check(caller, "delete this review")
            ),
        )

    def get_review(self, review_id: str) -> Result[ReviewRecord]:
        return capture("get_review", lambda: self.reviews.get(review_id))

    def get_all_reviews(self) -> Result[List[ReviewRecord]]:
        return capture("get_all_reviews", self.reviews.list)

    def get_service_reviews(self, service_id: str) -> Result[List[ReviewRecord]]:
        """Reviews referencing ``service_id``; empty if there are none."""
        return capture(
            "get_service_reviews",
            lambda: queries.reviews_for_service(self.reviews, service_id),
        )

    def get_service_average_rating(self, service_id: str) -> Result[float]:
        return capture(
            "get_service_average_rating",
            lambda: queries.average_rating(self.reviews, service_id),
        )
