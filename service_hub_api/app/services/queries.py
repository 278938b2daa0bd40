"""
Read-only filters and aggregates over repository enumerations.

Every function scans the full collection; there are no secondary
indexes.  Text matches on category, provider, username and email are
case-insensitive.  Date ranges compare the stored ``date`` strings
lexicographically, so they behave chronologically only for sortable
formats such as ISO 8601 (``YYYY-MM-DD``).  Dates are not parsed.
"""

from statistics import fmean
from typing import List

from ..core.errors import NoReviews
from ..schemas.review import ReviewRecord
from ..schemas.service import ServiceRecord
from ..schemas.user import UserRecord
from .repository import ReviewRepository, ServiceRepository, UserRepository


def services_by_category(services: ServiceRepository, category: str) -> List[ServiceRecord]:
    wanted = category.lower()
    return [s for s in services.list() if s.category.lower() == wanted]


def services_by_provider(services: ServiceRepository, provider: str) -> List[ServiceRecord]:
    wanted = provider.lower()
    return [s for s in services.list() if s.provider.lower() == wanted]


def services_by_date_range(services: ServiceRepository, start: str, end: str) -> List[ServiceRecord]:
    """Services whose ``date`` lies in ``[start, end]``, bounds inclusive."""
    return [s for s in services.list() if start <= s.date <= end]


def reviews_for_service(reviews: ReviewRepository, service_id: str) -> List[ReviewRecord]:
    return [r for r in reviews.list() if r.service_id == service_id]


def average_rating(reviews: ReviewRepository, service_id: str) -> float:
    """Arithmetic mean of the ratings given to ``service_id``.

    Raises ``NoReviews`` when the service has no reviews.  The service
    itself does not have to exist; reviews of a deleted service still
    count.
    """
    ratings = [r.rating for r in reviews_for_service(reviews, service_id)]
    if not ratings:
        raise NoReviews(f"No reviews found for service with id={service_id}")
    return float(fmean(ratings))


def users_by_username(users: UserRepository, fragment: str) -> List[UserRecord]:
    wanted = fragment.lower()
    return [u for u in users.list() if wanted in u.username.lower()]


def users_by_email(users: UserRepository, fragment: str) -> List[UserRecord]:
    wanted = fragment.lower()
    return [u for u in users.list() if wanted in u.email.lower()]
