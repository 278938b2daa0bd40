"""
Creation-time payload validation.

Payloads arrive either as schema instances or as plain mappings.
``parse_payload`` turns mappings into schema instances and maps any
Pydantic ``ValidationError`` (missing key, wrong type, unknown field on
a patch) to ``InvalidInput``.  The ``validate_*`` functions then apply
the content rules: required text must be non-empty and review ratings
must lie in [0, 5].

Updates are parsed but not content-validated.
"""

import math
from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..core.errors import InvalidInput, ServiceMissing
from ..schemas.review import ReviewCreate
from ..schemas.service import ServiceCreate
from ..schemas.user import UserCreate
from .repository import ServiceRepository


M = TypeVar("M", bound=BaseModel)

SERVICE_INVALID = "Missing or invalid input data"
REVIEW_INVALID = "Invalid review data"
USER_INVALID = "Missing username or email"

MIN_RATING = 0
MAX_RATING = 5


def parse_payload(model: Type[M], payload: Union[M, Mapping[str, Any]], message: str) -> M:
    if isinstance(payload, model):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(exclude_unset=True)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise InvalidInput(f"{message}: {fields}" if fields else message) from exc


def validate_service(payload: ServiceCreate) -> None:
    if not all(payload.model_dump().values()):
        raise InvalidInput(SERVICE_INVALID)


def validate_user(payload: UserCreate) -> None:
    if not payload.username or not payload.email:
        raise InvalidInput(USER_INVALID)


def validate_review(payload: ReviewCreate, services: ServiceRepository) -> None:
    """Check review content, then that the reviewed service exists."""
    rating = payload.rating
    if (
        not payload.service_id
        or not payload.user_id
        or not payload.comment
        or math.isnan(rating)
        or rating < MIN_RATING
        or rating > MAX_RATING
    ):
        raise InvalidInput(REVIEW_INVALID)
    if not services.exists(payload.service_id):
        raise ServiceMissing("Service does not exist")
