"""Creation-time validation tests."""

import math

import pytest

from factories import review_payload, service_payload
from service_hub_api.app.core.errors import InvalidInput, ServiceMissing
from service_hub_api.app.schemas.review import ReviewCreate
from service_hub_api.app.schemas.service import ServiceCreate, ServiceUpdate
from service_hub_api.app.schemas.user import UserCreate
from service_hub_api.app.services.validation import (
    parse_payload,
    validate_review,
    validate_service,
    validate_user,
)


class TestParsePayload:
    def test_schema_instance_passes_through(self):
        payload = ServiceCreate(**service_payload())

        assert parse_payload(ServiceCreate, payload, "bad") is payload

    def test_mapping_is_parsed(self):
        parsed = parse_payload(ServiceCreate, service_payload(), "bad")

        assert isinstance(parsed, ServiceCreate)

    def test_missing_key_is_invalid_input(self):
        payload = service_payload()
        del payload["location"]

        with pytest.raises(InvalidInput, match="location"):
            parse_payload(ServiceCreate, payload, "Missing or invalid input data")

    def test_unknown_patch_field_is_invalid_input(self):
        with pytest.raises(InvalidInput, match="provider"):
            parse_payload(ServiceUpdate, {"provider": "someone"}, "Invalid service update")

    def test_non_numeric_rating_is_invalid_input(self):
        with pytest.raises(InvalidInput):
            parse_payload(ReviewCreate, review_payload("s", rating="excellent"), "Invalid review data")

    def test_boolean_rating_is_invalid_input(self):
        with pytest.raises(InvalidInput):
            parse_payload(ReviewCreate, review_payload("s", rating=True), "Invalid review data")

    @pytest.mark.parametrize("rating", ["4", "4.5"])
    def test_numeric_string_rating_is_invalid_input(self, rating):
        with pytest.raises(InvalidInput, match="rating"):
            parse_payload(ReviewCreate, review_payload("s", rating=rating), "Invalid review data")


@pytest.mark.parametrize(
    "field", ["name", "category", "provider", "date", "start_time", "end_time", "location", "description"]
)
def test_service_requires_every_text_field(field):
    with pytest.raises(InvalidInput, match="Missing or invalid input data"):
        validate_service(ServiceCreate(**service_payload(**{field: ""})))


def test_complete_service_is_valid():
    validate_service(ServiceCreate(**service_payload()))


@pytest.mark.parametrize("field", ["username", "email"])
def test_user_requires_username_and_email(field):
    payload = {"username": "alice", "email": "alice@example.com", field: ""}

    with pytest.raises(InvalidInput, match="Missing username or email"):
        validate_user(UserCreate(**payload))


class TestReviewValidation:
    @pytest.mark.parametrize("rating", [0, 2.5, 5])
    def test_ratings_in_range_are_accepted(self, registry, service, rating):
        validate_review(
            ReviewCreate(**review_payload(service.id, rating=rating)), registry.catalog.services
        )

    @pytest.mark.parametrize("rating", [-0.1, 5.01, 6, math.nan, math.inf])
    def test_ratings_out_of_range_are_rejected(self, registry, service, rating):
        with pytest.raises(InvalidInput, match="Invalid review data"):
            validate_review(
                ReviewCreate(**review_payload(service.id, rating=rating)), registry.catalog.services
            )

    @pytest.mark.parametrize("field", ["service_id", "user_id", "comment"])
    def test_empty_text_is_rejected(self, registry, service, field):
        payload = review_payload(service.id)
        payload[field] = ""

        with pytest.raises(InvalidInput):
            validate_review(ReviewCreate(**payload), registry.catalog.services)

    def test_unknown_service_is_service_missing(self, registry):
        with pytest.raises(ServiceMissing, match="Service does not exist"):
            validate_review(ReviewCreate(**review_payload("ghost")), registry.catalog.services)
