"""Repository layer tests.

Repositories are built directly on ``MemoryStore`` with deterministic
ids and timestamps.
"""

import pytest

from factories import PROVIDER, service_payload
from service_hub_api.app.core.db import MemoryStore
from service_hub_api.app.core.errors import NotFound, Unauthorized
from service_hub_api.app.core.security import owner_check
from service_hub_api.app.schemas.review import ReviewCreate
from service_hub_api.app.schemas.service import ServiceCreate, ServiceUpdate
from service_hub_api.app.schemas.user import UserCreate, UserUpdate
from service_hub_api.app.services.repository import (
    ReviewRepository,
    ServiceRepository,
    UserRepository,
)


@pytest.fixture
def services(ids, clock):
    return ServiceRepository(MemoryStore(), ids, clock)


@pytest.fixture
def users(ids, clock):
    return UserRepository(MemoryStore(), ids, clock)


class TestInsert:
    def test_insert_stamps_id_and_created_at(self, services, clock):
        record = services.insert(ServiceCreate(**service_payload()))

        assert record.id == "id-0001"
        assert record.created_at == clock.now
        assert record.updated_at is None
        assert record.name == "Guided city walk"

    def test_each_insert_gets_a_fresh_id(self, services):
        first = services.insert(ServiceCreate(**service_payload()))
        second = services.insert(ServiceCreate(**service_payload()))

        assert first.id != second.id
        assert services.count() == 2

    def test_review_records_have_no_updated_at(self, ids, clock):
        reviews = ReviewRepository(MemoryStore(), ids, clock)

        record = reviews.insert(
            ReviewCreate(service_id="s", user_id="u", rating=3, comment="ok")
        )

        assert not hasattr(record, "updated_at")
        assert record.rating == 3.0

    def test_records_report_their_owner(self, services, users, ids, clock):
        reviews = ReviewRepository(MemoryStore(), ids, clock)

        service = services.insert(ServiceCreate(**service_payload()))
        review = reviews.insert(
            ReviewCreate(service_id=service.id, user_id="u", rating=3, comment="ok")
        )
        user = users.insert(UserCreate(username="alice", email="a@b.c"))

        assert service.owner == PROVIDER
        assert review.owner == "u"
        assert user.owner == user.id
        assert "owner" not in service.model_dump()


class TestGet:
    def test_get_returns_stored_record(self, services):
        record = services.insert(ServiceCreate(**service_payload()))

        assert services.get(record.id) == record

    def test_get_missing_raises_not_found_with_id(self, services):
        with pytest.raises(NotFound, match="Service with id=missing not found"):
            services.get("missing")


class TestUpdate:
    def test_update_merges_only_given_fields(self, services, clock):
        record = services.insert(ServiceCreate(**service_payload()))

        updated = services.update(record.id, ServiceUpdate(location="Harbour"))

        assert updated.location == "Harbour"
        assert updated.updated_at == clock.now
        assert updated.model_dump(exclude={"location", "updated_at"}) == record.model_dump(
            exclude={"location", "updated_at"}
        )
        assert services.get(record.id) == updated

    def test_update_keeps_created_at_and_id(self, services):
        record = services.insert(ServiceCreate(**service_payload()))

        updated = services.update(record.id, ServiceUpdate(name="Night walk"))

        assert updated.id == record.id
        assert updated.created_at == record.created_at
        assert updated.updated_at > record.created_at

    def test_update_missing_raises_not_found(self, services):
        with pytest.raises(NotFound):
            services.update("missing", ServiceUpdate(name="x"))

    def test_failed_authorization_leaves_record_untouched(self, services):
        record = services.insert(ServiceCreate(**service_payload()))

        with pytest.raises(Unauthorized):
            services.update(
                record.id,
                ServiceUpdate(name="Hijacked"),
                authorize=owner_check("intruder", "update this service"),
            )

        assert services.get(record.id) == record

    def test_user_update_merges_fields(self, users):
        record = users.insert(UserCreate(username="alice", email="alice@example.com"))

        updated = users.update(record.id, UserUpdate(email="alice@example.org"))

        assert updated.username == "alice"
        assert updated.email == "alice@example.org"
        assert updated.updated_at is not None


class TestRemove:
    def test_remove_returns_removed_record(self, services):
        record = services.insert(ServiceCreate(**service_payload()))

        removed = services.remove(record.id)

        assert removed == record
        assert not services.exists(record.id)
        with pytest.raises(NotFound):
            services.get(record.id)

    def test_remove_missing_raises_not_found(self, services):
        with pytest.raises(NotFound):
            services.remove("missing")

    def test_remove_with_owner_check(self, services):
        record = services.insert(ServiceCreate(**service_payload()))

        with pytest.raises(Unauthorized):
            services.remove(record.id, authorize=owner_check("intruder", "delete this service"))
        assert services.exists(record.id)

        services.remove(record.id, authorize=owner_check(PROVIDER, "delete this service"))
        assert not services.exists(record.id)


def test_list_returns_records_in_key_order(services):
    created = [services.insert(ServiceCreate(**service_payload(name=f"S{i}"))) for i in range(3)]

    assert services.list() == sorted(created, key=lambda r: r.id)
