"""
Entity repositories over ordered key-value stores.

A repository owns exactly one store and is the only component that
writes to it.  ``Repository`` provides insert, get, remove and list;
``UpdatableRepository`` adds ``update`` for entities that can change
after creation.  Each concrete repository spells out its merge as an
explicit field-by-field copy so the set of mutable fields is visible
in one place.

Mutating calls accept an optional ``authorize`` callback which runs
against the stored record after the existence check and before any
write, so a failed check leaves the store untouched.
"""

import logging
from typing import Callable, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from ..core.db import KeyValueStore
from ..core.errors import NotFound
from ..core.identity import Clock, IdGenerator, MonotonicClock, uuid_id
from ..schemas.review import ReviewRecord
from ..schemas.service import ServiceRecord, ServiceUpdate
from ..schemas.user import UserRecord, UserUpdate


logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)
P = TypeVar("P", bound=BaseModel)

Authorize = Callable[[R], None]


class Repository(Generic[R]):
    """Insert, fetch, remove and enumerate records of one entity type."""

    entity: str = "Record"
    record_type: Type[R]

    def __init__(
        self,
        store: KeyValueStore,
        id_factory: IdGenerator = uuid_id,
        clock: Optional[Clock] = None,
    ) -> None:
        self.store = store
        self._new_id = id_factory
        self._now = clock or MonotonicClock()

    def insert(self, payload: BaseModel) -> R:
        """Persist a new record built from ``payload`` under a fresh id."""
        record = self.record_type(
            id=self._new_id(),
            created_at=self._now(),
            **payload.model_dump(),
        )
        self.store.insert(record.id, record.model_dump())
        logger.info("Inserted %s %s", self.entity.lower(), record.id)
        return record

    def get(self, record_id: str) -> R:
        value = self.store.get(record_id)
        if value is None:
            raise NotFound(f"{self.entity} with id={record_id} not found")
        return self.record_type.model_validate(value)

    def exists(self, record_id: str) -> bool:
        return self.store.contains(record_id)

    def remove(self, record_id: str, authorize: Optional[Authorize] = None) -> R:
        """Delete a record and return the value it held."""
        existing = self.get(record_id)
        if authorize is not None:
            authorize(existing)
        self.store.remove(record_id)
        logger.info("Removed %s %s", self.entity.lower(), record_id)
        return existing

    def list(self) -> List[R]:
        return [self.record_type.model_validate(value) for value in self.store.values()]

    def count(self) -> int:
        return len(self.store)


class UpdatableRepository(Repository[R], Generic[R, P]):
    """Repository for entities whose records can be patched in place."""

    def update(self, record_id: str, patch: P, authorize: Optional[Authorize] = None) -> R:
        """Merge ``patch`` over the stored record and stamp ``updated_at``.

        Fields left unset (or ``None``) in the patch keep their stored
        value.
        """
        existing = self.get(record_id)
        if authorize is not None:
            authorize(existing)
        updated = self.merge(existing, patch, self._now())
        self.store.insert(record_id, updated.model_dump())
        logger.info("Updated %s %s", self.entity.lower(), record_id)
        return updated

    def merge(self, existing: R, patch: P, now: int) -> R:
        raise NotImplementedError


def _pick(new: Optional[str], old: str) -> str:
    return old if new is None else new


class ServiceRepository(UpdatableRepository[ServiceRecord, ServiceUpdate]):
    entity = "Service"
    record_type = ServiceRecord

    def merge(self, existing: ServiceRecord, patch: ServiceUpdate, now: int) -> ServiceRecord:
        return ServiceRecord(
            id=existing.id,
            name=_pick(patch.name, existing.name),
            category=_pick(patch.category, existing.category),
            provider=existing.provider,
            date=_pick(patch.date, existing.date),
            start_time=_pick(patch.start_time, existing.start_time),
            end_time=_pick(patch.end_time, existing.end_time),
            location=_pick(patch.location, existing.location),
            description=_pick(patch.description, existing.description),
            created_at=existing.created_at,
            updated_at=now,
        )


class ReviewRepository(Repository[ReviewRecord]):
    entity = "Review"
    record_type = ReviewRecord


class UserRepository(UpdatableRepository[UserRecord, UserUpdate]):
    entity = "User"
    record_type = UserRecord

    def merge(self, existing: UserRecord, patch: UserUpdate, now: int) -> UserRecord:
        return UserRecord(
            id=existing.id,
            username=_pick(patch.username, existing.username),
            email=_pick(patch.email, existing.email),
            created_at=existing.created_at,
            updated_at=now,
        )
