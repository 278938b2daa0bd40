"""
Wiring of stores, repositories and operation services.

``build_registry`` creates one store per collection and hands each to
its repository; nothing here is module-level state, so every registry
(and every test) works on its own stores.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .core.config import Settings, settings as default_settings
from .core.db import KeyValueStore, MemoryStore, SqliteStore, get_database_path
from .core.identity import Clock, IdGenerator, MonotonicClock, uuid_id
from .services.catalog_service import CatalogService
from .services.repository import ReviewRepository, ServiceRepository, UserRepository
from .services.review_service import ReviewService
from .services.user_service import UserService


@dataclass
class Registry:
    catalog: CatalogService
    reviews: ReviewService
    users: UserService

    def counts(self) -> dict:
        return {
            "services": self.catalog.services.count(),
            "reviews": self.reviews.reviews.count(),
            "users": self.users.users.count(),
        }


def build_registry(
    store_factory: Callable[[str], KeyValueStore],
    id_factory: IdGenerator = uuid_id,
    clock: Optional[Clock] = None,
) -> Registry:
    """Assemble a registry whose collections come from ``store_factory``.

    All repositories share one clock so timestamps stay non-decreasing
    across collections.
    """
    clock = clock or MonotonicClock()
    services = ServiceRepository(store_factory("services"), id_factory, clock)
    reviews = ReviewRepository(store_factory("reviews"), id_factory, clock)
    users = UserRepository(store_factory("users"), id_factory, clock)
    return Registry(
        catalog=CatalogService(services),
        reviews=ReviewService(reviews, services),
        users=UserService(users),
    )


def sqlite_registry(app_settings: Optional[Settings] = None, **kwargs) -> Registry:
    """Registry persisted in the SQLite file named by the settings."""
    db_path = get_database_path((app_settings or default_settings).database_url)
    return build_registry(lambda collection: SqliteStore(db_path, collection), **kwargs)


def memory_registry(**kwargs) -> Registry:
    return build_registry(lambda collection: MemoryStore(), **kwargs)
