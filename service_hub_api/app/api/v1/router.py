"""
Top-level router for version 1 of the API.

This router aggregates the domain routers (services, reviews, users,
info) under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import info, reviews, services, users

router = APIRouter()

router.include_router(services.router, prefix="/services", tags=["services"])
# The reviews router defines full paths itself (``/reviews`` and
# ``/services/{id}/reviews``), so it is mounted without a prefix.
router.include_router(reviews.router, tags=["reviews"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(info.router, prefix="/info", tags=["info"])
