"""
User endpoints for API v1.

Registration and reads are open.  A user record can only be updated
or deleted by the caller whose identity equals the user's id.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from service_hub_api.app.api.deps import get_registry, unwrap
from service_hub_api.app.core.security import get_caller
from service_hub_api.app.registry import Registry
from service_hub_api.app.schemas.user import UserCreate, UserRecord, UserUpdate


router = APIRouter()


@router.post("/", response_model=UserRecord, status_code=status.HTTP_201_CREATED)
def create_user(user: UserCreate, registry: Registry = Depends(get_registry)) -> UserRecord:
    """Register a new user.  ``username`` and ``email`` must be non-empty."""
    return unwrap(registry.users.create_user(user))


@router.get("/", response_model=List[UserRecord])
def get_all_users(registry: Registry = Depends(get_registry)) -> List[UserRecord]:
    return unwrap(registry.users.get_all_users())


@router.get("/search/username", response_model=List[UserRecord])
def search_users_by_username(
    q: str = Query(..., description="Substring of the username, case-insensitive"),
    registry: Registry = Depends(get_registry),
) -> List[UserRecord]:
    return unwrap(registry.users.search_users_by_username(q))


@router.get("/search/email", response_model=List[UserRecord])
def search_users_by_email(
    q: str = Query(..., description="Substring of the e-mail, case-insensitive"),
    registry: Registry = Depends(get_registry),
) -> List[UserRecord]:
    return unwrap(registry.users.search_users_by_email(q))


@router.get("/{user_id}", response_model=UserRecord)
def get_user(user_id: str, registry: Registry = Depends(get_registry)) -> UserRecord:
    return unwrap(registry.users.get_user(user_id))


@router.put("/{user_id}", response_model=UserRecord)
def update_user(
    user_id: str,
    payload: UserUpdate,
    caller: str = Depends(get_caller),
    registry: Registry = Depends(get_registry),
) -> UserRecord:
    return unwrap(registry.users.update_user(user_id, payload, caller))


@router.delete("/{user_id}", response_model=UserRecord)
def delete_user(
    user_id: str,
    caller: str = Depends(get_caller),
    registry: Registry = Depends(get_registry),
) -> UserRecord:
    return unwrap(registry.users.delete_user(user_id, caller))
