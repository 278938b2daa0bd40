"""
Business logic for users.

Users are owned by themselves: a caller may update or delete a user
record only when the caller identity equals the record's ``id``.
Usernames and e-mail addresses are not required to be unique.
"""

import logging
from typing import Any, List, Mapping, Union

from ..core.result import Result, capture
from ..core.security import owner_check
from ..schemas.user import UserCreate, UserRecord, UserUpdate
from . import queries
from .repository import UserRepository
from .validation import USER_INVALID, parse_payload, validate_user


logger = logging.getLogger(__name__)


class UserService:
    """Operations on user records."""

    def __init__(self, users: UserRepository) -> None:
        self.users = users

    def create_user(self, payload: Union[UserCreate, Mapping[str, Any]]) -> Result[UserRecord]:
        def run() -> UserRecord:
            data = parse_payload(UserCreate, payload, USER_INVALID)
            validate_user(data)
            logger.info("Registering user %s", data.username)
            return self.users.insert(data)

        return capture("create_user", run)

    def update_user(
        self, user_id: str, payload: Union[UserUpdate, Mapping[str, Any]], caller: str
    ) -> Result[UserRecord]:
        def run() -> UserRecord:
            patch = parse_payload(UserUpdate, payload, "Invalid user update")
            return self.users.update(
                user_id, patch, authorize=owner_check(caller, "update this user")
            )

        return capture("update_user", run)

    def delete_user(self, user_id: str, caller: str) -> Result[UserRecord]:
        return capture(
            "delete_user",
            lambda: self.users.remove(user_id, authorize=owner_check(caller, "delete this user")),
        )

    def get_user(self, user_id: str) -> Result[UserRecord]:
        return capture("get_user", lambda: self.users.get(user_id))

    def get_all_users(self) -> Result[List[UserRecord]]:
        return capture("get_all_users", self.users.list)

    def search_users_by_username(self, fragment: str) -> Result[List[UserRecord]]:
        return capture(
            "search_users_by_username", lambda: queries.users_by_username(self.users, fragment)
        )

    def search_users_by_email(self, fragment: str) -> Result[List[UserRecord]]:
        return capture(
            "search_users_by_email", lambda: queries.users_by_email(self.users, fragment)
        )
