"""
Caller identity and ownership checks.

The caller identity is an opaque string.  Over HTTP it is the bearer
credential of the ``Authorization`` header; how that string was
issued is outside this service.  Mutating operations compare it with
the owner field of the stored record using exact, case-sensitive
string equality.  No normalisation is performed, so identities must be
supplied in the same format they were stored in.
"""

from typing import Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .errors import Unauthorized


def ensure_owner(record, caller: str, action: str) -> None:
    """Raise ``Unauthorized`` unless ``caller`` owns ``record``.

    ``record`` is any record schema exposing an ``owner`` property
    (``provider`` for services, ``user_id`` for reviews, ``id`` for
    users).  ``action`` completes the message, e.g. ``"update this
    service"``.
    """
    if record.owner != caller:
        raise Unauthorized(f"You are not authorized to {action}")


def owner_check(caller: str, action: str) -> Callable[[object], None]:
    """Bind ``ensure_owner`` to a caller for use as a repository callback."""

    def check(record) -> None:
        ensure_owner(record, caller, action)

    return check


security = HTTPBearer(auto_error=False)


def get_caller(credentials: HTTPAuthorizationCredentials = Depends(security)) -> str:
    """Dependency returning the caller identity of the current request.

    Raises HTTP 401 when no bearer credential is supplied.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials
