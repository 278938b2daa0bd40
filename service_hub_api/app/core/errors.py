"""
Error kinds raised by the record store and query layer.

Repositories, validation and queries raise subclasses of
``ServiceHubError``.  The operation layer converts them into the
failure branch of a :class:`~service_hub_api.app.core.result.Result`;
any other exception (for example a SQLite fault) is not caught there
and propagates to the caller.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Tag carried by every failed result."""

    INVALID_INPUT = "InvalidInput"
    NOT_FOUND = "NotFound"
    SERVICE_MISSING = "ServiceMissing"
    UNAUTHORIZED = "Unauthorized"
    NO_REVIEWS = "NoReviews"


class ServiceHubError(Exception):
    """Base class for all expected, terminal failures of an operation."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(ServiceHubError):
    """A payload failed a structural or range check."""

    kind = ErrorKind.INVALID_INPUT


class NotFound(ServiceHubError):
    """No record exists under the requested id."""

    kind = ErrorKind.NOT_FOUND


class ServiceMissing(NotFound):
    """A review referenced a service that does not exist."""

    kind = ErrorKind.SERVICE_MISSING


class Unauthorized(ServiceHubError):
    """The caller identity does not match the record's owner field."""

    kind = ErrorKind.UNAUTHORIZED


class NoReviews(ServiceHubError):
    """An aggregate was requested over an empty set of reviews."""

    kind = ErrorKind.NO_REVIEWS


ERRORS_BY_KIND = {
    cls.kind: cls
    for cls in (InvalidInput, NotFound, ServiceMissing, Unauthorized, NoReviews)
}
