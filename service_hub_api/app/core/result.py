"""
Tagged success/failure result returned by every operation.

A result is either ``Ok(value)`` or ``Err(kind, message)``.  Callers
inspect ``is_ok`` (or use ``isinstance``/``match``) before touching the
value; ``unwrap`` returns the value or re-raises the matching error
class.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar, Union

from .errors import ERRORS_BY_KIND, ErrorKind, ServiceHubError


T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.to_exception()

    def to_exception(self) -> ServiceHubError:
        """Rebuild the exception this failure was created from."""
        return ERRORS_BY_KIND[self.kind](self.message)

    @classmethod
    def from_exception(cls, exc: ServiceHubError) -> "Err":
        return cls(kind=exc.kind, message=exc.message)


Result = Union[Ok[T], Err]


def capture(operation: str, func: Callable[[], T]) -> Result[T]:
    """Run ``func`` and wrap its outcome in a result.

    Only ``ServiceHubError`` is turned into ``Err``; everything else
    propagates unchanged.
    """
    try:
        return Ok(func())
    except ServiceHubError as exc:
        logger.warning("%s failed (%s): %s", operation, exc.kind.value, exc.message)
        return Err.from_exception(exc)
