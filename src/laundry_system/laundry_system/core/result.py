from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import wraps
from typing import Callable, Generic, Optional, TypeVar

from .constants import SUCCESS
from .exceptions import DomainError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a core operation: either a value or a domain error.

    The presentation layer only ever sees ``Result`` objects; exceptions raised
    inside services stop at :func:`returns_result`.
    """

    value: Optional[T] = None
    error: Optional[DomainError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        return SUCCESS if self.error is None else self.error.message

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: DomainError) -> "Result[T]":
        return cls(error=error)


def returns_result(func: Callable[..., T]) -> Callable[..., Result[T]]:
    """Wrap a service method so domain errors come back as ``Result`` failures."""

    @wraps(func)
    def wrapper(*args, **kwargs) -> Result[T]:
        try:
            return Result.success(func(*args, **kwargs))
        except DomainError as e:
            logger.debug("%s rejected: %s (%s)", func.__qualname__, e.message, e.kind)
            return Result.failure(e)

    return wrapper
