"""Result types for railway-oriented error handling.

Application handlers return a ``Result`` instead of raising, so that callers
must branch on the outcome explicitly.

Usage:
    result = await handler.handle(command)
    match result:
        case Success(value=notification):
            ...
        case Failure(error=error):
            logger.warning("mark_read_failed", error=str(error))
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E


type Result[T, E] = Success[T] | Failure[E]
