"""
Result type for explicit error handling.

Factories and validation paths in RandomSources return ``Result[T, E]``
instead of raising, so callers see every failure mode in the signature and
handle it with ``match``.

Usage:
    >>> match RandomSourceManager.create(source):
    ...     case Success(manager):
    ...         value = manager.uniform()
    ...     case Failure(error):
    ...         print(f"cannot build generator: {error}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar


T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A successful result carrying ``value``."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply ``f`` to the wrapped value."""
        return Success(f(self.value))

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a further Result-returning step."""
        return f(self.value)


@dataclass(frozen=True)
class Failure(Generic[E]):
    """A failed result carrying an ``error`` ADT."""

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """
        Raises:
            RuntimeError: Always; a Failure has no value.
        """
        raise RuntimeError(f"Called unwrap() on Failure: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        # Explicit annotation keeps the error type without a cast
        result: Result[U, E] = Failure(self.error)
        return result

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        result: Result[U, E] = Failure(self.error)
        return result


Result = Success[T] | Failure[E]
