"""Exception hierarchy for failures raised from variate-producing calls."""

from __future__ import annotations


class RandomSourceError(Exception):
    """Base exception for all random source errors."""

    pass


class MissingRandomSourceError(RandomSourceError):
    """The generator was constructed without a usable random source."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"No usable random source: {reason}")


class DomainError(RandomSourceError):
    """A uniform draw fell outside the domain of the Box-Muller transform."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Uniform draw {value!r} is outside the Box-Muller domain")


class StateMismatchError(RandomSourceError):
    """A snapshot cannot be applied to this source."""

    def __init__(self, expected: str, actual: str, message: str = "") -> None:
        self.expected = expected
        self.actual = actual
        detail = f": {message}" if message else ""
        super().__init__(f"State from {actual!r} cannot be loaded into {expected!r}{detail}")


class SourceNotInitializedError(RandomSourceError):
    """A source was read before being seeded or loaded."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"Random source {source!r} used before initialization")


__all__ = [
    "RandomSourceError",
    "MissingRandomSourceError",
    "DomainError",
    "StateMismatchError",
    "SourceNotInitializedError",
]
