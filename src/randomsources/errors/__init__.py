"""RandomSources error ADTs and exceptions."""

from randomsources.errors.generator import (
    InvalidTape,
    MissingRandomSource,
    NegativeSampleCount,
    SettingsLoadFailed,
)
from randomsources.errors.exceptions import (
    DomainError,
    MissingRandomSourceError,
    RandomSourceError,
    SourceNotInitializedError,
    StateMismatchError,
)

__all__ = [
    "InvalidTape",
    "MissingRandomSource",
    "NegativeSampleCount",
    "SettingsLoadFailed",
    "DomainError",
    "MissingRandomSourceError",
    "RandomSourceError",
    "SourceNotInitializedError",
    "StateMismatchError",
]
