"""Error ADTs for generator construction, sampling and configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import ValidationError


@dataclass(frozen=True)
class MissingRandomSource:
    """No usable random source was supplied or could be selected."""

    reason: str
    kind: Literal["MissingRandomSource"] = "MissingRandomSource"


@dataclass(frozen=True)
class NegativeSampleCount:
    """Requested a negative number of variates."""

    n_samples: int
    kind: Literal["NegativeSampleCount"] = "NegativeSampleCount"


@dataclass(frozen=True)
class InvalidTape:
    """A replay tape is empty or holds a value outside the open interval (0, 1)."""

    message: str
    kind: Literal["InvalidTape"] = "InvalidTape"


@dataclass(frozen=True)
class SettingsLoadFailed:
    """The settings file could not be read or did not validate."""

    path: str
    message: str
    error: ValidationError | None = None
    kind: Literal["SettingsLoadFailed"] = "SettingsLoadFailed"
