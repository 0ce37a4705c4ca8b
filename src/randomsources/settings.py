"""
Settings-driven selection of a bundled random source.

The generator itself only ever receives an instantiated source; this module
is the optional layer that turns a description such as ``"MersenneTwister"``
into one.  Unknown descriptions fall back to the default source, matching
how a stale settings file should behave after a source is removed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Final, Mapping

from pydantic import BaseModel, ConfigDict, Field

from randomsources.errors.generator import MissingRandomSource, SettingsLoadFailed
from randomsources.result import Failure, Result, Success
from randomsources.sources.bit_generator import BitGeneratorSource
from randomsources.sources.protocols import RandomSource
from randomsources.sources.tape import TapeSource
from randomsources.validation import validate_json


__all__: list[str] = [
    "DEFAULT_SOURCE",
    "TAPE_SOURCE",
    "RandomSourceSettings",
    "available_sources",
    "build_random_source",
    "load_settings",
]

logger = logging.getLogger(__name__)

DEFAULT_SOURCE: Final[str] = "PCG64"
TAPE_SOURCE: Final[str] = "Tape"

_FACTORIES: Final[Mapping[str, Callable[[], RandomSource]]] = MappingProxyType(
    {
        "PCG64": lambda: BitGeneratorSource("PCG64"),
        "MersenneTwister": lambda: BitGeneratorSource("MT19937"),
        "Philox": lambda: BitGeneratorSource("Philox"),
        "SFC64": lambda: BitGeneratorSource("SFC64"),
    }
)


class RandomSourceSettings(BaseModel):
    """User-facing choice of random source.

    Attributes
    ----------
    random_source
        Description of the source to use (see `available_sources`).
    tape_path
        File holding the replay tape; required when ``random_source`` is
        ``"Tape"``.
    """

    random_source: str = Field(DEFAULT_SOURCE, min_length=1)
    tape_path: Path | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")


def available_sources() -> tuple[str, ...]:
    """Descriptions accepted by `RandomSourceSettings.random_source`."""
    return (*_FACTORIES, TAPE_SOURCE)


def load_settings(path: Path) -> Result[RandomSourceSettings, SettingsLoadFailed]:
    """Read settings from a JSON file."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        return Failure(SettingsLoadFailed(path=str(path), message=str(exc)))
    match validate_json(RandomSourceSettings, raw):
        case Success(settings):
            return Success(settings)
        case Failure(error):
            return Failure(SettingsLoadFailed(path=str(path), message="invalid settings", error=error))


def _build_tape(settings: RandomSourceSettings) -> Result[RandomSource, MissingRandomSource]:
    if settings.tape_path is None:
        return Failure(MissingRandomSource(reason="the Tape source needs a tape_path"))
    match TapeSource.from_file(settings.tape_path):
        case Success(tape):
            return Success(tape)
        case Failure(error):
            return Failure(MissingRandomSource(reason=error.message))


def build_random_source(
    settings: RandomSourceSettings | None,
) -> Result[RandomSource, MissingRandomSource]:
    """Instantiate the source described by *settings*.

    Returns:
        Failure when no settings are available or the tape cannot be loaded;
        otherwise the selected source, or the default one when the
        description is not registered.
    """
    if settings is None:
        return Failure(MissingRandomSource(reason="no random source settings available"))
    if settings.random_source == TAPE_SOURCE:
        return _build_tape(settings)

    factory = _FACTORIES.get(settings.random_source)
    if factory is None:
        logger.warning(
            f"Unknown random source {settings.random_source!r}; using default {DEFAULT_SOURCE!r}"
        )
        factory = _FACTORIES[DEFAULT_SOURCE]
    return Success(factory())
