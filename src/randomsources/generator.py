"""
randomsources.generator
=======================
Uniform and standard-normal variates on top of a swappable `RandomSource`.

`RandomSourceManager` owns three pieces of state around the injected source:

1. **Initialisation flag** - the source is seeded lazily (non-repeatable) on
   the first draw unless the caller seeded it explicitly.  Any
   (re)initialisation discards a cached normal.
2. **Box-Muller cache** - normals are produced in pairs from two uniforms;
   the second of each pair is held back and served on the next call without
   consuming new uniforms.
3. **Checkpoint stack** - ``save`` pushes the source state (plus the cached
   normal) and ``restore_last`` pops and re-applies it, last in first out.

Typical usage
-------------
Example::

    from randomsources.generator import RandomSourceManager
    from randomsources.sources import BitGeneratorSource

    manager = RandomSourceManager(BitGeneratorSource("PCG64"))
    manager.initialize_repeatable(42)

    manager.save()
    first = manager.normal()
    manager.restore_last()
    assert manager.normal() == first

A manager is not thread-safe; use one instance per worker.
"""

from __future__ import annotations

import logging
import math
from typing import Final

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict

from randomsources import __version__
from randomsources.errors.exceptions import DomainError, MissingRandomSourceError
from randomsources.errors.generator import MissingRandomSource, NegativeSampleCount
from randomsources.result import Failure, Result, Success
from randomsources.settings import RandomSourceSettings, build_random_source
from randomsources.sources.protocols import RandomSource
from randomsources.sources.state import SourceState


__all__: list[str] = ["Checkpoint", "ImplementationInfo", "RandomSourceManager"]

logger = logging.getLogger(__name__)

_TWO_PI: Final[float] = 2.0 * math.pi


# --------------------------------------------------------------------------- #
# Value types                                                                 #
# --------------------------------------------------------------------------- #


class Checkpoint(BaseModel):
    """Entry of the checkpoint stack.

    Attributes
    ----------
    state
        Source state at the time of ``save``.
    spare
        Cached Box-Muller normal at the time of ``save``, or ``None``.
    """

    state: SourceState
    spare: float | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")


class ImplementationInfo(BaseModel):
    """Descriptive metadata about the generator implementation."""

    name: str
    version: str
    description: str

    model_config = ConfigDict(frozen=True, extra="forbid")


# --------------------------------------------------------------------------- #
# Generator                                                                   #
# --------------------------------------------------------------------------- #


class RandomSourceManager:
    """Uniform/normal variate generator delegating raw draws to a `RandomSource`."""

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #

    def __init__(self, source: RandomSource) -> None:
        if source is None:
            raise MissingRandomSourceError("no source supplied")
        if not isinstance(source, RandomSource):
            raise MissingRandomSourceError(
                f"{type(source).__name__} does not implement the RandomSource interface"
            )
        self._source: Final[RandomSource] = source
        self._initialized = False
        self._spare: float | None = None
        self._checkpoints: list[Checkpoint] = []

    @classmethod
    def create(cls, source: RandomSource | None) -> Result[RandomSourceManager, MissingRandomSource]:
        """Build a manager, reporting an absent or non-conforming source as a Failure."""
        if source is None:
            return Failure(MissingRandomSource(reason="no source supplied"))
        try:
            return Success(cls(source))
        except MissingRandomSourceError as exc:
            return Failure(MissingRandomSource(reason=exc.reason))

    @classmethod
    def from_settings(
        cls, settings: RandomSourceSettings | None
    ) -> Result[RandomSourceManager, MissingRandomSource]:
        """Select a bundled source from *settings* and wrap it."""
        return build_random_source(settings).and_then(cls.create)

    # ------------------------------------------------------------------ #
    # Read-only props                                                    #
    # ------------------------------------------------------------------ #

    @property
    def source(self) -> RandomSource:
        return self._source

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def has_spare(self) -> bool:
        """True iff a Box-Muller normal is cached for the next ``normal`` call."""
        return self._spare is not None

    @property
    def checkpoint_depth(self) -> int:
        return len(self._checkpoints)

    @property
    def checkpoints(self) -> tuple[Checkpoint, ...]:
        """Saved checkpoints, oldest first."""
        return tuple(self._checkpoints)

    @property
    def implementation_info(self) -> ImplementationInfo:
        return ImplementationInfo(
            name=type(self).__name__,
            version=__version__,
            description=f"Box-Muller normals over the {self._source.name!r} random source",
        )

    # ------------------------------------------------------------------ #
    # Initialisation                                                     #
    # ------------------------------------------------------------------ #

    def initialize_non_repeatable(self) -> None:
        """Seed the source unpredictably and drop any cached normal."""
        self._source.initialize_non_repeatable()
        self._spare = None
        self._initialized = True
        logger.debug(f"Initialized {self._source.name} non-repeatably")

    def initialize_repeatable(self, seed: int) -> None:
        """Seed the source from *seed* and drop any cached normal."""
        self._source.initialize_repeatable(seed)
        self._spare = None
        self._initialized = True
        logger.debug(f"Initialized {self._source.name} with seed {seed}")

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self.initialize_non_repeatable()

    # ------------------------------------------------------------------ #
    # Variates                                                           #
    # ------------------------------------------------------------------ #

    def uniform(self) -> float:
        """Return one raw draw from the source, in (0, 1)."""
        self._ensure_initialized()
        return self._source.next()

    def normal(self) -> float:
        """Return one standard-normal variate."""
        self._ensure_initialized()
        return self._box_muller()

    def fill_normal(self, out: NDArray[np.float64]) -> None:
        """Fill *out* in order with normals, exactly as repeated ``normal`` calls would."""
        self._ensure_initialized()
        for index in np.ndindex(out.shape):
            out[index] = self._box_muller()

    def normal_batch(self, n: int) -> Result[NDArray[np.float64], NegativeSampleCount]:
        """Return *n* normals drawn sequentially, sharing the Box-Muller cache with ``normal``."""
        if n < 0:
            return Failure(NegativeSampleCount(n_samples=n))
        if n == 0:
            return Success(np.empty(0, dtype=np.float64))
        samples: NDArray[np.float64] = np.empty(n, dtype=np.float64)
        self.fill_normal(samples)
        return Success(samples)

    def _box_muller(self) -> float:
        """Serve the cached normal, or draw two uniforms and cache the sine branch."""
        if self._spare is not None:
            spare, self._spare = self._spare, None
            return spare

        u1 = self._source.next()
        u2 = self._source.next()
        if not 0.0 < u1 <= 1.0:
            raise DomainError(u1)
        if not 0.0 <= u2 <= 1.0:
            raise DomainError(u2)

        radius = math.sqrt(-2.0 * math.log(u1))
        theta = _TWO_PI * u2
        self._spare = radius * math.sin(theta)
        return radius * math.cos(theta)

    # ------------------------------------------------------------------ #
    # Checkpoints                                                        #
    # ------------------------------------------------------------------ #

    def save(self) -> None:
        """Push the current source state and cached normal onto the checkpoint stack."""
        self._ensure_initialized()
        self._checkpoints.append(Checkpoint(state=self._source.get_state(), spare=self._spare))
        logger.debug(f"Saved checkpoint {len(self._checkpoints)} for {self._source.name}")

    def restore_last(self) -> None:
        """Pop the most recent checkpoint and re-apply it; no-op when the stack is empty."""
        if not self._checkpoints:
            return
        checkpoint = self._checkpoints[-1]
        self._source.load_state(checkpoint.state)
        self._checkpoints.pop()
        self._spare = checkpoint.spare
        self._initialized = True
        logger.debug(f"Restored checkpoint {len(self._checkpoints) + 1} for {self._source.name}")

    def save_state(self) -> SourceState:
        """Return the source state without touching the checkpoint stack."""
        self._ensure_initialized()
        return self._source.get_state()

    def restore_state(self, state: SourceState) -> None:
        """Apply a caller-held source state; the Box-Muller cache is left as is."""
        self._source.load_state(state)
        self._initialized = True
