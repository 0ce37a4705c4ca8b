"""
Capability contract for underlying random sources.

`RandomSourceManager` talks to its source only through this Protocol, so any
implementation (numpy bit generator, hardware device, replay tape) can be
plugged in without the manager knowing the entropy algorithm.

Contract
--------
* ``next()`` returns a uniform double in the open interval (0, 1).
* ``get_state()`` returns a `SourceState` that shares nothing mutable with the
  live source; loading it later resumes the sequence exactly.
* ``load_state()`` raises `StateMismatchError` for snapshots it cannot apply.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from randomsources.sources.state import SourceState


@runtime_checkable
class RandomSource(Protocol):
    """Minimal interface the generator requires from a random source."""

    @property
    def name(self) -> str:
        """Description identifying the implementation (and its snapshots)."""
        ...

    def initialize_non_repeatable(self) -> None:
        """Seed from an unpredictable source of entropy."""
        ...

    def initialize_repeatable(self, seed: int) -> None:
        """Seed deterministically; the same seed always yields the same sequence."""
        ...

    def next(self) -> float:
        """Draw one uniform value in (0, 1)."""
        ...

    def get_state(self) -> SourceState:
        """Capture everything needed to resume the sequence."""
        ...

    def load_state(self, state: SourceState) -> None:
        """Resume from a previously captured state."""
        ...
