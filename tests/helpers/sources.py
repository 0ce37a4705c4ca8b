# tests/helpers/sources.py
"""Instrumented random sources for exercising `RandomSourceManager`."""

from __future__ import annotations

import json
from typing import Sequence

from randomsources.errors import StateMismatchError
from randomsources.sources import RandomSource, SourceState


class CountingSource:
    """Delegating source that counts draws and initialisations."""

    def __init__(self, inner: RandomSource) -> None:
        self._inner = inner
        self.draws = 0
        self.non_repeatable_inits = 0
        self.repeatable_seeds: list[int] = []
        self.reject_loads = False

    @property
    def name(self) -> str:
        return self._inner.name

    def reset_counters(self) -> None:
        self.draws = 0
        self.non_repeatable_inits = 0
        self.repeatable_seeds = []

    def initialize_non_repeatable(self) -> None:
        self.non_repeatable_inits += 1
        self._inner.initialize_non_repeatable()

    def initialize_repeatable(self, seed: int) -> None:
        self.repeatable_seeds.append(seed)
        self._inner.initialize_repeatable(seed)

    def next(self) -> float:
        self.draws += 1
        return self._inner.next()

    def get_state(self) -> SourceState:
        return self._inner.get_state()

    def load_state(self, state: SourceState) -> None:
        if self.reject_loads:
            raise StateMismatchError(
                expected=self.name, actual=state.source, message="loads rejected"
            )
        self._inner.load_state(state)


class ScriptedSource:
    """Source replaying an arbitrary script of values, including out-of-contract ones."""

    def __init__(self, values: Sequence[float]) -> None:
        self._values = tuple(values)
        self._position = 0

    @property
    def name(self) -> str:
        return "Scripted"

    def initialize_non_repeatable(self) -> None:
        self._position = 0

    def initialize_repeatable(self, seed: int) -> None:
        self._position = 0

    def next(self) -> float:
        value = self._values[self._position]
        self._position += 1
        return value

    def get_state(self) -> SourceState:
        return SourceState(source=self.name, payload=json.dumps({"position": self._position}))

    def load_state(self, state: SourceState) -> None:
        self._position = int(json.loads(state.payload)["position"])
