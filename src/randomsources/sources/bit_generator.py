"""
randomsources.sources.bit_generator
===================================
Random source backed by one of NumPy's bit generators.

NumPy's ``Generator.random`` draws from the half-open interval [0, 1).  The
Box-Muller transform takes ``log(u1)``, so exact zeros are redrawn and the
source honours the open-interval contract of `RandomSource`.

Snapshots hold the bit generator's ``state`` dictionary as JSON.  Array
members (the MT19937 key, the Philox counter and buffer) are converted to
plain lists on capture; NumPy accepts lists when the state is loaded back.
"""

from __future__ import annotations

import json
from typing import Final, Literal, TypeAlias

import numpy as np

from randomsources.errors.exceptions import SourceNotInitializedError, StateMismatchError
from randomsources.sources.state import SourceState


__all__: list[str] = ["BitGeneratorKind", "BitGeneratorSource"]

BitGeneratorKind: TypeAlias = Literal["PCG64", "MT19937", "Philox", "SFC64"]

_BIT_GENERATORS: Final[dict[str, type[np.random.BitGenerator]]] = {
    "PCG64": np.random.PCG64,
    "MT19937": np.random.MT19937,
    "Philox": np.random.Philox,
    "SFC64": np.random.SFC64,
}

# SeedSequence only takes non-negative entropy; fold signed seeds onto uint64.
_SEED_MODULUS: Final[int] = 1 << 64

_JsonValue: TypeAlias = (
    str | int | float | bool | None | list["_JsonValue"] | dict[str, "_JsonValue"]
)


def _to_jsonable(value: object) -> _JsonValue:
    """Convert a bit generator state into plain JSON-compatible values."""
    match value:
        case dict():
            return {str(key): _to_jsonable(item) for key, item in value.items()}
        case np.ndarray():
            return [_to_jsonable(item) for item in value.tolist()]
        case list() | tuple():
            return [_to_jsonable(item) for item in value]
        case np.integer():
            return int(value)
        case np.floating():
            return float(value)
        case str() | int() | float() | bool() | None:
            return value
        case _:
            raise TypeError(f"Unsupported state member: {value!r}")


class BitGeneratorSource:
    """Uniform (0, 1) draws from a NumPy ``Generator`` over the chosen bit generator."""

    def __init__(self, kind: BitGeneratorKind = "PCG64") -> None:
        if kind not in _BIT_GENERATORS:
            raise ValueError(f"Unsupported bit generator: {kind!r}")
        self._kind: BitGeneratorKind = kind
        self._bit_generator_cls = _BIT_GENERATORS[kind]
        self._generator: np.random.Generator | None = None

    # ---------------- read-only props --------------------------------- #

    @property
    def name(self) -> str:
        return self._kind

    # ---------------- seeding ----------------------------------------- #

    def initialize_non_repeatable(self) -> None:
        """Seed from fresh OS entropy."""
        self._generator = np.random.Generator(self._bit_generator_cls(np.random.SeedSequence()))

    def initialize_repeatable(self, seed: int) -> None:
        """Seed deterministically from *seed*."""
        sequence = np.random.SeedSequence(seed % _SEED_MODULUS)
        self._generator = np.random.Generator(self._bit_generator_cls(sequence))

    # ---------------- draws ------------------------------------------- #

    def _require(self) -> np.random.Generator:
        if self._generator is None:
            raise SourceNotInitializedError(self._kind)
        return self._generator

    def next(self) -> float:
        generator = self._require()
        value = float(generator.random())
        while value == 0.0:
            value = float(generator.random())
        return value

    # ---------------- snapshots --------------------------------------- #

    def get_state(self) -> SourceState:
        state = self._require().bit_generator.state
        return SourceState(source=self._kind, payload=json.dumps(_to_jsonable(state)))

    def load_state(self, state: SourceState) -> None:
        if state.source != self._kind:
            raise StateMismatchError(expected=self._kind, actual=state.source)
        try:
            bit_generator = self._bit_generator_cls()
            bit_generator.state = json.loads(state.payload)
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise StateMismatchError(
                expected=self._kind, actual=state.source, message=str(exc)
            ) from exc
        self._generator = np.random.Generator(bit_generator)
