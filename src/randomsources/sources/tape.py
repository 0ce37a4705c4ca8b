"""
Replay source reading uniforms from a pre-recorded tape.

The tape is fixed at construction; seeding only moves the read cursor, so a
``TapeSource`` is fully deterministic apart from non-repeatable
initialisation, which picks the starting position from OS entropy.  Reads
wrap around at the end of the tape.
"""

from __future__ import annotations

import hashlib
import json
import secrets
from pathlib import Path
from typing import Final, Sequence

import numpy as np
from numpy.typing import NDArray

from randomsources.errors.exceptions import SourceNotInitializedError, StateMismatchError
from randomsources.errors.generator import InvalidTape
from randomsources.result import Failure, Result, Success
from randomsources.sources.state import SourceState


__all__: list[str] = ["TapeSource"]

_NAME: Final[str] = "Tape"


class TapeSource:
    """Deterministic replay of recorded uniform values."""

    def __init__(self, tape: NDArray[np.float64]) -> None:
        self._tape = tape
        self._cursor: int | None = None

    @classmethod
    def create(
        cls, values: Sequence[float] | NDArray[np.float64]
    ) -> Result[TapeSource, InvalidTape]:
        """Validate *values* and build a source over a private copy of them."""
        tape = np.array(values, dtype=np.float64).ravel()
        if tape.size == 0:
            return Failure(InvalidTape(message="tape is empty"))
        outside = np.flatnonzero(~((tape > 0.0) & (tape < 1.0)))
        if outside.size:
            index = int(outside[0])
            return Failure(
                InvalidTape(message=f"value {tape[index]!r} at position {index} is outside (0, 1)")
            )
        tape.setflags(write=False)
        return Success(cls(tape))

    @classmethod
    def from_file(cls, path: Path) -> Result[TapeSource, InvalidTape]:
        """Load a tape written as one value per line."""
        try:
            values = np.loadtxt(path, dtype=np.float64, ndmin=1)
        except (OSError, ValueError) as exc:
            return Failure(InvalidTape(message=f"cannot read {path}: {exc}"))
        return cls.create(values)

    # ---------------- read-only props --------------------------------- #

    @property
    def name(self) -> str:
        return _NAME

    def __len__(self) -> int:
        return int(self._tape.size)

    # ---------------- seeding ----------------------------------------- #

    def initialize_non_repeatable(self) -> None:
        self._cursor = secrets.randbelow(len(self))

    def initialize_repeatable(self, seed: int) -> None:
        self._cursor = seed % len(self)

    # ---------------- draws ------------------------------------------- #

    def _require_cursor(self) -> int:
        if self._cursor is None:
            raise SourceNotInitializedError(_NAME)
        return self._cursor

    def next(self) -> float:
        cursor = self._require_cursor()
        self._cursor = (cursor + 1) % len(self)
        return float(self._tape[cursor])

    # ---------------- snapshots --------------------------------------- #

    def _fingerprint(self) -> str:
        return hashlib.sha256(self._tape.tobytes()).hexdigest()

    def get_state(self) -> SourceState:
        payload = {
            "cursor": self._require_cursor(),
            "length": len(self),
            "sha256": self._fingerprint(),
        }
        return SourceState(source=_NAME, payload=json.dumps(payload))

    def load_state(self, state: SourceState) -> None:
        if state.source != _NAME:
            raise StateMismatchError(expected=_NAME, actual=state.source)
        try:
            payload = json.loads(state.payload)
            cursor, length = int(payload["cursor"]), int(payload["length"])
            fingerprint = str(payload["sha256"])
        except (KeyError, TypeError, ValueError) as exc:
            raise StateMismatchError(expected=_NAME, actual=state.source, message=str(exc)) from exc
        if length != len(self) or not 0 <= cursor < length:
            raise StateMismatchError(
                expected=_NAME,
                actual=state.source,
                message=f"cursor {cursor} on a tape of {length} values, this tape holds {len(self)}",
            )
        if fingerprint != self._fingerprint():
            raise StateMismatchError(
                expected=_NAME, actual=state.source, message="snapshot was taken from another tape"
            )
        self._cursor = cursor
