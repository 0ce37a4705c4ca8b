"""Immutable snapshot of a random source's internal state."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


__all__: list[str] = ["SourceState"]


class SourceState(BaseModel):
    """Serialisable capture of a source's position in its sequence.

    Attributes
    ----------
    source
        Name of the implementation that produced the snapshot.  Sources
        refuse snapshots carrying another name.
    payload
        JSON document with whatever the source needs to resume.  Kept as a
        string so the snapshot can never alias the live source's buffers.
    """

    source: Annotated[str, Field(min_length=1)]
    payload: str

    model_config = ConfigDict(frozen=True, extra="forbid")
