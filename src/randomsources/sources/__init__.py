"""Random source contract, snapshot type and bundled implementations."""

from randomsources.sources.bit_generator import BitGeneratorKind, BitGeneratorSource
from randomsources.sources.protocols import RandomSource
from randomsources.sources.state import SourceState
from randomsources.sources.tape import TapeSource

__all__ = [
    "BitGeneratorKind",
    "BitGeneratorSource",
    "RandomSource",
    "SourceState",
    "TapeSource",
]
