"""
RandomSources: uniform and Box-Muller normal variates over a swappable random
source, with lazy initialisation and a checkpoint stack for reproducible
sequences.
"""

from __future__ import annotations

__version__ = "0.1.0"
