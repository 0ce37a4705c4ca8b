# tests/helpers/__init__.py
"""Shared test utilities for the RandomSources test suite.

Usage:
    >>> from tests.helpers import expect_success, CountingSource
    >>>
    >>> manager = expect_success(RandomSourceManager.create(CountingSource(inner)))
"""

from __future__ import annotations

from tests.helpers.result_utils import E, T, expect_failure, expect_success
from tests.helpers.sources import CountingSource, ScriptedSource

__all__ = [
    # Result unwrapping
    "expect_success",
    "expect_failure",
    "T",
    "E",
    # Instrumented sources
    "CountingSource",
    "ScriptedSource",
]
