# tests/conftest.py
"""Global PyTest fixtures for the test-suite."""

from __future__ import annotations

import signal
from types import FrameType
from typing import Callable, Generator

import pytest

from randomsources.generator import RandomSourceManager
from randomsources.sources import BitGeneratorSource
from tests.helpers import CountingSource

DEFAULT_TEST_TIMEOUT_SECONDS = 30.0


def _build_timeout_handler(
    timeout_seconds: float,
) -> Callable[[int, FrameType | None], None]:
    """Create SIGALRM handler that fails the test when timeout is reached."""

    def _handle_timeout(signum: int, frame: FrameType | None) -> None:
        pytest.fail(f"Test exceeded {timeout_seconds:.0f}s timeout", pytrace=True)

    return _handle_timeout


def _resolve_timeout_seconds(request: pytest.FixtureRequest) -> float:
    """Return timeout for current test (marker override allowed)."""
    marker = request.node.get_closest_marker("timeout")
    if marker is None:
        return DEFAULT_TEST_TIMEOUT_SECONDS

    raw_value = marker.kwargs.get("seconds", marker.args[0] if marker.args else None)
    if raw_value is None:
        pytest.fail("timeout marker requires seconds argument", pytrace=True)

    seconds = float(raw_value)
    if seconds <= 0:
        pytest.fail("timeout marker must be positive seconds", pytrace=True)

    return seconds


@pytest.fixture(autouse=True)
def per_test_timeout(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Fail any test that runs longer than the default timeout."""
    if not hasattr(signal, "SIGALRM") or not hasattr(signal, "setitimer"):
        yield
        return

    timeout_seconds = _resolve_timeout_seconds(request)
    handler = _build_timeout_handler(timeout_seconds)
    previous_handler = signal.getsignal(signal.SIGALRM)
    signal.signal(signal.SIGALRM, handler)
    signal.setitimer(signal.ITIMER_REAL, timeout_seconds)
    try:
        yield
    finally:
        signal.setitimer(signal.ITIMER_REAL, 0.0)
        signal.signal(signal.SIGALRM, previous_handler)


@pytest.fixture(params=("PCG64", "MT19937", "Philox", "SFC64"))
def bit_generator_source(request: pytest.FixtureRequest) -> BitGeneratorSource:
    """Fresh, unseeded NumPy-backed source of every supported kind."""
    kind = request.param
    assert kind in ("PCG64", "MT19937", "Philox", "SFC64")
    return BitGeneratorSource(kind)


@pytest.fixture
def counting_source() -> CountingSource:
    """PCG64 source that records how many uniforms were drawn."""
    return CountingSource(BitGeneratorSource("PCG64"))


@pytest.fixture
def counted_manager(counting_source: CountingSource) -> RandomSourceManager:
    """Manager over `counting_source`, seeded with 42."""
    manager = RandomSourceManager(counting_source)
    manager.initialize_repeatable(42)
    counting_source.reset_counters()
    return manager
