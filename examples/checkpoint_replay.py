#!/usr/bin/env python3
"""
Checkpoint replay example.

Demonstrates:
- Repeatable seeding
- Nested save / restore_last checkpoints
- Persisting a source state as JSON and resuming from it
"""

from __future__ import annotations

from randomsources.generator import RandomSourceManager
from randomsources.result import Failure, Success
from randomsources.settings import RandomSourceSettings
from randomsources.sources import SourceState


def main() -> None:
    """Run checkpoint replay demo."""
    print("=== Checkpoint Replay ===")

    match RandomSourceManager.from_settings(RandomSourceSettings(random_source="MersenneTwister")):
        case Success(manager):
            pass
        case Failure(error):
            print(f"✗ Cannot build generator: {error.reason}")
            return

    print(f"\n1. {manager.implementation_info.description}")
    manager.initialize_repeatable(42)

    print("\n2. Nested checkpoints")
    manager.save()
    outer = [manager.normal() for _ in range(3)]
    manager.save()
    inner = [manager.normal() for _ in range(3)]
    print(f"   outer: {outer}")
    print(f"   inner: {inner}")

    manager.restore_last()
    assert [manager.normal() for _ in range(3)] == inner
    manager.restore_last()
    assert [manager.normal() for _ in range(3)] == outer
    print("   ✓ both checkpoints replayed exactly")

    print("\n3. Persisted state")
    persisted = manager.save_state().model_dump_json()
    expected = manager.uniform()
    manager.restore_state(SourceState.model_validate_json(persisted))
    assert manager.uniform() == expected
    print(f"   ✓ resumed from {len(persisted)} bytes of JSON")


if __name__ == "__main__":
    main()
