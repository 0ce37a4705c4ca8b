# tests/test_cli.py
"""Tests for the ``python -m randomsources`` CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from randomsources.__main__ import main
from randomsources.generator import RandomSourceManager
from randomsources.sources import BitGeneratorSource


def run_cli(capsys: pytest.CaptureFixture[str], *args: str) -> tuple[int, str, str]:
    """Run the CLI in-process and return (exit code, stdout, stderr)."""
    with pytest.raises(SystemExit) as excinfo:
        main(list(args))
    captured = capsys.readouterr()
    code = excinfo.value.code
    assert isinstance(code, int)
    return code, captured.out, captured.err


def test_list_sources(capsys: pytest.CaptureFixture[str]) -> None:
    code, out, _ = run_cli(capsys, "list-sources")
    assert code == 0
    assert "PCG64 (default)" in out
    assert "MersenneTwister" in out


def test_sample_uniform_json_is_repeatable(capsys: pytest.CaptureFixture[str]) -> None:
    code, out, _ = run_cli(
        capsys, "sample", "--source", "MersenneTwister", "--seed", "42", "--count", "3", "--json"
    )
    assert code == 0
    document = json.loads(out)
    assert document["source"] == "MT19937"
    assert document["distribution"] == "uniform"

    reference = RandomSourceManager(BitGeneratorSource("MT19937"))
    reference.initialize_repeatable(42)
    assert document["values"] == [reference.uniform() for _ in range(3)]


def test_sample_normal_plain(capsys: pytest.CaptureFixture[str]) -> None:
    code, out, _ = run_cli(capsys, "sample", "--seed", "1", "--count", "4", "--distribution", "normal")
    assert code == 0

    reference = RandomSourceManager(BitGeneratorSource("PCG64"))
    reference.initialize_repeatable(1)
    assert [float(line) for line in out.split()] == [reference.normal() for _ in range(4)]


def test_sample_negative_count(capsys: pytest.CaptureFixture[str]) -> None:
    code, _, err = run_cli(capsys, "sample", "--count", "-1", "--distribution", "normal")
    assert code == 2
    assert "cannot draw -1" in err


def test_sample_with_bad_settings(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text('{"random_source": ""}', encoding="utf-8")
    code, _, err = run_cli(capsys, "sample", "--settings", str(path))
    assert code == 2
    assert "cannot load settings" in err


def test_sample_tape_without_path(capsys: pytest.CaptureFixture[str]) -> None:
    code, _, err = run_cli(capsys, "sample", "--source", "Tape")
    assert code == 2
    assert "tape_path" in err


def test_sample_with_empty_source_name(capsys: pytest.CaptureFixture[str]) -> None:
    code, out, err = run_cli(capsys, "sample", "--source", "")
    assert code == 2
    assert out == ""
    assert "invalid source ''" in err
