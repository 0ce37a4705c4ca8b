# src/randomsources/__main__.py
"""CLI for drawing variates from the bundled random sources.

Usage:
    python -m randomsources list-sources
    python -m randomsources sample [--source NAME | --settings FILE] [--seed N]
                                   [--count N] [--distribution uniform|normal] [--json]

Examples:
    # Ten reproducible normals from the Mersenne Twister
    python -m randomsources sample --source MersenneTwister --seed 42 --count 10 --distribution normal

    # Uniforms from whatever a settings file selects, as JSON
    python -m randomsources sample --settings settings.json --count 5 --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

from randomsources.generator import RandomSourceManager
from randomsources.result import Failure, Success
from randomsources.settings import (
    DEFAULT_SOURCE,
    RandomSourceSettings,
    available_sources,
    load_settings,
)
from randomsources.validation import validate_model


def cmd_list_sources() -> int:
    """Print every registered source description, one per line."""
    for name in available_sources():
        marker = " (default)" if name == DEFAULT_SOURCE else ""
        print(f"{name}{marker}")
    return 0


def _resolve_settings(
    source: str | None, settings_path: str | None
) -> RandomSourceSettings | None:
    if settings_path is None:
        chosen = source if source is not None else DEFAULT_SOURCE
        match validate_model(RandomSourceSettings, random_source=chosen):
            case Success(settings):
                return settings
            case Failure(exc):
                print(f"✗ Error: invalid source {chosen!r}", file=sys.stderr)
                print(f"  {exc}", file=sys.stderr)
                return None
    match load_settings(Path(settings_path)):
        case Success(settings):
            return settings
        case Failure(error):
            print(f"✗ Error: cannot load settings from {error.path}: {error.message}", file=sys.stderr)
            if error.error is not None:
                print(f"  {error.error}", file=sys.stderr)
            return None


def cmd_sample(
    source: str | None,
    settings_path: str | None,
    seed: int | None,
    count: int,
    distribution: str,
    as_json: bool,
) -> int:
    """
    Draw *count* variates and print them.

    Returns:
        Exit code:
            0: Variates printed
            2: Configuration error (settings, source or count)
    """
    settings = _resolve_settings(source, settings_path)
    if settings is None:
        return 2

    match RandomSourceManager.from_settings(settings):
        case Failure(error):
            print(f"✗ Error: {error.reason}", file=sys.stderr)
            return 2
        case Success(manager):
            pass

    if seed is not None:
        manager.initialize_repeatable(seed)

    if distribution == "normal":
        match manager.normal_batch(count):
            case Success(samples):
                values = [float(x) for x in samples]
            case Failure(error):
                print(f"✗ Error: cannot draw {error.n_samples} variates", file=sys.stderr)
                return 2
    else:
        if count < 0:
            print(f"✗ Error: cannot draw {count} variates", file=sys.stderr)
            return 2
        values = [manager.uniform() for _ in range(count)]

    if as_json:
        print(
            json.dumps(
                {
                    "source": manager.source.name,
                    "seed": seed,
                    "distribution": distribution,
                    "values": values,
                },
                indent=2,
            )
        )
    else:
        for value in values:
            print(repr(value))
    return 0


def main(argv: list[str] | None = None) -> NoReturn:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="RandomSources variate generator CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # list-sources command
    subparsers.add_parser("list-sources", help="List registered random sources")

    # sample command
    sample_parser = subparsers.add_parser("sample", help="Draw uniform or normal variates")
    selection = sample_parser.add_mutually_exclusive_group()
    selection.add_argument("--source", help=f"Source description (default: {DEFAULT_SOURCE})")
    selection.add_argument("--settings", help="JSON settings file selecting the source")
    sample_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for a repeatable sequence"
    )
    sample_parser.add_argument("--count", type=int, default=10, help="Number of variates")
    sample_parser.add_argument(
        "--distribution",
        choices=("uniform", "normal"),
        default="uniform",
        help="Distribution to sample (default: uniform)",
    )
    sample_parser.add_argument(
        "--json", action="store_true", dest="as_json", help="Print a JSON document"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.command == "list-sources":
        exit_code = cmd_list_sources()
    elif args.command == "sample":
        exit_code = cmd_sample(
            args.source, args.settings, args.seed, args.count, args.distribution, args.as_json
        )
    else:
        parser.print_help()
        sys.exit(2)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
