"""
Command-line interface and high-level generator function.
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import Sequence

from .config import RandKeyConfig
from .engine import RandKey
from .errors import RandKeyError
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_COUNTS = ("10", "2", "3")


def generate_key(
    letters: str | int = DEFAULT_COUNTS[0],
    symbols: str | int = DEFAULT_COUNTS[1],
    digits: str | int = DEFAULT_COUNTS[2],
    unit: str | int | None = None,
    config: RandKeyConfig | None = None,
) -> str:
    """
    High-level function:
    - Parse the per-class counts.
    - Optionally override the chunk size.
    - Generate and return the key.
    """
    rk = RandKey(letters, symbols, digits, config=config)
    if unit is not None:
        rk.set_unit(unit)
    rk.generate()
    return rk.key


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="randkey",
        description="Generate a random key with a given number of letters, symbols and digits.",
    )
    parser.add_argument(
        "counts",
        nargs="*",
        metavar="N",
        help="LETTERS SYMBOLS DIGITS [UNIT] (default: 10 2 3)",
    )
    parser.add_argument("--seed", type=int, help="fixed PRNG seed for reproducible keys")
    parser.add_argument(
        "--quantum-seed",
        action="store_true",
        help="seed the PRNG from a simulated qubit measurement",
    )
    parser.add_argument("--workers", type=int, help="maximum worker threads")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for `python -m randkey`, `run_randkey.py` and the `randkey` script.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.counts) not in (0, 3, 4):
        parser.error("expected no counts, or LETTERS SYMBOLS DIGITS [UNIT]")

    setup_logging(args.verbose)

    counts = args.counts or list(DEFAULT_COUNTS)
    unit = counts[3] if len(counts) == 4 else None

    try:
        config = RandKeyConfig.from_env()
        overrides = {}
        if args.seed is not None:
            overrides["seed"] = args.seed
        if args.quantum_seed:
            overrides["seed_source"] = "quantum"
        if args.workers is not None:
            overrides["max_workers"] = args.workers
        if overrides:
            config = dataclasses.replace(config, **overrides)
    except ValueError as exc:
        print(f"randkey: invalid configuration: {exc}", file=sys.stderr)
        return 1

    try:
        key = generate_key(*counts[:3], unit=unit, config=config)
    except RandKeyError as exc:
        logger.debug("Generation failed", exc_info=True)
        print(f"randkey: {exc}", file=sys.stderr)
        return 1

    print(key)
    return 0
