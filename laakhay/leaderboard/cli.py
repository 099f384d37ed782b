"""Command-line entry point: ``laakhay-leaderboard``.

Usage:
    # Crawl the default 400 pages into rank.csv
    laakhay-leaderboard

    # Crawl 10 pages into a custom file
    laakhay-leaderboard --pages 10 --output out/us_rank.csv

Settings not given on the command line come from ``LEETCODE_*`` environment
variables (see :meth:`HarvestConfig.from_env`).
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys
from pathlib import Path
from time import perf_counter

from laakhay.leaderboard.core import HarvestConfig, LeaderboardError
from laakhay.leaderboard.pipeline import harvest


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="laakhay-leaderboard",
        description="Harvest US-region users of the LeetCode global ranking into a CSV file",
    )
    p.add_argument("--pages", type=int, default=None, help="Number of ranking pages to crawl")
    p.add_argument("--output", type=Path, default=None, help="Output CSV path")
    p.add_argument("--csrf-token", default=None, help="CSRF token for the session headers")
    p.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> HarvestConfig:
    """Environment settings overridden by any flags that were given."""
    overrides = {
        "page_count": args.pages,
        "output_path": args.output,
        "csrf_token": args.csrf_token,
        "timeout": args.timeout,
    }
    config = HarvestConfig.from_env()
    return dataclasses.replace(config, **{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"err = invalid configuration: {e}")
        return 2

    start = perf_counter()
    try:
        summary = asyncio.run(harvest(config))
    except LeaderboardError as e:
        print(f"err = {e}")
        status = 1
    else:
        print(
            f"ok: {summary.rows} rows from {summary.pages} pages -> {config.output_path}"
            f" ({summary.enrichment_failures} without detail)"
        )
        status = 0
    print(f"dt = {int((perf_counter() - start) * 1000)}")
    return status


if __name__ == "__main__":
    sys.exit(main())
