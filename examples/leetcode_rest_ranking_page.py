#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.leaderboard.connectors.leetcode import LeetCodeRESTConnector
from laakhay.leaderboard.pipeline import DetailEnricher


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch and enrich one LeetCode ranking page")
    p.add_argument("page", nargs="?", type=int, default=1)
    p.add_argument("--csrf-token", default=None)
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with LeetCodeRESTConnector(csrf_token=args.csrf_token) as rest:
        users = await rest.fetch_page(args.page)
        report = await DetailEnricher(rest.fetch_detail).enrich(users, page=args.page)

    print("=" * 90)
    print(f"Page        : {args.page}")
    print(f"US users    : {len(users)}")
    print(f"No detail   : {len(report.failures)}")
    print("=" * 90)
    print(f"{'Rank':>7} | {'Username':20} | {'Country':15} | {'Solved':>6} | {'Company':15} | School")
    print("-" * 90)
    for u in users:
        print(
            f"{u.rank:>7} | {u.username:20} | {u.country_name:15} | {u.total_solved:>6} | "
            f"{u.company[:15]:15} | {u.school}"
        )
    print("=" * 90)


if __name__ == "__main__":
    asyncio.run(main())
