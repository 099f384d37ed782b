"""Fixtures for pipeline tests: an in-memory fake of the LeetCode connector."""

from __future__ import annotations

import asyncio

import pytest

from laakhay.leaderboard.core import TransportError
from laakhay.leaderboard.models import RankedUser, UserDetail


class FakeLeaderboard:
    """Serves pages and details from dicts; records every call.

    ``pages`` maps page index to (username, region) pairs; ranks are assigned
    from the position in the listing. A page or username mapped to an
    exception instance raises it instead.
    """

    def __init__(self, pages, details=None, page_errors=None, detail_errors=None, delays=None):
        self.pages = pages
        self.details = details or {}
        self.page_errors = page_errors or {}
        self.detail_errors = detail_errors or {}
        self.delays = delays or {}
        self.page_calls: list[int] = []
        self.detail_calls: list[str] = []
        self.completed_details: list[str] = []

    async def fetch_page(self, page: int) -> list[RankedUser]:
        self.page_calls.append(page)
        await asyncio.sleep(self.delays.get(page, 0))
        if page in self.page_errors:
            raise self.page_errors[page]
        return [
            RankedUser(rank=rank, username=name, region="US")
            for rank, name, region in self.pages.get(page, [])
            if region == "US"
        ]

    async def fetch_detail(self, username: str) -> UserDetail:
        self.detail_calls.append(username)
        await asyncio.sleep(self.delays.get(username, 0))
        if username in self.detail_errors:
            raise self.detail_errors[username]
        self.completed_details.append(username)
        return self.details.get(username, UserDetail(total_solved=100, company="Acme", school="MIT"))


@pytest.fixture
def alice_bob_board():
    """Page 1: alice, bob (US) and one non-US user; page 2: carol."""
    return FakeLeaderboard(
        pages={
            1: [(1, "alice", "US"), (2, "zhang", "CN"), (3, "bob", "US")],
            2: [(51, "carol", "US")],
        },
        details={
            "alice": UserDetail(total_solved=900, company="Acme", school="MIT"),
            "carol": UserDetail(total_solved=300),
        },
        detail_errors={"bob": TransportError("HTTP 500", status_code=500)},
    )


@pytest.fixture
def fake_board_cls():
    return FakeLeaderboard
