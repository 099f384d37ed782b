"""Unit tests for PaginationOrchestrator."""

from __future__ import annotations

import asyncio

import pytest

from laakhay.leaderboard.core import MalformedDataError, MalformedField, TransportError
from laakhay.leaderboard.pipeline import DetailEnricher, PaginationOrchestrator


def _orchestrator(board) -> PaginationOrchestrator:
    return PaginationOrchestrator(board.fetch_page, DetailEnricher(board.fetch_detail))


class TestCollectAll:
    """Test ordering, filtering and enrichment across pages."""

    @pytest.mark.asyncio
    async def test_alice_bob_example(self, alice_bob_board):
        users = await _orchestrator(alice_bob_board).collect_all(2)

        assert [u.username for u in users] == ["alice", "bob", "carol"]
        alice, bob, carol = users
        assert (alice.total_solved, alice.company, alice.school) == (900, "Acme", "MIT")
        assert (bob.total_solved, bob.company, bob.school) == (-1, "null", "null")
        assert (carol.total_solved, carol.company, carol.school) == (300, "null", "null")

    @pytest.mark.asyncio
    async def test_non_target_region_absent(self, alice_bob_board):
        users = await _orchestrator(alice_bob_board).collect_all(2)
        assert "zhang" not in {u.username for u in users}
        assert all(u.region == "US" for u in users)

    @pytest.mark.asyncio
    async def test_page_order_independent_of_completion_order(self, fake_board_cls):
        """Page 1 finishes last but still comes first."""
        board = fake_board_cls(
            pages={
                1: [(1, "p1a", "US"), (2, "p1b", "US")],
                2: [(51, "p2a", "US")],
                3: [(101, "p3a", "US"), (102, "p3b", "US")],
            },
            delays={1: 0.03, 2: 0.01, "p1a": 0.02},
        )

        users = await _orchestrator(board).collect_all(3)

        assert [u.username for u in users] == ["p1a", "p1b", "p2a", "p3a", "p3b"]

    @pytest.mark.asyncio
    async def test_row_count_is_sum_of_us_users(self, fake_board_cls):
        board = fake_board_cls(
            pages={
                1: [(1, "a", "US"), (2, "b", "CN"), (3, "c", "US")],
                2: [(4, "d", "CN")],
                3: [(5, "e", "US")],
            }
        )
        users = await _orchestrator(board).collect_all(3)
        assert len(users) == 3

    @pytest.mark.asyncio
    async def test_fetches_exactly_pages_one_to_n(self, fake_board_cls):
        board = fake_board_cls(pages={})
        await _orchestrator(board).collect_all(5)
        assert sorted(board.page_calls) == [1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_idempotent_over_unchanged_upstream(self, alice_bob_board):
        first = await _orchestrator(alice_bob_board).collect_all(2)
        second = await _orchestrator(alice_bob_board).collect_all(2)
        assert [u.to_row() for u in first] == [u.to_row() for u in second]

    @pytest.mark.asyncio
    async def test_collect_pages_reports_enrichment(self, alice_bob_board):
        batches = await _orchestrator(alice_bob_board).collect_pages(2)

        assert [b.page for b in batches] == [1, 2]
        assert [f.username for f in batches[0].report.failures] == ["bob"]
        assert batches[1].report.failures == []

    @pytest.mark.parametrize("page_count", [0, -3, True, 2.0])
    @pytest.mark.asyncio
    async def test_rejects_invalid_page_count(self, fake_board_cls, page_count):
        board = fake_board_cls(pages={})
        with pytest.raises(ValueError):
            await _orchestrator(board).collect_all(page_count)
        assert board.page_calls == []


class TestFatalAbort:
    """Test that any page failure aborts the whole collection."""

    @pytest.mark.asyncio
    async def test_page_failure_aborts(self, fake_board_cls):
        error = TransportError("HTTP 403", status_code=403)
        board = fake_board_cls(
            pages={1: [(1, "a", "US")], 3: [(3, "c", "US")]},
            page_errors={2: error},
        )

        with pytest.raises(TransportError) as exc_info:
            await _orchestrator(board).collect_all(3)

        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_lowest_failed_page_is_reported(self, fake_board_cls):
        late = MalformedDataError("rank null", field=MalformedField.RANK)
        early = TransportError("reset")
        board = fake_board_cls(
            pages={},
            page_errors={2: late, 4: early},
            delays={2: 0.02},
        )

        with pytest.raises(MalformedDataError) as exc_info:
            await _orchestrator(board).collect_all(4)

        assert exc_info.value is late

    @pytest.mark.asyncio
    async def test_other_pages_enrichment_runs_to_completion(self, fake_board_cls):
        """No cancellation: page 1's slow detail fetch still finishes."""
        board = fake_board_cls(
            pages={1: [(1, "slow", "US")]},
            page_errors={2: TransportError("boom")},
            delays={"slow": 0.02},
        )

        with pytest.raises(TransportError):
            await _orchestrator(board).collect_all(2)

        assert board.completed_details == ["slow"]

    @pytest.mark.asyncio
    async def test_failed_page_skips_enrichment(self, fake_board_cls):
        board = fake_board_cls(pages={}, page_errors={1: TransportError("boom")})

        with pytest.raises(TransportError):
            await _orchestrator(board).collect_all(1)

        assert board.detail_calls == []

    @pytest.mark.asyncio
    async def test_detail_failures_never_abort(self, fake_board_cls):
        board = fake_board_cls(
            pages={1: [(1, "a", "US"), (2, "b", "US")]},
            detail_errors={"a": TransportError("x"), "b": asyncio.TimeoutError()},
        )

        users = await _orchestrator(board).collect_all(1)

        assert [u.total_solved for u in users] == [-1, -1]
