"""Unit tests for LeaderboardPipeline and harvest()."""

from __future__ import annotations

import csv
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from laakhay.leaderboard.core import HarvestConfig, TransportError
from laakhay.leaderboard.pipeline import (
    DetailEnricher,
    HarvestSummary,
    LeaderboardPipeline,
    PaginationOrchestrator,
    harvest,
)
from laakhay.leaderboard.sinks import CSVSink


def _pipeline(board, sink, page_count: int) -> LeaderboardPipeline:
    orchestrator = PaginationOrchestrator(board.fetch_page, DetailEnricher(board.fetch_detail))
    return LeaderboardPipeline(orchestrator=orchestrator, sink=sink, page_count=page_count)


class TestLeaderboardPipeline:
    """Test the driver's hand-off to the sink."""

    @pytest.mark.asyncio
    async def test_success_writes_once(self, alice_bob_board):
        sink = MagicMock()
        sink.write = MagicMock(return_value=3)

        summary = await _pipeline(alice_bob_board, sink, 2).run()

        sink.write.assert_called_once()
        written = sink.write.call_args.args[0]
        assert [u.username for u in written] == ["alice", "bob", "carol"]
        assert summary.pages == 2
        assert summary.rows == 3
        assert summary.enrichment_failures == 1
        assert summary.elapsed_ms >= 0

    @pytest.mark.asyncio
    async def test_page_failure_never_invokes_sink(self, fake_board_cls):
        error = TransportError("HTTP 403", status_code=403)
        board = fake_board_cls(pages={1: [(1, "a", "US")]}, page_errors={2: error})
        sink = MagicMock()

        with pytest.raises(TransportError) as exc_info:
            await _pipeline(board, sink, 2).run()

        assert exc_info.value is error
        sink.write.assert_not_called()

    @pytest.mark.asyncio
    async def test_page_failure_writes_no_file(self, fake_board_cls, tmp_path):
        board = fake_board_cls(pages={1: [(1, "a", "US")]}, page_errors={2: TransportError("x")})
        path = tmp_path / "rank.csv"

        with pytest.raises(TransportError):
            await _pipeline(board, CSVSink(path), 2).run()

        assert not path.exists()

    @pytest.mark.asyncio
    async def test_csv_output_end_to_end(self, alice_bob_board, tmp_path):
        path = tmp_path / "rank.csv"

        await _pipeline(alice_bob_board, CSVSink(path), 2).run()

        with path.open(newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert rows == [
            {"rank": "1", "username": "alice", "country": "null", "total_solved": "900", "company": "Acme", "school": "MIT"},
            {"rank": "3", "username": "bob", "country": "null", "total_solved": "-1", "company": "null", "school": "null"},
            {"rank": "51", "username": "carol", "country": "null", "total_solved": "300", "company": "null", "school": "null"},
        ]

    @pytest.mark.asyncio
    async def test_two_runs_identical_output(self, alice_bob_board, tmp_path):
        first, second = tmp_path / "a.csv", tmp_path / "b.csv"

        await _pipeline(alice_bob_board, CSVSink(first), 2).run()
        await _pipeline(alice_bob_board, CSVSink(second), 2).run()

        assert first.read_text() == second.read_text()


class TestFromConnector:
    def test_wires_connector_and_default_sink(self, tmp_path):
        connector = MagicMock()
        config = HarvestConfig(page_count=3, output_path=tmp_path / "x.csv")

        pipeline = LeaderboardPipeline.from_connector(connector, config)

        assert isinstance(pipeline._sink, CSVSink)
        assert pipeline._sink.path == tmp_path / "x.csv"
        assert pipeline._page_count == 3


class TestHarvest:
    @pytest.mark.asyncio
    async def test_harvest_scopes_connector(self, tmp_path):
        config = HarvestConfig(page_count=1, output_path=tmp_path / "x.csv", csrf_token="tok")
        summary = HarvestSummary(pages=1, rows=0, enrichment_failures=0, elapsed_ms=1.0)

        with patch("laakhay.leaderboard.pipeline.driver.LeetCodeRESTConnector") as connector_cls, patch.object(
            LeaderboardPipeline, "run", AsyncMock(return_value=summary)
        ):
            connector = connector_cls.return_value
            connector.__aenter__ = AsyncMock(return_value=connector)
            connector.__aexit__ = AsyncMock(return_value=None)

            result = await harvest(config)

        assert result is summary
        connector_cls.assert_called_once_with(csrf_token="tok", timeout=config.timeout)
        connector.__aexit__.assert_awaited_once()
