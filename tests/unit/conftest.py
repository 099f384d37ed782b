"""Shared fixtures: GraphQL payload builders for the two LeetCode queries."""

from __future__ import annotations

from typing import Any

import pytest


def _node(
    rank: int | None,
    username: str | None,
    region: str | None = "US",
    country: str | None = "United States",
) -> dict[str, Any]:
    return {
        "ranking": "[]",
        "currentRating": "2000.0",
        "currentGlobalRanking": rank,
        "dataRegion": region,
        "user": {
            "username": username,
            "profile": {"countryCode": "US", "countryName": country, "realName": ""},
        },
    }


def _ranking_response(nodes: list[dict[str, Any]]) -> dict[str, Any]:
    return {"data": {"globalRanking": {"rankingNodes": nodes}}}


def _profile_response(
    solved_all: int | None = 500,
    company: str | None = "Acme",
    school: str | None = "MIT",
    extra_counts: dict[str, int] | None = None,
) -> dict[str, Any]:
    counts = [{"difficulty": "All", "count": solved_all, "submissions": 900}]
    for difficulty, count in (extra_counts or {"Easy": 200, "Medium": 250, "Hard": 50}).items():
        counts.append({"difficulty": difficulty, "count": count, "submissions": count * 2})
    return {
        "data": {
            "matchedUser": {
                "username": "someone",
                "profile": {"realName": "", "company": company, "school": school, "ranking": 1},
                "submitStats": {"acSubmissionNum": counts},
            }
        }
    }


@pytest.fixture
def make_node():
    """Factory for one raw ranking node."""
    return _node


@pytest.fixture
def make_ranking_response():
    """Factory for a getGlobalRanking response body."""
    return _ranking_response


@pytest.fixture
def make_profile_response():
    """Factory for a getUserProfile response body."""
    return _profile_response
