"""LeetCode user profile endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from laakhay.leaderboard.connectors.leetcode.config import GRAPHQL_PATH, profile_referer
from laakhay.leaderboard.connectors.leetcode.rest.schemas import (
    SubmissionCount,
    UserProfileResponse,
    validate_response,
)
from laakhay.leaderboard.core import MalformedDataError, MalformedField
from laakhay.leaderboard.models import SENTINEL_TEXT, UserDetail
from laakhay.leaderboard.runtime.rest import ResponseAdapter, RestEndpointSpec

# Difficulty label carrying the count solved across every difficulty
ALL_DIFFICULTIES = "All"

QUERY = """
    query getUserProfile($username: String!) {
        matchedUser(username: $username) {
            username
            profile {
                realName
                company
                school
                ranking
            }
            submitStats {
                acSubmissionNum {
                    difficulty
                    count
                    submissions
                }
            }
        }
    }
"""


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    """Build the GraphQL request body for one user profile."""
    return {
        "operationName": "getUserProfile",
        "variables": {"username": params["username"]},
        "query": QUERY,
    }


def build_headers(params: dict[str, Any]) -> dict[str, str]:
    return {"referer": profile_referer(params["username"])}


SPEC = RestEndpointSpec(
    id="user_profile",
    method="POST",
    build_path=lambda _params: GRAPHQL_PATH,
    build_body=build_body,
    build_headers=build_headers,
)


def _solved_by_difficulty(
    entries: list[SubmissionCount], context: dict[str, Any]
) -> dict[str, int]:
    solved: dict[str, int] = {}
    for entry in entries:
        if entry.difficulty is None:
            raise MalformedDataError(
                f"user {context['username']!r}: difficulty is null",
                field=MalformedField.DIFFICULTY,
                context=context,
            )
        if entry.count is None:
            raise MalformedDataError(
                f"user {context['username']!r}: accepted count for {entry.difficulty} is null",
                field=MalformedField.SOLVED_COUNT,
                context={**context, "difficulty": entry.difficulty},
            )
        solved[entry.difficulty] = entry.count
    return solved


class Adapter(ResponseAdapter):
    """Adapter extracting company, school and total solved count."""

    def parse(self, response: Any, params: dict[str, Any]) -> UserDetail:
        username = params["username"]
        context = {"username": username}
        parsed = validate_response(UserProfileResponse, response, context)

        matched = parsed.data.matched_user if parsed.data else None
        if matched is None:
            raise MalformedDataError(
                f"user {username!r}: matchedUser missing from response",
                field=MalformedField.PROFILE,
                context={**context, "graphql_errors": parsed.error_messages()},
            )

        entries = matched.submit_stats.ac_submission_num if matched.submit_stats else None
        solved = _solved_by_difficulty(entries or [], context)
        if ALL_DIFFICULTIES not in solved:
            raise MalformedDataError(
                f"user {username!r}: no accepted count for difficulty {ALL_DIFFICULTIES!r}",
                field=MalformedField.SOLVED_ALL,
                context={**context, "difficulties": sorted(solved)},
            )

        profile = matched.profile
        company = profile.company if profile else None
        school = profile.school if profile else None
        return UserDetail(
            total_solved=solved[ALL_DIFFICULTIES],
            company=company if company is not None else SENTINEL_TEXT,
            school=school if school is not None else SENTINEL_TEXT,
        )
