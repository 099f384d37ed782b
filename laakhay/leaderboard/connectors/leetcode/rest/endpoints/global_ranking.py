"""LeetCode global contest ranking endpoint definition and adapter.

One page of the ranking holds a fixed-size batch of ranking nodes. The
adapter keeps only nodes from the target data region and turns them into
partial :class:`RankedUser` entries.
"""

from __future__ import annotations

from typing import Any

from laakhay.leaderboard.connectors.leetcode.config import (
    GRAPHQL_PATH,
    TARGET_REGION,
    ranking_referer,
)
from laakhay.leaderboard.connectors.leetcode.rest.schemas import (
    GlobalRankingResponse,
    RankingNode,
    validate_response,
)
from laakhay.leaderboard.core import MalformedDataError, MalformedField
from laakhay.leaderboard.models import SENTINEL_TEXT, RankedUser
from laakhay.leaderboard.runtime.rest import ResponseAdapter, RestEndpointSpec

QUERY = """
    query getGlobalRanking($page_num: Int) {
        globalRanking(page: $page_num) {
            rankingNodes {
                ranking
                currentRating
                currentGlobalRanking
                dataRegion
                user {
                    username
                    profile {
                        countryCode
                        countryName
                        realName
                    }
                }
            }
        }
    }
"""


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    """Build the GraphQL request body for one ranking page."""
    return {
        "operationName": "getGlobalRanking",
        "variables": {"page_num": int(params["page"])},
        "query": QUERY,
    }


def build_headers(params: dict[str, Any]) -> dict[str, str]:
    return {"referer": ranking_referer(int(params["page"]))}


# Endpoint specification
SPEC = RestEndpointSpec(
    id="global_ranking",
    method="POST",
    build_path=lambda _params: GRAPHQL_PATH,
    build_body=build_body,
    build_headers=build_headers,
)


class Adapter(ResponseAdapter):
    """Adapter turning a ranking page into region-filtered partial users."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[RankedUser]:
        """Parse one global ranking page.

        Args:
            response: Decoded GraphQL response body
            params: Request parameters containing ``page``

        Returns:
            Users from the target region, in the order the page lists them

        Raises:
            MalformedDataError: If the ranking envelope is absent, a node has
                no region, or a target-region node lacks rank or username
        """
        page = params["page"]
        parsed = validate_response(GlobalRankingResponse, response, {"page": page})

        ranking = parsed.data.global_ranking if parsed.data else None
        if ranking is None or ranking.ranking_nodes is None:
            raise MalformedDataError(
                f"page {page}: globalRanking.rankingNodes missing from response",
                field=MalformedField.ENVELOPE,
                context={"page": page, "graphql_errors": parsed.error_messages()},
            )

        users: list[RankedUser] = []
        for position, raw in enumerate(ranking.ranking_nodes):
            user = self._parse_node(raw, page=page, position=position)
            if user is not None:
                users.append(user)
        return users

    def _parse_node(self, raw: dict[str, Any], *, page: int, position: int) -> RankedUser | None:
        # Nothing but dataRegion is read from nodes outside the target region
        context = {"page": page, "position": position}
        region = raw.get("dataRegion")
        if region is None:
            raise MalformedDataError(
                f"page {page}, node {position}: dataRegion is null",
                field=MalformedField.REGION,
                context=context,
            )
        if region != TARGET_REGION:
            return None

        node = validate_response(RankingNode, raw, context)
        if node.current_global_ranking is None:
            raise MalformedDataError(
                f"page {page}, node {position}: currentGlobalRanking is null",
                field=MalformedField.RANK,
                context=context,
            )
        username = node.user.username if node.user else None
        if not username:
            raise MalformedDataError(
                f"page {page}, node {position}: username is null",
                field=MalformedField.USERNAME,
                context=context,
            )

        profile = node.user.profile if node.user else None
        country = profile.country_name if profile else None
        return RankedUser(
            rank=node.current_global_ranking,
            username=username,
            region=region,
            country_name=country if country is not None else SENTINEL_TEXT,
        )
