"""LeetCode GraphQL raw response schemas.

Pydantic models for the two GraphQL responses, before conversion to domain
models. Every field the upstream may omit or null is Optional here; the
adapters perform the presence checks and raise ``MalformedDataError`` with
the specific missing field.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from laakhay.leaderboard.core import MalformedDataError, MalformedField


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class GraphQLErrorItem(_Schema):
    """One entry of a GraphQL ``errors`` array."""

    message: str = ""


class GraphQLResponse(_Schema):
    """Fields common to every GraphQL response."""

    errors: list[GraphQLErrorItem] | None = None

    def error_messages(self) -> list[str]:
        return [e.message for e in self.errors or []]


# --- getGlobalRanking ---


class RankingProfile(_Schema):
    country_name: str | None = Field(None, alias="countryName")


class RankingUser(_Schema):
    username: str | None = None
    profile: RankingProfile | None = None


class RankingNode(_Schema):
    """One ranking node from the target region."""

    current_global_ranking: int | None = Field(None, alias="currentGlobalRanking")
    data_region: str | None = Field(None, alias="dataRegion")
    user: RankingUser | None = None


class GlobalRanking(_Schema):
    # Raw nodes; only target-region nodes are validated as RankingNode
    ranking_nodes: list[dict[str, Any]] | None = Field(None, alias="rankingNodes")


class GlobalRankingData(_Schema):
    global_ranking: GlobalRanking | None = Field(None, alias="globalRanking")


class GlobalRankingResponse(GraphQLResponse):
    data: GlobalRankingData | None = None


# --- getUserProfile ---


class SubmissionCount(_Schema):
    """Accepted-submission count for one difficulty label ("All", "Easy", ...)."""

    difficulty: str | None = None
    count: int | None = None


class SubmitStats(_Schema):
    ac_submission_num: list[SubmissionCount] | None = Field(None, alias="acSubmissionNum")


class MatchedUserProfile(_Schema):
    company: str | None = None
    school: str | None = None


class MatchedUser(_Schema):
    username: str | None = None
    profile: MatchedUserProfile | None = None
    submit_stats: SubmitStats | None = Field(None, alias="submitStats")


class UserProfileData(_Schema):
    matched_user: MatchedUser | None = Field(None, alias="matchedUser")


class UserProfileResponse(GraphQLResponse):
    data: UserProfileData | None = None


M = TypeVar("M", bound=BaseModel)


def validate_response(model: type[M], response: Any, context: dict[str, Any]) -> M:
    """Validate a decoded GraphQL body, or one fragment of it, against a schema.

    Raises:
        MalformedDataError: If the payload does not match the schema
    """
    try:
        return model.model_validate(response)
    except ValidationError as e:
        raise MalformedDataError(
            f"{model.__name__} does not match schema: {e.error_count()} error(s)",
            field=MalformedField.SCHEMA,
            context={**context, "errors": e.errors(include_url=False)},
        ) from e
