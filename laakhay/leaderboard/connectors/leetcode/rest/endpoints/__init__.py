"""LeetCode REST endpoint registry."""

from __future__ import annotations

from laakhay.leaderboard.runtime.rest import ResponseAdapter, RestEndpointSpec

from . import global_ranking, user_profile

_ENDPOINTS: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    global_ranking.SPEC.id: (global_ranking.SPEC, global_ranking.Adapter),
    user_profile.SPEC.id: (user_profile.SPEC, user_profile.Adapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    entry = _ENDPOINTS.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    entry = _ENDPOINTS.get(endpoint_id)
    return entry[1] if entry else None


__all__ = ["get_endpoint_spec", "get_endpoint_adapter"]
