"""Shared LeetCode connector constants.

Centralizes the GraphQL endpoint, referer construction and the static
credential headers so the endpoint modules stay declarative.
"""

from __future__ import annotations

BASE_URL = "https://leetcode.com"
GRAPHQL_PATH = "/graphql"

# Only ranking nodes served from this data region are kept
TARGET_REGION = "US"


def ranking_referer(page: int) -> str:
    """Referer the web UI sends when loading a global ranking page.

    Examples:
        >>> ranking_referer(3)
        'https://leetcode.com/contest/globalranking/3/'
    """
    return f"{BASE_URL}/contest/globalranking/{page}/"


def profile_referer(username: str) -> str:
    """Referer the web UI sends when loading a user profile.

    Examples:
        >>> profile_referer("alice")
        'https://leetcode.com/alice/'
    """
    return f"{BASE_URL}/{username}/"


def auth_headers(csrf_token: str | None) -> dict[str, str]:
    """Static session headers sent with every request.

    LeetCode checks the CSRF token twice: once as a cookie and once as the
    ``x-csrftoken`` header. Without a token no credential headers are sent.
    """
    if not csrf_token:
        return {}
    return {
        "cookie": f"csrftoken={csrf_token}",
        "x-csrftoken": csrf_token,
    }
