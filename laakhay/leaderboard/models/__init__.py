"""Data models for ranking entries.

Architecture:
    ``UserDetail`` is immutable (frozen=True). ``RankedUser`` is the one
    mutable model: the detail stage fills its sentinel fields in place, once,
    so that enrichment never reorders a page's entries.
"""

from .ranked_user import SENTINEL_COUNT, SENTINEL_TEXT, RankedUser, UserDetail

__all__ = [
    "RankedUser",
    "UserDetail",
    "SENTINEL_COUNT",
    "SENTINEL_TEXT",
]
