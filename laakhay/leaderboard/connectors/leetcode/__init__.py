"""LeetCode connector implementation."""

from .rest.provider import LeetCodeRESTConnector

__all__ = [
    "LeetCodeRESTConnector",
]
