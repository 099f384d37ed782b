"""LeetCode REST layer."""

from .provider import LeetCodeRESTConnector

__all__ = ["LeetCodeRESTConnector"]
