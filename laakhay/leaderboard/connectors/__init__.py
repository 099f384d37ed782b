"""Upstream connectors."""

from .leetcode import LeetCodeRESTConnector

__all__ = ["LeetCodeRESTConnector"]
