"""Shared fixtures for integration tests.

Integration modules skip themselves unless RUN_LAAKHAY_NETWORK_TESTS=1.
"""

import os

import pytest


@pytest.fixture
def csrf_token():
    return os.environ.get("LEETCODE_CSRF_TOKEN")
