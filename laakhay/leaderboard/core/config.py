"""Runtime settings for a harvest run."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PAGE_COUNT = 400
DEFAULT_OUTPUT_PATH = Path("rank.csv")
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class HarvestConfig:
    """Settings for one full leaderboard harvest.

    Attributes:
        page_count: Number of ranking pages to crawl, starting at page 1
        output_path: Destination CSV file
        csrf_token: Static CSRF token sent as cookie and x-csrftoken header
        timeout: Total per-request timeout in seconds, applied by the transport
    """

    page_count: int = DEFAULT_PAGE_COUNT
    output_path: Path = DEFAULT_OUTPUT_PATH
    csrf_token: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if isinstance(self.page_count, bool) or not isinstance(self.page_count, int):
            raise ValueError(f"page_count must be an int, got {self.page_count!r}")
        if self.page_count < 1:
            raise ValueError(f"page_count must be positive, got {self.page_count}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(cls) -> HarvestConfig:
        """Build settings from ``LEETCODE_*`` environment variables.

        Unset variables fall back to the defaults.
        """
        return cls(
            page_count=int(os.environ.get("LEETCODE_PAGE_COUNT", DEFAULT_PAGE_COUNT)),
            output_path=Path(os.environ.get("LEETCODE_OUTPUT", DEFAULT_OUTPUT_PATH)),
            csrf_token=os.environ.get("LEETCODE_CSRF_TOKEN") or None,
            timeout=float(os.environ.get("LEETCODE_TIMEOUT", DEFAULT_TIMEOUT)),
        )
