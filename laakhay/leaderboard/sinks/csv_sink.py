"""CSV output for harvested ranking rows.

The whole file is rendered in memory and written in a single call, so a run
that fails before ``write`` leaves no file behind and a successful run
produces exactly one complete file.
"""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Sequence
from pathlib import Path

from laakhay.leaderboard.models import RankedUser

logger = logging.getLogger(__name__)

#: Output columns, in order.
CSV_FIELDS: list[str] = [
    "rank",
    "username",
    "country",
    "total_solved",
    "company",
    "school",
]


def build_csv_content(users: Sequence[RankedUser]) -> str:
    """Build CSV content as a string: header row plus one row per user."""
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=CSV_FIELDS, lineterminator="\n")
    writer.writeheader()
    for user in users:
        writer.writerow(user.to_row())
    return buf.getvalue()


class CSVSink:
    """Writes the final ordered user sequence to one CSV file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def write(self, users: Sequence[RankedUser]) -> int:
        """Write all users and return the number of data rows written."""
        content = build_csv_content(users)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(content, encoding="utf-8")
        logger.info("csv_written", extra={"path": str(self.path), "rows": len(users)})
        return len(users)
