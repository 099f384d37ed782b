"""Ranked user and profile detail data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

# Placeholders for fields not (yet) populated by the detail stage
SENTINEL_TEXT = "null"
SENTINEL_COUNT = -1


class UserDetail(BaseModel):
    """Profile detail for one user, as returned by the detail query."""

    total_solved: int
    company: str = SENTINEL_TEXT
    school: str = SENTINEL_TEXT

    model_config = ConfigDict(frozen=True)


class RankedUser(BaseModel):
    """One region-matched entry of the global ranking.

    Created partial by the page fetcher with detail fields at their sentinel
    values, then filled in exactly once by :meth:`apply_detail`.
    """

    rank: int
    username: str = Field(..., min_length=1)
    region: str
    country_name: str = SENTINEL_TEXT
    total_solved: int = SENTINEL_COUNT
    company: str = SENTINEL_TEXT
    school: str = SENTINEL_TEXT

    model_config = ConfigDict(validate_assignment=True)

    _enriched: bool = PrivateAttr(default=False)

    @property
    def is_enriched(self) -> bool:
        """Whether detail fields have been populated."""
        return self._enriched

    def apply_detail(self, detail: UserDetail) -> None:
        """Write detail fields in place.

        Raises:
            ValueError: If detail was already applied to this user
        """
        if self._enriched:
            raise ValueError(f"detail already applied to {self.username!r}")
        self.total_solved = detail.total_solved
        self.company = detail.company
        self.school = detail.school
        self._enriched = True

    def to_row(self) -> dict[str, object]:
        """Flat output row keyed by CSV column name."""
        return {
            "rank": self.rank,
            "username": self.username,
            "country": self.country_name,
            "total_solved": self.total_solved,
            "company": self.company,
            "school": self.school,
        }
