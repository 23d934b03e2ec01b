"""Pagination - defaulting rules for offset/limit and open-ended due date ranges.

Invariants:
    - offset < 0 becomes 0; limit <= 0 becomes DEFAULT_LIMIT
    - A missing start date is date.min, a missing end date is date.max
    - Open bounds are unbounded, never an error
"""

from dataclasses import dataclass
from datetime import date

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 100


@dataclass(frozen=True)
class Page:
    offset: int
    limit: int


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    @property
    def is_empty(self) -> bool:
        return self.start > self.end


def normalize_page(offset: int, limit: int) -> Page:
    """Clamp caller-supplied paging values to usable ones."""
    return Page(
        offset=offset if offset >= 0 else DEFAULT_OFFSET,
        limit=limit if limit > 0 else DEFAULT_LIMIT,
    )


def resolve_due_date_bounds(start: date | None, end: date | None) -> DateRange:
    return DateRange(
        start=start if start is not None else date.min,
        end=end if end is not None else date.max,
    )
