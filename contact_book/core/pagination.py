"""Pagination — page of items plus the derived navigation flags.

Invariants:
    - total_pages = ceil(total_count / page_size); 0 when there are no items
    - has_previous_page is page_number > 1
    - has_next_page is page_number < total_pages
    - page_offset(n, size) = (n - 1) * size
"""

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


def page_offset(page_number: int, page_size: int) -> int:
    return (page_number - 1) * page_size


@dataclass(frozen=True)
class PaginatedList(Generic[T]):
    """One page of a larger ordered result set."""
    items: list[T] = field(default_factory=list)
    total_count: int = 0
    page_number: int = 1
    page_size: int = 10

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages
