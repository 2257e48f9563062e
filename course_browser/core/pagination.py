from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

DEFAULT_PAGE_SIZES: Tuple[int, ...] = (10, 25, 50)

# Windows with this many pages or fewer list every page without gaps.
MAX_UNABBREVIATED_PAGES = 7


@dataclass(frozen=True)
class PaginationState:
    page_size: int = DEFAULT_PAGE_SIZES[0]
    page_number: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"page_size": self.page_size, "page_number": self.page_number}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], page_sizes: Sequence[int] = DEFAULT_PAGE_SIZES) -> PaginationState:
        page_size = data.get("page_size", page_sizes[0])
        if page_size not in page_sizes:
            page_size = page_sizes[0]
        page_number = data.get("page_number", 0)
        if not isinstance(page_number, int) or page_number < 0:
            page_number = 0
        return cls(page_size=page_size, page_number=page_number)


@dataclass(frozen=True)
class PageInfo:
    """
    Numbers behind the "Showing X to Y of Z" line and the prev/next buttons.

    range_start is 1-based (0 when there are no results), range_end inclusive.
    """
    range_start: int
    range_end: int
    result_count: int
    total_pages: int
    has_prev: bool
    has_next: bool


def total_pages(result_count: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if result_count < 0:
        raise ValueError(f"result_count must be non-negative, got {result_count}")
    return -(-result_count // page_size)


def clamp_page_number(page_number: int, page_size: int, result_count: int) -> int:
    """
    Pull `page_number` back so that the page starts inside the result set.

    Keeps page_number * page_size < max(result_count, 1). A page that already
    satisfies this is returned unchanged.
    """
    if page_number < 0:
        return 0
    if page_number * page_size < max(result_count, 1):
        return page_number
    last = result_count // page_size
    # An exact multiple would land one page past the end.
    if result_count and result_count % page_size == 0:
        last -= 1
    return last


def page_window(total: int, page_number: int) -> List[List[int]]:
    """
    Abbreviated page labels for the navigation bar.

    Returns groups of zero-based page indices; the UI draws a gap between
    consecutive groups.

        page_window(5, 2)   -> [[0, 1, 2, 3, 4]]
        page_window(10, 1)  -> [[0, 1, 2, 3, 4], [9]]
        page_window(10, 8)  -> [[0], [5, 6, 7, 8, 9]]
        page_window(10, 5)  -> [[0], [4, 5, 6], [9]]
    """
    if total < 0:
        raise ValueError(f"total pages must be non-negative, got {total}")
    if total == 0:
        return []
    if total <= MAX_UNABBREVIATED_PAGES:
        return [list(range(total))]
    if page_number <= 3:
        return [[0, 1, 2, 3, 4], [total - 1]]
    if total - page_number <= 4:
        return [[0], list(range(total - 5, total))]
    return [[0], [page_number - 1, page_number, page_number + 1], [total - 1]]


def page_info(result_count: int, page_size: int, page_number: int) -> PageInfo:
    pages = total_pages(result_count, page_size)
    start = page_number * page_size
    end = min(start + page_size, result_count)
    return PageInfo(
        range_start=start + 1 if result_count else 0,
        range_end=end,
        result_count=result_count,
        total_pages=pages,
        has_prev=page_number > 0,
        has_next=page_number + 1 < pages,
    )
