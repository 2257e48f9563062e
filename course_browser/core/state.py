from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Sequence, Tuple

from course_browser.core.course import Course
from course_browser.core.filter_state import FilterCriteria
from course_browser.core.pagination import (
    DEFAULT_PAGE_SIZES,
    PageInfo,
    PaginationState,
    clamp_page_number,
    page_info,
    page_window,
)
from course_browser.core.predicate import filter_courses
from course_browser.core.sorting import SortConfig, sort_courses


@dataclass
class ViewState:
    """
    Everything the user can change about the course list.

    Serialises to a plain dict so it can live in a client-side store and be
    rebuilt on every event.
    """

    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    sort: SortConfig = field(default_factory=SortConfig)
    pagination: PaginationState = field(default_factory=PaginationState)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "criteria": self.criteria.to_dict(),
            "sort": self.sort.to_dict(),
            "pagination": self.pagination.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], page_sizes: Sequence[int] = DEFAULT_PAGE_SIZES) -> ViewState:
        return cls(
            criteria=FilterCriteria.from_dict(data.get("criteria") or {}),
            sort=SortConfig.from_dict(data.get("sort") or {}),
            pagination=PaginationState.from_dict(data.get("pagination") or {}, page_sizes),
        )


@dataclass(frozen=True)
class DerivedView:
    """
    Result of running a ViewState over the catalog.

    - state: the input state, with the page number clamped into range
    - filtered: every admitted course, in sort order
    - page: the visible slice of `filtered`
    - window: page label groups for the navigation bar
    """

    state: ViewState
    filtered: Tuple[Course, ...]
    page: Tuple[Course, ...]
    window: List[List[int]]
    info: PageInfo

    @property
    def total_count(self) -> int:
        return len(self.filtered)

    @property
    def total_pages(self) -> int:
        return self.info.total_pages


def slice_view(state: ViewState, ordered: Sequence[Course]) -> DerivedView:
    """Clamp the page number against `ordered` and cut out the visible page."""
    pagination = state.pagination
    page_number = clamp_page_number(pagination.page_number, pagination.page_size, len(ordered))
    if page_number != pagination.page_number:
        state = replace(state, pagination=replace(pagination, page_number=page_number))

    start = page_number * pagination.page_size
    info = page_info(len(ordered), pagination.page_size, page_number)
    return DerivedView(
        state=state,
        filtered=tuple(ordered),
        page=tuple(ordered[start:start + pagination.page_size]),
        window=page_window(info.total_pages, page_number),
        info=info,
    )


def recompute(state: ViewState, courses: Sequence[Course]) -> DerivedView:
    """filter -> sort -> clamp -> slice"""
    ordered = sort_courses(filter_courses(courses, state.criteria), state.sort)
    return slice_view(state, ordered)
