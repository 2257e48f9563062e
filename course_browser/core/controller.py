from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, List, Optional, Sequence

from course_browser.core.course import Course
from course_browser.core.filter_state import (
    DOMAIN_DEFAULTS,
    TOGGLE_FLAGS,
    FilterCriteria,
    parse_bound,
)
from course_browser.core.pagination import DEFAULT_PAGE_SIZES
from course_browser.core.sorting import SORT_ATTRIBUTES, toggle_sort
from course_browser.core.state import DerivedView, ViewState, recompute, slice_view

logger = logging.getLogger(__name__)


class ViewStateController:
    """
    Owns the view state of one course list and keeps the derived view current.

    Every setter applies its change and recomputes before returning, so
    `view` is always consistent with `state`. Filter, sort and page-size
    changes re-run filter and sort; a page-number change only re-slices.

    None of the setters raise on user input: unparsable bounds clear the
    bound, unknown attributes are logged and ignored.
    """

    def __init__(
        self,
        courses: Sequence[Course],
        state: Optional[ViewState] = None,
        page_sizes: Sequence[int] = DEFAULT_PAGE_SIZES,
    ) -> None:
        self.courses: List[Course] = list(courses)
        self.page_sizes = tuple(page_sizes)
        self._view: DerivedView = recompute(state or ViewState(), self.courses)

    @property
    def view(self) -> DerivedView:
        return self._view

    @property
    def state(self) -> ViewState:
        return self._view.state

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------
    def set_bound(self, attribute: str, which: str, text: Any) -> DerivedView:
        if attribute not in DOMAIN_DEFAULTS or which not in ("min", "max"):
            logger.warning(
                "Ignoring bound for unknown filter",
                extra={"attribute": attribute, "which": which},
            )
            return self._view

        criteria = self.state.criteria
        bounds = replace(criteria.bounds_for(attribute), **{which: parse_bound(text)})
        return self._set_criteria(replace(criteria, **{attribute: bounds}))

    def set_hide_deprecated(self, enabled: bool) -> DerivedView:
        return self._set_criteria(replace(self.state.criteria, hide_deprecated=bool(enabled)))

    def set_only_show_foundational(self, enabled: bool) -> DerivedView:
        return self._set_criteria(replace(self.state.criteria, only_show_foundational=bool(enabled)))

    def toggle(self, flag: str) -> DerivedView:
        if flag not in TOGGLE_FLAGS:
            logger.warning("Ignoring unknown toggle", extra={"flag": flag})
            return self._view
        current = getattr(self.state.criteria, flag)
        return self._set_criteria(replace(self.state.criteria, **{flag: not current}))

    def reset_filters(self) -> DerivedView:
        return self._set_criteria(FilterCriteria())

    # ------------------------------------------------------------------
    # Sort
    # ------------------------------------------------------------------
    def set_sort(self, attribute: str) -> DerivedView:
        if attribute not in SORT_ATTRIBUTES:
            logger.warning("Ignoring unknown sort attribute", extra={"attribute": attribute})
            return self._view
        sort = toggle_sort(self.state.sort, attribute)
        logger.debug("Sort changed", extra={"attribute": sort.attribute, "direction": sort.direction})
        return self._recompute(replace(self.state, sort=sort))

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------
    def set_page_size(self, size: int) -> DerivedView:
        # Callers only offer the configured sizes.
        if size not in self.page_sizes:
            logger.warning("Ignoring page size outside the allowed set", extra={"page_size": size})
            return self._view
        pagination = replace(self.state.pagination, page_size=size)
        return self._recompute(replace(self.state, pagination=pagination))

    def set_page_number(self, page_number: int) -> DerivedView:
        requested = int(page_number)
        pagination = replace(self.state.pagination, page_number=requested)
        view = slice_view(replace(self.state, pagination=pagination), self._view.filtered)
        self._view = self._clamped(view, requested)
        return self._view

    def next_page(self) -> DerivedView:
        if not self._view.info.has_next:
            return self._view
        return self.set_page_number(self.state.pagination.page_number + 1)

    def prev_page(self) -> DerivedView:
        if not self._view.info.has_prev:
            return self._view
        return self.set_page_number(self.state.pagination.page_number - 1)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _set_criteria(self, criteria: FilterCriteria) -> DerivedView:
        logger.debug("Filter criteria changed", extra={"criteria": criteria.to_dict()})
        return self._recompute(replace(self.state, criteria=criteria))

    def _recompute(self, state: ViewState) -> DerivedView:
        self._view = self._clamped(recompute(state, self.courses), state.pagination.page_number)
        return self._view

    def _clamped(self, view: DerivedView, requested: int) -> DerivedView:
        if view.state.pagination.page_number != requested:
            logger.info(
                "Page number clamped to result set",
                extra={
                    "requested_page": requested,
                    "page": view.state.pagination.page_number,
                    "result_count": view.total_count,
                },
            )
        return view
