from __future__ import annotations

__all__ = ["IDs", "bound_input_id", "sort_header_id", "page_button_id", "page_size_button_id"]


class IDs:
    class Store:
        VIEW_STATE = "view-state"

    class Control:
        # Filters
        TOGGLES_CHECKLIST = "toggles-checklist"

        # Results
        RESULTS_TABLE = "results-table"
        RESULTS_SUMMARY = "results-summary"

        # Pagination
        PAGINATION_BAR = "pagination-bar"
        PAGE_SIZE_GROUP = "page-size-group"
        PAGE_BUTTONS = "page-buttons"
        PREV_PAGE_BTN = "prev-page-btn"
        NEXT_PAGE_BTN = "next-page-btn"

    class Pattern:
        # pattern-matching "type" strings
        BOUND_INPUT = "bound-input"
        SORT_HEADER = "sort-header"
        PAGE_BUTTON = "page-button"
        PAGE_SIZE_BUTTON = "page-size-button"


def bound_input_id(attribute: str, which: str) -> dict:
    return {"type": IDs.Pattern.BOUND_INPUT, "attribute": attribute, "which": which}


def sort_header_id(attribute: str) -> dict:
    return {"type": IDs.Pattern.SORT_HEADER, "index": attribute}


def page_button_id(page: int) -> dict:
    return {"type": IDs.Pattern.PAGE_BUTTON, "index": page}


def page_size_button_id(size: int) -> dict:
    return {"type": IDs.Pattern.PAGE_SIZE_BUTTON, "index": size}
