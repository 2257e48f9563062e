from __future__ import annotations

from typing import List, Optional, Sequence

import dash_bootstrap_components as dbc
from dash import html

from course_browser.core.pagination import PageInfo
from course_browser.core.sorting import ASC, SortConfig
from course_browser.core.state import DerivedView
from course_browser.ui.ids import page_button_id, page_size_button_id, sort_header_id

# Column order of the results table
COLUMNS = [
    ("name", "Name"),
    ("rating", "Rating"),
    ("difficulty", "Difficulty"),
    ("workload", "Workload"),
    ("review_count", "Reviews"),
]

FILTER_LABELS = {
    "review_count": "Review Count",
    "rating": "Rating",
    "difficulty": "Difficulty",
    "workload": "Workload",
}


def format_stat(value: Optional[float]) -> str:
    """Two decimals, or N/A for a course without reviews."""
    if value is None:
        return "N/A"
    return f"{value:.2f}"


def summary_text(info: PageInfo) -> str:
    return f"Showing {info.range_start} to {info.range_end} of {info.result_count} courses"


def sort_marker(sort: SortConfig, attribute: str) -> str:
    if sort.attribute != attribute:
        return ""
    return " ▲" if sort.direction == ASC else " ▼"


def build_results_table(view: DerivedView) -> dbc.Table:
    sort = view.state.sort
    header = html.Thead(
        html.Tr(
            [
                html.Th(
                    html.A(
                        label + sort_marker(sort, attr),
                        id=sort_header_id(attr),
                        href="#",
                        n_clicks=0,
                    ),
                    scope="col",
                )
                for attr, label in COLUMNS
            ]
        )
    )

    if not view.page:
        body = html.Tbody(
            html.Tr(html.Td("No courses match the current filters.", colSpan=len(COLUMNS)))
        )
    else:
        body = html.Tbody(
            [
                html.Tr(
                    [
                        html.Td(
                            [
                                html.Div(course.code or course.id, className="text-muted small"),
                                html.Div(course.name),
                            ]
                        ),
                        html.Td(format_stat(course.rating)),
                        html.Td(format_stat(course.difficulty)),
                        html.Td(format_stat(course.workload)),
                        html.Td(str(course.review_count)),
                    ],
                    key=course.id,
                )
                for course in view.page
            ]
        )

    return dbc.Table([header, body], striped=True, hover=True, size="sm")


def build_page_buttons(view: DerivedView) -> List:
    """Windowed page buttons (1-based labels) with an ellipsis between groups."""
    current = view.state.pagination.page_number
    children: List = []
    for i, group in enumerate(view.window):
        if i > 0:
            children.append(dbc.Button("...", disabled=True, color="light", size="sm"))
        for page in group:
            children.append(
                dbc.Button(
                    str(page + 1),
                    id=page_button_id(page),
                    n_clicks=0,
                    color="primary" if page == current else "light",
                    size="sm",
                )
            )
    return children


def build_page_size_buttons(page_size: int, page_sizes: Sequence[int]) -> List:
    return [
        dbc.Button(
            str(size),
            id=page_size_button_id(size),
            n_clicks=0,
            color="primary" if size == page_size else "light",
            size="sm",
        )
        for size in page_sizes
    ]
