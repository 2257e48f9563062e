from __future__ import annotations

from typing import Sequence

import dash_bootstrap_components as dbc
from dash import html

from course_browser.core.state import DerivedView
from course_browser.ui.helpers import (
    build_page_buttons,
    build_page_size_buttons,
    build_results_table,
    summary_text,
)
from course_browser.ui.ids import IDs


def build_results_panel(view: DerivedView, page_sizes: Sequence[int]) -> dbc.Card:
    info = view.info
    return dbc.Card(
        [
            dbc.CardBody(
                [
                    html.Div(build_results_table(view), id=IDs.Control.RESULTS_TABLE),
                    html.Div(
                        [
                            html.Span(summary_text(info), id=IDs.Control.RESULTS_SUMMARY, className="me-3"),
                            dbc.ButtonGroup(
                                build_page_size_buttons(view.state.pagination.page_size, page_sizes),
                                id=IDs.Control.PAGE_SIZE_GROUP,
                                className="me-3",
                            ),
                            dbc.ButtonGroup(
                                [
                                    dbc.Button("‹", id=IDs.Control.PREV_PAGE_BTN, n_clicks=0,
                                               disabled=not info.has_prev, color="light", size="sm"),
                                    html.Span(build_page_buttons(view), id=IDs.Control.PAGE_BUTTONS),
                                    dbc.Button("›", id=IDs.Control.NEXT_PAGE_BTN, n_clicks=0,
                                               disabled=not info.has_next, color="light", size="sm"),
                                ],
                                className="ms-auto",
                            ),
                        ],
                        className="d-flex align-items-center",
                    ),
                ]
            ),
        ],
        className="cb-results",
    )
