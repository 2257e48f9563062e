from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output

from course_browser.core.state import DerivedView, ViewState, recompute
from course_browser.ui.helpers import (
    build_page_buttons,
    build_page_size_buttons,
    build_results_table,
    summary_text,
)
from course_browser.ui.ids import IDs

if TYPE_CHECKING:
    from course_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def derive_view(ctx: AppConfig, state_data: dict[str, Any] | None) -> DerivedView:
    if state_data:
        state = ViewState.from_dict(state_data, ctx.page_sizes)
    else:
        state = ctx.initial_state()
    return recompute(state, ctx.courses)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # ViewState -> table + pagination controls
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.RESULTS_TABLE, "children"),
        Output(IDs.Control.RESULTS_SUMMARY, "children"),
        Output(IDs.Control.PAGE_SIZE_GROUP, "children"),
        Output(IDs.Control.PAGE_BUTTONS, "children"),
        Output(IDs.Control.PREV_PAGE_BTN, "disabled"),
        Output(IDs.Control.NEXT_PAGE_BTN, "disabled"),
        Input(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def render_view(state_data: dict[str, Any] | None):
        view = derive_view(ctx, state_data)
        info = view.info
        return (
            build_results_table(view),
            summary_text(info),
            build_page_size_buttons(view.state.pagination.page_size, ctx.page_sizes),
            build_page_buttons(view),
            not info.has_prev,
            not info.has_next,
        )
