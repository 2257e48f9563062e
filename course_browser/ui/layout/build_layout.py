from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from course_browser.core.state import recompute
from course_browser.ui.ids import IDs
from course_browser.ui.layout.build_filter_panel import build_filter_panel
from course_browser.ui.layout.build_navbar import build_navbar
from course_browser.ui.layout.build_results_panel import build_results_panel

if TYPE_CHECKING:
    from course_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    state = ctx.initial_state()
    view = recompute(state, ctx.courses)

    return dbc.Container(
        fluid=True,
        className="cb-root",
        children=[
            build_navbar(ctx.global_config, len(ctx.courses)),

            # The canonical ViewState; every event rewrites it
            dcc.Store(id=IDs.Store.VIEW_STATE, data=view.state.to_dict(), storage_type="memory"),

            dbc.Row(
                [
                    dbc.Col(build_filter_panel(view.state), md=3, className="mt-3"),
                    dbc.Col(build_results_panel(view, ctx.page_sizes), md=9, className="mt-3"),
                ],
                className="gx-3",
            ),
        ],
    )
