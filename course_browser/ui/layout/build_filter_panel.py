from __future__ import annotations

import math

import dash_bootstrap_components as dbc
from dash import html

from course_browser.core.filter_state import DOMAIN_DEFAULTS, RANGE_ATTRIBUTES, format_bound
from course_browser.core.state import ViewState
from course_browser.ui.helpers import FILTER_LABELS
from course_browser.ui.ids import IDs, bound_input_id


def _placeholder(attribute: str, which: str) -> str:
    low, high = DOMAIN_DEFAULTS[attribute]
    value = low if which == "min" else high
    return format_bound(value) if math.isfinite(value) else ""


def _range_row(attribute: str, state: ViewState) -> html.Div:
    bounds = state.criteria.bounds_for(attribute)
    label = FILTER_LABELS[attribute]

    def bound_input(which: str, value) -> dbc.Col:
        return dbc.Col(
            dbc.Input(
                id=bound_input_id(attribute, which),
                type="text",
                # debounce: commit on blur / enter, not per keystroke
                debounce=True,
                value=format_bound(value),
                placeholder=_placeholder(attribute, which),
                size="sm",
            ),
        )

    return html.Div(
        [
            html.Label(label, className="form-label"),
            dbc.Row(
                [bound_input("min", bounds.min), bound_input("max", bounds.max)],
                className="g-2 mb-3",
            ),
        ]
    )


def build_filter_panel(state: ViewState) -> dbc.Card:
    toggles = [
        name
        for name, enabled in (
            ("only_show_foundational", state.criteria.only_show_foundational),
            ("hide_deprecated", state.criteria.hide_deprecated),
        )
        if enabled
    ]

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    *[_range_row(attribute, state) for attribute in RANGE_ATTRIBUTES],
                    html.Hr(),
                    dbc.Checklist(
                        id=IDs.Control.TOGGLES_CHECKLIST,
                        options=[
                            {"label": " Foundational only", "value": "only_show_foundational"},
                            {"label": " Hide deprecated", "value": "hide_deprecated"},
                        ],
                        value=toggles,
                        switch=True,
                    ),
                ]
            ),
        ],
        className="cb-sidebar",
    )
