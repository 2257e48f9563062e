from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import ALL, Input, Output, State, exceptions

from course_browser.core.controller import ViewStateController
from course_browser.core.state import ViewState
from course_browser.ui.ids import IDs

if TYPE_CHECKING:
    from course_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

# Pattern types whose trigger is a click: a re-rendered button reports
# n_clicks == 0 and must not count as an event.
_CLICK_PATTERNS = {
    IDs.Pattern.SORT_HEADER,
    IDs.Pattern.PAGE_BUTTON,
    IDs.Pattern.PAGE_SIZE_BUTTON,
}


def apply_event(
        ctx: AppConfig,
        state_data: dict[str, Any] | None,
        triggered_id: Any,
        value: Any,
) -> dict[str, Any] | None:
    """
    Pure helper: apply one UI event to the stored ViewState.

    Returns the new state dict, or None when the trigger isn't a real event
    (e.g. a freshly rendered button).
    """
    if state_data:
        state = ViewState.from_dict(state_data, ctx.page_sizes)
    else:
        state = ctx.initial_state()
    controller = ViewStateController(ctx.courses, state, ctx.page_sizes)

    if isinstance(triggered_id, dict):
        kind = triggered_id.get("type")
        if kind in _CLICK_PATTERNS and not value:
            return None

        if kind == IDs.Pattern.BOUND_INPUT:
            controller.set_bound(triggered_id["attribute"], triggered_id["which"], value)
        elif kind == IDs.Pattern.SORT_HEADER:
            controller.set_sort(triggered_id["index"])
        elif kind == IDs.Pattern.PAGE_BUTTON:
            controller.set_page_number(triggered_id["index"])
        elif kind == IDs.Pattern.PAGE_SIZE_BUTTON:
            controller.set_page_size(triggered_id["index"])
        else:
            return None
    elif triggered_id == IDs.Control.TOGGLES_CHECKLIST:
        enabled = set(value or [])
        controller.set_hide_deprecated("hide_deprecated" in enabled)
        controller.set_only_show_foundational("only_show_foundational" in enabled)
    elif triggered_id == IDs.Control.PREV_PAGE_BTN:
        controller.prev_page()
    elif triggered_id == IDs.Control.NEXT_PAGE_BTN:
        controller.next_page()
    else:
        return None

    logger.debug(
        "View state updated",
        extra={"trigger": str(triggered_id), "result_count": controller.view.total_count},
    )
    return controller.state.to_dict()


def register_sync_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # UI events -> ViewState (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data"),
        Input({"type": IDs.Pattern.BOUND_INPUT, "attribute": ALL, "which": ALL}, "value"),
        Input(IDs.Control.TOGGLES_CHECKLIST, "value"),
        Input({"type": IDs.Pattern.SORT_HEADER, "index": ALL}, "n_clicks"),
        Input({"type": IDs.Pattern.PAGE_SIZE_BUTTON, "index": ALL}, "n_clicks"),
        Input({"type": IDs.Pattern.PAGE_BUTTON, "index": ALL}, "n_clicks"),
        Input(IDs.Control.PREV_PAGE_BTN, "n_clicks"),
        Input(IDs.Control.NEXT_PAGE_BTN, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def sync_view_state_from_ui(_bounds, _toggles, _sort, _sizes, _pages, _prev, _next, state_data):
        triggered = dash.ctx.triggered
        if not triggered:
            raise exceptions.PreventUpdate

        new_state = apply_event(ctx, state_data, dash.ctx.triggered_id, triggered[0]["value"])
        if new_state is None:
            raise exceptions.PreventUpdate
        return new_state
