from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from course_browser.config.loader import load_catalog, load_global_config
from course_browser.ui.callbacks.callbacks_render import register_render_callbacks
from course_browser.ui.callbacks.callbacks_sync import register_sync_callbacks
from course_browser.ui.config import AppConfig
from course_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_app_config(config_root: Path | str = Path("config")) -> AppConfig:
    config_root = Path(config_root)

    # 1) Load config
    global_config = load_global_config(config_root)

    # 2) Snapshot the catalog once; it is read-only for the app's lifetime
    courses = load_catalog(global_config.catalog_path)
    if not courses:
        logger.warning("Course catalog is empty", extra={"config_root": str(config_root)})

    return AppConfig(
        config_root=config_root,
        global_config=global_config,
        courses=courses,
    )


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    ctx = create_app_config(config_root)

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = ctx.global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_sync_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    return app
