from __future__ import annotations

import dash_bootstrap_components as dbc

from course_browser.config.model import GlobalConfig


def build_navbar(global_config: GlobalConfig, n_courses: int) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            [
                dbc.NavbarBrand(global_config.ui_title),
                dbc.NavItem(f"{n_courses} courses", className="text-white-50"),
            ],
            fluid=True,
        ),
        color="primary",
        dark=True,
    )
