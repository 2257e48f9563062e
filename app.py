import locale
import logging
import os

from course_browser.logging_config import configure_logging
from course_browser.ui.dash_app import create_dash_app

configure_logging()

try:
    locale.setlocale(locale.LC_COLLATE, "")
except locale.Error:
    # unknown LANG/LC_ALL on the host; names keep the C locale's order
    logging.getLogger(__name__).warning(
        "Could not apply the environment's collation locale", extra={"lang": os.getenv("LANG")}
    )

app = create_dash_app(os.getenv("COURSE_BROWSER_CONFIG", "config"))
server = app.server


if __name__ == "__main__":
    port = int(os.getenv("PORT", "8050"))
    debug = os.getenv("DEBUG", "0") == "1"

    app.run(host="0.0.0.0", port=port, debug=debug)
