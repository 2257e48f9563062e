from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from course_browser.config.model import GlobalConfig
from course_browser.core.course import Course
from course_browser.core.exceptions import CatalogSchemaError, ConfigError
from course_browser.core.filter_state import parse_bound
from course_browser.core.pagination import DEFAULT_PAGE_SIZES

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a config directory.

    Expected structure:

        root/
            global.json
            courses.json     (or wherever "catalog" points)

    global.json keys (all optional):

    - ui_title: title for the UI, defaults to 'Course Reviews'
    - catalog: path to the catalog JSON; relative paths are resolved
               against the config root
    - page_sizes: allowed page sizes, defaults to [10, 25, 50]
    - default_min_review_count: initial "min reviews" bound

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json can't be parsed or has invalid values.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    try:
        with global_path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    catalog_raw = raw.get("catalog")
    if catalog_raw is None:
        catalog_path = None
    else:
        catalog_path = Path(catalog_raw)
        if not catalog_path.is_absolute():
            catalog_path = (root / catalog_path).resolve()

    return GlobalConfig(
        ui_title=raw.get("ui_title", "Course Reviews"),
        catalog_path=catalog_path,
        page_sizes=_parse_page_sizes(raw.get("page_sizes")),
        default_min_review_count=parse_bound(raw.get("default_min_review_count")),
    )


def _parse_page_sizes(raw) -> tuple[int, ...]:
    if raw is None:
        return DEFAULT_PAGE_SIZES
    if not isinstance(raw, list) or not raw:
        raise ConfigError(f"page_sizes must be a non-empty list, got {raw!r}")
    for size in raw:
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ConfigError(f"page_sizes must contain positive integers, got {size!r}")
    return tuple(sorted(set(raw)))


def load_catalog(path: Optional[Path]) -> List[Course]:
    """
    Load the course catalog from a JSON array of records.

    The catalog is a snapshot exported from the CMS. A missing or unreadable
    file degrades to an empty catalog (logged), so the browser still starts.
    Records that don't satisfy Course are skipped with a warning, as are
    repeated ids (first one wins).
    """
    if path is None:
        logger.error("No catalog configured; starting with an empty catalog")
        return []

    path = Path(path)
    try:
        frame = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    except (OSError, ValueError) as e:
        logger.error(
            "Could not read course catalog; starting with an empty catalog",
            extra={"path": str(path), "error": str(e)},
        )
        return []

    courses: List[Course] = []
    seen: set[str] = set()
    skipped = 0

    for record in frame.to_dict(orient="records"):
        try:
            course = Course.from_dict(record)
        except CatalogSchemaError as e:
            skipped += 1
            logger.warning(
                "Skipping invalid catalog record",
                extra={"path": str(path), "record_id": str(record.get("id")), "error": str(e)},
            )
            continue

        if course.id in seen:
            skipped += 1
            logger.warning(
                "Skipping duplicate course id",
                extra={"path": str(path), "record_id": course.id},
            )
            continue

        seen.add(course.id)
        courses.append(course)

    logger.info(
        "Course catalog loaded",
        extra={"path": str(path), "n_courses": len(courses), "n_skipped": skipped},
    )
    return courses
