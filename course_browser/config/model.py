from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from course_browser.core.pagination import DEFAULT_PAGE_SIZES


@dataclass(frozen=True)
class GlobalConfig:
    """
    Parsed global.json.

    - ui_title: page title
    - catalog_path: catalog JSON file, already resolved against the config root
    - page_sizes: allowed page sizes, ascending; the first one is the default
    - default_min_review_count: initial "min reviews" bound, None for no bound
    """
    ui_title: str = "Course Reviews"
    catalog_path: Optional[Path] = None
    page_sizes: Tuple[int, ...] = DEFAULT_PAGE_SIZES
    default_min_review_count: Optional[float] = None

    @property
    def default_page_size(self) -> int:
        return self.page_sizes[0]
