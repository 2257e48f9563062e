from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from course_browser.config.model import GlobalConfig
from course_browser.core.course import Course
from course_browser.core.filter_state import FilterCriteria, RangeBounds
from course_browser.core.pagination import PaginationState
from course_browser.core.state import ViewState


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    courses: List[Course] = field(default_factory=list)

    @property
    def page_sizes(self) -> tuple[int, ...]:
        return self.global_config.page_sizes

    def initial_state(self) -> ViewState:
        """State the view mounts with: configured min reviews, smallest page size."""
        criteria = FilterCriteria(
            review_count=RangeBounds(min=self.global_config.default_min_review_count),
        )
        return ViewState(
            criteria=criteria,
            pagination=PaginationState(page_size=self.global_config.default_page_size),
        )
