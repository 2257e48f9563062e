from __future__ import annotations

from typing import Iterable, List, Optional

from course_browser.core.course import Course
from course_browser.core.filter_state import FilterCriteria, RANGE_ATTRIBUTES


def passes(value: Optional[float], min_value: float, max_value: float) -> bool:
    """
    Inclusive range check.

    A missing value always passes: a course without reviews has no rating
    to violate a bound, so it stays in the list.
    """
    if value is None:
        return True
    return min_value <= value <= max_value


def admit(course: Course, criteria: FilterCriteria) -> bool:
    for attribute in RANGE_ATTRIBUTES:
        low, high = criteria.bounds_for(attribute).effective(attribute)
        if not passes(getattr(course, attribute), low, high):
            return False

    if criteria.hide_deprecated and course.is_deprecated:
        return False
    if criteria.only_show_foundational and not course.is_foundational:
        return False
    return True


def filter_courses(courses: Iterable[Course], criteria: FilterCriteria) -> List[Course]:
    """Admitted subset of `courses`, in input order."""
    return [c for c in courses if admit(c, criteria)]
