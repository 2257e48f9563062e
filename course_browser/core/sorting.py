from __future__ import annotations

import locale
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Dict, Iterable, List

from course_browser.core.course import Course

SORT_ATTRIBUTES = ("name", "rating", "difficulty", "workload", "review_count")
ASC = "asc"
DESC = "desc"


@dataclass(frozen=True)
class SortConfig:
    attribute: str = "review_count"
    direction: str = DESC

    def __post_init__(self) -> None:
        if self.attribute not in SORT_ATTRIBUTES:
            raise ValueError(f"Unknown sort attribute: {self.attribute!r}")
        if self.direction not in (ASC, DESC):
            raise ValueError(f"Unknown sort direction: {self.direction!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {"attribute": self.attribute, "direction": self.direction}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SortConfig:
        attribute = data.get("attribute", "review_count")
        direction = data.get("direction", DESC)
        if attribute not in SORT_ATTRIBUTES or direction not in (ASC, DESC):
            return cls()
        return cls(attribute=attribute, direction=direction)


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def compare_names(a: str, b: str) -> int:
    """
    Alphabetical first, case second: "alpha" < "Alpha" < "beta" < "Beta".

    Letters compare case-insensitively under the process locale's collation
    (code point order in the C locale); only names equal up to case fall back
    to the case tie-break, lowercase first.
    """
    primary = _sign(locale.strcoll(a.casefold(), b.casefold()))
    if primary:
        return primary
    a_swapped, b_swapped = a.swapcase(), b.swapcase()
    return (a_swapped > b_swapped) - (a_swapped < b_swapped)


def compare(a: Course, b: Course, config: SortConfig) -> int:
    """
    Three-way comparison of two courses under `config`.

    Names compare with `compare_names`. Numeric attributes rank missing
    values last in both directions; `desc` only inverts the ordering of
    present values.
    """
    ordering = 1 if config.direction == ASC else -1
    attribute = config.attribute

    if attribute == "name":
        return compare_names(a.name, b.name) * ordering

    a_value = getattr(a, attribute)
    b_value = getattr(b, attribute)
    if a_value is None and b_value is None:
        return 0
    if a_value is None:
        return 1
    if b_value is None:
        return -1
    return _sign(a_value - b_value) * ordering


def sort_courses(courses: Iterable[Course], config: SortConfig) -> List[Course]:
    # sorted() is stable: equal keys keep their input order
    return sorted(courses, key=cmp_to_key(lambda a, b: compare(a, b, config)))


def toggle_sort(config: SortConfig, attribute: str) -> SortConfig:
    """Clicking the active column flips direction; a new column starts ascending."""
    if attribute != config.attribute:
        return SortConfig(attribute=attribute, direction=ASC)
    return SortConfig(attribute=attribute, direction=DESC if config.direction == ASC else ASC)
