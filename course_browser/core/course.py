from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from course_browser.core.exceptions import CatalogSchemaError

# Documented (inclusive) domain of each review statistic.
STAT_BOUNDS: Dict[str, tuple[float, float]] = {
    "rating": (1.0, 5.0),
    "difficulty": (1.0, 5.0),
    "workload": (1.0, 100.0),
}


@dataclass(frozen=True)
class Course:
    """
    One catalog entry with aggregate review statistics.

    Fields:

    - id: opaque identifier, unique within a catalog
    - name: display name, used for lexicographic sort
    - rating / difficulty: mean in [1, 5], None when the course has no reviews
    - workload: mean hours per week in [1, 100], None when there are no reviews
    - review_count: number of reviews (0 when none)
    - is_deprecated / is_foundational: catalog flags
    - code: display code such as "CS-6200", if the record has one
    """

    id: str
    name: str
    rating: Optional[float] = None
    difficulty: Optional[float] = None
    workload: Optional[float] = None
    review_count: int = 0
    is_deprecated: bool = False
    is_foundational: bool = False
    code: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise CatalogSchemaError("Course is missing an id")
        if not self.name:
            raise CatalogSchemaError(f"Course {self.id!r} is missing a name")
        if self.review_count < 0:
            raise CatalogSchemaError(
                f"Course {self.id!r} has a negative review count: {self.review_count}"
            )
        for attr, (low, high) in STAT_BOUNDS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            if not math.isfinite(value) or not low <= value <= high:
                raise CatalogSchemaError(
                    f"Course {self.id!r} has {attr}={value}, expected a value in [{low:g}, {high:g}]"
                )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Course:
        """
        Build a Course from a raw catalog record.

        Accepts the camelCase keys used by the CMS export (reviewCount,
        isDeprecated, isFoundational) as well as snake_case. Missing or NaN
        statistics become None.
        """
        course_id = _first_present(data, "id", "_id")
        name = _first_present(data, "name")

        code = _first_present(data, "code")
        department = _first_present(data, "department")
        number = _first_present(data, "number")
        # pandas widens an integer column with gaps to float (6200 -> 6200.0)
        if isinstance(number, float) and number.is_integer():
            number = int(number)
        if not code and department and number:
            code = f"{department}-{number}"

        review_count = _optional_number(_first_present(data, "reviewCount", "review_count"))
        if review_count is not None and not review_count.is_integer():
            raise CatalogSchemaError(f"Expected a whole review count, got {review_count!r}")

        return cls(
            id=str(course_id) if course_id is not None else "",
            name=str(name) if name is not None else "",
            rating=_optional_number(data.get("rating")),
            difficulty=_optional_number(data.get("difficulty")),
            workload=_optional_number(data.get("workload")),
            review_count=int(review_count) if review_count is not None else 0,
            is_deprecated=_optional_flag(_first_present(data, "isDeprecated", "is_deprecated")),
            is_foundational=_optional_flag(_first_present(data, "isFoundational", "is_foundational")),
            code=str(code) if code else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "code": self.code,
            "rating": self.rating,
            "difficulty": self.difficulty,
            "workload": self.workload,
            "reviewCount": self.review_count,
            "isDeprecated": self.is_deprecated,
            "isFoundational": self.is_foundational,
        }


def _first_present(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = data.get(key)
        if value is None or (isinstance(value, float) and math.isnan(value)):
            continue
        return value
    return None


def _optional_number(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise CatalogSchemaError(f"Expected a number, got {value!r}") from None
    if math.isnan(number):
        return None
    return number


def _optional_flag(value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise CatalogSchemaError(f"Expected true or false, got {value!r}")
    return value
