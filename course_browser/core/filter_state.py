from __future__ import annotations

import math
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional, Tuple

# Attributes that can be narrowed with a [min, max] range, with the bound
# used when the user leaves one side empty.
DOMAIN_DEFAULTS: Dict[str, Tuple[float, float]] = {
    "review_count": (0.0, math.inf),
    "rating": (1.0, 5.0),
    "difficulty": (1.0, 5.0),
    "workload": (1.0, 100.0),
}

RANGE_ATTRIBUTES: Tuple[str, ...] = tuple(DOMAIN_DEFAULTS)

TOGGLE_FLAGS: Tuple[str, ...] = ("hide_deprecated", "only_show_foundational")


def parse_bound(text: Any) -> Optional[float]:
    """
    Parse a user-entered bound.

    Empty or unparsable input (and NaN / infinity) means "no value" and is
    returned as None. "0" is a real bound and parses to 0.0.
    """
    if text is None:
        return None
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        value = float(text)
    else:
        stripped = str(text).strip()
        if not stripped:
            return None
        try:
            value = float(stripped)
        except ValueError:
            return None
    if not math.isfinite(value):
        return None
    return value


def format_bound(value: Optional[float]) -> str:
    """Render a stored bound back into an input field ("" when unset)."""
    if value is None or math.isnan(value):
        return ""
    return f"{value:g}"


@dataclass
class RangeBounds:
    """User-entered bounds for one attribute. None means "not set"."""

    min: Optional[float] = None
    max: Optional[float] = None

    def effective(self, attribute: str) -> Tuple[float, float]:
        default_min, default_max = DOMAIN_DEFAULTS[attribute]
        low = default_min if self.min is None else self.min
        high = default_max if self.max is None else self.max
        return low, high


@dataclass
class FilterCriteria:
    """
    Represents the active admit/reject constraints of the course list.

    Fields:

    - review_count / rating / difficulty / workload: optional min/max bounds
    - hide_deprecated: if True, deprecated courses are excluded
    - only_show_foundational: if True, only foundational courses are kept
    """

    review_count: RangeBounds = field(default_factory=RangeBounds)
    rating: RangeBounds = field(default_factory=RangeBounds)
    difficulty: RangeBounds = field(default_factory=RangeBounds)
    workload: RangeBounds = field(default_factory=RangeBounds)

    hide_deprecated: bool = False
    only_show_foundational: bool = False

    def bounds_for(self, attribute: str) -> RangeBounds:
        if attribute not in DOMAIN_DEFAULTS:
            raise KeyError(attribute)
        return getattr(self, attribute)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterCriteria:
        def bounds(key: str) -> RangeBounds:
            raw = data.get(key) or {}
            return RangeBounds(min=parse_bound(raw.get("min")), max=parse_bound(raw.get("max")))

        return cls(
            review_count=bounds("review_count"),
            rating=bounds("rating"),
            difficulty=bounds("difficulty"),
            workload=bounds("workload"),
            hide_deprecated=bool(data.get("hide_deprecated", False)),
            only_show_foundational=bool(data.get("only_show_foundational", False)),
        )
