"""
Core list-view engine: course records, filter criteria, sorting,
pagination and the view-state controller
"""

from .course import Course
from .filter_state import FilterCriteria, RangeBounds
from .sorting import SortConfig
from .pagination import PaginationState
from .state import DerivedView, ViewState, recompute
from .controller import ViewStateController

__all__ = [
    "Course",
    "FilterCriteria",
    "RangeBounds",
    "SortConfig",
    "PaginationState",
    "DerivedView",
    "ViewState",
    "recompute",
    "ViewStateController",
]
