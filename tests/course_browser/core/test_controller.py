from __future__ import annotations

import logging

from course_browser.core.controller import ViewStateController
from course_browser.core.course import Course
from course_browser.core.filter_state import RangeBounds
from course_browser.core.sorting import ASC, DESC, SortConfig


def _make_courses(n: int = 23):
    return [
        Course(
            id=f"c{i}",
            name=f"Course {i:02d}",
            rating=None if i % 4 == 0 else 1.0 + (i % 5),
            review_count=i,
            is_deprecated=i % 6 == 0,
            is_foundational=i % 2 == 0,
        )
        for i in range(1, n + 1)
    ]


def test_initial_view_uses_defaults():
    controller = ViewStateController(_make_courses())

    assert controller.state.sort == SortConfig()
    assert controller.state.pagination.page_size == 10
    assert controller.state.pagination.page_number == 0
    assert len(controller.view.page) == 10


def test_tightening_filter_clamps_page_number(caplog):
    controller = ViewStateController(_make_courses())
    controller.set_page_number(2)
    assert controller.view.info.range_start == 21

    with caplog.at_level(logging.INFO, logger="course_browser.core.controller"):
        controller.set_bound("review_count", "min", "9")

    assert controller.view.total_count == 15
    assert controller.state.pagination.page_number == 1
    assert any("clamped" in r.getMessage() for r in caplog.records)


def test_malformed_bound_means_no_bound():
    controller = ViewStateController(_make_courses())
    controller.set_bound("review_count", "min", "20")
    assert controller.view.total_count == 4

    controller.set_bound("review_count", "min", "twenty")

    assert controller.state.criteria.review_count == RangeBounds()
    assert controller.view.total_count == 23


def test_unknown_bound_attribute_is_ignored():
    controller = ViewStateController(_make_courses())
    before = controller.view

    assert controller.set_bound("name", "min", "3") is before
    assert controller.set_bound("rating", "between", "3") is before


def test_toggles():
    controller = ViewStateController(_make_courses())

    controller.toggle("hide_deprecated")
    assert controller.view.total_count == 20

    controller.set_only_show_foundational(True)
    assert all(c.is_foundational and not c.is_deprecated for c in controller.view.filtered)

    controller.toggle("hide_deprecated")
    controller.set_only_show_foundational(False)
    assert controller.view.total_count == 23


def test_reset_filters():
    controller = ViewStateController(_make_courses())
    controller.set_bound("rating", "min", "4")
    controller.toggle("only_show_foundational")

    controller.reset_filters()

    assert controller.view.total_count == 23


def test_set_sort_toggles_direction():
    controller = ViewStateController(_make_courses())

    controller.set_sort("name")
    assert controller.state.sort == SortConfig("name", ASC)
    assert controller.view.page[0].name == "Course 01"

    controller.set_sort("name")
    assert controller.state.sort == SortConfig("name", DESC)
    assert controller.view.page[0].name == "Course 23"


def test_set_sort_keeps_unrated_courses_last():
    controller = ViewStateController(_make_courses())
    controller.set_page_size(25)

    for _ in range(2):
        controller.set_sort("rating")
        flags = [c.rating is None for c in controller.view.filtered]
        assert flags == sorted(flags)


def test_set_sort_unknown_attribute_is_ignored():
    controller = ViewStateController(_make_courses())

    controller.set_sort("code")

    assert controller.state.sort == SortConfig()


def test_set_page_size_reclamps_page_number():
    controller = ViewStateController(_make_courses())
    controller.set_page_number(2)

    controller.set_page_size(25)

    assert controller.state.pagination.page_size == 25
    assert controller.state.pagination.page_number == 0
    assert len(controller.view.page) == 23


def test_set_page_size_outside_allowed_set_is_ignored():
    controller = ViewStateController(_make_courses(), page_sizes=(10, 25, 50))

    controller.set_page_size(7)

    assert controller.state.pagination.page_size == 10


def test_set_page_number_out_of_range_is_clamped():
    controller = ViewStateController(_make_courses())

    controller.set_page_number(9)
    assert controller.state.pagination.page_number == 2

    controller.set_page_number(-3)
    assert controller.state.pagination.page_number == 0


def test_next_and_prev_page_stop_at_the_ends():
    controller = ViewStateController(_make_courses())

    controller.prev_page()
    assert controller.state.pagination.page_number == 0

    controller.next_page()
    controller.next_page()
    controller.next_page()
    assert controller.state.pagination.page_number == 2

    controller.prev_page()
    assert controller.state.pagination.page_number == 1


def test_empty_catalog():
    controller = ViewStateController([])

    controller.set_page_number(3)
    controller.set_bound("rating", "min", "2")

    assert controller.view.total_count == 0
    assert controller.view.window == []
    assert controller.state.pagination.page_number == 0
