from __future__ import annotations

import pytest

from course_browser.core.course import Course
from course_browser.core.sorting import (
    ASC,
    DESC,
    SortConfig,
    compare,
    compare_names,
    sort_courses,
    toggle_sort,
)


def _make_courses():
    return [
        Course(id="1", name="Databases", rating=3.0, review_count=10),
        Course(id="2", name="Algorithms", rating=None, review_count=0),
        Course(id="3", name="Compilers", rating=4.5, review_count=10),
        Course(id="4", name="Networks", rating=3.0, review_count=7),
        Course(id="5", name="Robotics", rating=None, review_count=0),
    ]


def _ids(courses):
    return [c.id for c in courses]


def test_default_sort_is_review_count_descending():
    assert SortConfig() == SortConfig(attribute="review_count", direction=DESC)


def test_sort_by_name():
    courses = _make_courses()

    asc = sort_courses(courses, SortConfig("name", ASC))
    desc = sort_courses(courses, SortConfig("name", DESC))

    assert [c.name for c in asc] == ["Algorithms", "Compilers", "Databases", "Networks", "Robotics"]
    assert [c.name for c in desc] == ["Robotics", "Networks", "Databases", "Compilers", "Algorithms"]


def test_sort_by_name_is_alphabetical_before_case():
    courses = [
        Course(id=str(i), name=name)
        for i, name in enumerate(["beta", "Alpha", "alpha", "Beta", "Gamma"])
    ]

    asc = [c.name for c in sort_courses(courses, SortConfig("name", ASC))]
    desc = [c.name for c in sort_courses(courses, SortConfig("name", DESC))]

    assert asc == ["alpha", "Alpha", "beta", "Beta", "Gamma"]
    assert desc == list(reversed(asc))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("alpha", "Beta", -1),
        ("Zeta", "apple", 1),
        ("alpha", "Alpha", -1),
        ("Alpha", "alpha", 1),
        ("Networks", "Networks", 0),
    ],
)
def test_compare_names(a, b, expected):
    assert compare_names(a, b) == expected


@pytest.mark.parametrize("direction", [ASC, DESC])
def test_missing_values_sort_last_in_both_directions(direction):
    ordered = sort_courses(_make_courses(), SortConfig("rating", direction))

    assert [c.rating is None for c in ordered] == [False, False, False, True, True]


def test_numeric_sort_ascending_and_descending():
    courses = _make_courses()

    assert _ids(sort_courses(courses, SortConfig("rating", ASC))) == ["1", "4", "3", "2", "5"]
    assert _ids(sort_courses(courses, SortConfig("rating", DESC))) == ["3", "1", "4", "2", "5"]


def test_sort_is_stable_for_equal_keys():
    courses = _make_courses()

    # "1" and "3" share review_count=10, "2" and "5" share 0
    assert _ids(sort_courses(courses, SortConfig("review_count", DESC))) == ["1", "3", "4", "2", "5"]
    assert _ids(sort_courses(courses, SortConfig("review_count", ASC))) == ["2", "5", "4", "1", "3"]


def test_compare_returns_sign_only():
    a = Course(id="a", name="A", workload=40.0)
    b = Course(id="b", name="B", workload=10.0)
    missing = Course(id="c", name="C")

    assert compare(a, b, SortConfig("workload", ASC)) == 1
    assert compare(a, b, SortConfig("workload", DESC)) == -1
    assert compare(missing, a, SortConfig("workload", DESC)) == 1
    assert compare(a, missing, SortConfig("workload", DESC)) == -1
    assert compare(missing, missing, SortConfig("workload", ASC)) == 0


def test_toggle_sort_new_attribute_resets_to_ascending():
    config = toggle_sort(SortConfig(), "name")

    assert config == SortConfig("name", ASC)
    assert toggle_sort(config, "name") == SortConfig("name", DESC)
    assert toggle_sort(SortConfig("name", DESC), "name") == SortConfig("name", ASC)


def test_sort_config_rejects_unknown_attribute():
    with pytest.raises(ValueError):
        SortConfig("code", ASC)


def test_sort_config_from_dict_falls_back_to_default():
    assert SortConfig.from_dict({"attribute": "rating", "direction": ASC}) == SortConfig("rating", ASC)
    assert SortConfig.from_dict({"attribute": "bogus"}) == SortConfig()
