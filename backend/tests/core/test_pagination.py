"""Pagination helpers: clamping, offsets and page counts.

Invariants:
    - Page size always ends in [1, 50]
    - Page numbers below 1 become 1
    - total_pages rounds up and is 0 for an empty set
"""

import pytest

from timewise.core.pagination import (
    MAX_PAGE_NUMBER, MAX_PAGE_SIZE, MIN_PAGE_SIZE,
    clamp_page_size, normalize_page_number, page_offset, total_pages,
)


@pytest.mark.parametrize("requested, expected", [
    (0, 1), (-5, 1), (1, 1), (10, 10), (50, 50), (51, 50), (1000, 50),
])
def test_clamp_page_size(requested, expected):
    assert clamp_page_size(requested) == expected


def test_bounds():
    assert MIN_PAGE_SIZE == 1
    assert MAX_PAGE_SIZE == 50


@pytest.mark.parametrize("requested, expected", [(0, 1), (-3, 1), (1, 1), (7, 7)])
def test_normalize_page_number(requested, expected):
    assert normalize_page_number(requested) == expected


def test_page_offset():
    assert page_offset(1, 10) == 0
    assert page_offset(3, 2) == 4


def test_total_pages_rounds_up():
    assert total_pages(0, 10) == 0
    assert total_pages(5, 2) == 3
    assert total_pages(10, 10) == 1
    assert total_pages(11, 10) == 2


def test_largest_offset_fits_signed_64_bit():
    assert page_offset(MAX_PAGE_NUMBER, MAX_PAGE_SIZE) < 2**63
