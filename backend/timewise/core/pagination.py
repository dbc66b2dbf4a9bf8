"""Pagination: pure helpers for offset-based paging.

Invariants:
    - Page size always lands in [MIN_PAGE_SIZE, MAX_PAGE_SIZE], out-of-range input is clamped
    - Page numbers are 1-based; anything below 1 is treated as 1, above MAX_PAGE_NUMBER is rejected
    - Offsets stay within a signed 64-bit integer for every accepted page
    - offset = (page_number - 1) * page_size
"""

import math

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 50
MAX_PAGE_NUMBER = 10_000_000


def clamp_page_size(page_size: int) -> int:
    return max(MIN_PAGE_SIZE, min(page_size, MAX_PAGE_SIZE))


def normalize_page_number(page_number: int) -> int:
    return max(DEFAULT_PAGE_NUMBER, page_number)


def page_offset(page_number: int, page_size: int) -> int:
    return (page_number - 1) * page_size


def total_pages(total_count: int, page_size: int) -> int:
    """Number of pages needed for total_count items (0 for an empty set)."""
    if page_size <= 0:
        return 0
    return math.ceil(total_count / page_size)
