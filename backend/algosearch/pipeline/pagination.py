"""
Pagination window: how many filtered items are materialized, grown one page per
qualifying sentinel intersection.
"""

from typing import Sized

from algosearch.pipeline.schemas import IntersectionReport

DEFAULT_PAGE_SIZE = 10
DEFAULT_INTERSECTION_THRESHOLD = 0.1


def reset(filtered: Sized, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    return min(page_size, len(filtered))


def advance(displayed_count: int, total: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Grow by one page, capped at total. Returns displayed_count unchanged once the window is full."""
    if displayed_count >= total:
        return displayed_count
    return min(displayed_count + page_size, total)


def has_sentinel(displayed_count: int, total: int) -> bool:
    return displayed_count < total


def should_advance(
    displayed_count: int,
    total: int,
    report: IntersectionReport,
    threshold: float = DEFAULT_INTERSECTION_THRESHOLD,
) -> bool:
    if not has_sentinel(displayed_count, total):
        return False
    return report.is_intersecting and report.intersection_ratio >= threshold
