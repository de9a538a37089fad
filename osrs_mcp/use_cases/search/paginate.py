"""
Page arithmetic over an ordered list of search matches.
"""

import math
from collections.abc import Sequence
from typing import TypeVar

from osrs_mcp.entities.records import Pagination

T = TypeVar("T")


def paginate(items: Sequence[T], page: int, page_size: int) -> tuple[list[T], Pagination]:
    """
    Select one page of items and compute its pagination metadata.

    ``page`` and ``page_size`` are assumed to be positive; argument schemas
    validate them before they get here. Pages past the end yield an empty
    slice.

    Args:
        items: Every match, in file order
        page: 1-based page number
        page_size: Number of items per page

    Returns:
        Tuple of (items on the page, Pagination)
    """
    total_results = len(items)
    total_pages = math.ceil(total_results / page_size)
    start = (page - 1) * page_size
    visible = list(items[start : start + page_size])
    return visible, Pagination(page, page_size, total_results, total_pages)
