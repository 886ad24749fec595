"""Pagination arithmetic for in-memory slicing."""

from __future__ import annotations

import math
from typing import Tuple

from st_pagination.config import JUMP_DIVISOR


def compute_total_pages(total_rows: int, page_size: int) -> int:
    """Pages needed for ``total_rows``; empty content still has one page."""
    if page_size <= 0:
        return 1
    return max(1, math.ceil(total_rows / page_size))


def clamp_page_number(page_number: int, total_pages: int) -> int:
    """Clamp a possibly stale page number into ``[1, total_pages]``."""
    return min(max(page_number, 1), max(total_pages, 1))


def page_slice(page_number: int, page_size: int) -> Tuple[int, int]:
    """Return start/end offsets (end exclusive) for a 1-based page number."""
    start = (page_number - 1) * page_size
    end = start + page_size
    return start, end


def jump_length(total_pages: int) -> int:
    """Number of pages a jump control moves."""
    return total_pages // JUMP_DIVISOR
