"""Pagination calculation over an in-memory content collection."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Sequence, Tuple

from st_pagination.errors import InvalidConfigError, TypeMismatchError
from st_pagination.utils.helpers import is_sequential, slice_content, to_positive_int
from st_pagination.utils.pagination import (
    clamp_page_number,
    compute_total_pages,
    jump_length,
    page_slice,
)

logger = logging.getLogger(__name__)

PaginationResult = Dict[str, Any]


def calculate(content: Sequence[Any], config: Mapping) -> PaginationResult:
    """Return ``config`` enriched with navigation fields and the visible slice.

    An out-of-range ``current_page`` is clamped into ``[1, page_count]`` rather
    than rejected, so stale UI state (page 9 of a result set that has since
    been filtered down to 3 pages) heals on the next calculation. Empty
    content still has one (empty) page.

    Raises:
        TypeMismatchError: ``content`` is not an ordered collection or
            ``config`` is not a mapping.
        InvalidConfigError: ``items_per_page`` is absent or not positive.
    """
    if not is_sequential(content):
        raise TypeMismatchError(
            f"content must be an ordered collection, got {type(content).__name__}"
        )
    if not isinstance(config, Mapping):
        raise TypeMismatchError(f"config must be a mapping, got {type(config).__name__}")

    items_per_page = to_positive_int(config.get("items_per_page"))
    if items_per_page is None:
        raise InvalidConfigError(
            f"items_per_page must be a positive int, got {config.get('items_per_page')!r}"
        )

    total_items = len(content)
    page_count = compute_total_pages(total_items, items_per_page)

    requested_page = to_positive_int(config.get("current_page", 1)) or 1
    current_page = clamp_page_number(requested_page, page_count)
    if current_page != requested_page:
        logger.debug(
            "Clamped current page %r to %d of %d",
            config.get("current_page"),
            current_page,
            page_count,
            extra={"pagination_id": config.get("id")},
        )

    start, end = page_slice(current_page, items_per_page)
    jump = jump_length(page_count)

    derived = {
        "total_items": total_items,
        "page_count": page_count,
        "current_page": current_page,
        "items_per_page": items_per_page,
        "jump_back_page": max(1, current_page - jump),
        "jump_forward_page": min(page_count, current_page + jump),
        "prev_page": max(1, current_page - 1),
        "next_page": min(page_count, current_page + 1),
        "first_page": 1,
        "last_page": page_count,
        "at_first": current_page == 1,
        "at_last": current_page == page_count,
        "content": slice_content(content, start, end),
    }
    return {**config, **derived}


def calculate_for_subscription(inputs: Tuple[Sequence[Any], Mapping]) -> PaginationResult:
    """Calculate from the ``(content, config)`` pair a reactive subscription yields."""
    content, config = inputs
    return calculate(content, config)
