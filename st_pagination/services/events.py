"""Command and read channels between the UI layer and the config store."""

from __future__ import annotations

import logging
from typing import Any, Sequence, Tuple

from st_pagination.errors import UnknownCommandError
from st_pagination.services.calculator import PaginationResult, calculate
from st_pagination.services.config_store import ConfigStore, PaginationConfig

logger = logging.getLogger(__name__)

REGISTER = "register"
SET_CURRENT_PAGE = "set_current_page"
SET_ITEMS_PER_PAGE = "set_items_per_page"

Event = Tuple[Any, ...]


def dispatch(store: ConfigStore, event: Event) -> None:
    """Apply one event tuple to the store.

    Supported events::

        ("register", {"id": ..., **overrides})
        ("set_current_page", id, page)
        ("set_items_per_page", id, count)
    """
    if not event:
        raise UnknownCommandError("empty event")

    name, *args = event
    handlers = {
        REGISTER: store.register,
        SET_CURRENT_PAGE: store.set_current_page,
        SET_ITEMS_PER_PAGE: store.set_items_per_page,
    }
    handler = handlers.get(name)
    if handler is None:
        raise UnknownCommandError(f"unknown pagination command: {name!r}")

    logger.debug("Dispatching %s", name)
    handler(*args)


def subscribe_config(store: ConfigStore, pagination_id: Any) -> PaginationConfig:
    """Current config for ``pagination_id``."""
    return store.get_config(pagination_id)


def subscribe_page(
    store: ConfigStore,
    pagination_id: Any,
    content: Sequence[Any],
) -> PaginationResult:
    """Current config for ``pagination_id`` combined with ``content``."""
    return calculate(content, store.get_config(pagination_id))
