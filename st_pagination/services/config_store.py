"""Per-instance pagination configuration kept in a host state container."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any, Dict, List, Optional

from st_pagination.config import DEFAULTS, STORE_KEY
from st_pagination.errors import InvalidConfigError, TypeMismatchError
from st_pagination.utils.helpers import to_positive_int

logger = logging.getLogger(__name__)

PaginationConfig = Dict[str, Any]


def assemble_initial_config(defaults: Mapping, user_config: Mapping) -> PaginationConfig:
    """Merge user config over defaults, filling items_per_page from the allowed list."""
    config = {**defaults, **user_config}
    allowed = config.get("allowed_items_per_page")

    if (
        not isinstance(allowed, Sequence)
        or isinstance(allowed, (str, bytes))
        or not allowed
        or any(to_positive_int(option) is None for option in allowed)
    ):
        raise InvalidConfigError(
            f"allowed_items_per_page must be a non-empty list of positive ints, got {allowed!r}"
        )

    # Records never share the allowed list with the defaults or each other.
    config["allowed_items_per_page"] = list(allowed)

    if config.get("items_per_page") is None:
        config["items_per_page"] = allowed[0]
    elif config["items_per_page"] not in allowed:
        raise InvalidConfigError(
            f"items_per_page {config['items_per_page']!r} is not one of {list(allowed)}"
        )
    return config


def _snapshot(record: Mapping) -> PaginationConfig:
    """Copy a record, including its allowed page sizes."""
    snapshot = dict(record)
    if isinstance(snapshot.get("allowed_items_per_page"), list):
        snapshot["allowed_items_per_page"] = list(snapshot["allowed_items_per_page"])
    return snapshot


class ConfigStore:
    """Mapping from pagination id to its config, held inside ``state``.

    ``state`` is any mutable mapping owned by the caller, typically
    ``st.session_state``. Bounds are never checked here; the calculator clamps
    against the content it is given.
    """

    def __init__(
        self,
        state: Optional[MutableMapping] = None,
        defaults: Mapping = DEFAULTS,
    ) -> None:
        self._state = {} if state is None else state
        self._defaults = dict(defaults)

    @property
    def _configs(self) -> MutableMapping:
        if STORE_KEY not in self._state:
            self._state[STORE_KEY] = {}
        return self._state[STORE_KEY]

    def register(self, config: Mapping) -> PaginationConfig:
        """Register a config, merging into any record already stored for its id."""
        if not isinstance(config, Mapping):
            raise TypeMismatchError(f"config must be a mapping, got {type(config).__name__}")
        pagination_id = config.get("id")
        if pagination_id is None:
            raise InvalidConfigError("config passed to register must include an 'id' key")

        assembled = assemble_initial_config(self._defaults, config)
        existing = self._configs.get(pagination_id, {})
        # Merge so a late registration keeps fields set by user interaction.
        record = {**existing, **assembled}
        self._configs[pagination_id] = record

        logger.debug(
            "Registered pagination config",
            extra={"pagination_id": pagination_id, "replaced": bool(existing)},
        )
        return _snapshot(record)

    def get_config(self, pagination_id: Any) -> PaginationConfig:
        """Return the stored config, or a bare ``{"id": ...}`` if never registered."""
        record = self._configs.get(pagination_id)
        if record is None:
            return {"id": pagination_id}
        return _snapshot(record)

    def set_current_page(self, pagination_id: Any, page: Any) -> None:
        """Overwrite current_page without a bounds check."""
        self._assoc(pagination_id, "current_page", page)

    def set_items_per_page(self, pagination_id: Any, count: Any) -> None:
        """Overwrite items_per_page without checking the allowed list."""
        self._assoc(pagination_id, "items_per_page", count)

    def ids(self) -> List[Any]:
        """Return the registered pagination ids."""
        return list(self._configs.keys())

    def _assoc(self, pagination_id: Any, key: str, value: Any) -> None:
        existing = self._configs.get(pagination_id, {"id": pagination_id})
        self._configs[pagination_id] = {**existing, key: value}
        logger.debug(
            "Set %s to %r",
            key,
            value,
            extra={"pagination_id": pagination_id},
        )
