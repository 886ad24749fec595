"""Pagination state and controls for Streamlit apps."""

from st_pagination.errors import (
    InvalidConfigError,
    PaginationError,
    TypeMismatchError,
    UnknownCommandError,
)
from st_pagination.services.calculator import calculate, calculate_for_subscription
from st_pagination.services.config_store import ConfigStore
from st_pagination.services.events import dispatch, subscribe_config, subscribe_page

__all__ = [
    "ConfigStore",
    "InvalidConfigError",
    "PaginationError",
    "TypeMismatchError",
    "UnknownCommandError",
    "calculate",
    "calculate_for_subscription",
    "dispatch",
    "subscribe_config",
    "subscribe_page",
]
