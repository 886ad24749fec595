"""Helper utilities for value coercion and content slicing."""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from itertools import islice
from typing import Any, Optional

import pandas as pd


def to_positive_int(value: object) -> Optional[int]:
    """Coerce ints and numeric strings to a positive int, or return None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        number = int(value)
    elif isinstance(value, float):
        if not value.is_integer():
            return None
        number = int(value)
    elif isinstance(value, str):
        try:
            number = int(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if number > 0 else None


def is_sequential(content: object) -> bool:
    """Return True for ordered collections that can be paged through."""
    if isinstance(content, (pd.DataFrame, pd.Series)):
        return True
    if isinstance(content, (str, bytes, bytearray)):
        return False
    return isinstance(content, Sequence)


def slice_content(content: Any, start: int, end: int) -> Any:
    """Positionally slice content, keeping its collection type."""
    if isinstance(content, (pd.DataFrame, pd.Series)):
        return content.iloc[start:end]
    try:
        return content[start:end]
    except TypeError:
        # Sequences without slice support, e.g. deque.
        return list(islice(content, start, end))
