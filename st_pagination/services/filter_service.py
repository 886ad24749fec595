"""Search filtering for the demo table."""

from __future__ import annotations

from typing import List

import pandas as pd


def search_rows(dataframe: pd.DataFrame, term: str, columns: List[str]) -> pd.DataFrame:
    """Keep rows where any search column contains ``term``, case-insensitively."""
    needle = (term or "").strip().lower()
    if not needle:
        return dataframe

    mask = pd.Series(False, index=dataframe.index)
    for column in columns:
        if column not in dataframe.columns:
            continue
        mask |= dataframe[column].astype(str).str.lower().str.contains(needle, regex=False)
    return dataframe[mask]


def filters_signature(term: str, region_filter: List[str]) -> tuple:
    """Build a hashable signature used to detect filter changes."""
    return ((term or "").strip().lower(), tuple(sorted(region_filter)))


def apply_region_filter(dataframe: pd.DataFrame, regions: List[str]) -> pd.DataFrame:
    """Keep rows in any of ``regions``; an empty selection keeps everything."""
    if not regions or "region" not in dataframe.columns:
        return dataframe
    return dataframe[dataframe["region"].isin(regions)]
