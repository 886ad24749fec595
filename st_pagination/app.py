"""Streamlit demo page for paginated client listings."""

from __future__ import annotations

import logging

import pandas as pd
import streamlit as st

from st_pagination.components.pagination_controls import render_pagination_controls
from st_pagination.config import (
    DEMO_PAGINATION_ID,
    DEMO_REGIONS,
    DEMO_ROW_COUNT,
    SEARCH_COLUMNS,
    TABLE_COLUMNS,
)
from st_pagination.errors import PaginationError
from st_pagination.services import filter_service
from st_pagination.services.config_store import ConfigStore
from st_pagination.services.events import REGISTER, dispatch, subscribe_page
from st_pagination.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_sample_clients(row_count: int = DEMO_ROW_COUNT) -> pd.DataFrame:
    """Build a deterministic sample client table."""
    rows = [
        {
            "client_id": f"C{index:05d}",
            "name": f"Client {index}",
            "region": DEMO_REGIONS[index % len(DEMO_REGIONS)],
            "revenue": (index * 7919) % 100_000,
        }
        for index in range(1, row_count + 1)
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


@st.cache_data(show_spinner=False)
def get_clients(row_count: int) -> pd.DataFrame:
    """Cached sample client table."""
    return build_sample_clients(row_count)


def init_session_state() -> ConfigStore:
    """Initialize session state and register the table's pagination config."""
    st.session_state.setdefault("last_filter_signature", tuple())
    store = ConfigStore(st.session_state)
    if DEMO_PAGINATION_ID not in store.ids():
        dispatch(store, (REGISTER, {"id": DEMO_PAGINATION_ID, "items_per_page": 20}))
    return store


def main() -> None:
    """Render the paginated client table."""
    st.set_page_config(page_title="Paginated Clients", layout="wide")
    setup_logging()

    store = init_session_state()
    clients_df = get_clients(DEMO_ROW_COUNT)

    st.markdown("### Clients")
    search_col, region_col = st.columns([2, 1])
    with search_col:
        term = st.text_input("Search", key="client_search", placeholder="ID, name or region")
    with region_col:
        regions = st.multiselect("Region", options=DEMO_REGIONS, key="region_filter")

    filter_signature = filter_service.filters_signature(term, regions)
    if filter_signature != st.session_state["last_filter_signature"]:
        # The stale page is clamped by the calculator; just note the change.
        logger.info("Filters changed", extra={"pagination_id": DEMO_PAGINATION_ID})
        st.session_state["last_filter_signature"] = filter_signature

    filtered_df = filter_service.search_rows(clients_df, term, SEARCH_COLUMNS)
    filtered_df = filter_service.apply_region_filter(filtered_df, regions)

    try:
        page = subscribe_page(store, DEMO_PAGINATION_ID, filtered_df)
    except PaginationError as exc:
        st.error(f"Pagination failed: {exc}")
        st.stop()

    st.caption(f"Total Rows: {page['total_items']}/{len(clients_df)}")
    if page["content"].empty:
        st.info("No rows available.")
    else:
        st.dataframe(page["content"], hide_index=True, width="stretch")

    render_pagination_controls(store, page)


if __name__ == "__main__":
    main()
