"""Shared fixtures for pagination tests."""

import pandas as pd
import pytest

from st_pagination.services.config_store import ConfigStore


@pytest.fixture
def items_95():
    """95 ordered items."""
    return list(range(95))


@pytest.fixture
def state():
    """Plain dict standing in for st.session_state."""
    return {}


@pytest.fixture
def store(state):
    return ConfigStore(state)


@pytest.fixture
def clients_df():
    return pd.DataFrame(
        {
            "client_id": [f"C{index:03d}" for index in range(1, 26)],
            "name": [f"Client {index}" for index in range(1, 26)],
            "region": ["EMEA", "APAC", "AMER", "LATAM", "EMEA"] * 5,
        }
    )
