"""Unit tests for the command and read channels."""

import pytest

from st_pagination.errors import UnknownCommandError
from st_pagination.services.events import (
    REGISTER,
    SET_CURRENT_PAGE,
    SET_ITEMS_PER_PAGE,
    dispatch,
    subscribe_config,
    subscribe_page,
)


class TestDispatch:
    def test_register(self, store):
        dispatch(store, (REGISTER, {"id": "x", "items_per_page": 20}))

        assert store.get_config("x")["items_per_page"] == 20

    def test_set_current_page(self, store):
        dispatch(store, (REGISTER, {"id": "x"}))
        dispatch(store, (SET_CURRENT_PAGE, "x", 3))

        assert store.get_config("x")["current_page"] == 3

    def test_set_items_per_page(self, store):
        dispatch(store, (REGISTER, {"id": "x"}))
        dispatch(store, (SET_ITEMS_PER_PAGE, "x", 50))

        assert store.get_config("x")["items_per_page"] == 50

    def test_returns_nothing(self, store):
        assert dispatch(store, (REGISTER, {"id": "x"})) is None

    def test_unknown_command(self, store):
        with pytest.raises(UnknownCommandError):
            dispatch(store, ("delete", "x"))

    def test_empty_event(self, store):
        with pytest.raises(UnknownCommandError):
            dispatch(store, ())


class TestSubscriptions:
    def test_subscribe_config_unknown(self, store):
        assert subscribe_config(store, "x") == {"id": "x"}

    def test_subscribe_page(self, store, items_95):
        dispatch(store, (REGISTER, {"id": "x", "items_per_page": 20}))
        dispatch(store, (SET_CURRENT_PAGE, "x", 5))

        page = subscribe_page(store, "x", items_95)

        assert page["id"] == "x"
        assert page["content"] == items_95[80:95]
        assert page["at_last"] is True

    def test_page_size_change_clamps_stale_page(self, store):
        content = list(range(100))
        dispatch(store, (REGISTER, {"id": "x"}))
        dispatch(store, (SET_CURRENT_PAGE, "x", 9))

        dispatch(store, (SET_ITEMS_PER_PAGE, "x", 50))
        page = subscribe_page(store, "x", content)

        assert page["page_count"] == 2
        assert page["current_page"] == 2
        assert page["content"] == content[50:100]
        # the store itself is never clamped
        assert store.get_config("x")["current_page"] == 9

    def test_navigation_loop(self, store, items_95):
        dispatch(store, (REGISTER, {"id": "x", "items_per_page": 20}))

        page = subscribe_page(store, "x", items_95)
        dispatch(store, (SET_CURRENT_PAGE, "x", page["next_page"]))
        page = subscribe_page(store, "x", items_95)

        assert page["current_page"] == 2
        assert page["content"] == items_95[20:40]
