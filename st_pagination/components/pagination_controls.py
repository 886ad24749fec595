"""Pagination control bar component."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping

import streamlit as st

from st_pagination.services.config_store import ConfigStore
from st_pagination.services.events import SET_CURRENT_PAGE, SET_ITEMS_PER_PAGE, dispatch


@dataclass
class NavAction:
    """One navigation button bound to a target page."""

    key: str
    icon: str
    tooltip: str
    target_page: int
    disabled: bool


def build_navigation(result: Mapping) -> List[NavAction]:
    """Build the first/jump/prev/next/jump/last buttons for a calculated page."""
    at_first = bool(result.get("at_first"))
    at_last = bool(result.get("at_last"))
    allow_jump = result.get("allow_jump", True)

    actions = [NavAction("first", "first_page", "Show first page", result["first_page"], at_first)]
    if allow_jump:
        actions.append(
            NavAction(
                "jump_back",
                "keyboard_double_arrow_left",
                "Jump backwards",
                result["jump_back_page"],
                at_first,
            )
        )
    actions.append(NavAction("prev", "navigate_before", "Previous page", result["prev_page"], at_first))
    actions.append(NavAction("next", "navigate_next", "Next page", result["next_page"], at_last))
    if allow_jump:
        actions.append(
            NavAction(
                "jump_forward",
                "keyboard_double_arrow_right",
                "Jump forwards",
                result["jump_forward_page"],
                at_last,
            )
        )
    actions.append(NavAction("last", "last_page", "Show last page", result["last_page"], at_last))
    return actions


def page_indicator(result: Mapping) -> str:
    """Format the current/total page label."""
    return f"{result['current_page']}/{result['page_count']}"


def _on_items_per_page_change(store: ConfigStore, pagination_id: object, widget_key: str) -> None:
    """Dispatch the page size picked in the selector."""
    dispatch(store, (SET_ITEMS_PER_PAGE, pagination_id, st.session_state[widget_key]))


def render_pagination_controls(store: ConfigStore, result: Mapping) -> None:
    """Render navigation buttons and the page-size selector for ``result``."""
    pagination_id = result["id"]
    actions = build_navigation(result)

    # Navigation buttons, the page indicator after "prev", then the selector.
    slot_count = len(actions) + 1 + (1 if result.get("allow_set_per_page", True) else 0)
    slots = st.columns(slot_count, vertical_alignment="center")
    indicator_index = next(index for index, action in enumerate(actions) if action.key == "prev") + 1

    action_iter = iter(actions)
    for index, slot in enumerate(slots[: len(actions) + 1]):
        with slot:
            if index == indicator_index:
                st.markdown(f"**{page_indicator(result)}**")
                continue
            action = next(action_iter)
            st.button(
                "",
                key=f"{pagination_id}_{action.key}",
                icon=f":material/{action.icon}:",
                help=action.tooltip,
                disabled=action.disabled,
                on_click=dispatch,
                args=(store, (SET_CURRENT_PAGE, pagination_id, action.target_page)),
            )

    if result.get("allow_set_per_page", True):
        allowed = list(result.get("allowed_items_per_page") or [])
        items_per_page = result.get("items_per_page")
        widget_key = f"{pagination_id}_items_per_page"
        with slots[-1]:
            st.caption(f"{result['total_items']} entries")
            st.selectbox(
                "Entries per page",
                options=allowed,
                index=allowed.index(items_per_page) if items_per_page in allowed else 0,
                key=widget_key,
                format_func=lambda number: f"{number} / page",
                label_visibility="collapsed",
                on_change=_on_items_per_page_change,
                args=(store, pagination_id, widget_key),
            )
