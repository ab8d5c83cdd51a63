"""Streamlit form for the Unit Converter API."""

from __future__ import annotations

import os
from typing import Any

import httpx
import streamlit as st

from conversion.controller import ConverterState

DEFAULT_API_BASE = "http://localhost:8000"
API_BASE_ENV_VAR = "API_BASE_URL"
API_BASE_SECRET = "api_base"
STATE_KEY = "converter_state"


def get_api_base() -> str:
    """Resolve the API base URL: Streamlit secret, then environment, then localhost."""
    return _read_secret(API_BASE_SECRET) or os.environ.get(API_BASE_ENV_VAR) or DEFAULT_API_BASE


def _read_secret(key: str) -> str | None:
    # st.secrets raises its own error types when no secrets.toml is present.
    try:
        return st.secrets[key]
    except Exception:  # noqa: BLE001
        return None


def fetch_conversion(state: ConverterState) -> dict[str, Any]:
    """Ask the backend to convert the current form selection."""
    params = {
        "category": state.category.value,
        "value": state.value,
        "from_unit": state.from_unit.value,
        "to_unit": state.to_unit.value,
    }
    return _request_api("/convert/", params)


@st.cache_data(ttl=600)
def load_categories() -> list[dict[str, Any]]:
    """Load and cache category summaries for the picker widgets."""
    return _request_api("/categories/", {})


def _request_api(path: str, params: dict[str, Any]) -> Any:
    base_url = get_api_base().rstrip("/")
    url = f"{base_url}{path}"
    with httpx.Client(timeout=30, follow_redirects=True) as client:
        response = client.get(url, params=params)
        response.raise_for_status()
        return response.json()


def _get_state() -> ConverterState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = ConverterState()
    return st.session_state[STATE_KEY]


def main() -> None:
    st.set_page_config(page_title="Unit Converter")
    st.title("Unit Converter")

    try:
        categories = load_categories()
    except httpx.HTTPError as exc:
        st.error(f"Could not load categories: {exc}")
        return

    state = _get_state()
    labels = [item["category"] for item in categories]

    st.subheader("Select a unit category")
    selected_category = st.radio(
        "Select a unit category",
        labels,
        index=labels.index(state.category.value),
        horizontal=True,
        label_visibility="collapsed",
    )
    if selected_category != state.category.value:
        state.select_category(selected_category)

    st.subheader(f"{state.category.value} conversions")
    value = st.number_input("Enter a value to convert", value=state.value)
    state.set_value(value)

    from_options = [unit.value for unit in state.from_options()]
    selected_from = st.selectbox(
        "Select from:",
        from_options,
        index=from_options.index(state.from_unit.value),
    )
    state.select_from(selected_from)

    to_options = [unit.value for unit in state.to_options()]
    # The target may have just become the source; fall back to the first free unit.
    to_index = (
        to_options.index(state.to_unit.value) if state.to_unit.value in to_options else 0
    )
    selected_to = st.selectbox("Select to:", to_options, index=to_index)
    state.select_to(selected_to)

    try:
        payload = fetch_conversion(state)
    except httpx.HTTPError as exc:
        st.error(f"Request failed: {exc}")
        return

    st.write(state.summary(payload["display"]))
    if payload.get("time_table"):
        st.caption(f"Time table: {payload['time_table']}")


if __name__ == "__main__":
    main()
