"""A Streamlit page rendering the weather widget served by the API.

Streamlit only reports a text box change on Enter or blur, so the search box
lives in a form: Enter (or 🔍) submits the search, "Suggest" asks for
matching locations once the service's debounce has settled.
"""

import os
import time

import requests
import streamlit as st

# --- Page and API Configuration ---
st.set_page_config(page_title="Weather", page_icon="🌤️", layout="centered")
API_BASE = os.getenv("WIDGET_API_BASE", "http://localhost:8000")
SUGGESTION_SETTLE_SECONDS = 0.6


def get_api_session():
    """Gets the requests.Session object from streamlit's session state."""
    if "api_session" not in st.session_state:
        st.session_state.api_session = requests.Session()
    return st.session_state.api_session


def call(method, path, **kwargs):
    """
    Calls the widget API and stores the returned view state.
    On any failure the last view is kept and an error is shown.
    """
    try:
        response = get_api_session().request(
            method, f"{API_BASE}{path}", timeout=15, **kwargs
        )
    except requests.exceptions.ConnectionError:
        st.error("Could not connect to the weather service.", icon="🚨")
        return False
    except requests.exceptions.RequestException as e:
        st.error(f"Weather service request failed: {e}", icon="🚨")
        return False

    if response.status_code != 200:
        st.error(f"API Error: {response.status_code} - {response.text}")
        return False

    try:
        st.session_state.view = response.json()
    except ValueError:
        st.error("The weather service sent an unreadable response.")
        return False
    return True


def on_submit():
    if call("POST", "/weather/input", json={"text": st.session_state.search_box}):
        call("POST", "/weather/submit")


def on_suggest():
    if call("POST", "/weather/input", json={"text": st.session_state.search_box}):
        # Let the debounced lookup land before reading suggestions back
        time.sleep(SUGGESTION_SETTLE_SECONDS)
        call("GET", "/weather/state")


def on_suggestion(location):
    st.session_state.search_box = location["full_name"]
    call("POST", "/weather/select", json=location)


def on_tab_change():
    call("POST", "/weather/tab", json={"tab": st.session_state.tab_choice})


# --- Initial state ---
if "view" not in st.session_state:
    call("GET", "/weather/state")
view = st.session_state.get("view", {})

# --- Search ---
with st.form("search", border=False):
    search_col, submit_col, suggest_col = st.columns([4, 1, 1])
    search_col.text_input(
        "Search location",
        key="search_box",
        placeholder="e.g., Paris",
        label_visibility="collapsed",
    )
    submit_col.form_submit_button("🔍", on_click=on_submit, use_container_width=True)
    suggest_col.form_submit_button(
        "Suggest", on_click=on_suggest, use_container_width=True
    )

if view.get("fetching_suggestions"):
    st.caption("Searching…")

if view.get("show_suggestions"):
    with st.container(border=True):
        for index, location in enumerate(view["suggestions"]):
            st.button(
                location["full_name"],
                key=f"suggestion-{index}",
                on_click=on_suggestion,
                args=(location,),
                use_container_width=True,
            )
        if st.button("Close", key="dismiss"):
            call("POST", "/weather/dismiss")
            st.rerun()

if view.get("error"):
    st.error(view["error"], icon="⚠️")

# --- Current conditions ---
current = view.get("current")
if view.get("loading") and not current:
    st.info("Loading weather…")
elif current:
    with st.container(border=True):
        st.subheader(current["location"])
        st.caption(current["date"])
        icon_col, temp_col = st.columns([1, 3])
        icon_col.image(current["icon"], width=64)
        temp_col.metric(current["condition"], f"{current['temperature']}°C")
        wind_col, humidity_col = st.columns(2)
        wind_col.metric("Wind", f"{current['wind_kph']} km/h {current['wind_dir']}")
        humidity_col.metric("Humidity", f"{current['humidity']}%")

    # --- Forecast tabs ---
    st.radio(
        "Forecast",
        options=["weekly", "hourly"],
        index=0 if view.get("active_tab") == "weekly" else 1,
        key="tab_choice",
        horizontal=True,
        on_change=on_tab_change,
        format_func=str.capitalize,
    )

    if view.get("active_tab") == "hourly":
        columns = st.columns(max(len(view["hourly"]), 1))
        for column, hour in zip(columns, view["hourly"]):
            column.metric(hour["time"], hour["temp"])
    else:
        columns = st.columns(max(len(view["forecast"]), 1))
        for column, day in zip(columns, view["forecast"]):
            column.caption(day["day"][:3])
            column.image(day["icon"], width=40)
            column.markdown(f"**{day['temp']}**")
