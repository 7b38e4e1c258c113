import streamlit as st


PREFIX = "slice"
SLICE_NAMES = ("mood", "journal", "goal", "goals", "activity", "dashboard.profile", "dashboard.moods")


def get_slice(slice_name):
    key = f"{PREFIX}.{slice_name}"
    if key not in st.session_state:
        st.session_state[key] = {}
    return st.session_state[key]


def get_or_create(slice_name, name, factory):
    payload = get_slice(slice_name)
    if name not in payload:
        payload[name] = factory()
    return payload[name]


def clear_slice(slice_name):
    key = f"{PREFIX}.{slice_name}"
    if key in st.session_state:
        del st.session_state[key]


def clear_all():
    for slice_name in SLICE_NAMES:
        clear_slice(slice_name)


def load_once(slice_name, loaded_key, loader, refresh=False):
    """Run ``loader`` when the slice was loaded for a different key (or on refresh)."""
    payload = get_slice(slice_name)
    if refresh or payload.get("loaded_key") != loaded_key:
        payload["items"] = loader()
        payload["loaded_key"] = loaded_key
    return payload["items"]
