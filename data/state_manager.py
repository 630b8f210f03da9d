import streamlit as st

from data.mock_data import SEEDS
from data.record_store import RecordStore


# === Record Store State Management ===

def _store_key(view: str) -> str:
    return f"state_store_{view}"


def get_record_store(view: str) -> RecordStore:
    """Returns the view's record store, seeding it on first access in this session."""
    key = _store_key(view)
    if key not in st.session_state:
        id_prefix, factory = SEEDS[view]
        st.session_state[key] = RecordStore(factory(), id_prefix=id_prefix, name=view)
    return st.session_state[key]


def get_store_session_keys() -> list:
    """Returns session state keys of all record stores."""
    return [_store_key(view) for view in SEEDS]


# === Pagination State Management ===

def get_page(view: str) -> int:
    """Gets the current 1-based page index of a list view."""
    return st.session_state.get(f"state_page_{view}", 1)


def set_page(view: str, page: int):
    """Sets the current page index of a list view."""
    st.session_state[f"state_page_{view}"] = page


def reset_page(view: str):
    """Jumps back to the first page, e.g. after a filter changed."""
    set_page(view, 1)


# === Settings ===

def get_page_size() -> int:
    """Gets the configured list page size, loading settings if the entry script did not."""
    settings = st.session_state.get('settings')
    if settings is None:
        from utils.config import load_settings
        settings = load_settings()
        st.session_state['settings'] = settings
    return settings['page_size']
