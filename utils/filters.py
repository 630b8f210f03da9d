"""Filtering utilities for admin list views.

This module decides which records of a Record Store belong in the current
view of a list page (members, team, matches, recaps).

HOW FILTERING WORKS:
-------------------
1. The admin types a search text and/or picks values in the category dropdowns
2. Each record is checked against the search text and every category filter
3. Only records that match ALL criteria are shown (AND logic)
4. A dropdown left on "all" does not restrict anything

A filter configuration is a plain dictionary::

    {
        'search_text': 'sarah',
        'category_filters': {'status': 'Active', 'region': 'all'},
    }

EXAMPLE:
--------
```python
config = build_filter_config(search_text="chen", status="Active")
visible = filter_records(members, config, search_fields=("name", "email"))
```
"""

import streamlit as st

# Sentinel value of a category dropdown that does not restrict the list
ALL = "all"

# =============================================================================
# VIEW CONFIGURATION
# =============================================================================
# PURPOSE: Which fields are searched and which are offered as dropdown filters
# per list view. Pages read this instead of hard-coding field names.

VIEW_FILTERS = {
    'members': {
        'search_fields': ('name', 'email'),
        'category_fields': ('membership_tier', 'status', 'region'),
    },
    'team': {
        'search_fields': (),
        'category_fields': ('role',),
    },
    'matches': {
        'search_fields': ('title', 'player1', 'player2', 'court'),
        'category_fields': ('status',),
    },
    'recaps': {
        'search_fields': ('title', 'description'),
        'category_fields': (),
    },
}

# =============================================================================
# PREDICATES
# =============================================================================
# PURPOSE: Pure per-record checks. No session state, no side effects.

def matches_search(record, search_text, search_fields):
    """Return True if ``search_text`` occurs in any of the search fields.

    Matching is a case-insensitive substring test. An empty search text
    matches every record.

    Args:
        record (dict): Record to check.
        search_text (str): Text typed into the search box.
        search_fields (tuple): Names of the text fields to search.

    Returns:
        bool: True if the record matches the free-text predicate.
    """
    if not search_text:
        return True
    needle = search_text.lower()
    for field in search_fields:
        value = record.get(field)
        if value is not None and needle in str(value).lower():
            return True
    return False


def matches_categories(record, category_filters):
    """Return True if the record equals every non-"all" category filter."""
    for field, selected in (category_filters or {}).items():
        if selected == ALL:
            continue
        if field not in record or record[field] != selected:
            return False
    return True


def record_matches_filters(record, filter_config, search_fields=()):
    """Check if a record matches the search text AND all category filters.

    Args:
        record (dict): Record to check.
        filter_config (dict): Filter configuration with ``search_text`` and
            ``category_filters`` keys. Missing keys mean "no restriction".
        search_fields (tuple, optional): Text fields searched for ``search_text``.

    Returns:
        bool: True when the record belongs in the current view.
    """
    filter_config = filter_config or {}
    return (
        matches_search(record, filter_config.get('search_text', ''), search_fields)
        and matches_categories(record, filter_config.get('category_filters'))
    )


def filter_records(records, filter_config, search_fields=()):
    """Return the records that match the filter configuration.

    The relative order of the input is preserved and the input sequence is
    not modified.
    """
    return [r for r in records if record_matches_filters(r, filter_config, search_fields)]


def build_filter_config(search_text="", **category_filters):
    """Build a filter configuration from a search text and keyword filters."""
    return {
        'search_text': search_text or "",
        'category_filters': dict(category_filters),
    }


def has_active_filters(filter_config):
    """Return True if the configuration restricts the list in any way."""
    if not filter_config:
        return False
    if filter_config.get('search_text'):
        return True
    return any(v != ALL for v in (filter_config.get('category_filters') or {}).values())

# =============================================================================
# SESSION STATE MANAGEMENT
# =============================================================================
# PURPOSE: Filter widget values live in st.session_state under per-view keys,
# e.g. "members_search_text" or "members_filter_region".

def _search_key(view):
    return f"{view}_search_text"


def _category_key(view, field):
    return f"{view}_filter_{field}"


def _build_session_defaults():
    defaults = {}
    for view, view_config in VIEW_FILTERS.items():
        defaults[_search_key(view)] = ""
        for field in view_config['category_fields']:
            defaults[_category_key(view, field)] = ALL
    return defaults


FILTER_SESSION_DEFAULTS = _build_session_defaults()


def get_filter_session_keys():
    """Return all filter-related session state keys.

    Note:
        Used on logout so one admin's filters do not leak into the next session.
    """
    return list(FILTER_SESSION_DEFAULTS.keys())


def initialize_session_state():
    """Set filter defaults in session state without overwriting user choices."""
    for key, value in FILTER_SESSION_DEFAULTS.items():
        if key not in st.session_state:
            st.session_state[key] = value


def clear_view_filters(view):
    """Reset the search text and dropdowns of one view to their defaults."""
    for key, value in FILTER_SESSION_DEFAULTS.items():
        if key == _search_key(view) or key.startswith(f"{view}_filter_"):
            st.session_state[key] = value


def get_filter_values_from_session(view):
    """Read the current filter configuration of a view from session state."""
    view_config = VIEW_FILTERS[view]
    return build_filter_config(
        st.session_state.get(_search_key(view), ""),
        **{
            field: st.session_state.get(_category_key(view, field), ALL)
            for field in view_config['category_fields']
        },
    )
