"""Shared controls for admin list pages.

Every list page (members, team, matches, recaps) uses the same filter bar
and the same previous/next pagination row. Widget values are stored in
``st.session_state`` under the keys defined in ``utils.filters`` so a page
can rebuild its filter configuration on every rerun.
"""

import streamlit as st

from data.state_manager import get_page, reset_page, set_page
from utils.filters import (
    ALL, VIEW_FILTERS, clear_view_filters, get_filter_values_from_session, has_active_filters,
    initialize_session_state,
)
from utils.formatting import format_range_label


def render_filter_bar(view, search_placeholder="Search...", category_options=None):
    """Render the search box and category dropdowns of a list view.

    Changing any control jumps back to page 1.

    Args:
        view (str): View name, a key of ``VIEW_FILTERS``.
        search_placeholder (str, optional): Placeholder of the search box.
        category_options (dict, optional): Field name mapped to
            ``(all_label, choices)``, e.g. ``{'region': ("All Regions", REGIONS)}``.

    Returns:
        dict: The view's current filter configuration.
    """
    initialize_session_state()
    view_config = VIEW_FILTERS[view]
    category_options = category_options or {}
    fields = [f for f in view_config['category_fields'] if f in category_options]

    has_search = bool(view_config['search_fields'])
    widths = ([2] if has_search else []) + [1] * len(fields)
    if not widths:
        return get_filter_values_from_session(view)

    columns = st.columns(widths)
    if has_search:
        with columns[0]:
            st.text_input(
                "🔎 Search",
                key=f"{view}_search_text",
                placeholder=search_placeholder,
                label_visibility="collapsed",
                on_change=reset_page,
                args=(view,),
            )
        columns = columns[1:]

    for column, field in zip(columns, fields):
        all_label, choices = category_options[field]
        with column:
            st.selectbox(
                all_label,
                options=[ALL, *choices],
                key=f"{view}_filter_{field}",
                format_func=lambda value, all_label=all_label: all_label if value == ALL else value,
                label_visibility="collapsed",
                on_change=reset_page,
                args=(view,),
            )

    filter_config = get_filter_values_from_session(view)
    if has_active_filters(filter_config):
        st.button("✖️ Clear filters", key=f"{view}_clear_filters", on_click=_clear_filters, args=(view,))
    return filter_config


def _clear_filters(view):
    clear_view_filters(view)
    reset_page(view)


def render_pagination(view, projection, noun):
    """Render "Showing X to Y of N" with previous/next buttons.

    The stored page index is replaced by the projection's clamped page, so a
    page that became empty after a delete falls back to the last page.
    """
    current = projection['effective_page']
    if get_page(view) != current:
        set_page(view, current)

    col_label, col_prev, col_next = st.columns([4, 1, 1])
    with col_label:
        st.caption(format_range_label(projection, noun))
    with col_prev:
        st.button(
            "Previous",
            key=f"{view}_prev_page",
            disabled=current <= 1,
            use_container_width=True,
            on_click=set_page,
            args=(view, current - 1),
        )
    with col_next:
        st.button(
            "Next",
            key=f"{view}_next_page",
            disabled=current >= projection['total_pages'],
            use_container_width=True,
            on_click=set_page,
            args=(view, current + 1),
        )


def selected_record(event, page_records):
    """Return the record of the row selected in a ``st.dataframe``, or None."""
    rows = event.selection.rows if event is not None else []
    if not rows or rows[0] >= len(page_records):
        return None
    return page_records[rows[0]]


def flash(message):
    """Queue a success toast shown after the next rerun."""
    st.session_state['state_flash'] = message


def render_flash():
    """Show and clear the queued toast, if any."""
    message = st.session_state.pop('state_flash', None)
    if message:
        st.toast(message, icon="✅")


def show_field_errors(errors):
    """Show validation errors returned by ``data.validation``."""
    for field, message in errors.items():
        st.error(f"**{field.replace('_', ' ').title()}**: {message}")
