"""pages.matches

Live Matches page: search and status filter, match table and
add/edit/delete dialogs.
"""

import logging
from datetime import datetime

import streamlit as st

from data.list_controls import (
    flash, render_filter_bar, render_flash, render_pagination, selected_record, show_field_errors,
)
from data.mock_data import MATCH_STATUSES
from data.record_store import NotFoundError
from data.state_manager import get_page, get_page_size, get_record_store
from data.validation import validate_match
from utils.aggregates import count_where
from utils.filters import VIEW_FILTERS
from utils.formatting import matches_table_df
from utils.pagination import project

logger = logging.getLogger(__name__)

VIEW = 'matches'

store = get_record_store(VIEW)


def _split_scheduled_time(value):
    if not value:
        now = datetime.now().replace(second=0, microsecond=0)
        return now.date(), now.time()
    scheduled = datetime.fromisoformat(value)
    return scheduled.date(), scheduled.time()


@st.dialog("Match")
def match_dialog(match=None):
    """Schedule a new match (``match`` is None) or edit an existing one."""
    match = match or {}
    scheduled_date, scheduled_clock = _split_scheduled_time(match.get('scheduled_time'))
    default_status = match.get('status', 'Upcoming')

    with st.form("match_form"):
        title = st.text_input("Match Name", value=match.get('title', ''), placeholder="Championship Finals")
        col1, col2 = st.columns(2)
        with col1:
            player1 = st.text_input("Player 1", value=match.get('player1', ''))
        with col2:
            player2 = st.text_input("Player 2", value=match.get('player2', ''))
        col3, col4 = st.columns(2)
        with col3:
            day = st.date_input("Date", value=scheduled_date)
        with col4:
            clock = st.time_input("Time", value=scheduled_clock)
        court = st.text_input("Court", value=match.get('court', ''), placeholder="Center Court")
        status = st.selectbox("Status", MATCH_STATUSES, index=MATCH_STATUSES.index(default_status))
        label = "Save Changes" if match else "Add Match"
        submitted = st.form_submit_button(label, type="primary", use_container_width=True)

    if not submitted:
        return

    values = {
        'title': title.strip(),
        'player1': player1.strip(),
        'player2': player2.strip(),
        'status': status,
        'scheduled_time': datetime.combine(day, clock).isoformat(timespec='seconds'),
        'court': court.strip(),
    }
    errors = validate_match(values)
    if errors:
        logger.warning(f"Rejected match form: {errors}")
        show_field_errors(errors)
        return

    if match:
        try:
            store.update(match['id'], values)
        except NotFoundError as e:
            logger.warning(str(e))
            st.error("❌ This match no longer exists.")
            return
        flash("Match updated successfully!")
    else:
        store.create(values)
        flash("Match added successfully!")
    st.rerun()


@st.dialog("Delete Match")
def delete_match_dialog(match):
    st.write(f"Are you sure you want to delete **{match['title']}**? This action cannot be undone.")
    col_cancel, col_delete = st.columns(2)
    with col_cancel:
        if st.button("Cancel", use_container_width=True):
            st.rerun()
    with col_delete:
        if st.button("Delete Match", type="primary", use_container_width=True):
            try:
                store.delete(match['id'])
            except NotFoundError as e:
                logger.warning(str(e))
                st.error("❌ This match no longer exists.")
                return
            flash("Match deleted successfully")
            st.rerun()


render_flash()

col_title, col_add = st.columns([4, 1])
with col_title:
    st.title("🎥 Live Matches")
    st.write("Manage live and upcoming match streams")
with col_add:
    if st.button("➕ Add Match", type="primary", use_container_width=True):
        match_dialog()

for column, status in zip(st.columns(len(MATCH_STATUSES)), MATCH_STATUSES):
    column.metric(status, count_where(store.records, lambda m, status=status: m.get('status') == status))

filter_config = render_filter_bar(
    VIEW,
    search_placeholder="Search matches, players or courts...",
    category_options={'status': ("All Status", MATCH_STATUSES)},
)
projection = project(
    store.records, filter_config, get_page(VIEW), get_page_size(),
    search_fields=VIEW_FILTERS[VIEW]['search_fields'],
)

page_records = projection['page_records']
if not page_records:
    st.info("🔍 No matches found.")
else:
    event = st.dataframe(
        matches_table_df(page_records),
        hide_index=True,
        use_container_width=True,
        on_select="rerun",
        selection_mode="single-row",
        key=f"{VIEW}_table_{projection['effective_page']}",
    )

    match = selected_record(event, page_records)
    col_edit, col_delete, col_hint = st.columns([1, 1, 4])
    with col_edit:
        if st.button("✏️ Edit", disabled=match is None, use_container_width=True):
            match_dialog(match)
    with col_delete:
        if st.button("🗑️ Delete", disabled=match is None, use_container_width=True):
            delete_match_dialog(match)
    with col_hint:
        if match is None:
            st.caption("Select a row to edit or delete a match.")

render_pagination(VIEW, projection, "matches")
