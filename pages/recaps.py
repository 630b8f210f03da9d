"""pages.recaps

Game Recaps page: searchable grid of highlight videos with view totals
and add/edit/delete dialogs.
"""

import logging
from datetime import date

import streamlit as st

from data.list_controls import flash, render_filter_bar, render_flash, render_pagination, show_field_errors
from data.record_store import NotFoundError
from data.state_manager import get_page, get_page_size, get_record_store
from data.validation import validate_recap
from utils.aggregates import average_field, sum_field
from utils.filters import VIEW_FILTERS
from utils.formatting import format_count
from utils.pagination import project

logger = logging.getLogger(__name__)

VIEW = 'recaps'
GRID_COLUMNS = 3

store = get_record_store(VIEW)


@st.dialog("Game Recap")
def recap_dialog(recap=None):
    """Publish a new recap (``recap`` is None) or edit an existing one."""
    recap = recap or {}

    with st.form("recap_form"):
        title = st.text_input("Title", value=recap.get('title', ''))
        thumbnail = st.text_input("Thumbnail URL", value=recap.get('thumbnail', ''), placeholder="https://...")
        duration = st.text_input("Duration", value=recap.get('duration', ''), placeholder="10:34")
        description = st.text_area("Description", value=recap.get('description', ''))
        label = "Save Changes" if recap else "Add Recap"
        submitted = st.form_submit_button(label, type="primary", use_container_width=True)

    if not submitted:
        return

    values = {
        'title': title.strip(),
        'thumbnail': thumbnail.strip(),
        'duration': duration.strip(),
        'description': description.strip(),
    }
    errors = validate_recap(values)
    if errors:
        logger.warning(f"Rejected recap form: {errors}")
        show_field_errors(errors)
        return

    if recap:
        try:
            store.update(recap['id'], values)
        except NotFoundError as e:
            logger.warning(str(e))
            st.error("❌ This recap no longer exists.")
            return
        flash("Recap updated successfully!")
    else:
        store.create({**values, 'views': 0, 'upload_date': date.today().isoformat()})
        flash("Recap added successfully!")
    st.rerun()


@st.dialog("Delete Recap")
def delete_recap_dialog(recap):
    st.write(f"Are you sure you want to delete **{recap['title']}**? This action cannot be undone.")
    col_cancel, col_delete = st.columns(2)
    with col_cancel:
        if st.button("Cancel", use_container_width=True):
            st.rerun()
    with col_delete:
        if st.button("Delete Recap", type="primary", use_container_width=True):
            try:
                store.delete(recap['id'])
            except NotFoundError as e:
                logger.warning(str(e))
                st.error("❌ This recap no longer exists.")
                return
            flash("Recap deleted successfully")
            st.rerun()


def render_recap_card(recap):
    with st.container(border=True):
        if recap.get('thumbnail'):
            st.image(recap['thumbnail'], use_container_width=True)
        st.markdown(f"**{recap['title']}**")
        st.caption(recap['description'])
        st.caption(f"⏱️ {recap['duration']} · 👁️ {format_count(recap['views'])} views · 📅 {recap['upload_date']}")

        col_edit, col_delete = st.columns(2)
        with col_edit:
            if st.button("✏️ Edit", key=f"edit_{recap['id']}", use_container_width=True):
                recap_dialog(recap)
        with col_delete:
            if st.button("🗑️ Delete", key=f"delete_{recap['id']}", use_container_width=True):
                delete_recap_dialog(recap)


render_flash()

col_title, col_add = st.columns([4, 1])
with col_title:
    st.title("🎞️ Game Recaps")
    st.write("Manage match highlights and recap videos")
with col_add:
    if st.button("➕ Add Recap", type="primary", use_container_width=True):
        recap_dialog()

col_total, col_views, col_average = st.columns(3)
col_total.metric("Total Recaps", len(store))
col_views.metric("Total Views", format_count(sum_field(store.records, 'views')))
col_average.metric("Average Views", format_count(average_field(store.records, 'views')))

filter_config = render_filter_bar(VIEW, search_placeholder="Search recaps...")
projection = project(
    store.records, filter_config, get_page(VIEW), get_page_size(),
    search_fields=VIEW_FILTERS[VIEW]['search_fields'],
)

page_records = projection['page_records']
if not page_records:
    st.info("🔍 No recaps found.")
else:
    for row_start in range(0, len(page_records), GRID_COLUMNS):
        row = page_records[row_start:row_start + GRID_COLUMNS]
        for column, recap in zip(st.columns(GRID_COLUMNS), row):
            with column:
                render_recap_card(recap)

render_pagination(VIEW, projection, "recaps")
