"""pages.team

Team & Roles page: internal admin users, filterable by role, with
add/edit/remove dialogs.
"""

import logging
from datetime import date

import streamlit as st

from data.list_controls import (
    flash, render_filter_bar, render_flash, render_pagination, selected_record, show_field_errors,
)
from data.mock_data import TEAM_ROLES, avatar_url
from data.record_store import NotFoundError
from data.state_manager import get_page, get_page_size, get_record_store
from data.validation import validate_team_member
from utils.aggregates import group_count_by
from utils.filters import VIEW_FILTERS
from utils.formatting import team_table_df
from utils.pagination import project

logger = logging.getLogger(__name__)

VIEW = 'team'

store = get_record_store(VIEW)


@st.dialog("Team Member")
def team_member_dialog(member=None):
    """Add a new team member (``member`` is None) or edit an existing one."""
    member = member or {}
    default_role = member.get('role', 'Moderator')

    with st.form("team_member_form"):
        name = st.text_input("Full Name", value=member.get('name', ''), placeholder="Enter full name")
        email = st.text_input("Email Address", value=member.get('email', ''), placeholder="email@pickleball.com")
        role = st.selectbox("Role", TEAM_ROLES, index=TEAM_ROLES.index(default_role))
        label = "Save Changes" if member else "Add Team Member"
        submitted = st.form_submit_button(label, type="primary", use_container_width=True)

    if not submitted:
        return

    values = {'name': name.strip(), 'email': email.strip(), 'role': role}
    errors = validate_team_member(values)
    if errors:
        logger.warning(f"Rejected team member form: {errors}")
        show_field_errors(errors)
        return

    if member:
        try:
            store.update(member['id'], values)
        except NotFoundError as e:
            logger.warning(str(e))
            st.error("❌ This team member no longer exists.")
            return
        flash("Team member updated successfully!")
    else:
        store.create({
            **values,
            'avatar': avatar_url(values['email']),
            'last_active': date.today().isoformat(),
        })
        flash("Team member added successfully!")
    st.rerun()


@st.dialog("Remove Team Member")
def remove_member_dialog(member):
    st.write(f"Are you sure you want to remove **{member['name']}** from the team?")
    col_cancel, col_remove = st.columns(2)
    with col_cancel:
        if st.button("Cancel", use_container_width=True):
            st.rerun()
    with col_remove:
        if st.button("Remove", type="primary", use_container_width=True):
            try:
                store.delete(member['id'])
            except NotFoundError as e:
                logger.warning(str(e))
                st.error("❌ This team member no longer exists.")
                return
            flash(f"{member['name']} has been removed from the team")
            st.rerun()


render_flash()

col_title, col_add = st.columns([4, 1])
with col_title:
    st.title("🛡️ Team & Roles")
    st.write("Manage internal admin users and their permissions")
with col_add:
    if st.button("➕ Add Team Member", type="primary", use_container_width=True):
        team_member_dialog()

filter_config = render_filter_bar(VIEW, category_options={'role': ("All Roles", TEAM_ROLES)})
projection = project(
    store.records, filter_config, get_page(VIEW), get_page_size(),
    search_fields=VIEW_FILTERS[VIEW]['search_fields'],
)

role_counts = group_count_by(store.records, 'role')
for column, role in zip(st.columns(len(TEAM_ROLES)), TEAM_ROLES):
    column.metric(role, role_counts.get(role, 0))

st.subheader(f"Team Members ({projection['total_filtered']})")

page_records = projection['page_records']
if not page_records:
    st.info("No team members with this role.")
else:
    event = st.dataframe(
        team_table_df(page_records),
        hide_index=True,
        use_container_width=True,
        on_select="rerun",
        selection_mode="single-row",
        key=f"{VIEW}_table_{projection['effective_page']}",
        column_config={'Avatar': st.column_config.ImageColumn("", width="small")},
    )

    member = selected_record(event, page_records)
    col_edit, col_remove, col_hint = st.columns([1, 1, 4])
    with col_edit:
        if st.button("✏️ Edit", disabled=member is None, use_container_width=True):
            team_member_dialog(member)
    with col_remove:
        if st.button("🗑️ Remove", disabled=member is None, use_container_width=True):
            remove_member_dialog(member)
    with col_hint:
        if member is None:
            st.caption("Select a row to edit or remove a team member.")

render_pagination(VIEW, projection, "team members")
