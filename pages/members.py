"""pages.members

Members admin page: search by name or email, filter by tier, status and
region, paginate, view/edit/delete a member and export the filtered list
as CSV.
"""

import logging
from datetime import date

import streamlit as st

from data.list_controls import (
    flash, render_filter_bar, render_flash, render_pagination, selected_record, show_field_errors,
)
from data.mock_data import MEMBER_STATUSES, MEMBERSHIP_TIERS, REGIONS
from data.record_store import NotFoundError
from data.state_manager import get_page, get_page_size, get_record_store
from data.validation import validate_member
from utils.aggregates import group_count_by
from utils.export import export_file_name, records_to_csv
from utils.filters import VIEW_FILTERS, filter_records
from utils.formatting import STATUS_BADGES, TIER_BADGES, format_badge, members_table_df, render_avatar
from utils.pagination import paginate

logger = logging.getLogger(__name__)

VIEW = 'members'
SEARCH_FIELDS = VIEW_FILTERS[VIEW]['search_fields']

store = get_record_store(VIEW)

# =============================================================================
# DIALOGS
# =============================================================================

@st.dialog("Member Details")
def view_member_dialog(member):
    col_avatar, col_info = st.columns([1, 4])
    with col_avatar:
        render_avatar(member['name'], member.get('avatar'), width=64)
    with col_info:
        st.markdown(f"### {member['name']}")
        st.caption(member['email'])

    col1, col2 = st.columns(2)
    with col1:
        st.markdown(f"**Membership Tier**  \n{format_badge(member['membership_tier'], TIER_BADGES)}")
        st.markdown(f"**Region**  \n{member['region']}")
        st.markdown(f"**Status**  \n{format_badge(member['status'], STATUS_BADGES)}")
    with col2:
        st.markdown(f"**Join Date**  \n{member['join_date']}")
        st.markdown(f"**Last Active**  \n{member['last_active']}")


@st.dialog("Edit Member")
def edit_member_dialog(member):
    with st.form("edit_member_form"):
        name = st.text_input("Full Name", value=member['name'])
        email = st.text_input("Email", value=member['email'])
        membership_tier = st.selectbox(
            "Membership Tier", MEMBERSHIP_TIERS, index=MEMBERSHIP_TIERS.index(member['membership_tier'])
        )
        region = st.selectbox("Region", REGIONS, index=REGIONS.index(member['region']))
        status = st.selectbox("Status", MEMBER_STATUSES, index=MEMBER_STATUSES.index(member['status']))
        submitted = st.form_submit_button("Save Changes", type="primary", use_container_width=True)

    if not submitted:
        return

    values = {
        'name': name.strip(),
        'email': email.strip(),
        'membership_tier': membership_tier,
        'region': region,
        'status': status,
    }
    errors = validate_member(values)
    if errors:
        logger.warning(f"Rejected edit of {member['id']}: {errors}")
        show_field_errors(errors)
        return

    try:
        store.update(member['id'], values)
    except NotFoundError as e:
        logger.warning(str(e))
        st.error("❌ This member no longer exists.")
        return

    flash("Member updated successfully!")
    st.rerun()


@st.dialog("Delete Member")
def delete_member_dialog(member):
    st.write(f"Are you sure you want to delete **{member['name']}**? This action cannot be undone.")
    col_cancel, col_delete = st.columns(2)
    with col_cancel:
        if st.button("Cancel", use_container_width=True):
            st.rerun()
    with col_delete:
        if st.button("Delete Member", type="primary", use_container_width=True):
            try:
                store.delete(member['id'])
            except NotFoundError as e:
                logger.warning(str(e))
                st.error("❌ This member no longer exists.")
                return
            flash(f"{member['name']} has been deleted")
            st.rerun()

# =============================================================================
# PAGE
# =============================================================================

render_flash()

col_title, col_export = st.columns([4, 1])
with col_title:
    st.title("👥 Members")
    st.write("Manage fan club members and their subscriptions")

filter_config = render_filter_bar(
    VIEW,
    search_placeholder="Search by name or email...",
    category_options={
        'membership_tier': ("All Tiers", MEMBERSHIP_TIERS),
        'status': ("All Status", MEMBER_STATUSES),
        'region': ("All Regions", REGIONS),
    },
)

filtered = filter_records(store.records, filter_config, SEARCH_FIELDS)
projection = paginate(filtered, get_page(VIEW), get_page_size())

with col_export:
    st.download_button(
        "⬇️ Export Data",
        data=records_to_csv(filtered),
        file_name=export_file_name(VIEW, date.today()),
        mime="text/csv",
        use_container_width=True,
        disabled=not filtered,
    )

status_counts = group_count_by(store.records, 'status')
col_total, col_active, col_inactive = st.columns(3)
col_total.metric("Total Members", len(store))
col_active.metric("Active", status_counts.get('Active', 0))
col_inactive.metric("Inactive", status_counts.get('Inactive', 0))

page_records = projection['page_records']
if not page_records:
    st.info("🔍 No members match your filters. Try adjusting your search criteria.")
else:
    event = st.dataframe(
        members_table_df(page_records),
        hide_index=True,
        use_container_width=True,
        on_select="rerun",
        selection_mode="single-row",
        key=f"{VIEW}_table_{projection['effective_page']}",
        column_config={'Avatar': st.column_config.ImageColumn("", width="small")},
    )

    member = selected_record(event, page_records)
    col_view, col_edit, col_delete, col_hint = st.columns([1, 1, 1, 3])
    with col_view:
        if st.button("👁️ View", disabled=member is None, use_container_width=True):
            view_member_dialog(member)
    with col_edit:
        if st.button("✏️ Edit", disabled=member is None, use_container_width=True):
            edit_member_dialog(member)
    with col_delete:
        if st.button("🗑️ Delete", disabled=member is None, use_container_width=True):
            delete_member_dialog(member)
    with col_hint:
        if member is None:
            st.caption("Select a row to view, edit or delete a member.")

render_pagination(VIEW, projection, "members")
