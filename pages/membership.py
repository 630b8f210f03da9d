"""pages.membership

Membership Tiers page: revenue summary, one card per tier with its
features, subscriber count and active toggle, an edit dialog and the
revenue distribution by tier.
"""

import logging

import streamlit as st

from data.list_controls import flash, render_flash, show_field_errors
from data.record_store import NotFoundError
from data.state_manager import get_record_store
from data.validation import validate_tier
from utils.aggregates import ratio, summarize
from utils.analytics import build_revenue_share_chart, render_chart
from utils.formatting import format_count, format_currency

logger = logging.getLogger(__name__)

VIEW = 'tiers'

store = get_record_store(VIEW)


def _set_tier_active(tier_id):
    """Toggle callback: copy the widget value into the store."""
    active = st.session_state[f"tier_active_{tier_id}"]
    try:
        store.update(tier_id, {'active': active})
    except NotFoundError as e:
        logger.warning(str(e))


@st.dialog("Edit Membership Tier")
def edit_tier_dialog(tier):
    with st.form("edit_tier_form"):
        name = st.text_input("Tier Name", value=tier['name'])
        price = st.number_input("Monthly Price ($)", value=float(tier['price']), step=0.01, format="%.2f")
        features_text = st.text_area(
            "Features",
            value="\n".join(tier['features']),
            help="One feature per line",
            height=180,
        )
        active = st.toggle("Active", value=tier['active'])
        submitted = st.form_submit_button("Save Changes", type="primary", use_container_width=True)

    if not submitted:
        return

    values = {
        'name': name.strip(),
        'price': round(price, 2),
        'features': [line.strip() for line in features_text.splitlines() if line.strip()],
        'active': active,
    }
    errors = validate_tier(values)
    if errors:
        logger.warning(f"Rejected edit of {tier['id']}: {errors}")
        show_field_errors(errors)
        return

    try:
        store.update(tier['id'], values)
    except NotFoundError as e:
        logger.warning(str(e))
        st.error("❌ This tier no longer exists.")
        return

    # Keep the card toggle in sync with the edited value
    st.session_state.pop(f"tier_active_{tier['id']}", None)
    flash(f'Membership tier "{values["name"]}" updated successfully!')
    st.rerun()


render_flash()

st.title("💳 Membership Tiers")
st.write("Manage pricing and features for each membership level")

tiers = store.records
totals = summarize(tiers, {
    'subscribers': ('sum', 'subscriber_count'),
    'revenue': ('sum', 'monthly_revenue'),
})

col_subscribers, col_revenue, col_arpu = st.columns(3)
col_subscribers.metric("Total Subscribers", format_count(totals['subscribers']))
col_revenue.metric("Monthly Revenue", format_currency(totals['revenue']))
col_arpu.metric("Average Revenue Per User", format_currency(ratio(totals['revenue'], totals['subscribers'])))

st.divider()

# Tier cards; the middle tier is highlighted as the most popular
for index, (column, tier) in enumerate(zip(st.columns(max(1, len(tiers))), tiers)):
    with column:
        with st.container(border=True):
            if index == 1:
                st.caption("⭐ Most Popular")
            st.subheader(tier['name'])
            st.markdown(f"## {format_currency(tier['price'])} <small>/month</small>", unsafe_allow_html=True)

            for feature in tier['features']:
                st.markdown(f"✔️ {feature}")

            st.divider()
            st.markdown(f"**Subscribers:** {format_count(tier['subscriber_count'])}")
            st.markdown(f"**Monthly Revenue:** {format_currency(tier['monthly_revenue'])}")
            st.toggle(
                "Active",
                value=tier['active'],
                key=f"tier_active_{tier['id']}",
                on_change=_set_tier_active,
                args=(tier['id'],),
            )

            if st.button(
                "Edit Tier Details",
                key=f"edit_{tier['id']}",
                type="primary" if index == 1 else "secondary",
                use_container_width=True,
            ):
                edit_tier_dialog(tier)

st.divider()
render_chart(build_revenue_share_chart(tiers))
