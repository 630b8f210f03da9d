"""pages.overview

Dashboard landing page: headline KPIs and the four overview charts.
"""

import streamlit as st

from data.mock_data import ANALYTICS_DATA
from data.state_manager import get_record_store
from utils.aggregates import count_where, group_count_by, sum_field
from utils.analytics import (
    build_region_chart, build_revenue_trend_chart, build_tier_distribution_chart,
    build_user_growth_chart, render_chart,
)
from utils.formatting import format_count, format_currency

members = get_record_store('members').records
tiers = get_record_store('tiers').records
matches = get_record_store('matches').records

st.title("📊 Dashboard Overview")
st.write("Welcome back! Here's what's happening with your fan club.")

status_counts = group_count_by(members, 'status')
live_matches = count_where(matches, lambda m: m.get('status') == 'Live')

col_members, col_active, col_revenue, col_live = st.columns(4)
col_members.metric("Total Members", format_count(len(members)))
col_active.metric("Active Members", format_count(status_counts.get('Active', 0)))
col_revenue.metric("Monthly Revenue", format_currency(sum_field(tiers, 'monthly_revenue')))
col_live.metric("Live Matches", live_matches)

st.divider()

col_left, col_right = st.columns(2)
with col_left:
    render_chart(build_user_growth_chart(ANALYTICS_DATA['user_growth']))
with col_right:
    render_chart(build_revenue_trend_chart(ANALYTICS_DATA['revenue_trend']))

col_left, col_right = st.columns(2)
with col_left:
    render_chart(build_tier_distribution_chart(tiers))
with col_right:
    region_counts = {row['region']: row['members'] for row in ANALYTICS_DATA['region_data']}
    render_chart(build_region_chart(region_counts))
