"""pages.insights

Player Insights page: headline numbers for the top players, the rankings
table and the performance, win trend and rating charts.
"""

import streamlit as st

from data.mock_data import PLAYER_INSIGHTS, TOP_PLAYERS
from utils.aggregates import average_field, sum_field
from utils.analytics import (
    build_performance_radar, build_rating_progression_chart, build_win_trends_chart, render_chart,
)
from utils.formatting import format_count, format_percentage, top_players_df

st.title("📈 Player Insights")
st.write("Performance analytics for the top ranked players")

total_matches = sum_field(TOP_PLAYERS, 'wins') + sum_field(TOP_PLAYERS, 'losses')

col_players, col_matches, col_rating, col_win_rate = st.columns(4)
col_players.metric("Top Players", len(TOP_PLAYERS))
col_matches.metric("Matches Played", format_count(total_matches))
col_rating.metric("Average Rating", format_count(average_field(TOP_PLAYERS, 'rating')))
col_win_rate.metric("Average Win Rate", format_percentage(average_field(TOP_PLAYERS, 'win_rate')))

st.divider()

st.subheader("🏆 Top Players")
st.dataframe(top_players_df(TOP_PLAYERS), hide_index=True, use_container_width=True)

col_left, col_right = st.columns(2)
with col_left:
    render_chart(build_performance_radar(PLAYER_INSIGHTS['performance_comparison']))
with col_right:
    render_chart(build_win_trends_chart(PLAYER_INSIGHTS['win_trends']))

months = [point['month'] for point in PLAYER_INSIGHTS['win_trends']]
render_chart(build_rating_progression_chart(months, PLAYER_INSIGHTS['rating_progression']))
