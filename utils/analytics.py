"""
================================================================================
ANALYTICS AND VISUALIZATION UTILITIES
================================================================================

Purpose: Plotly chart builders for the Overview, Membership and Insights
pages. Builders are plain functions returning a ``go.Figure`` so they can be
tested without a running Streamlit app; ``render_chart`` draws a figure with
the shared layout.
================================================================================
"""

import streamlit as st
import plotly.graph_objects as go

from utils.aggregates import share_by

PRIMARY_COLOR = '#7C3AED'
ACCENT_COLOR = '#F77F00'
SERIES_COLORS = ['#7C3AED', '#2E86AB', '#F77F00', '#06A77D', '#D62828']

# =============================================================================
# SHARED LAYOUT
# =============================================================================

def _apply_layout(fig, title, x_title=None, y_title=None, height=300):
    fig.update_layout(
        title=dict(text=title, x=0.5, xanchor='center', font=dict(size=18, family='Arial', color='#000000')),
        xaxis_title=x_title,
        yaxis_title=y_title,
        height=height,
        margin=dict(l=20, r=20, t=50, b=20),
        paper_bgcolor='#FFFFFF',
        plot_bgcolor='rgba(0,0,0,0)',
        font=dict(family='Inter, system-ui, sans-serif', size=12),
        xaxis=dict(gridcolor='rgba(108, 117, 125, 0.1)', showgrid=True),
        yaxis=dict(gridcolor='rgba(108, 117, 125, 0.1)', showgrid=True),
    )
    return fig


def render_chart(fig):
    """Draw a figure at full container width."""
    st.plotly_chart(fig, width="stretch")

# =============================================================================
# OVERVIEW CHARTS
# =============================================================================

def build_user_growth_chart(series):
    """Line chart of new users per month."""
    fig = go.Figure(data=[
        go.Scatter(
            x=[p['month'] for p in series],
            y=[p['users'] for p in series],
            mode='lines+markers',
            line=dict(color=PRIMARY_COLOR, width=3),
            name='Users',
        )
    ])
    return _apply_layout(fig, "User Growth", "Month", "Users")


def build_revenue_trend_chart(series):
    """Bar chart of monthly revenue."""
    fig = go.Figure(data=[
        go.Bar(
            x=[p['month'] for p in series],
            y=[p['revenue'] for p in series],
            marker_color=ACCENT_COLOR,
            hovertemplate='%{x}: $%{y:,.0f}<extra></extra>',
        )
    ])
    return _apply_layout(fig, "Revenue Trend", "Month", "Revenue ($)")


def build_tier_distribution_chart(tiers):
    """Donut chart of subscribers per membership tier."""
    fig = go.Figure(data=[
        go.Pie(
            labels=[t['name'] for t in tiers],
            values=[t['subscriber_count'] for t in tiers],
            hole=0.5,
            marker=dict(colors=SERIES_COLORS[:len(tiers)]),
        )
    ])
    return _apply_layout(fig, "Tier Distribution")


def build_region_chart(region_counts):
    """Bar chart of members per region.

    Args:
        region_counts (dict): Region name mapped to member count.
    """
    fig = go.Figure(data=[
        go.Bar(
            x=list(region_counts.keys()),
            y=list(region_counts.values()),
            marker_color='#2E86AB',
        )
    ])
    return _apply_layout(fig, "Members by Region", "Region", "Members")

# =============================================================================
# MEMBERSHIP CHARTS
# =============================================================================

def build_revenue_share_chart(tiers):
    """Horizontal bar chart of each tier's share of monthly revenue."""
    shares = share_by(tiers, 'name', 'monthly_revenue')
    fig = go.Figure(data=[
        go.Bar(
            x=[s['percentage'] for s in shares],
            y=[s['label'] for s in shares],
            orientation='h',
            marker_color=PRIMARY_COLOR,
            text=[f"{s['percentage']:.1f}%" for s in shares],
            textposition='auto',
        )
    ])
    return _apply_layout(fig, "Revenue Distribution by Tier", "Share of Revenue (%)", None)

# =============================================================================
# PLAYER INSIGHTS CHARTS
# =============================================================================

def build_performance_radar(stats):
    """Radar chart of the performance comparison stats."""
    categories = [s['stat'] for s in stats]
    values = [s['value'] for s in stats]

    # Close the radar shape by repeating the first point
    fig = go.Figure(data=[
        go.Scatterpolar(
            r=values + values[:1],
            theta=categories + categories[:1],
            fill='toself',
            name='Top 5 Average',
            line_color=PRIMARY_COLOR,
            fillcolor='rgba(124, 58, 237, 0.3)',
        )
    ])
    fig.update_layout(polar=dict(radialaxis=dict(visible=True, range=[0, 100])), showlegend=False)
    return _apply_layout(fig, "Top 5 Performance Comparison", height=350)


def build_win_trends_chart(series):
    """Bar chart of total match wins per month."""
    fig = go.Figure(data=[
        go.Bar(
            x=[p['month'] for p in series],
            y=[p['wins'] for p in series],
            marker_color=PRIMARY_COLOR,
            name='Total Wins',
        )
    ])
    return _apply_layout(fig, "Match Win Trends (Last 6 Months)", "Month", "Wins", height=350)


def build_rating_progression_chart(months, ratings):
    """Line chart with one rating line per player.

    Args:
        months (list): X axis labels.
        ratings (dict): Player name mapped to a list of ratings aligned with ``months``.
    """
    fig = go.Figure()
    for index, (player, values) in enumerate(ratings.items()):
        fig.add_trace(go.Scatter(
            x=months,
            y=values,
            mode='lines+markers',
            name=player,
            line=dict(color=SERIES_COLORS[index % len(SERIES_COLORS)], width=2),
        ))
    return _apply_layout(fig, "Rating Progression - Top Players", "Month", "Rating", height=350)
