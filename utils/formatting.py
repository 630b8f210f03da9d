"""
================================================================================
DISPLAY FORMATTING UTILITIES
================================================================================

Purpose: Turn records into the strings and tables shown by the admin pages:
status and role badges, currency and view counts, "Showing X to Y of N"
labels, match times, and pandas DataFrames for st.dataframe().
================================================================================
"""

from datetime import datetime
import pandas as pd
import streamlit as st


STATUS_BADGES = {
    'Active': '🟢 Active',
    'Inactive': '⚪ Inactive',
    'Live': '🔴 Live',
    'Upcoming': '🟣 Upcoming',
    'Completed': '⚫ Completed',
}

TIER_BADGES = {
    'Rally Pass': '🔵 Rally Pass',
    'Match Point': '🟣 Match Point',
    'Tour Insider': '🟠 Tour Insider',
}

ROLE_BADGES = {
    'Super Admin': '🔴 Super Admin',
    'Admin': '🟣 Admin',
    'Content Manager': '🟠 Content Manager',
    'Moderator': '🟢 Moderator',
}


def format_badge(value, badges):
    """Prefix a category value with its emoji indicator.

    Example:
        >>> format_badge('Live', STATUS_BADGES)
        '🔴 Live'
        >>> format_badge(None, STATUS_BADGES)
        'N/A'
    """
    if not value:
        return "N/A"
    return badges.get(value, f"⚪ {value}")


def format_currency(amount):
    """Format an amount in dollars with two decimals and thousands separators.

    Example:
        >>> format_currency(9514.75)
        '$9,514.75'
    """
    return f"${amount:,.2f}"


def format_count(value):
    """Format an integer count with thousands separators (rounded)."""
    return f"{round(value):,}"


def format_percentage(value, decimals=1):
    return f"{value:.{decimals}f}%"


def format_range_label(projection, noun):
    """Build the pagination caption of a list page.

    Args:
        projection (dict): Result of ``utils.pagination.project``.
        noun (str): Plural name of the listed records, e.g. "members".

    Returns:
        str: e.g. "Showing 11 to 20 of 52 members" or "No members found".
    """
    if not projection['total_filtered']:
        return f"No {noun} found"
    return (
        f"Showing {projection['start_index']} to {projection['end_index']} "
        f"of {projection['total_filtered']} {noun}"
    )


def format_scheduled_time(value):
    """Format an ISO datetime string as e.g. "Dec 01, 2024 14:00"."""
    if not value:
        return "N/A"
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace('Z', '+00:00'))
    return value.strftime('%b %d, %Y %H:%M')


def initials(name):
    """Return up to two uppercase initials, "U" for an empty name."""
    words = name.split()[:2] if name else []
    return ''.join(word[0].upper() for word in words if word) or "U"


def members_table_df(members):
    """Create the DataFrame shown in the Members table."""
    return pd.DataFrame(
        [
            {
                'Avatar': m.get('avatar'),
                'Member': m.get('name'),
                'Email': m.get('email'),
                'Tier': format_badge(m.get('membership_tier'), TIER_BADGES),
                'Join Date': m.get('join_date'),
                'Region': m.get('region'),
                'Status': format_badge(m.get('status'), STATUS_BADGES),
            }
            for m in members
        ],
        columns=['Avatar', 'Member', 'Email', 'Tier', 'Join Date', 'Region', 'Status'],
    )


def team_table_df(team_members):
    """Create the DataFrame shown in the Team & Roles table."""
    return pd.DataFrame(
        [
            {
                'Avatar': m.get('avatar'),
                'Team Member': m.get('name'),
                'Email': m.get('email'),
                'Role': format_badge(m.get('role'), ROLE_BADGES),
                'Last Active': m.get('last_active'),
            }
            for m in team_members
        ],
        columns=['Avatar', 'Team Member', 'Email', 'Role', 'Last Active'],
    )


def matches_table_df(matches):
    """Create the DataFrame shown in the Live Matches table."""
    return pd.DataFrame(
        [
            {
                'Match Name': m.get('title'),
                'Players': f"{m.get('player1')} vs {m.get('player2')}",
                'Status': format_badge(m.get('status'), STATUS_BADGES),
                'Scheduled Time': format_scheduled_time(m.get('scheduled_time')),
                'Court': m.get('court'),
            }
            for m in matches
        ],
        columns=['Match Name', 'Players', 'Status', 'Scheduled Time', 'Court'],
    )


def top_players_df(players):
    """Create the rankings table of the Insights page."""
    return pd.DataFrame(
        [
            {
                'Rank': p['rank'],
                'Player': p['name'],
                'Rating': p['rating'],
                'Record': f"{p['wins']}W - {p['losses']}L",
                'Win Rate': format_percentage(p['win_rate']),
                'Rank Change': p['change'],
            }
            for p in players
        ],
        columns=['Rank', 'Player', 'Rating', 'Record', 'Win Rate', 'Rank Change'],
    )


def render_avatar(name, avatar_url=None, width=40):
    """Render an avatar image, or the initials when no URL is available."""
    if avatar_url and str(avatar_url).startswith('http'):
        st.image(avatar_url, width=width)
    else:
        st.markdown(f"**{initials(name)}**")
