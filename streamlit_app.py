"""
================================================================================
COURTSIDE ADMIN STREAMLIT APPLICATION
================================================================================

Purpose: Main entry point of the admin dashboard for the Courtside pickleball
fan club. Staff manage members, team roles, membership tiers, live matches and
game recaps, and look at analytics charts.

How it works:
1. Settings are read from the environment (utils.config)
2. Optional login gate (COURTSIDE_AUTH_REQUIRED) via Streamlit's OIDC login
3. st.navigation renders the sidebar menu and runs the selected page script
4. Each list page keeps its records in a session-scoped RecordStore seeded
   from data.mock_data, so edits last for the browser session only

Run with:  streamlit run streamlit_app.py
================================================================================
"""

import logging

import streamlit as st

from utils.config import load_settings, configure_logging
from utils.auth import require_login
from data.shared_sidebar import render_sidebar_header, render_sidebar_user_info

settings = load_settings()
configure_logging(settings)
logger = logging.getLogger(__name__)

# IMPORTANT: This MUST be the first Streamlit command in the script
st.set_page_config(
    page_title=settings['app_title'],
    page_icon="🏓",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.session_state['settings'] = settings

require_login(settings['auth_required'])

# =============================================================================
# NAVIGATION
# =============================================================================
# Mirrors the admin menu: Overview, Members, Team, Membership, Live Matches,
# Game Recaps, Insights.

pages = {
    "Dashboard": [
        st.Page("pages/overview.py", title="Overview", icon="📊", default=True),
        st.Page("pages/members.py", title="Members", icon="👥"),
        st.Page("pages/team.py", title="Team", icon="🛡️"),
        st.Page("pages/membership.py", title="Membership", icon="💳"),
    ],
    "Content": [
        st.Page("pages/matches.py", title="Live Matches", icon="🎥"),
        st.Page("pages/recaps.py", title="Game Recaps", icon="🎞️"),
    ],
    "Analytics": [
        st.Page("pages/insights.py", title="Insights", icon="📈"),
    ],
}

render_sidebar_header(settings['app_title'])
render_sidebar_user_info()

current_page = st.navigation(pages)
logger.debug(f"Rendering page {current_page.title}")
current_page.run()
