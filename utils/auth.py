"""
================================================================================
AUTHENTICATION MODULE
================================================================================

Purpose: Optional login gate for the admin dashboard using Streamlit's
built-in OIDC support (st.login / st.user). The identity provider and the
token check run server-side in Streamlit; this module only reads the result.
The dashboard keeps no "authenticated" flag of its own.

Enable with COURTSIDE_AUTH_REQUIRED=true and configure the provider in
.streamlit/secrets.toml ([auth] section).
================================================================================
"""

import logging
from datetime import datetime, timezone

import streamlit as st

logger = logging.getLogger(__name__)

# =============================================================================
# AUTHENTICATION STATUS
# =============================================================================

def is_logged_in():
    """Check if a user is currently logged in.

    Returns:
        bool: True if Streamlit reports a logged-in user with an email.
    """
    try:
        user_info = st.user
        return bool(user_info.get('email'))
    except (AttributeError, KeyError):
        return False


def get_user_email():
    """Return the logged-in user's email address, or None."""
    return st.user.email if is_logged_in() else None


def get_user_display():
    """Return ``(name, email)`` of the logged-in user for the sidebar card."""
    if not is_logged_in():
        return None, None
    return st.user.get('name') or st.user.email, st.user.email

# =============================================================================
# SESSION MANAGEMENT
# =============================================================================

def clear_user_session():
    """Remove filters, pages and record stores of the current user from session state.

    Note:
        Without this the next user of the same browser session would see the
        previous user's filters and unsaved edits.
    """
    from utils.filters import get_filter_session_keys
    from data.state_manager import get_store_session_keys

    for key in get_filter_session_keys() + get_store_session_keys():
        if key in st.session_state:
            del st.session_state[key]

    for key in [k for k in st.session_state.keys() if str(k).startswith("state_")]:
        del st.session_state[key]


def handle_logout():
    """Clear session data, log out of the identity provider and rerun."""
    logger.info(f"Logging out {get_user_email()}")
    clear_user_session()
    st.logout()
    st.rerun()


def check_token_expiry():
    """Log the user out if the identity provider's token has expired."""
    if not is_logged_in():
        return

    expires_at = getattr(st.user, 'expires_at', None)
    if expires_at and datetime.now(timezone.utc) > expires_at:
        st.warning("Your session has expired. Please log in again.")
        handle_logout()


def require_login(auth_required):
    """Stop the script with a sign-in prompt when login is required and missing.

    Args:
        auth_required (bool): Value of the COURTSIDE_AUTH_REQUIRED setting.
    """
    if not auth_required:
        return

    if not is_logged_in():
        st.title("🏓 Courtside Admin")
        st.write("Sign in to manage members, content and memberships.")
        st.button("🔵 Sign in", type="primary", on_click=st.login)
        st.stop()

    check_token_expiry()
