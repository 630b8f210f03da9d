"""
Sidebar components shared by every page of the Courtside admin dashboard:
the club header above the navigation and, with login enabled, the
signed-in staff member with a logout button.
"""
from html import escape

import streamlit as st

from utils.formatting import initials

BRAND_COLOR = "#7C3AED"


def _create_user_info_card_html(user_name: str, user_email: str) -> str:
    """Build the signed-in card: initials badge next to name and email."""
    return f"""
    <div style="display: flex; align-items: center; gap: 12px;
                border: 1px solid rgba(124, 58, 237, 0.25); border-radius: 10px;
                padding: 12px 14px; margin-bottom: 12px;">
        <div style="width: 40px; height: 40px; border-radius: 50%; background: {BRAND_COLOR};
                    color: #FFFFFF; font-weight: 700; display: flex;
                    align-items: center; justify-content: center;">
            {escape(initials(user_name))}
        </div>
        <div style="min-width: 0;">
            <div style="font-weight: 600; overflow: hidden; text-overflow: ellipsis;">{escape(user_name)}</div>
            <div style="font-size: 12px; opacity: 0.7; overflow: hidden; text-overflow: ellipsis;">
                {escape(user_email)}
            </div>
        </div>
    </div>
    """


def render_sidebar_header(app_title: str) -> None:
    with st.sidebar:
        st.markdown(f"### 🏓 {app_title}")
        st.caption("Pickleball fan club administration")


def render_sidebar_user_info() -> None:
    """Show the signed-in staff member; nothing when login is off or pending."""
    from utils.auth import get_user_display, handle_logout, is_logged_in

    if not is_logged_in():
        return

    user_name, user_email = get_user_display()
    st.sidebar.markdown(
        _create_user_info_card_html(user_name or "Staff member", user_email or ""),
        unsafe_allow_html=True,
    )
    if st.sidebar.button("🚪 Sign out", key="sidebar_logout", use_container_width=True):
        handle_logout()
