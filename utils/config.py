"""
================================================================================
APPLICATION CONFIGURATION
================================================================================

Purpose: Read runtime settings for the Courtside admin dashboard from
environment variables. A ``.env`` file next to the project root is loaded first
(if present), so local development works without exporting variables by hand.

Settings:
- COURTSIDE_PAGE_SIZE: rows per page in list views (default 10)
- COURTSIDE_AUTH_REQUIRED: require Google/OIDC login via st.login (default false)
- COURTSIDE_LOG_LEVEL: logging level name (default INFO)
- COURTSIDE_APP_TITLE: title shown in the browser tab and sidebar
================================================================================
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).resolve().parents[1]
ENV_PATH = ROOT_DIR / ".env"

DEFAULT_PAGE_SIZE = 10
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_APP_TITLE = "Courtside Admin"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(raw, default):
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning(f"Invalid boolean setting {raw!r}, using {default}")
    return default


def _parse_page_size(raw):
    if raw is None:
        return DEFAULT_PAGE_SIZE
    try:
        page_size = int(raw)
    except (ValueError, TypeError):
        logger.warning(f"Invalid page size {raw!r}, using {DEFAULT_PAGE_SIZE}")
        return DEFAULT_PAGE_SIZE
    if page_size < 1:
        logger.warning(f"Page size must be at least 1, got {page_size}; using {DEFAULT_PAGE_SIZE}")
        return DEFAULT_PAGE_SIZE
    return page_size


def _parse_log_level(raw):
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"Unknown log level {raw!r}, using {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return level


def load_settings(environ=None):
    """Return the dashboard settings as a dictionary.

    Args:
        environ (dict, optional): Mapping to read from. Defaults to ``os.environ``
            after loading ``.env``.

    Returns:
        dict: Keys ``page_size``, ``auth_required``, ``log_level``, ``app_title``.
    """
    if environ is None:
        load_dotenv(dotenv_path=ENV_PATH)
        environ = os.environ

    return {
        'page_size': _parse_page_size(environ.get("COURTSIDE_PAGE_SIZE")),
        'auth_required': _parse_bool(environ.get("COURTSIDE_AUTH_REQUIRED"), False),
        'log_level': _parse_log_level(environ.get("COURTSIDE_LOG_LEVEL")),
        'app_title': environ.get("COURTSIDE_APP_TITLE") or DEFAULT_APP_TITLE,
    }


def configure_logging(settings):
    """Configure root logging once for the Streamlit process."""
    logging.basicConfig(
        level=settings['log_level'],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
