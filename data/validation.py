"""
Input validation for admin forms.

Each ``validate_*`` function takes the submitted form values and returns a
dictionary of field name to error message. An empty dictionary means the
values are valid. ``ensure_valid`` turns a non-empty result into a
``ValidationError`` for callers that prefer exceptions.
"""

import re
from typing import Any, Dict
from urllib.parse import urlparse

from data.mock_data import (
    MATCH_STATUSES,
    MEMBER_STATUSES,
    MEMBERSHIP_TIERS,
    REGIONS,
    TEAM_ROLES,
)

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ValidationError(ValueError):
    """Raised when form values fail validation; ``errors`` maps field to message."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{field}: {message}" for field, message in self.errors.items()))


def _min_length(value: Any, length: int) -> bool:
    return isinstance(value, str) and len(value.strip()) >= length


def _check_min_length(errors, data, field, length, message):
    if not _min_length(data.get(field), length):
        errors[field] = message


def _check_choice(errors, data, field, choices):
    if data.get(field) not in choices:
        errors[field] = f"Must be one of: {', '.join(choices)}"


def _check_email(errors, data, field="email"):
    value = data.get(field)
    if not isinstance(value, str) or not EMAIL_RE.match(value.strip()):
        errors[field] = "Invalid email address"


def is_valid_url(value: Any) -> bool:
    """Return True for absolute http(s) URLs."""
    if not isinstance(value, str):
        return False
    parsed = urlparse(value.strip())
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_member(data: Dict[str, Any]) -> Dict[str, str]:
    errors = {}
    _check_min_length(errors, data, 'name', 2, "Name must be at least 2 characters")
    _check_email(errors, data)
    _check_choice(errors, data, 'membership_tier', MEMBERSHIP_TIERS)
    _check_choice(errors, data, 'region', REGIONS)
    _check_choice(errors, data, 'status', MEMBER_STATUSES)
    return errors


def validate_team_member(data: Dict[str, Any]) -> Dict[str, str]:
    errors = {}
    _check_min_length(errors, data, 'name', 2, "Name must be at least 2 characters")
    _check_email(errors, data)
    _check_choice(errors, data, 'role', TEAM_ROLES)
    return errors


def validate_tier(data: Dict[str, Any]) -> Dict[str, str]:
    """Validate a membership tier.

    Price must be a non-negative number and at least one non-blank feature
    is required.
    """
    errors = {}
    _check_min_length(errors, data, 'name', 2, "Name must be at least 2 characters")

    price = data.get('price')
    if isinstance(price, bool) or not isinstance(price, (int, float)) or price < 0:
        errors['price'] = "Price must be positive"

    features = data.get('features')
    if not isinstance(features, list) or not any(isinstance(f, str) and f.strip() for f in features):
        errors['features'] = "At least one feature is required"

    if not isinstance(data.get('active'), bool):
        errors['active'] = "Active must be true or false"
    return errors


def validate_match(data: Dict[str, Any]) -> Dict[str, str]:
    errors = {}
    _check_min_length(errors, data, 'title', 2, "Title must be at least 2 characters")
    _check_min_length(errors, data, 'player1', 2, "Player 1 name is required")
    _check_min_length(errors, data, 'player2', 2, "Player 2 name is required")
    _check_min_length(errors, data, 'court', 1, "Court is required")
    _check_min_length(errors, data, 'scheduled_time', 1, "Scheduled time is required")
    _check_choice(errors, data, 'status', MATCH_STATUSES)
    return errors


def validate_recap(data: Dict[str, Any]) -> Dict[str, str]:
    errors = {}
    _check_min_length(errors, data, 'title', 2, "Title must be at least 2 characters")
    if not is_valid_url(data.get('thumbnail')):
        errors['thumbnail'] = "Must be a valid URL"
    _check_min_length(errors, data, 'duration', 1, "Duration is required")
    _check_min_length(errors, data, 'description', 10, "Description must be at least 10 characters")
    return errors


def ensure_valid(errors: Dict[str, str]) -> None:
    """Raise ``ValidationError`` if ``errors`` is not empty."""
    if errors:
        raise ValidationError(errors)
