"""Tests for admin form validation (data/validation.py)."""

import pytest

from data.validation import (
    ValidationError,
    ensure_valid,
    is_valid_url,
    validate_match,
    validate_member,
    validate_recap,
    validate_team_member,
    validate_tier,
)

VALID_MEMBER = {
    'name': 'Sarah Johnson',
    'email': 'sarah@example.com',
    'membership_tier': 'Match Point',
    'region': 'North',
    'status': 'Active',
}

VALID_TIER = {'name': 'Rally Pass', 'price': 9.99, 'features': ['Live streams'], 'active': True}

VALID_MATCH = {
    'title': 'Championship Finals',
    'player1': 'Ben Johns',
    'player2': 'Tyson McGuffin',
    'status': 'Live',
    'scheduled_time': '2024-12-01T14:00:00',
    'court': 'Center Court',
}

VALID_RECAP = {
    'title': 'Incredible Rally',
    'thumbnail': 'https://images.example.com/rally.jpg',
    'duration': '10:34',
    'description': 'Watch the most intense rally of the tournament',
}


class TestValidateMember:
    def test_valid(self):
        assert validate_member(VALID_MEMBER) == {}

    def test_short_name_and_bad_email(self):
        errors = validate_member({**VALID_MEMBER, 'name': ' S ', 'email': 'not-an-email'})
        assert errors == {
            'name': "Name must be at least 2 characters",
            'email': "Invalid email address",
        }

    def test_unknown_choices(self):
        errors = validate_member({**VALID_MEMBER, 'membership_tier': 'Gold', 'region': 'Mars'})
        assert set(errors) == {'membership_tier', 'region'}
        assert errors['membership_tier'].startswith("Must be one of: Rally Pass")


class TestValidateTeamMember:
    def test_valid(self):
        assert validate_team_member({'name': 'Jane Cooper', 'email': 'jane@pickleball.com', 'role': 'Admin'}) == {}

    def test_unknown_role(self):
        errors = validate_team_member({'name': 'Jane Cooper', 'email': 'jane@pickleball.com', 'role': 'Owner'})
        assert list(errors) == ['role']


class TestValidateTier:
    def test_valid(self):
        assert validate_tier(VALID_TIER) == {}
        assert validate_tier({**VALID_TIER, 'price': 0}) == {}

    @pytest.mark.parametrize("price", [-1, "9.99", None, True])
    def test_invalid_price(self, price):
        assert validate_tier({**VALID_TIER, 'price': price}) == {'price': "Price must be positive"}

    @pytest.mark.parametrize("features", [[], ["  "], None, "Live streams"])
    def test_features_required(self, features):
        errors = validate_tier({**VALID_TIER, 'features': features})
        assert errors == {'features': "At least one feature is required"}

    def test_active_must_be_bool(self):
        assert 'active' in validate_tier({**VALID_TIER, 'active': 'yes'})


class TestValidateMatch:
    def test_valid(self):
        assert validate_match(VALID_MATCH) == {}

    def test_missing_fields(self):
        errors = validate_match({'status': 'Paused'})
        assert set(errors) == {'title', 'player1', 'player2', 'court', 'scheduled_time', 'status'}
        assert errors['player1'] == "Player 1 name is required"


class TestValidateRecap:
    def test_valid(self):
        assert validate_recap(VALID_RECAP) == {}

    def test_invalid_url_and_short_description(self):
        errors = validate_recap({**VALID_RECAP, 'thumbnail': 'ftp://x', 'description': 'Too short'})
        assert errors == {
            'thumbnail': "Must be a valid URL",
            'description': "Description must be at least 10 characters",
        }

    @pytest.mark.parametrize("value,expected", [
        ("https://example.com/a.png", True),
        ("http://example.com", True),
        ("example.com/a.png", False),
        ("https://", False),
        (None, False),
    ])
    def test_is_valid_url(self, value, expected):
        assert is_valid_url(value) is expected


class TestEnsureValid:
    def test_no_errors(self):
        assert ensure_valid({}) is None

    def test_raises_with_errors(self):
        with pytest.raises(ValidationError) as exc_info:
            ensure_valid(validate_member({**VALID_MEMBER, 'email': 'x'}))
        assert exc_info.value.errors == {'email': "Invalid email address"}
        assert "email: Invalid email address" in str(exc_info.value)

    def test_validation_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            ensure_valid({'name': "required"})
