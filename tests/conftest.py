"""
Shared pytest fixtures for the Courtside admin tests.

Fixtures build fresh record lists on every use, so a test that mutates a
store never affects another test.
"""

import pytest

from data.mock_data import make_live_matches, make_members, make_membership_tiers
from data.record_store import RecordStore


def make_synthetic_members(count=52, inactive_positions=(4, 17, 38)):
    """Build ``count`` members where only ``inactive_positions`` are inactive."""
    regions = ('North', 'South', 'East', 'West', 'Central')
    tiers = ('Rally Pass', 'Match Point', 'Tour Insider')
    return [
        {
            'id': f"member-{i + 1}",
            'name': f"Player {i + 1}",
            'email': f"player{i + 1}@example.com",
            'membership_tier': tiers[i % 3],
            'region': regions[i % 5],
            'status': 'Inactive' if i in inactive_positions else 'Active',
        }
        for i in range(count)
    ]


@pytest.fixture
def synthetic_members():
    """52 members, exactly 3 of them inactive."""
    return make_synthetic_members()


@pytest.fixture
def member_store(synthetic_members):
    return RecordStore(synthetic_members, id_prefix='member', name='members')


@pytest.fixture
def seeded_members():
    return make_members()


@pytest.fixture
def tiers():
    return make_membership_tiers()


@pytest.fixture
def matches():
    return make_live_matches()
