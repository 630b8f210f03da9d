"""Shape checks for the seed datasets (data/mock_data.py)."""

import pytest

from data.mock_data import (
    ANALYTICS_DATA,
    MEMBER_COUNT,
    PLAYER_INSIGHTS,
    SEEDS,
    TOP_PLAYERS,
    make_members,
)
from data.record_store import RecordStore
from data.validation import (
    validate_match,
    validate_member,
    validate_recap,
    validate_team_member,
    validate_tier,
)

VALIDATORS = {
    'members': validate_member,
    'team': validate_team_member,
    'tiers': validate_tier,
    'matches': validate_match,
    'recaps': validate_recap,
}


class TestMembers:
    def test_count_and_inactive_members(self):
        members = make_members()
        assert len(members) == MEMBER_COUNT == 52
        assert sum(1 for m in members if m['status'] == 'Inactive') == 8

    def test_factory_returns_fresh_copies(self):
        first = make_members()
        first[0]['name'] = 'Changed'
        assert make_members()[0]['name'] == 'Sarah Johnson'


class TestSeeds:
    @pytest.mark.parametrize("view", sorted(SEEDS))
    def test_seed_builds_a_store(self, view):
        id_prefix, factory = SEEDS[view]
        store = RecordStore(factory(), id_prefix=id_prefix, name=view)
        assert len(store) > 0
        assert all(r['id'].startswith(f"{id_prefix}-") for r in store)

    @pytest.mark.parametrize("view", sorted(SEEDS))
    def test_seed_records_pass_validation(self, view):
        _, factory = SEEDS[view]
        for record in factory():
            assert VALIDATORS[view](record) == {}, record['id']


class TestChartSeries:
    def test_monthly_series_are_aligned(self):
        months = [p['month'] for p in ANALYTICS_DATA['user_growth']]
        assert [p['month'] for p in ANALYTICS_DATA['revenue_trend']] == months
        assert [p['month'] for p in PLAYER_INSIGHTS['win_trends']] == months

    def test_rating_progression_matches_months(self):
        months = len(PLAYER_INSIGHTS['win_trends'])
        assert all(len(r) == months for r in PLAYER_INSIGHTS['rating_progression'].values())

    def test_top_players_are_ranked(self):
        assert [p['rank'] for p in TOP_PLAYERS] == [1, 2, 3, 4, 5]
        ratings = [p['rating'] for p in TOP_PLAYERS]
        assert ratings == sorted(ratings, reverse=True)
