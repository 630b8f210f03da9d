"""Tests for the aggregate summarizer (utils/aggregates.py)."""

import pytest

from utils.aggregates import (
    average_field,
    count_where,
    group_count_by,
    ratio,
    share_by,
    sum_field,
    summarize,
)


class TestRevenueExample:
    def test_sum_of_monthly_revenue(self, tiers):
        assert [t['monthly_revenue'] for t in tiers] == [2447.55, 3638.18, 3429.02]
        assert sum_field(tiers, 'monthly_revenue') == 9514.75

    def test_average_of_monthly_revenue(self, tiers):
        assert average_field(tiers, 'monthly_revenue') == pytest.approx(3171.5833, abs=1e-4)
        assert round(average_field(tiers, 'monthly_revenue'), 2) == 3171.58


class TestBasicAggregates:
    def test_count_where(self, synthetic_members):
        assert count_where(synthetic_members, lambda m: m['status'] == 'Inactive') == 3
        assert count_where([], lambda m: True) == 0

    def test_sum_of_ints_stays_int(self, tiers):
        total = sum_field(tiers, 'subscriber_count')
        assert total == 525
        assert isinstance(total, int)

    def test_missing_and_none_values_are_skipped(self):
        records = [{'views': 10}, {'views': None}, {}, {'views': 20}]
        assert sum_field(records, 'views') == 30
        assert average_field(records, 'views') == 15.0

    def test_group_count_by(self, synthetic_members):
        assert group_count_by(synthetic_members, 'status') == {'Active': 49, 'Inactive': 3}

    def test_group_count_by_keeps_first_seen_order(self):
        records = [{'role': 'Admin'}, {'role': 'Moderator'}, {'role': 'Admin'}, {}]
        assert list(group_count_by(records, 'role').items()) == [('Admin', 2), ('Moderator', 1), (None, 1)]


class TestDivisionPolicy:
    def test_average_of_empty_is_zero(self):
        assert average_field([], 'views') == 0.0
        assert average_field([{'views': None}], 'views') == 0.0

    def test_ratio_with_zero_denominator(self):
        assert ratio(9514.75, 0) == 0.0
        assert ratio(0, 0) == 0.0
        assert ratio(10, 4) == 2.5

    def test_share_by_with_zero_total(self):
        shares = share_by([{'name': 'A', 'amount': 0}, {'name': 'B'}], 'name', 'amount')
        assert [s['percentage'] for s in shares] == [0.0, 0.0]


class TestShareBy:
    def test_percentages_sum_to_hundred(self, tiers):
        shares = share_by(tiers, 'name', 'monthly_revenue')
        assert [s['label'] for s in shares] == ['Rally Pass', 'Match Point', 'Tour Insider']
        assert sum(s['percentage'] for s in shares) == pytest.approx(100.0)
        assert shares[1]['percentage'] == pytest.approx(38.24, abs=0.01)


class TestSummarize:
    def test_combines_operations(self, tiers):
        result = summarize(tiers, {
            'revenue': ('sum', 'monthly_revenue'),
            'average_price': ('average', 'price'),
            'active': ('count', lambda t: t['active']),
            'by_active': ('group', 'active'),
        })
        assert result['revenue'] == 9514.75
        assert result['average_price'] == pytest.approx(21.6567, abs=1e-4)
        assert result['active'] == 3
        assert result['by_active'] == {True: 3}

    def test_accepts_iterables(self, member_store):
        assert summarize(iter(member_store), {'n': ('count', lambda m: True)}) == {'n': 52}

    def test_unknown_operation(self, tiers):
        with pytest.raises(ValueError, match="median"):
            summarize(tiers, {'x': ('median', 'price')})
