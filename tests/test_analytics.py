"""Tests for the plotly figure builders (utils/analytics.py)."""

import plotly.graph_objects as go
import pytest

from data.mock_data import ANALYTICS_DATA, PLAYER_INSIGHTS
from utils.analytics import (
    build_performance_radar,
    build_rating_progression_chart,
    build_region_chart,
    build_revenue_share_chart,
    build_revenue_trend_chart,
    build_tier_distribution_chart,
    build_user_growth_chart,
    build_win_trends_chart,
)


class TestOverviewCharts:
    def test_user_growth(self):
        fig = build_user_growth_chart(ANALYTICS_DATA['user_growth'])
        assert isinstance(fig, go.Figure)
        assert list(fig.data[0].x) == ['Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov']
        assert list(fig.data[0].y)[-1] == 525
        assert fig.layout.title.text == "User Growth"

    def test_revenue_trend(self):
        fig = build_revenue_trend_chart(ANALYTICS_DATA['revenue_trend'])
        assert fig.data[0].type == 'bar'
        assert list(fig.data[0].y)[-1] == 9514

    def test_tier_distribution(self, tiers):
        fig = build_tier_distribution_chart(tiers)
        assert fig.data[0].type == 'pie'
        assert list(fig.data[0].values) == [245, 182, 98]
        assert fig.data[0].hole == 0.5

    def test_region_chart(self):
        fig = build_region_chart({'North': 3, 'South': 1})
        assert list(fig.data[0].x) == ['North', 'South']
        assert list(fig.data[0].y) == [3, 1]


class TestMembershipCharts:
    def test_revenue_share(self, tiers):
        fig = build_revenue_share_chart(tiers)
        assert fig.data[0].orientation == 'h'
        assert sum(fig.data[0].x) == pytest.approx(100.0)

    def test_revenue_share_without_revenue(self):
        fig = build_revenue_share_chart([{'name': 'Free', 'monthly_revenue': 0}])
        assert list(fig.data[0].x) == [0.0]


class TestInsightsCharts:
    def test_radar_is_closed(self):
        stats = PLAYER_INSIGHTS['performance_comparison']
        fig = build_performance_radar(stats)
        trace = fig.data[0]
        assert len(trace.r) == len(stats) + 1
        assert trace.r[0] == trace.r[-1]
        assert trace.theta[0] == trace.theta[-1]

    def test_win_trends(self):
        fig = build_win_trends_chart(PLAYER_INSIGHTS['win_trends'])
        assert list(fig.data[0].y) == [142, 165, 178, 195, 210, 228]

    def test_rating_progression_has_one_trace_per_player(self):
        months = [p['month'] for p in PLAYER_INSIGHTS['win_trends']]
        fig = build_rating_progression_chart(months, PLAYER_INSIGHTS['rating_progression'])
        assert [t.name for t in fig.data] == ['Ben Johns', 'Anna Leigh Waters', 'Tyson McGuffin']
        assert all(list(t.x) == months for t in fig.data)
