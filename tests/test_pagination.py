"""Tests for the list projector (utils/pagination.py)."""

import math

import pytest

from utils.filters import VIEW_FILTERS, build_filter_config
from utils.pagination import clamp_page, count_pages, paginate, project

MEMBER_SEARCH = VIEW_FILTERS['members']['search_fields']


class TestCountPages:
    @pytest.mark.parametrize("total,page_size", [(1, 10), (10, 10), (11, 10), (52, 10), (52, 7), (3, 1)])
    def test_ceil_for_non_empty(self, total, page_size):
        assert count_pages(total, page_size) == math.ceil(total / page_size)

    def test_empty_has_one_page(self):
        assert count_pages(0, 10) == 1

    def test_page_size_must_be_positive(self):
        with pytest.raises(ValueError):
            count_pages(5, 0)


class TestClampPage:
    def test_clamps_into_range(self):
        assert clamp_page(0, 6) == 1
        assert clamp_page(-3, 6) == 1
        assert clamp_page(7, 6) == 6
        assert clamp_page(4, 6) == 4

    def test_zero_pages_clamps_to_first(self):
        assert clamp_page(5, 0) == 1


class TestPaginate:
    def test_slices_requested_page(self):
        records = list(range(25))
        result = paginate(records, 2, 10)
        assert result['page_records'] == list(range(10, 20))
        assert result['total_filtered'] == 25
        assert result['total_pages'] == 3
        assert result['effective_page'] == 2
        assert (result['start_index'], result['end_index']) == (11, 20)

    def test_last_page_is_partial(self):
        result = paginate(list(range(25)), 3, 10)
        assert result['page_records'] == [20, 21, 22, 23, 24]
        assert (result['start_index'], result['end_index']) == (21, 25)

    def test_page_beyond_end_is_clamped(self):
        result = paginate(list(range(25)), 99, 10)
        assert result['effective_page'] == 3
        assert result['page_records'] == [20, 21, 22, 23, 24]

    def test_page_zero_is_clamped(self):
        result = paginate(list(range(25)), 0, 10)
        assert result['effective_page'] == 1
        assert result['page_records'] == list(range(10))

    def test_empty_input(self):
        result = paginate([], 3, 10)
        assert result == {
            'page_records': [],
            'total_filtered': 0,
            'total_pages': 1,
            'effective_page': 1,
            'start_index': 0,
            'end_index': 0,
        }


class TestProject:
    def test_unfiltered_first_page(self, synthetic_members):
        result = project(synthetic_members, build_filter_config(), 1, 10, MEMBER_SEARCH)
        assert result['total_filtered'] == 52
        assert result['total_pages'] == 6
        assert result['page_records'] == synthetic_members[:10]

    def test_is_stable(self, synthetic_members):
        result = project(synthetic_members, build_filter_config(region='North'), 1, 100, MEMBER_SEARCH)
        ids = [r['id'] for r in result['page_records']]
        expected = [r['id'] for r in synthetic_members if r['region'] == 'North']
        assert ids == expected

    def test_is_idempotent(self, synthetic_members):
        before = [dict(r) for r in synthetic_members]
        config = build_filter_config("player", status='Active')
        first = project(synthetic_members, config, 2, 10, MEMBER_SEARCH)
        second = project(synthetic_members, config, 2, 10, MEMBER_SEARCH)
        assert first == second
        assert synthetic_members == before

    def test_no_matches(self, synthetic_members):
        result = project(synthetic_members, build_filter_config("nobody"), 4, 10, MEMBER_SEARCH)
        assert result['page_records'] == []
        assert result['total_filtered'] == 0
        assert result['total_pages'] == 1
        assert result['effective_page'] == 1

    def test_accepts_a_record_store(self, member_store):
        result = project(member_store, build_filter_config(status='Inactive'), 1, 10, MEMBER_SEARCH)
        assert result['total_filtered'] == 3
