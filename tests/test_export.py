"""Tests for CSV export (utils/export.py)."""

import io
from datetime import date

import pandas as pd

from utils.export import (
    MEMBER_EXPORT_COLUMNS,
    export_file_name,
    records_to_csv,
    records_to_dataframe,
)


class TestRecordsToCsv:
    def test_member_columns_in_order(self, seeded_members):
        csv_text = records_to_csv(seeded_members[:3])
        lines = csv_text.splitlines()
        assert lines[0] == ",".join(MEMBER_EXPORT_COLUMNS)
        assert len(lines) == 4
        assert lines[1].startswith("member-1,Sarah Johnson,user1@example.com,Rally Pass,")

    def test_avatar_is_not_exported(self, seeded_members):
        assert 'dicebear' not in records_to_csv(seeded_members)

    def test_reads_back_with_pandas(self, seeded_members):
        df = pd.read_csv(io.StringIO(records_to_csv(seeded_members)))
        assert len(df) == 52
        assert (df['status'] == 'Inactive').sum() == 8

    def test_empty_records_write_header_only(self):
        assert records_to_csv([]).splitlines() == [",".join(MEMBER_EXPORT_COLUMNS)]

    def test_list_values_are_joined(self, tiers):
        df = pd.read_csv(io.StringIO(records_to_csv(tiers, columns=['id', 'features'])))
        assert df.loc[0, 'features'] == (
            "Access to live match streams;Basic match highlights;Community forum access;Monthly newsletter"
        )


class TestRecordsToDataframe:
    def test_missing_fields_are_empty(self):
        df = records_to_dataframe([{'id': 'team-1'}], ['id', 'name'])
        assert list(df.columns) == ['id', 'name']
        assert pd.isna(df.loc[0, 'name'])


class TestExportFileName:
    def test_includes_view_and_date(self):
        assert export_file_name('members', date(2024, 12, 1)) == "members-2024-12-01.csv"
