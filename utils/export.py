"""CSV export of admin list views.

Backs the "Export Data" button of the Members page: the currently filtered
records (all pages, not just the visible one) are written to CSV with pandas.
List values (e.g. tier features) are joined with ';' so every cell stays a
single field.
"""

import pandas as pd


MEMBER_EXPORT_COLUMNS = [
    'id', 'name', 'email', 'membership_tier', 'join_date', 'region', 'status', 'last_active',
]


def _array_to_semicolon_str(value):
    """Convert a list value (or None) into a ';'-separated string for CSV."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    try:
        return ";".join(str(x) for x in value)
    except TypeError:
        return str(value)


def records_to_dataframe(records, columns):
    """Build a DataFrame with exactly ``columns``, missing fields left empty."""
    df = pd.DataFrame(list(records), columns=columns)
    for column in columns:
        if df[column].map(lambda v: isinstance(v, (list, tuple))).any():
            df[column] = df[column].map(_array_to_semicolon_str)
    return df


def records_to_csv(records, columns=None):
    """Serialize records to CSV text.

    Args:
        records (list): Records to export, in display order.
        columns (list, optional): Columns to write. Defaults to
            ``MEMBER_EXPORT_COLUMNS``.

    Returns:
        str: CSV with a header row.
    """
    columns = columns or MEMBER_EXPORT_COLUMNS
    return records_to_dataframe(records, columns).to_csv(index=False)


def export_file_name(view, today):
    """Return e.g. ``members-2024-12-01.csv``."""
    return f"{view}-{today.isoformat()}.csv"
