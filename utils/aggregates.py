"""Aggregate statistics over record sequences.

Used by the summary cards of the admin pages (total subscribers, monthly
revenue, average views, members by status, ...). Every function recomputes
from the records it is given; nothing is cached.

Division policy: an average over zero values, or a ratio with a zero
denominator, is ``0.0``.
"""

import math
from collections import Counter


def _values(records, field):
    return [r[field] for r in records if r.get(field) is not None]


def count_where(records, predicate):
    """Count records for which ``predicate(record)`` is true."""
    return sum(1 for r in records if predicate(r))


def sum_field(records, field):
    """Sum a numeric field, skipping records where it is missing or None."""
    values = _values(records, field)
    if all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return sum(values)
    return math.fsum(values)


def average_field(records, field):
    """Average a numeric field; ``0.0`` when no record has a value."""
    values = _values(records, field)
    if not values:
        return 0.0
    return math.fsum(values) / len(values)


def ratio(numerator, denominator):
    """Return ``numerator / denominator`` or ``0.0`` for a zero denominator."""
    if not denominator:
        return 0.0
    return numerator / denominator


def group_count_by(records, field):
    """Map each distinct value of ``field`` to the number of records having it.

    Keys appear in order of first occurrence. Records without the field are
    counted under ``None``.
    """
    return dict(Counter(r.get(field) for r in records))


def share_by(records, label_field, value_field):
    """Return each record's percentage share of the ``value_field`` total.

    Returns:
        list: ``[{'label': ..., 'value': ..., 'percentage': ...}, ...]`` in
            record order. Percentages are 0.0 when the total is zero.
    """
    total = sum_field(records, value_field)
    return [
        {
            'label': r.get(label_field),
            'value': r.get(value_field) or 0,
            'percentage': ratio((r.get(value_field) or 0) * 100, total),
        }
        for r in records
    ]


_OPERATIONS = {
    'count': count_where,
    'sum': sum_field,
    'average': average_field,
    'group': group_count_by,
}


def summarize(records, spec):
    """Evaluate several aggregates over the same records.

    Args:
        records (list): Records to summarize (full store or a filtered subset).
        spec (dict): Output name mapped to ``(operation, argument)``, where
            operation is one of ``count`` (argument: predicate), ``sum``,
            ``average`` or ``group`` (argument: field name).

    Returns:
        dict: Output name mapped to the computed value.

    Example:
        >>> summarize(tiers, {'revenue': ('sum', 'monthly_revenue')})
        {'revenue': 9514.75}
    """
    records = list(records)
    result = {}
    for name, (operation, argument) in spec.items():
        try:
            func = _OPERATIONS[operation]
        except KeyError:
            raise ValueError(f"Unknown summary operation {operation!r} for {name!r}") from None
        result[name] = func(records, argument)
    return result
