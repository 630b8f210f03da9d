"""Pagination for admin list views.

``project`` is the single entry point list pages use: it filters a Record
Store with the shared predicate set and returns one page of the result plus
the counts the page needs for its "Showing X to Y of N" label and the
previous/next buttons.
"""

import math

from utils.filters import filter_records


def count_pages(total, page_size):
    """Return ``ceil(total / page_size)``, never less than 1."""
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")
    return max(1, math.ceil(total / page_size))


def clamp_page(page, total_pages):
    """Clamp a 1-based page index into ``[1, total_pages]``."""
    return min(max(1, page), max(1, total_pages))


def paginate(records, page, page_size):
    """Slice an already-filtered sequence into one page.

    Args:
        records (list): Filtered records in display order.
        page (int): Requested 1-based page index. Out-of-range values are clamped.
        page_size (int): Number of records per page (>= 1).

    Returns:
        dict: Projection result with keys:
            - page_records (list): Records on the effective page
            - total_filtered (int): Number of records across all pages
            - total_pages (int): ``max(1, ceil(total_filtered / page_size))``
            - effective_page (int): Page index after clamping
            - start_index (int): 1-based position of the first record shown (0 if none)
            - end_index (int): 1-based position of the last record shown (0 if none)
    """
    total_filtered = len(records)
    total_pages = count_pages(total_filtered, page_size)
    effective_page = clamp_page(page, total_pages)

    offset = (effective_page - 1) * page_size
    page_records = list(records[offset:offset + page_size])

    return {
        'page_records': page_records,
        'total_filtered': total_filtered,
        'total_pages': total_pages,
        'effective_page': effective_page,
        'start_index': offset + 1 if page_records else 0,
        'end_index': offset + len(page_records),
    }


def project(store, filter_config, page=1, page_size=10, search_fields=()):
    """Filter a Record Store and return the requested page.

    Filtering is stable (records keep their original relative order) and the
    store is never modified, so calling this twice with the same arguments
    gives the same result.

    Args:
        store (Iterable[dict]): Full record sequence of the view.
        filter_config (dict): Filter configuration, see ``utils.filters``.
        page (int, optional): Requested 1-based page index. Defaults to 1.
        page_size (int, optional): Records per page. Defaults to 10.
        search_fields (tuple, optional): Text fields searched for the search text.

    Returns:
        dict: See ``paginate``.
    """
    filtered = filter_records(store, filter_config, search_fields)
    return paginate(filtered, page, page_size)
