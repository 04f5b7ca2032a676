import math

import pandas as pd

from ipgroupmap.config import PAGE_SIZE
from ipgroupmap.groups import GROUP_COLUMN

# Source column -> header, in display order.
TABLE_COLUMNS = {
    'ip': 'IP address',
    'country_name': 'Country name',
    'region_name': 'Region name',
    'city': 'City',
    'zip_code': 'Zip code',
    'time_zone': 'Time zone',
    GROUP_COLUMN: 'Group',
}

# Internal codes and coordinates never shown in the table.
EXCLUDED_COLUMNS = frozenset({'country_code', 'region_code', 'metro_code', 'latitude', 'longitude'})

SORT_COLUMN = 'country_name'


def build_table(records):
    """
    Project labeled records onto the table columns, sorted by country name.
    The sort is stable so ties keep file order.
    """
    projected = records.reindex(columns=list(TABLE_COLUMNS)).fillna('')
    projected = projected.sort_values(SORT_COLUMN, kind='mergesort')
    return projected.rename(columns=TABLE_COLUMNS).reset_index(drop=True)


def filter_table(table, filters=None, search=''):
    """
    Keep rows matching every per-column filter and the global search.
    Matching is a case-insensitive substring test; blank filters are ignored.
    """
    mask = pd.Series(True, index=table.index)
    for column, needle in (filters or {}).items():
        needle = (needle or '').strip()
        if needle:
            mask &= table[column].astype(str).str.contains(needle, case=False, regex=False)

    search = (search or '').strip()
    if search:
        hits = pd.Series(False, index=table.index)
        for column in table.columns:
            hits |= table[column].astype(str).str.contains(search, case=False, regex=False)
        mask &= hits

    return table[mask].reset_index(drop=True)


def page_count(table, page_size=PAGE_SIZE):
    # An empty table still has one (empty) page.
    return max(1, math.ceil(len(table) / page_size))


def paginate(table, page=1, page_size=PAGE_SIZE):
    """Rows of 1-based `page`; out-of-range pages are clamped."""
    page = min(max(1, int(page)), page_count(table, page_size))
    start = (page - 1) * page_size
    return table.iloc[start:start + page_size]
