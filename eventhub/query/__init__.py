"""Query package initialization."""

from .spec import QuerySpec, SortKey, DEFAULT_SORT_KEY, parse_sort_key
from .engine import query, query_store, matches_search, matches_category

__all__ = [
    'QuerySpec',
    'SortKey',
    'DEFAULT_SORT_KEY',
    'parse_sort_key',
    'query',
    'query_store',
    'matches_search',
    'matches_category',
]
