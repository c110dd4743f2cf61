"""Query specification: search term, category filter and sort key."""

from enum import Enum
from dataclasses import dataclass
from typing import Optional, Union

from ..models.event import CATEGORIES, ALL_CATEGORIES
from ..store.errors import ValidationError

class SortKey(str, Enum):
    DATE_ASCENDING = 'date-asc'
    DATE_DESCENDING = 'date-desc'
    MOST_POPULAR = 'popular'
    MOST_AVAILABLE = 'available'

DEFAULT_SORT_KEY = SortKey.DATE_ASCENDING

def parse_sort_key(value: Union[SortKey, str]) -> SortKey:
    """
    Resolve a sort key from an enum member, its token ('date-asc') or its
    name ('DATE_ASCENDING').

    Raises:
        ValidationError: If the value names no sort key
    """
    if isinstance(value, SortKey):
        return value
    if isinstance(value, str):
        try:
            return SortKey(value)
        except ValueError:
            pass
        if value.upper() in SortKey.__members__:
            return SortKey[value.upper()]
    valid = ', '.join(key.value for key in SortKey)
    raise ValidationError(f"Unknown sort key '{value}'. Expected one of: {valid}", ['sort_key'])

@dataclass(frozen=True)
class QuerySpec:
    """What to show: a free-text term, a category, and an ordering."""
    search_term: str = ''
    category: str = ALL_CATEGORIES
    sort_key: SortKey = DEFAULT_SORT_KEY

    def __post_init__(self):
        if not isinstance(self.search_term, str):
            raise ValidationError("Search term must be a string", ['search_term'])
        if self.category != ALL_CATEGORIES and self.category not in CATEGORIES:
            raise ValidationError(
                f"Unknown category '{self.category}'. Expected '{ALL_CATEGORIES}' "
                f"or one of: {', '.join(CATEGORIES)}",
                ['category']
            )
        object.__setattr__(self, 'sort_key', parse_sort_key(self.sort_key))

    @classmethod
    def from_params(
        cls,
        search: Optional[str] = None,
        category: Optional[str] = None,
        sort: Optional[str] = None
    ) -> 'QuerySpec':
        """Build a spec from loosely typed request or command-line parameters."""
        return cls(
            search_term=search or '',
            category=category or ALL_CATEGORIES,
            sort_key=sort or DEFAULT_SORT_KEY,
        )
