"""Query engine: filtered, sorted views over an event snapshot.

Everything here is a pure function of its inputs. Snapshots are sequences
of immutable Event records, so results can be held across later store
mutations.
"""

import logging
from datetime import date, time
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from ..models.event import Event, ALL_CATEGORIES
from ..store.validation import parse_event_date, parse_event_time
from .spec import QuerySpec, SortKey

logger = logging.getLogger(__name__)

def matches_search(event: Event, search_term: str) -> bool:
    """Case-insensitive substring match on title, description or location."""
    if not search_term:
        return True
    needle = search_term.lower()
    return any(
        needle in (value or '').lower()
        for value in (event.title, event.description, event.location)
    )

def matches_category(event: Event, category: str) -> bool:
    return category == ALL_CATEGORIES or event.category == category

def _schedule_key(event: Event) -> Tuple[date, time]:
    return parse_event_date(event.date), parse_event_time(event.time)

def _sort_by_date(events: List[Event], descending: bool) -> List[Event]:
    # sorted() stays stable with reverse=True: ties keep snapshot order
    return sorted(events, key=_schedule_key, reverse=descending)

SORTERS: Dict[SortKey, Callable[[List[Event]], List[Event]]] = {
    SortKey.DATE_ASCENDING: lambda events: _sort_by_date(events, descending=False),
    SortKey.DATE_DESCENDING: lambda events: _sort_by_date(events, descending=True),
    SortKey.MOST_POPULAR: lambda events: sorted(events, key=lambda e: e.attendee_count, reverse=True),
    SortKey.MOST_AVAILABLE: lambda events: sorted(events, key=lambda e: e.spots_left, reverse=True),
}

def query(snapshot: Iterable[Event], spec: QuerySpec) -> List[Event]:
    """
    Derive a display-ordered view of a snapshot.

    Args:
        snapshot: Events to select from; never modified
        spec: Search term, category filter and sort key

    Returns:
        List[Event]: A new list, filtered then stably sorted
    """
    selected = [
        event for event in snapshot
        if matches_search(event, spec.search_term) and matches_category(event, spec.category)
    ]
    return SORTERS[spec.sort_key](selected)

def query_store(store, spec: QuerySpec) -> List[Event]:
    """Run a query against a fresh snapshot of the store."""
    snapshot: Sequence[Event] = store.snapshot()
    results = query(snapshot, spec)
    logger.debug(
        f"Query search='{spec.search_term}' category='{spec.category}' "
        f"sort={spec.sort_key.value} matched {len(results)}/{len(snapshot)} events"
    )
    return results
