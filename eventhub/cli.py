"""
Command-line interface for the event store.

The store lives in memory, so every invocation starts from the demo catalog
(unless --empty is given) and applies one command to it.

For usage information, run:
    eventhub --help

Common use cases:
    # List events, most popular first
    eventhub list --sort popular

    # Search within a category
    eventhub list --search park --category Music

    # Fire 50 concurrent reservations at one event
    eventhub simulate 3 --users 50 --capacity 10
"""

import argparse
import logging
import threading
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from .config.environment import IS_PRODUCTION_ENVIRONMENT  # noqa: F401  loads .env first
from .config.store import StoreConfig
from .models.event import Event, CATEGORIES, ALL_CATEGORIES
from .query import QuerySpec, SortKey, query_store
from .store import EventStore, StoreError, reserve_with_retry
from .store.demo import seed_demo_events
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

def build_store(seed: bool = True, config: Optional[StoreConfig] = None) -> EventStore:
    """Create a store, optionally loaded with the demo catalog."""
    store = EventStore(config=config)
    if seed:
        seed_demo_events(store)
    return store

def print_events_info(events: List[Event], detailed: bool = False):
    """
    Print information about events.

    Args:
        events: List of events to display
        detailed: If True, shows all available event information
    """
    logger.info(f"Found {len(events)} events")
    for event in events:
        if detailed:
            logger.info(event.to_detailed_string())
            logger.info('-' * 50)
        else:
            logger.info(event.to_summary_string())

def simulate_reservations(store: EventStore, event_id: str, users: int) -> Counter:
    """
    Fire reservations from `users` distinct users at one event at the same time.

    Returns:
        Counter: Outcome counts keyed by 'granted' or the rejection reason
    """
    barrier = threading.Barrier(users)

    def attempt(n: int) -> str:
        barrier.wait()
        result = reserve_with_retry(store, event_id, f"sim-user-{n}")
        return 'granted' if result.ok else result.reason.value

    with ThreadPoolExecutor(max_workers=users) as executor:
        outcomes = list(executor.map(attempt, range(1, users + 1)))
    return Counter(outcomes)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='eventhub',
        description='EventHub event store tool',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  # List all events, earliest first
  eventhub list

  # Latest first, only Technology
  eventhub list --category Technology --sort date-desc

  # Show one event
  eventhub show 1

  # Reserve and cancel a seat
  eventhub rsvp 3 alice
  eventhub cancel 1 user1

  # A user's events and reservations
  eventhub dashboard user1

  # Concurrency check: 20 users racing for 5 seats
  eventhub simulate 3 --users 20 --capacity 5
        """
    )
    parser.add_argument('--empty', action='store_true',
                        help='Start from an empty store instead of the demo catalog')
    parser.add_argument('--log-level',
                        help='Log level (default: LOG_LEVEL or INFO)')

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    list_parser = subparsers.add_parser('list', help='Search, filter and sort events')
    list_parser.add_argument('--search', default='',
                             help='Case-insensitive text to find in title, description or location')
    list_parser.add_argument('--category', default=ALL_CATEGORIES,
                             choices=[ALL_CATEGORIES, *CATEGORIES],
                             help='Only show this category')
    list_parser.add_argument('--sort', default=SortKey.DATE_ASCENDING.value,
                             choices=[key.value for key in SortKey],
                             help='Ordering (default: date-asc)')
    list_parser.add_argument('--detailed', action='store_true',
                             help='Show detailed information about events')

    show_parser = subparsers.add_parser('show', help='Show a specific event')
    show_parser.add_argument('event_id', help='Event ID to show')

    rsvp_parser = subparsers.add_parser('rsvp', help='Reserve a seat')
    rsvp_parser.add_argument('event_id', help='Event ID')
    rsvp_parser.add_argument('user_id', help='User reserving the seat')

    cancel_parser = subparsers.add_parser('cancel', help='Cancel a reservation')
    cancel_parser.add_argument('event_id', help='Event ID')
    cancel_parser.add_argument('user_id', help='User cancelling')

    dashboard_parser = subparsers.add_parser('dashboard', help="Show a user's events and reservations")
    dashboard_parser.add_argument('user_id', help='User to summarize')

    simulate_parser = subparsers.add_parser('simulate', help='Race concurrent reservations against one event')
    simulate_parser.add_argument('event_id', help='Event ID')
    simulate_parser.add_argument('--users', type=int, default=20,
                                 help='Number of concurrent users (default: 20)')
    simulate_parser.add_argument('--capacity', type=int,
                                 help='Set the event capacity before the race')

    return parser

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    if not args.command:
        parser.print_help()
        return 0

    store = build_store(seed=not args.empty)

    try:
        if args.command == 'list':
            spec = QuerySpec.from_params(search=args.search, category=args.category, sort=args.sort)
            print_events_info(query_store(store, spec), detailed=args.detailed)

        elif args.command == 'show':
            event = store.get(args.event_id)
            if not event:
                logger.error(f"No event found with ID {args.event_id}")
                return 1
            logger.info(event.to_detailed_string())

        elif args.command == 'rsvp':
            result = store.reserve(args.event_id, args.user_id)
            if not result.ok:
                logger.error(result.message)
                return 1
            logger.info(f"{result.message} {result.event.spots_left} spots remaining")

        elif args.command == 'cancel':
            if store.cancel(args.event_id, args.user_id):
                logger.info("RSVP cancelled successfully")
            else:
                logger.info(f"No reservation for {args.user_id} on event {args.event_id}")

        elif args.command == 'dashboard':
            summary = store.dashboard(args.user_id)
            logger.info(f"Events created by {args.user_id}: {summary.created_count}")
            print_events_info(summary.created)
            logger.info(f"Reservations held by {args.user_id}: {summary.reserved_count}")
            print_events_info(summary.reserved)

        elif args.command == 'simulate':
            if args.users < 1:
                parser.error("--users must be at least 1")
            if args.capacity is not None:
                store.update(args.event_id, {'capacity': args.capacity})
            before = store.get(args.event_id)
            if not before:
                logger.error(f"No event found with ID {args.event_id}")
                return 1

            outcomes = simulate_reservations(store, args.event_id, args.users)
            after = store.get(args.event_id)
            logger.info(
                f"{args.users} users raced for {before.spots_left} open spots on '{after.title}'"
            )
            for outcome, count in sorted(outcomes.items()):
                logger.info(f"  {outcome}: {count}")
            logger.info(f"Attendees now {after.attendee_count}/{after.capacity}")

            if outcomes['granted'] > before.spots_left or after.attendee_count > after.capacity:
                logger.error("Capacity invariant violated")
                return 1

    except StoreError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    return 0
