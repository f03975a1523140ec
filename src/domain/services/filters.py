"""Date-range and name-search filters over transactions and people."""

from collections.abc import Iterable
from datetime import date, datetime, time, timezone
from logging import Logger

from src.domain.errors import MalformedTimestamp
from src.domain.models import DateRange, Person, Transaction
from src.domain.services.normalization import normalize_query, parse_timestamp

_DAY_START = time(0, 0, 0, tzinfo=timezone.utc)
_DAY_END = time(23, 59, 59, tzinfo=timezone.utc)


def in_date_range(
    timestamp,
    start_date: date | None = None,
    end_date: date | None = None,
) -> bool:
    """Return True when the timestamp falls inside the inclusive range.

    The start bound is ``start_date 00:00:00 UTC`` and the end bound is
    ``end_date 23:59:59 UTC``. Missing bounds do not constrain. A timestamp
    that cannot be parsed is outside any bounded range.

    Args:
        timestamp: Transaction timestamp (datetime or ISO-8601 string).
        start_date: Optional first calendar day.
        end_date: Optional last calendar day.

    Returns:
        bool: Whether the timestamp is within the bounds.
    """
    if start_date is None and end_date is None:
        return True
    try:
        instant = parse_timestamp(timestamp)
    except MalformedTimestamp:
        return False
    if start_date is not None:
        if instant < datetime.combine(start_date, _DAY_START):
            return False
    if end_date is not None:
        if instant > datetime.combine(end_date, _DAY_END):
            return False
    return True


def filter_by_date_range(
    transactions: Iterable[Transaction],
    date_range: DateRange | None = None,
    logger: Logger | None = None,
) -> list[Transaction]:
    """Return transactions inside the range, keeping their order.

    Args:
        transactions: Transactions to filter.
        date_range: Optional bounds; None keeps everything.
        logger: Optional logger warned about unparseable timestamps.

    Returns:
        list[Transaction]: Matching transactions.
    """
    if date_range is None or not date_range.is_bounded:
        return list(transactions)
    kept: list[Transaction] = []
    for transaction in transactions:
        if in_date_range(
            transaction.occurred_at,
            date_range.start,
            date_range.end,
        ):
            kept.append(transaction)
        elif logger is not None and not _is_parseable(transaction):
            logger.warning(
                f"Transaction {transaction.id} has an invalid timestamp "
                f"{transaction.occurred_at!r}; excluded from the period"
            )
    return kept


def matches_name_search(person: Person, query: str | None) -> bool:
    """Case-insensitive substring match of the query in the person's name."""
    needle = normalize_query(query)
    if not needle:
        return True
    return needle in person.name.lower()


def resolve_unique_match(
    people: Iterable[Person],
    query: str | None,
) -> Person | None:
    """Return the only person matching the query, if exactly one does.

    An empty query never selects anyone.
    """
    if not normalize_query(query):
        return None
    matches = [
        person for person in people if matches_name_search(person, query)
    ]
    return matches[0] if len(matches) == 1 else None


def _is_parseable(transaction: Transaction) -> bool:
    try:
        parse_timestamp(transaction.occurred_at)
    except MalformedTimestamp:
        return False
    return True


__all__ = [
    "in_date_range",
    "filter_by_date_range",
    "matches_name_search",
    "resolve_unique_match",
]
