"""Tests for date-range and name-search filters."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import (
    CategoryRef,
    DateRange,
    Person,
    PersonRef,
    Transaction,
)
from src.domain.services.filters import (
    filter_by_date_range,
    in_date_range,
    matches_name_search,
    resolve_unique_match,
)


def _tx(tx_id: int, occurred_at) -> Transaction:
    return Transaction(
        id=tx_id,
        description=f"tx-{tx_id}",
        amount=Decimal("10"),
        kind="Despesa",
        person=PersonRef(id=1),
        category=CategoryRef(id=1, label="Food"),
        occurred_at=occurred_at,
    )


def test_in_date_range_bounds_are_inclusive() -> None:
    """Start midnight and end 23:59:59 UTC should both be included."""
    start = date(2024, 1, 6)
    end = date(2024, 1, 31)

    assert in_date_range("2024-01-06T00:00:00Z", start, end)
    assert in_date_range("2024-01-31T23:59:59Z", start, end)
    assert not in_date_range("2024-01-05T23:59:59Z", start, end)
    assert not in_date_range("2024-02-01T00:00:00Z", start, end)


def test_in_date_range_handles_single_bounds() -> None:
    """Absent bounds should not constrain their side."""
    assert in_date_range("1999-01-01T00:00:00Z", None, date(2024, 1, 1))
    assert not in_date_range("2024-01-02T00:00:00Z", None, date(2024, 1, 1))
    assert in_date_range("2099-01-01T00:00:00Z", date(2024, 1, 1), None)
    assert not in_date_range("2023-12-31T23:59:59Z", date(2024, 1, 1), None)


def test_in_date_range_compares_in_utc() -> None:
    """A local evening timestamp can fall on the next UTC day."""
    assert not in_date_range(
        "2024-01-31T22:00:00-03:00",
        None,
        date(2024, 1, 31),
    )


def test_in_date_range_excludes_malformed_timestamps_when_bounded() -> None:
    """Malformed timestamps are out of any bounded range."""
    assert not in_date_range("garbage", date(2024, 1, 1), None)
    assert not in_date_range(None, None, date(2024, 1, 1))
    assert in_date_range("garbage", None, None)


def test_filter_by_date_range_keeps_order_and_warns_on_malformed() -> None:
    """Filtering should keep input order and report bad timestamps."""
    logger = MagicMock()
    transactions = [
        _tx(1, "2024-01-10T00:00:00Z"),
        _tx(2, "bad"),
        _tx(3, "2023-12-01T00:00:00Z"),
        _tx(4, "2024-01-02T00:00:00Z"),
    ]

    result = filter_by_date_range(
        transactions,
        DateRange(start=date(2024, 1, 1)),
        logger,
    )

    assert [tx.id for tx in result] == [1, 4]
    logger.warning.assert_called_once()


def test_filter_by_date_range_without_bounds_returns_everything() -> None:
    transactions = [_tx(1, "bad"), _tx(2, None)]

    assert filter_by_date_range(transactions, DateRange()) == transactions
    assert filter_by_date_range(transactions, None) == transactions


def test_matches_name_search_is_case_insensitive() -> None:
    person = Person(id=1, name="Anabela", age=30)

    assert matches_name_search(person, "BEL")
    assert matches_name_search(person, "")
    assert matches_name_search(person, "   ")
    assert not matches_name_search(person, "Bob")


def test_matches_name_search_keeps_surrounding_spaces() -> None:
    """Only blank queries are trimmed away; others match as typed."""
    person = Person(id=1, name="Ana", age=30)

    assert not matches_name_search(person, "Ana ")
    assert matches_name_search(Person(id=2, name="Ana Lima", age=30), "Ana ")


def test_resolve_unique_match() -> None:
    """Only a search matching exactly one person selects it."""
    people = [
        Person(id=1, name="Ana", age=30),
        Person(id=2, name="Anabela", age=25),
    ]

    assert resolve_unique_match(people, "Ana") is None
    assert resolve_unique_match(people, "Anabela") == people[1]
    assert resolve_unique_match(people, "Zé") is None
    assert resolve_unique_match(people, "") is None
    assert resolve_unique_match(people[:1], "  ") is None
