"""Tests for kind and timestamp normalization."""

from datetime import date, datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from src.domain.errors import MalformedTimestamp, UnrecognizedKind
from src.domain.models import TransactionKind
from src.domain.services.normalization import (
    classify_kind,
    normalize_query,
    parse_kind,
    parse_timestamp,
)


@pytest.mark.parametrize(
    "raw",
    ["Receita", "receita", " RECEITA ", "Income", 2, "2"],
)
def test_classify_kind_recognizes_income(raw) -> None:
    """Income tags and the code 2 should classify as income."""
    assert classify_kind(raw) is TransactionKind.INCOME


@pytest.mark.parametrize("raw", ["Despesa", "expense", 1, "1"])
def test_classify_kind_recognizes_expense(raw) -> None:
    """Expense tags and the code 1 should classify as expense."""
    assert classify_kind(raw) is TransactionKind.EXPENSE


@pytest.mark.parametrize("raw", ["Transferencia", 3, 0, None, True, 2.5])
def test_classify_kind_defaults_unknown_values_to_expense(raw) -> None:
    """Unknown kinds fall back to expense and are reported."""
    logger = MagicMock()

    assert classify_kind(raw, logger) is TransactionKind.EXPENSE
    logger.warning.assert_called_once()


def test_parse_kind_rejects_unknown_values() -> None:
    """The strict parser should raise for unknown kinds."""
    with pytest.raises(UnrecognizedKind):
        parse_kind("Outro")


def test_parse_timestamp_reads_zulu_suffix() -> None:
    """A trailing Z should be read as UTC."""
    parsed = parse_timestamp("2024-01-05T12:00:00Z")

    assert parsed == datetime(2024, 1, 5, 12, tzinfo=timezone.utc)


def test_parse_timestamp_treats_naive_values_as_utc() -> None:
    """Naive strings and datetimes should be assumed to be UTC."""
    expected = datetime(2024, 1, 5, 12, tzinfo=timezone.utc)

    assert parse_timestamp("2024-01-05T12:00:00") == expected
    assert parse_timestamp(datetime(2024, 1, 5, 12)) == expected


def test_parse_timestamp_converts_offsets_to_utc() -> None:
    """Offset timestamps should be converted to UTC."""
    parsed = parse_timestamp("2024-01-05T09:00:00-03:00")

    assert parsed == datetime(2024, 1, 5, 12, tzinfo=timezone.utc)
    assert parsed.utcoffset() == timedelta(0)


def test_parse_timestamp_truncates_long_fractions() -> None:
    """Seven fractional digits should be cut to microseconds."""
    parsed = parse_timestamp("2024-01-05T12:00:00.1234567Z")

    assert parsed.microsecond == 123456


@pytest.mark.parametrize(
    ("raw", "microsecond"),
    [
        ("2024-01-05T12:00:00.1", 100000),
        ("2024-01-05T12:00:00.12", 120000),
        ("2024-01-05T12:00:00.1234", 123400),
        ("2024-01-05T12:00:00.1234567", 123456),
        ("2024-01-05T12:00:00.12-03:00", 120000),
    ],
)
def test_parse_timestamp_normalizes_fraction_length(raw, microsecond) -> None:
    """Trimmed and over-long fractions both resolve to microseconds."""
    parsed = parse_timestamp(raw)

    assert parsed.microsecond == microsecond
    assert parsed.second == 0


def test_parse_timestamp_accepts_plain_dates() -> None:
    """A date is read as midnight UTC."""
    parsed = parse_timestamp(date(2024, 1, 5))

    assert parsed == datetime(2024, 1, 5, tzinfo=timezone.utc)


@pytest.mark.parametrize("raw", ["not a date", "", None, 20240105])
def test_parse_timestamp_rejects_malformed_values(raw) -> None:
    """Unparseable timestamps should raise MalformedTimestamp."""
    with pytest.raises(MalformedTimestamp):
        parse_timestamp(raw)


def test_normalize_query() -> None:
    assert normalize_query("AnA") == "ana"
    assert normalize_query("AnA ") == "ana "
    assert normalize_query("   ") == ""
    assert normalize_query(None) == ""
