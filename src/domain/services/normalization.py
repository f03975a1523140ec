"""Domain normalization helpers for raw transaction fields."""

import re
from datetime import date, datetime, timezone
from logging import Logger

from src.domain.constants import (
    EXPENSE_CODE,
    EXPENSE_TAGS,
    INCOME_CODE,
    INCOME_TAGS,
)
from src.domain.errors import MalformedTimestamp, UnrecognizedKind
from src.domain.models import TransactionKind

_FRACTION_RE = re.compile(r"(?<=:\d\d)\.(\d+)")


def parse_kind(kind) -> TransactionKind:
    """Read a raw kind tag or code, rejecting unknown values.

    Args:
        kind: Tag ("Receita", "Despesa", "Income", "Expense") or code (2, 1).

    Returns:
        TransactionKind: Normalized kind.

    Raises:
        UnrecognizedKind: If the value is neither a known tag nor code.
    """
    if isinstance(kind, TransactionKind):
        return kind
    if isinstance(kind, bool) or kind is None:
        raise UnrecognizedKind(f"Unrecognized transaction kind: {kind!r}")
    if isinstance(kind, int):
        if kind == INCOME_CODE:
            return TransactionKind.INCOME
        if kind == EXPENSE_CODE:
            return TransactionKind.EXPENSE
        raise UnrecognizedKind(f"Unrecognized transaction kind: {kind!r}")
    if isinstance(kind, str):
        cleaned = kind.strip().lower()
        if cleaned in INCOME_TAGS or cleaned == str(INCOME_CODE):
            return TransactionKind.INCOME
        if cleaned in EXPENSE_TAGS or cleaned == str(EXPENSE_CODE):
            return TransactionKind.EXPENSE
    raise UnrecognizedKind(f"Unrecognized transaction kind: {kind!r}")


def classify_kind(kind, logger: Logger | None = None) -> TransactionKind:
    """Normalize a raw kind, treating unknown values as expense.

    Args:
        kind: Raw kind tag or code.
        logger: Optional logger warned when the value is unknown.

    Returns:
        TransactionKind: INCOME or EXPENSE.
    """
    try:
        return parse_kind(kind)
    except UnrecognizedKind as exc:
        if logger is not None:
            logger.warning(f"{exc}; counting it as expense")
        return TransactionKind.EXPENSE


def _to_microseconds(match: re.Match) -> str:
    return "." + match.group(1)[:6].ljust(6, "0")


def parse_timestamp(value) -> datetime:
    """Parse a transaction timestamp into an aware UTC datetime.

    Naive values are read as UTC. Fractional seconds are padded or
    truncated to microseconds.

    Args:
        value: datetime, date or ISO-8601 string.

    Returns:
        datetime: Timezone-aware datetime in UTC.

    Raises:
        MalformedTimestamp: If the value cannot be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        raw = value.strip()
        if raw[-1] in ("Z", "z"):
            raw = raw[:-1] + "+00:00"
        raw = _FRACTION_RE.sub(_to_microseconds, raw)
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError as exc:
            raise MalformedTimestamp(
                f"Invalid transaction timestamp: {value!r}"
            ) from exc
    else:
        raise MalformedTimestamp(f"Invalid transaction timestamp: {value!r}")
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def normalize_query(query: str | None) -> str:
    """Return the lower-cased search query.

    Blank queries become ''. Surrounding spaces of a non-blank query are
    kept, so "Ana " does not match "Ana".
    """
    if not query or not query.strip():
        return ""
    return query.lower()


__all__ = [
    "parse_kind",
    "classify_kind",
    "parse_timestamp",
    "normalize_query",
]
