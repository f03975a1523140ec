"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation

from src.domain.errors import MalformedAmount


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.

    Args:
        value: Raw numeric value from the API payload or a form.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        MalformedAmount: If the value cannot be read as a finite number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, bool):
        raise MalformedAmount(f"Boolean is not a valid amount: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as exc:
            raise MalformedAmount(f"Invalid amount: {value!r}") from exc
    if not result.is_finite():
        raise MalformedAmount(f"Amount is not finite: {value!r}")
    return result


def coerce_amount(value) -> Decimal:
    """Normalize a transaction amount, rejecting missing or negative values."""
    if value is None:
        raise MalformedAmount("Amount is missing")
    amount = coerce_decimal(value)
    if amount < 0:
        raise MalformedAmount(f"Amount must not be negative: {value!r}")
    return amount


__all__ = ["coerce_decimal", "coerce_amount"]
