"""Tests for Decimal helpers."""

from decimal import Decimal

import pytest

from src.domain.errors import MalformedAmount
from src.utils.decimal_utils import coerce_amount, coerce_decimal


def test_coerce_decimal_normalizes_values() -> None:
    """Floats go through str so no binary noise is kept."""
    assert coerce_decimal(0.1) == Decimal("0.1")
    assert coerce_decimal("12.50") == Decimal("12.50")
    assert coerce_decimal(None) == Decimal("0")
    value = Decimal("3.3")
    assert coerce_decimal(value) is value


@pytest.mark.parametrize("raw", ["abc", "NaN", "Infinity", True, [1]])
def test_coerce_decimal_rejects_malformed_values(raw) -> None:
    with pytest.raises(MalformedAmount):
        coerce_decimal(raw)


def test_coerce_amount_rejects_negative_values() -> None:
    assert coerce_amount(5) == Decimal("5")
    with pytest.raises(MalformedAmount):
        coerce_amount("-1")


def test_coerce_amount_rejects_missing_values() -> None:
    """Unlike coerce_decimal, a missing amount is not read as zero."""
    with pytest.raises(MalformedAmount):
        coerce_amount(None)
