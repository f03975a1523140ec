"""Tests for household validation rules."""

from decimal import Decimal

import pytest

from src.domain.errors import BusinessRuleViolation
from src.domain.models import Person, TransactionKind
from src.domain.policies import can_receive_income
from src.domain.services.validation import (
    validate_category_fields,
    validate_person_fields,
    validate_transaction_fields,
)

ADULT = Person(id=1, name="Bob", age=18)
MINOR = Person(id=2, name="Lia", age=17)


def test_can_receive_income_starts_at_eighteen() -> None:
    assert can_receive_income(ADULT)
    assert not can_receive_income(MINOR)


def test_minor_cannot_register_income() -> None:
    """A minor registering income should be rejected by name."""
    with pytest.raises(BusinessRuleViolation, match="Lia"):
        validate_transaction_fields(
            "Mesada",
            Decimal("50"),
            TransactionKind.INCOME,
            MINOR,
        )


def test_minor_can_register_expense() -> None:
    validate_transaction_fields(
        "Lanche",
        Decimal("12.50"),
        TransactionKind.EXPENSE,
        MINOR,
    )


@pytest.mark.parametrize(
    ("description", "amount"),
    [("", Decimal("10")), ("Mercado", Decimal("0")), ("x", Decimal("-1"))],
)
def test_transaction_requires_description_and_positive_amount(
    description,
    amount,
) -> None:
    with pytest.raises(BusinessRuleViolation):
        validate_transaction_fields(
            description,
            amount,
            TransactionKind.EXPENSE,
            ADULT,
        )


def test_person_and_category_fields() -> None:
    """Blank names, blank labels and negative ages are rejected."""
    validate_person_fields("Ana", 0)
    validate_category_fields("Mercado")
    with pytest.raises(BusinessRuleViolation):
        validate_person_fields("  ", 20)
    with pytest.raises(BusinessRuleViolation):
        validate_person_fields("Ana", -1)
    with pytest.raises(BusinessRuleViolation):
        validate_category_fields("")
