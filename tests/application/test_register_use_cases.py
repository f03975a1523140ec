"""Tests for the register and remove use cases."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.manage_categories import (
    RegisterCategoryUseCase,
    RemoveCategoryUseCase,
)
from src.application.use_cases.manage_people import (
    RegisterPersonUseCase,
    RemovePersonUseCase,
)
from src.application.use_cases.register_transaction import (
    RegisterTransactionUseCase,
)
from src.domain.errors import BusinessRuleViolation
from src.domain.models import CategoryPurpose, Person, TransactionKind


def _api() -> MagicMock:
    api = MagicMock()
    api.fetch_people.return_value = [
        Person(id=1, name="Bob", age=30),
        Person(id=2, name="Lia", age=15),
    ]
    api.create_transaction.return_value = "ok"
    return api


def test_register_person_strips_name_and_submits() -> None:
    api = _api()
    api.create_person.return_value = "Pessoa criada"

    message = RegisterPersonUseCase(api, logger=MagicMock()).execute(
        "  Ana ",
        21,
    )

    assert message == "Pessoa criada"
    api.create_person.assert_called_once_with("Ana", 21)


def test_register_person_rejects_blank_name_before_calling_api() -> None:
    api = _api()

    with pytest.raises(BusinessRuleViolation):
        RegisterPersonUseCase(api, logger=MagicMock()).execute(" ", 21)

    api.create_person.assert_not_called()


def test_remove_person_and_category_delegate_to_api() -> None:
    api = _api()

    RemovePersonUseCase(api, logger=MagicMock()).execute(7)
    RemoveCategoryUseCase(api, logger=MagicMock()).execute(3)

    api.delete_person.assert_called_once_with(7)
    api.delete_category.assert_called_once_with(3)


def test_register_category_submits_purpose() -> None:
    api = _api()

    RegisterCategoryUseCase(api, logger=MagicMock()).execute(
        "Mercado",
        CategoryPurpose.EXPENSE,
    )

    api.create_category.assert_called_once_with(
        "Mercado",
        CategoryPurpose.EXPENSE,
    )


def test_register_transaction_submits_decimal_amount() -> None:
    """The typed amount should reach the API as a Decimal."""
    api = _api()

    message = RegisterTransactionUseCase(api, logger=MagicMock()).execute(
        " Salário ",
        "2500.75",
        TransactionKind.INCOME,
        1,
        4,
    )

    assert message == "ok"
    api.create_transaction.assert_called_once_with(
        "Salário",
        Decimal("2500.75"),
        TransactionKind.INCOME,
        1,
        4,
    )


def test_register_transaction_rejects_income_for_minor() -> None:
    api = _api()

    with pytest.raises(BusinessRuleViolation, match="menor de idade"):
        RegisterTransactionUseCase(api, logger=MagicMock()).execute(
            "Mesada",
            "50",
            TransactionKind.INCOME,
            2,
            4,
        )

    api.create_transaction.assert_not_called()


@pytest.mark.parametrize(
    ("amount", "person_id"),
    [("abc", 1), ("0", 1), ("10", 99)],
)
def test_register_transaction_rejects_invalid_input(amount, person_id) -> None:
    api = _api()

    with pytest.raises(BusinessRuleViolation):
        RegisterTransactionUseCase(api, logger=MagicMock()).execute(
            "Mercado",
            amount,
            TransactionKind.EXPENSE,
            person_id,
            4,
        )

    api.create_transaction.assert_not_called()
