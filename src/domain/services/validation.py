"""Domain validation helpers for user-submitted records."""

from decimal import Decimal

from src.domain.errors import BusinessRuleViolation
from src.domain.models import Person, TransactionKind
from src.domain.policies import can_receive_income


def validate_person_fields(name: str, age: int) -> None:
    """Reject blank names and negative ages.

    Raises:
        BusinessRuleViolation: If a field is invalid.
    """
    if not name or not name.strip():
        raise BusinessRuleViolation("Informe o nome do morador.")
    if age < 0:
        raise BusinessRuleViolation("A idade não pode ser negativa.")


def validate_category_fields(label: str) -> None:
    """Reject blank category labels."""
    if not label or not label.strip():
        raise BusinessRuleViolation("Informe a descrição da categoria.")


def validate_transaction_fields(
    description: str,
    amount: Decimal,
    kind: TransactionKind,
    person: Person,
) -> None:
    """Validate a new transaction against the household rules.

    Args:
        description: Free text description.
        amount: Amount to record.
        kind: Normalized kind of the transaction.
        person: Person the transaction belongs to.

    Raises:
        BusinessRuleViolation: If the transaction must not be recorded.
    """
    if not description or not description.strip():
        raise BusinessRuleViolation("Informe a descrição da transação.")
    if amount <= 0:
        raise BusinessRuleViolation("O valor deve ser maior que zero.")
    if kind is TransactionKind.INCOME and not can_receive_income(person):
        raise BusinessRuleViolation(
            f"Operação negada: {person.name} é menor de idade."
        )


__all__ = [
    "validate_person_fields",
    "validate_category_fields",
    "validate_transaction_fields",
]
