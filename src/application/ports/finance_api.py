"""Application port for the household finance API."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Protocol

from src.domain.models import (
    Category,
    CategoryPurpose,
    Person,
    Transaction,
    TransactionKind,
)


@dataclass(frozen=True)
class FinanceSnapshot:
    """People and transactions loaded together for one computation."""

    people: list[Person] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)


class FinanceApiPort(Protocol):
    """Port exposing the remote finance API operations."""

    def fetch_people(self) -> list[Person]:
        """Return every registered person."""

    def fetch_categories(self) -> list[Category]:
        """Return every registered category."""

    def fetch_transactions(self) -> list[Transaction]:
        """Return every recorded transaction."""

    def create_person(self, name: str, age: int) -> str:
        """Register a person and return the API message."""

    def delete_person(self, person_id: int) -> str:
        """Remove a person and return the API message."""

    def create_category(self, label: str, purpose: CategoryPurpose) -> str:
        """Register a category and return the API message."""

    def delete_category(self, category_id: int) -> str:
        """Remove a category and return the API message."""

    def create_transaction(
        self,
        description: str,
        amount: Decimal,
        kind: TransactionKind,
        person_id: int,
        category_id: int,
    ) -> str:
        """Record a transaction and return the API message."""


__all__ = ["FinanceApiPort", "FinanceSnapshot"]
