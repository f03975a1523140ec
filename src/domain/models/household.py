"""Domain models for residents, categories and transactions."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class TransactionKind(str, Enum):
    """Normalized transaction kind."""

    INCOME = "Income"
    EXPENSE = "Expense"


class CategoryPurpose(str, Enum):
    """Purpose a category was registered for."""

    INCOME = "Income"
    EXPENSE = "Expense"


@dataclass(frozen=True)
class Person:
    """Resident registered in the household.

    Attributes:
        id: Identifier assigned by the API.
        name: Display name.
        age: Age in years.
    """

    id: int
    name: str
    age: int


@dataclass(frozen=True)
class Category:
    """Income or expense category."""

    id: int
    label: str
    purpose: CategoryPurpose


@dataclass(frozen=True)
class PersonRef:
    """Person reference embedded in a transaction payload."""

    id: int
    name: str | None = None
    age: int | None = None


@dataclass(frozen=True)
class CategoryRef:
    """Category reference embedded in a transaction payload."""

    id: int
    label: str


@dataclass(frozen=True)
class Transaction:
    """Recorded income or expense.

    ``kind`` and ``occurred_at`` keep the values as received; use
    ``classify_kind`` and ``parse_timestamp`` to read them.

    Attributes:
        id: Identifier assigned by the API.
        description: Free text description.
        amount: Non-negative amount in BRL.
        kind: Raw kind tag ("Receita"/"Despesa") or code (2/1).
        person: Reference to the owning person.
        category: Reference to the category with its label.
        occurred_at: Transaction timestamp (datetime, ISO string or None).
    """

    id: int
    description: str
    amount: Decimal
    kind: str | int | None
    person: PersonRef
    category: CategoryRef
    occurred_at: datetime | str | None = None


@dataclass(frozen=True)
class DateRange:
    """Optional inclusive calendar date bounds."""

    start: date | None = None
    end: date | None = None

    @property
    def is_bounded(self) -> bool:
        """Return True when at least one bound is set."""
        return self.start is not None or self.end is not None


__all__ = [
    "TransactionKind",
    "CategoryPurpose",
    "Person",
    "Category",
    "PersonRef",
    "CategoryRef",
    "Transaction",
    "DateRange",
]
