"""Domain models for financial aggregates."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.household import Person


@dataclass(frozen=True)
class PersonTotals:
    """Income, expense and balance of one person over a filter.

    Attributes:
        person: Person the totals belong to.
        income: Sum of income amounts.
        expense: Sum of expense amounts.
    """

    person: Person
    income: Decimal
    expense: Decimal

    @property
    def balance(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class AggregateTotals:
    """Totals summed across a list of PersonTotals."""

    income: Decimal
    expense: Decimal

    @property
    def balance(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class KindTotals:
    """Income and expense totals over a flat list of transactions."""

    income: Decimal
    expense: Decimal

    @property
    def balance(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class CategoryExpense:
    """Expense amount aggregated for a category label."""

    label: str
    amount: Decimal


__all__ = [
    "PersonTotals",
    "AggregateTotals",
    "KindTotals",
    "CategoryExpense",
]
