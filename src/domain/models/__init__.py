"""Domain models package."""

from .finance import (
    AggregateTotals,
    CategoryExpense,
    KindTotals,
    PersonTotals,
)
from .household import (
    Category,
    CategoryPurpose,
    CategoryRef,
    DateRange,
    Person,
    PersonRef,
    Transaction,
    TransactionKind,
)

__all__ = [
    "AggregateTotals",
    "CategoryExpense",
    "KindTotals",
    "PersonTotals",
    "Category",
    "CategoryPurpose",
    "CategoryRef",
    "DateRange",
    "Person",
    "PersonRef",
    "Transaction",
    "TransactionKind",
]
