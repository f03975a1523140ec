"""Domain package for business rules and core models."""

from .constants import MINIMUM_INCOME_AGE
from .errors import (
    BusinessRuleViolation,
    FinanceDataError,
    MalformedAmount,
    MalformedTimestamp,
    MissingReference,
    UnrecognizedKind,
)
from .models import (
    AggregateTotals,
    Category,
    CategoryExpense,
    CategoryPurpose,
    CategoryRef,
    DateRange,
    KindTotals,
    Person,
    PersonRef,
    PersonTotals,
    Transaction,
    TransactionKind,
)
from .policies import can_receive_income
from .services import (
    classify_kind,
    compute_aggregate_totals,
    compute_all_person_totals,
    compute_kind_totals,
    compute_totals_for_person,
    group_expenses_by_category,
    in_date_range,
    matches_name_search,
    resolve_unique_match,
)

__all__ = [
    "AggregateTotals",
    "Category",
    "CategoryExpense",
    "CategoryPurpose",
    "CategoryRef",
    "DateRange",
    "KindTotals",
    "Person",
    "PersonRef",
    "PersonTotals",
    "Transaction",
    "TransactionKind",
    "MINIMUM_INCOME_AGE",
    "BusinessRuleViolation",
    "FinanceDataError",
    "MalformedAmount",
    "MalformedTimestamp",
    "MissingReference",
    "UnrecognizedKind",
    "can_receive_income",
    "classify_kind",
    "compute_aggregate_totals",
    "compute_all_person_totals",
    "compute_kind_totals",
    "compute_totals_for_person",
    "group_expenses_by_category",
    "in_date_range",
    "matches_name_search",
    "resolve_unique_match",
]
