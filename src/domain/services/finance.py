"""Domain services for per-person and household finance aggregates."""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from logging import Logger

from src.domain.errors import MissingReference
from src.domain.models import (
    AggregateTotals,
    CategoryExpense,
    DateRange,
    KindTotals,
    Person,
    PersonTotals,
    Transaction,
    TransactionKind,
)
from src.domain.services.filters import (
    filter_by_date_range,
    matches_name_search,
)
from src.domain.services.normalization import classify_kind


def transactions_for_person(
    person: Person,
    transactions: Iterable[Transaction],
    date_range: DateRange | None = None,
    logger: Logger | None = None,
) -> list[Transaction]:
    """Return the person's transactions inside the range, in input order."""
    owned = [
        transaction
        for transaction in transactions
        if transaction.person.id == person.id
    ]
    return filter_by_date_range(owned, date_range, logger)


def compute_kind_totals(
    transactions: Iterable[Transaction],
    date_range: DateRange | None = None,
    logger: Logger | None = None,
) -> KindTotals:
    """Sum income and expense amounts of transactions inside the range.

    Args:
        transactions: Transactions to aggregate.
        date_range: Optional inclusive date bounds.
        logger: Optional logger for data-quality warnings.

    Returns:
        KindTotals: Income and expense sums.
    """
    income = Decimal("0")
    expense = Decimal("0")
    for transaction in filter_by_date_range(transactions, date_range, logger):
        if classify_kind(transaction.kind, logger) is TransactionKind.INCOME:
            income += transaction.amount
        else:
            expense += transaction.amount
    return KindTotals(income=income, expense=expense)


def compute_totals_for_person(
    person: Person,
    transactions: Iterable[Transaction],
    date_range: DateRange | None = None,
    logger: Logger | None = None,
) -> PersonTotals:
    """Compute income, expense and balance for one person.

    Args:
        person: Person to aggregate.
        transactions: All loaded transactions; others' entries are ignored.
        date_range: Optional inclusive date bounds.
        logger: Optional logger for data-quality warnings.

    Returns:
        PersonTotals: Totals for the person, zero when there is no activity.
    """
    totals = compute_kind_totals(
        transactions_for_person(person, transactions, None),
        date_range,
        logger,
    )
    return PersonTotals(
        person=person,
        income=totals.income,
        expense=totals.expense,
    )


def compute_all_person_totals(
    people: Iterable[Person],
    transactions: Iterable[Transaction],
    date_range: DateRange | None = None,
    logger: Logger | None = None,
) -> list[PersonTotals]:
    """Compute totals for every person, preserving the people order."""
    snapshot = list(transactions)
    return [
        compute_totals_for_person(person, snapshot, date_range, logger)
        for person in people
    ]


def filter_person_totals(
    person_totals: Iterable[PersonTotals],
    query: str | None,
) -> list[PersonTotals]:
    """Keep the rows whose person name matches the search query."""
    return [
        row for row in person_totals if matches_name_search(row.person, query)
    ]


def compute_aggregate_totals(
    person_totals: Iterable[PersonTotals],
) -> AggregateTotals:
    """Sum income and expense across person totals.

    The aggregate balance is derived from the two sums.
    """
    income = Decimal("0")
    expense = Decimal("0")
    for row in person_totals:
        income += row.income
        expense += row.expense
    return AggregateTotals(income=income, expense=expense)


def group_expenses_by_category(
    transactions: Iterable[Transaction],
    date_range: DateRange | None = None,
    logger: Logger | None = None,
) -> list[CategoryExpense]:
    """Sum expense amounts per category label.

    Categories sharing a label are merged. Labels appear in the order of
    their first expense.

    Args:
        transactions: Transactions to group.
        date_range: Optional inclusive date bounds.
        logger: Optional logger for data-quality warnings.

    Returns:
        list[CategoryExpense]: One entry per label.
    """
    totals: dict[str, Decimal] = {}
    for transaction in filter_by_date_range(transactions, date_range, logger):
        if classify_kind(transaction.kind, logger) is not TransactionKind.EXPENSE:
            continue
        label = transaction.category.label
        totals[label] = totals.get(label, Decimal("0")) + transaction.amount
    return [
        CategoryExpense(label=label, amount=amount)
        for label, amount in totals.items()
    ]


def find_orphan_transactions(
    people: Sequence[Person],
    transactions: Iterable[Transaction],
) -> list[MissingReference]:
    """Describe transactions whose person is not among the loaded people."""
    known_ids = {person.id for person in people}
    return [
        MissingReference(transaction.id, transaction.person.id)
        for transaction in transactions
        if transaction.person.id not in known_ids
    ]


__all__ = [
    "transactions_for_person",
    "compute_kind_totals",
    "compute_totals_for_person",
    "compute_all_person_totals",
    "filter_person_totals",
    "compute_aggregate_totals",
    "group_expenses_by_category",
    "find_orphan_transactions",
]
