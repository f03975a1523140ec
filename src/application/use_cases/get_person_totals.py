"""Use case to compute the per-resident totals report."""

from dataclasses import dataclass, field
from datetime import date

from src.application.ports.finance_api import FinanceApiPort, FinanceSnapshot
from src.application.use_cases.load_snapshot import load_finance_snapshot
from src.domain.models import (
    AggregateTotals,
    DateRange,
    PersonTotals,
    Transaction,
)
from src.domain.services import (
    compute_aggregate_totals,
    compute_all_person_totals,
    filter_person_totals,
    find_orphan_transactions,
    resolve_unique_match,
    transactions_for_person,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class PersonTotalsView:
    """Per-resident totals and the optional detail selection.

    Attributes:
        rows: Totals of the people matching the search, in API order.
        aggregate: Totals summed across ``rows``.
        selected: Totals of the single person matching the search, if any.
        selected_transactions: The selected person's transactions in range.
        orphan_count: Transactions referencing unknown people.
    """

    rows: list[PersonTotals]
    aggregate: AggregateTotals
    selected: PersonTotals | None = None
    selected_transactions: list[Transaction] = field(default_factory=list)
    orphan_count: int = 0


class GetPersonTotalsUseCase:
    """Compute per-resident income, expense and balance."""

    def __init__(
        self,
        finance_api: FinanceApiPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            finance_api: Port providing people and transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._finance_api = finance_api
        self._logger = logger or get_app_logger()

    def execute(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        query: str | None = None,
        snapshot: FinanceSnapshot | None = None,
    ) -> PersonTotalsView:
        """Return the totals report for the period and search.

        Args:
            start_date: Optional first day of the period.
            end_date: Optional last day of the period.
            query: Optional case-insensitive name search.
            snapshot: Already loaded data. When omitted, people and
                transactions are fetched from the finance API.

        Returns:
            PersonTotalsView: Rows, aggregate and detail selection.
        """
        if snapshot is None:
            snapshot = load_finance_snapshot(self._finance_api)
            self._logger.info(
                f"Fetched {len(snapshot.people)} people and "
                f"{len(snapshot.transactions)} transactions"
            )
        date_range = DateRange(start=start_date, end=end_date)

        orphans = find_orphan_transactions(
            snapshot.people,
            snapshot.transactions,
        )
        for orphan in orphans:
            self._logger.warning(str(orphan))

        all_totals = compute_all_person_totals(
            snapshot.people,
            snapshot.transactions,
            date_range,
            logger=self._logger,
        )
        rows = filter_person_totals(all_totals, query)
        aggregate = compute_aggregate_totals(rows)

        selected = None
        selected_transactions: list[Transaction] = []
        person = resolve_unique_match(snapshot.people, query)
        if person is not None:
            selected = next(
                row for row in all_totals if row.person.id == person.id
            )
            selected_transactions = transactions_for_person(
                person,
                snapshot.transactions,
                date_range,
            )

        self._logger.info(
            f"Person totals computed: rows={len(rows)}, "
            f"income={aggregate.income}, expense={aggregate.expense}"
        )
        return PersonTotalsView(
            rows=rows,
            aggregate=aggregate,
            selected=selected,
            selected_transactions=selected_transactions,
            orphan_count=len(orphans),
        )


__all__ = ["GetPersonTotalsUseCase", "PersonTotalsView"]
