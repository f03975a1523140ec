"""Use case to compute the household dashboard summary."""

from dataclasses import dataclass
from datetime import date

from src.application.ports.finance_api import FinanceApiPort, FinanceSnapshot
from src.domain.models import (
    CategoryExpense,
    DateRange,
    KindTotals,
    Transaction,
)
from src.domain.services import (
    compute_kind_totals,
    filter_by_date_range,
    group_expenses_by_category,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DashboardView:
    """Household totals, expense breakdown and movements for a period."""

    totals: KindTotals
    expenses_by_category: list[CategoryExpense]
    transactions: list[Transaction]


class GetDashboardSummaryUseCase:
    """Compute household totals over every transaction in a period."""

    def __init__(
        self,
        finance_api: FinanceApiPort,
        logger=None,
    ) -> None:
        self._finance_api = finance_api
        self._logger = logger or get_app_logger()

    def execute(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        snapshot: FinanceSnapshot | None = None,
    ) -> DashboardView:
        """Return totals and the expense breakdown for the period.

        Args:
            start_date: Optional first day of the period.
            end_date: Optional last day of the period.
            snapshot: Already loaded data. When omitted, transactions are
                fetched from the finance API.

        Returns:
            DashboardView: Totals, category breakdown and transactions.
        """
        if snapshot is None:
            transactions = self._finance_api.fetch_transactions()
            self._logger.info(f"Fetched {len(transactions)} transactions")
        else:
            transactions = snapshot.transactions
        date_range = DateRange(start=start_date, end=end_date)

        in_range = filter_by_date_range(
            transactions,
            date_range,
            logger=self._logger,
        )
        totals = compute_kind_totals(in_range, logger=self._logger)
        by_category = group_expenses_by_category(in_range)

        self._logger.info(
            f"Dashboard totals computed: income={totals.income}, "
            f"expense={totals.expense}, categories={len(by_category)}"
        )
        return DashboardView(
            totals=totals,
            expenses_by_category=by_category,
            transactions=in_range,
        )


__all__ = ["GetDashboardSummaryUseCase", "DashboardView"]
