"""CLI adapter printing the per-resident totals report.

The period and name search come from ``REPORT_START_DATE``,
``REPORT_END_DATE`` (YYYY-MM-DD) and ``REPORT_QUERY``.
"""

from datetime import date
import os

from src.adapters.interface.formatting import format_brl
from src.application.use_cases.get_person_totals import (
    GetPersonTotalsUseCase,
    PersonTotalsView,
)
from src.infrastructure.container import build_finance_api
from src.infrastructure.finance_api_client import FinanceApiError
from src.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _render_report(view: PersonTotalsView) -> str:
    lines = [f"{'Morador':<24}{'Receitas':>18}{'Despesas':>18}{'Saldo':>18}"]
    for row in view.rows:
        lines.append(
            f"{row.person.name:<24}"
            f"{format_brl(row.income):>18}"
            f"{format_brl(row.expense):>18}"
            f"{format_brl(row.balance):>18}"
        )
    lines.append(
        f"{'TOTAL GERAL':<24}"
        f"{format_brl(view.aggregate.income):>18}"
        f"{format_brl(view.aggregate.expense):>18}"
        f"{format_brl(view.aggregate.balance):>18}"
    )
    return "\n".join(lines)


def main() -> None:
    """Print totals per resident for the configured period."""
    logger = get_app_logger()
    start_date = _parse_date(os.getenv("REPORT_START_DATE"), logger)
    end_date = _parse_date(os.getenv("REPORT_END_DATE"), logger)
    query = os.getenv("REPORT_QUERY", "")

    use_case = GetPersonTotalsUseCase(
        finance_api=build_finance_api(),
        logger=logger,
    )
    try:
        view = use_case.execute(
            start_date=start_date,
            end_date=end_date,
            query=query,
        )
    except FinanceApiError as exc:
        logger.error(str(exc))
        return

    print(_render_report(view))


if __name__ == "__main__":  # pragma: no cover
    main()
