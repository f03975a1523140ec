"""Composition root for wiring infrastructure adapters."""

from src.application.ports.finance_api import FinanceApiPort
from src.infrastructure.finance_api_client import RequestsFinanceApiClient
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import FinanceApiSettings


def build_finance_api(
    settings: FinanceApiSettings | None = None,
) -> FinanceApiPort:
    """Return the finance API client configured from the environment."""
    resolved = settings or FinanceApiSettings.from_env()
    return RequestsFinanceApiClient(resolved, logger=get_app_logger())


__all__ = ["build_finance_api"]
