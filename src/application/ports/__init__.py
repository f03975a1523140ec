"""Application ports package."""

from .finance_api import FinanceApiPort, FinanceSnapshot

__all__ = ["FinanceApiPort", "FinanceSnapshot"]
