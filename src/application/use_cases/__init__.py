"""Application use cases package."""

from .get_dashboard_summary import DashboardView, GetDashboardSummaryUseCase
from .get_person_totals import GetPersonTotalsUseCase, PersonTotalsView
from .load_snapshot import load_finance_snapshot
from .manage_categories import RegisterCategoryUseCase, RemoveCategoryUseCase
from .manage_people import RegisterPersonUseCase, RemovePersonUseCase
from .register_transaction import RegisterTransactionUseCase

__all__ = [
    "DashboardView",
    "GetDashboardSummaryUseCase",
    "GetPersonTotalsUseCase",
    "PersonTotalsView",
    "load_finance_snapshot",
    "RegisterCategoryUseCase",
    "RemoveCategoryUseCase",
    "RegisterPersonUseCase",
    "RemovePersonUseCase",
    "RegisterTransactionUseCase",
]
