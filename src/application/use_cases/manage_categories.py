"""Use cases to register and remove categories."""

from src.application.ports.finance_api import FinanceApiPort
from src.domain.models import CategoryPurpose
from src.domain.services import validate_category_fields
from src.infrastructure.logging.logger import get_app_logger


class RegisterCategoryUseCase:
    """Register a category through the finance API."""

    def __init__(self, finance_api: FinanceApiPort, logger=None) -> None:
        self._finance_api = finance_api
        self._logger = logger or get_app_logger()

    def execute(self, label: str, purpose: CategoryPurpose) -> str:
        """Validate and submit a new category.

        Raises:
            BusinessRuleViolation: If the label is blank.
        """
        validate_category_fields(label)
        cleaned = label.strip()
        message = self._finance_api.create_category(cleaned, purpose)
        self._logger.info(
            f"Registered category label={cleaned}, purpose={purpose.value}"
        )
        return message


class RemoveCategoryUseCase:
    """Remove a category through the finance API."""

    def __init__(self, finance_api: FinanceApiPort, logger=None) -> None:
        self._finance_api = finance_api
        self._logger = logger or get_app_logger()

    def execute(self, category_id: int) -> str:
        message = self._finance_api.delete_category(category_id)
        self._logger.info(f"Removed category id={category_id}")
        return message


__all__ = ["RegisterCategoryUseCase", "RemoveCategoryUseCase"]
