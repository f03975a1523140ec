"""Use cases to register and remove residents."""

from src.application.ports.finance_api import FinanceApiPort
from src.domain.services import validate_person_fields
from src.infrastructure.logging.logger import get_app_logger


class RegisterPersonUseCase:
    """Register a resident through the finance API."""

    def __init__(self, finance_api: FinanceApiPort, logger=None) -> None:
        self._finance_api = finance_api
        self._logger = logger or get_app_logger()

    def execute(self, name: str, age: int) -> str:
        """Validate and submit a new resident.

        Args:
            name: Resident name; surrounding spaces are removed.
            age: Age in years.

        Returns:
            str: Message returned by the API.

        Raises:
            BusinessRuleViolation: If the name is blank or the age negative.
        """
        validate_person_fields(name, age)
        cleaned = name.strip()
        message = self._finance_api.create_person(cleaned, age)
        self._logger.info(f"Registered person name={cleaned}, age={age}")
        return message


class RemovePersonUseCase:
    """Remove a resident through the finance API."""

    def __init__(self, finance_api: FinanceApiPort, logger=None) -> None:
        self._finance_api = finance_api
        self._logger = logger or get_app_logger()

    def execute(self, person_id: int) -> str:
        message = self._finance_api.delete_person(person_id)
        self._logger.info(f"Removed person id={person_id}")
        return message


__all__ = ["RegisterPersonUseCase", "RemovePersonUseCase"]
