"""Use case to record an income or expense."""

from src.application.ports.finance_api import FinanceApiPort
from src.domain.errors import BusinessRuleViolation, MalformedAmount
from src.domain.models import TransactionKind
from src.domain.services import validate_transaction_fields
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class RegisterTransactionUseCase:
    """Validate a transaction against household rules and submit it."""

    def __init__(self, finance_api: FinanceApiPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            finance_api: Port used to look up people and record the entry.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._finance_api = finance_api
        self._logger = logger or get_app_logger()

    def execute(
        self,
        description: str,
        amount,
        kind: TransactionKind,
        person_id: int,
        category_id: int,
    ) -> str:
        """Record the transaction.

        Args:
            description: Free text description.
            amount: Amount as typed (str, Decimal or number).
            kind: Income or expense.
            person_id: Identifier of the owning person.
            category_id: Identifier of the category.

        Returns:
            str: Message returned by the API.

        Raises:
            BusinessRuleViolation: If the amount is invalid, the person is
                unknown or a minor tries to register income.
        """
        try:
            value = coerce_decimal(amount)
        except MalformedAmount as exc:
            raise BusinessRuleViolation("Valor inválido.") from exc

        people = {
            person.id: person for person in self._finance_api.fetch_people()
        }
        person = people.get(person_id)
        if person is None:
            raise BusinessRuleViolation("Selecione um morador válido.")

        validate_transaction_fields(description, value, kind, person)
        message = self._finance_api.create_transaction(
            description.strip(),
            value,
            kind,
            person_id,
            category_id,
        )
        self._logger.info(
            f"Recorded {kind.value} of {value} for person id={person_id}"
        )
        return message


__all__ = ["RegisterTransactionUseCase"]
