"""Mapping between finance API payloads and domain models.

The API uses Portuguese field names (``nome``, ``idade``, ``descricao``,
``finalidade``, ``valor``, ``tipo``, ``pessoa``, ``categoria``,
``dataTransacao``).
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from src.domain.constants import (
    EXPENSE_CODE,
    EXPENSE_LABEL,
    INCOME_CODE,
    INCOME_LABEL,
)
from src.domain.errors import FinanceDataError
from src.domain.models import (
    Category,
    CategoryPurpose,
    CategoryRef,
    Person,
    PersonRef,
    Transaction,
    TransactionKind,
)
from src.domain.services.normalization import parse_kind
from src.utils.decimal_utils import coerce_amount

T = TypeVar("T")


def person_from_payload(payload: dict[str, Any]) -> Person:
    """Build a Person from a ``pessoa`` payload."""
    return Person(
        id=int(payload["id"]),
        name=str(payload["nome"]),
        age=int(payload.get("idade") or 0),
    )


def category_from_payload(payload: dict[str, Any]) -> Category:
    """Build a Category from a ``categoria`` payload."""
    kind = parse_kind(payload.get("finalidade"))
    purpose = (
        CategoryPurpose.INCOME
        if kind is TransactionKind.INCOME
        else CategoryPurpose.EXPENSE
    )
    return Category(
        id=int(payload["id"]),
        label=str(payload["descricao"]),
        purpose=purpose,
    )


def transaction_from_payload(payload: dict[str, Any]) -> Transaction:
    """Build a Transaction from a ``transacao`` payload.

    The kind and timestamp are kept as received. The amount must be a
    non-negative number.
    """
    person_payload = payload.get("pessoa") or {}
    person_id = person_payload.get("id", payload.get("idPessoa"))
    category_payload = payload.get("categoria") or {}
    category_id = category_payload.get("id", payload.get("idCategoria"))
    raw_age = person_payload.get("idade")
    return Transaction(
        id=int(payload["id"]),
        description=str(payload.get("descricao") or ""),
        amount=coerce_amount(payload.get("valor")),
        kind=payload.get("tipo"),
        person=PersonRef(
            id=int(person_id),
            name=person_payload.get("nome"),
            age=int(raw_age) if raw_age is not None else None,
        ),
        category=CategoryRef(
            id=int(category_id) if category_id is not None else 0,
            label=str(category_payload.get("descricao") or ""),
        ),
        occurred_at=payload.get("dataTransacao"),
    )


def map_records(
    payloads: Iterable[Any] | None,
    mapper: Callable[[dict[str, Any]], T],
    logger,
    record_name: str,
) -> list[T]:
    """Map payloads with ``mapper``, skipping records that do not fit.

    Args:
        payloads: Raw records from the ``dados`` field.
        mapper: Function building one domain model.
        logger: Logger warned about skipped records.
        record_name: Name used in warnings.

    Returns:
        list[T]: Mapped records in payload order.
    """
    records: list[T] = []
    for payload in payloads or []:
        try:
            records.append(mapper(payload))
        except (
            AttributeError,
            FinanceDataError,
            KeyError,
            TypeError,
            ValueError,
        ) as exc:
            logger.warning(
                f"Skipping malformed {record_name} {payload!r}: {exc}"
            )
    return records


def kind_to_code(kind: TransactionKind) -> int:
    """Return the integer code the API expects for a kind."""
    return INCOME_CODE if kind is TransactionKind.INCOME else EXPENSE_CODE


def purpose_to_label(purpose: CategoryPurpose) -> str:
    """Return the API label for a category purpose."""
    return INCOME_LABEL if purpose is CategoryPurpose.INCOME else EXPENSE_LABEL


__all__ = [
    "person_from_payload",
    "category_from_payload",
    "transaction_from_payload",
    "map_records",
    "kind_to_code",
    "purpose_to_label",
]
