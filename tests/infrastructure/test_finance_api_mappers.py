"""Tests for finance API payload mapping."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import CategoryPurpose, TransactionKind
from src.infrastructure.finance_api_mappers import (
    category_from_payload,
    kind_to_code,
    map_records,
    person_from_payload,
    purpose_to_label,
    transaction_from_payload,
)


def test_person_and_category_from_payload() -> None:
    person = person_from_payload({"id": 3, "nome": "Raiane", "idade": 27})
    category = category_from_payload(
        {"id": 5, "descricao": "Salário", "finalidade": "Receita"}
    )

    assert (person.id, person.name, person.age) == (3, "Raiane", 27)
    assert category.label == "Salário"
    assert category.purpose is CategoryPurpose.INCOME


def test_transaction_from_payload_keeps_raw_kind_and_timestamp() -> None:
    """Kind and timestamp are kept as received for later normalization."""
    transaction = transaction_from_payload(
        {
            "id": 10,
            "descricao": "Mercado",
            "valor": 120.4,
            "tipo": 1,
            "pessoa": {"id": 3, "nome": "Raiane", "idade": 27},
            "categoria": {"id": 5, "descricao": "Alimentação"},
            "dataTransacao": "2024-03-02T09:00:00Z",
        }
    )

    assert transaction.amount == Decimal("120.4")
    assert transaction.kind == 1
    assert transaction.person.id == 3
    assert transaction.person.name == "Raiane"
    assert transaction.category.label == "Alimentação"
    assert transaction.occurred_at == "2024-03-02T09:00:00Z"


def test_transaction_from_payload_accepts_flat_references() -> None:
    transaction = transaction_from_payload(
        {"id": 1, "valor": "5", "tipo": "Despesa", "idPessoa": 4}
    )

    assert transaction.person.id == 4
    assert transaction.person.name is None
    assert transaction.category.label == ""
    assert transaction.occurred_at is None


def test_map_records_skips_malformed_payloads() -> None:
    """Bad amounts, missing ids and non-dict entries are skipped."""
    logger = MagicMock()
    payloads = [
        {"id": 1, "valor": 10, "tipo": 2, "pessoa": {"id": 1}},
        {"id": 2, "valor": "abc", "tipo": 2, "pessoa": {"id": 1}},
        {"id": 3, "valor": -5, "tipo": 1, "pessoa": {"id": 1}},
        {"valor": 1, "tipo": 1, "pessoa": {"id": 1}},
        {"id": 4, "valor": 1, "tipo": 1},
        "garbage",
    ]

    records = map_records(
        payloads,
        transaction_from_payload,
        logger,
        "transaction",
    )

    assert [record.id for record in records] == [1]
    assert logger.warning.call_count == 5


def test_map_records_skips_transactions_without_amount() -> None:
    """A missing or null ``valor`` is reported instead of read as zero."""
    logger = MagicMock()
    payloads = [
        {"id": 1, "tipo": 1, "pessoa": {"id": 1}},
        {"id": 2, "valor": None, "tipo": 1, "pessoa": {"id": 1}},
        {"id": 3, "valor": 0, "tipo": 1, "pessoa": {"id": 1}},
    ]

    records = map_records(
        payloads,
        transaction_from_payload,
        logger,
        "transaction",
    )

    assert [record.id for record in records] == [3]
    assert records[0].amount == Decimal("0")
    assert logger.warning.call_count == 2


def test_map_records_handles_missing_payload() -> None:
    assert map_records(None, person_from_payload, MagicMock(), "person") == []


def test_wire_codes() -> None:
    assert kind_to_code(TransactionKind.EXPENSE) == 1
    assert kind_to_code(TransactionKind.INCOME) == 2
    assert purpose_to_label(CategoryPurpose.INCOME) == "Receita"
    assert purpose_to_label(CategoryPurpose.EXPENSE) == "Despesa"
