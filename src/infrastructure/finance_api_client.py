"""HTTP adapter for the household finance API built on ``requests``."""

from decimal import Decimal
from typing import Any

import requests

from src.application.ports.finance_api import FinanceApiPort
from src.domain.models import (
    Category,
    CategoryPurpose,
    Person,
    Transaction,
    TransactionKind,
)
from src.infrastructure.finance_api_mappers import (
    category_from_payload,
    kind_to_code,
    map_records,
    person_from_payload,
    purpose_to_label,
    transaction_from_payload,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import FinanceApiSettings

PEOPLE_LIST_PATH = "/pessoa/BuscarPessoas"
PEOPLE_CREATE_PATH = "/pessoa/CriarPessoas"
PEOPLE_DELETE_PATH = "/pessoa/DeletarPessoas"
CATEGORIES_LIST_PATH = "/Categoria/Buscar"
CATEGORIES_CREATE_PATH = "/Categoria/Criar"
CATEGORIES_DELETE_PATH = "/Categoria/Excluir"
TRANSACTIONS_LIST_PATH = "/Transacoes/BuscarTodas"
TRANSACTIONS_CREATE_PATH = "/Transacoes/CriarTransacao"


class FinanceApiError(RuntimeError):
    """Raised when the finance API cannot be reached or rejects a call.

    Attributes:
        status_code: HTTP status when a response was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RequestsFinanceApiClient(FinanceApiPort):
    """FinanceApiPort implementation over a ``requests.Session``.

    Every response is an envelope ``{"dados": ..., "mensagem": ...}``.
    """

    def __init__(
        self,
        settings: FinanceApiSettings,
        session: requests.Session | None = None,
        logger=None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: API location and timeout.
            session: Optional session, mainly for tests.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._settings = settings
        self._session = session or requests.Session()
        self._logger = logger or get_app_logger()

    def fetch_people(self) -> list[Person]:
        payload, _ = self._request("GET", PEOPLE_LIST_PATH)
        return map_records(
            payload,
            person_from_payload,
            self._logger,
            "person",
        )

    def fetch_categories(self) -> list[Category]:
        payload, _ = self._request("GET", CATEGORIES_LIST_PATH)
        return map_records(
            payload,
            category_from_payload,
            self._logger,
            "category",
        )

    def fetch_transactions(self) -> list[Transaction]:
        payload, _ = self._request("GET", TRANSACTIONS_LIST_PATH)
        return map_records(
            payload,
            transaction_from_payload,
            self._logger,
            "transaction",
        )

    def create_person(self, name: str, age: int) -> str:
        _, message = self._request(
            "POST",
            PEOPLE_CREATE_PATH,
            json={"nome": name, "idade": age},
        )
        return message

    def delete_person(self, person_id: int) -> str:
        _, message = self._request(
            "DELETE",
            PEOPLE_DELETE_PATH,
            params={"id": person_id},
        )
        return message

    def create_category(self, label: str, purpose: CategoryPurpose) -> str:
        _, message = self._request(
            "POST",
            CATEGORIES_CREATE_PATH,
            json={"descricao": label, "finalidade": purpose_to_label(purpose)},
        )
        return message

    def delete_category(self, category_id: int) -> str:
        _, message = self._request(
            "DELETE",
            CATEGORIES_DELETE_PATH,
            params={"id": category_id},
        )
        return message

    def create_transaction(
        self,
        description: str,
        amount: Decimal,
        kind: TransactionKind,
        person_id: int,
        category_id: int,
    ) -> str:
        _, message = self._request(
            "POST",
            TRANSACTIONS_CREATE_PATH,
            json={
                "descricao": description,
                "valor": float(amount),
                "tipo": kind_to_code(kind),
                "idPessoa": person_id,
                "idCategoria": category_id,
            },
        )
        return message

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> tuple[Any, str]:
        """Send a request and unwrap the response envelope.

        Returns:
            tuple: The ``dados`` payload and the ``mensagem`` text.

        Raises:
            FinanceApiError: On network errors, error statuses or
                non-JSON bodies.
        """
        url = f"{self._settings.base_url}{path}"
        try:
            response = self._session.request(
                method,
                url,
                params=params,
                json=json,
                timeout=self._settings.timeout,
            )
        except requests.RequestException as exc:
            self._logger.error(f"{method} {url} failed: {exc}")
            raise FinanceApiError(
                f"Não foi possível conectar à API: {exc}"
            ) from exc

        body = self._decode(response)
        message = str(body.get("mensagem") or "") if body else ""
        if not response.ok:
            self._logger.error(
                f"{method} {url} returned {response.status_code}: {message}"
            )
            raise FinanceApiError(
                message or f"Erro HTTP {response.status_code}",
                status_code=response.status_code,
            )
        if body is None:
            if response.content:
                raise FinanceApiError(
                    f"Resposta inválida da API em {path}",
                    status_code=response.status_code,
                )
            return None, ""
        return body.get("dados"), message

    @staticmethod
    def _decode(response: requests.Response) -> dict[str, Any] | None:
        if not response.content:
            return None
        try:
            body = response.json()
        except ValueError:
            return None
        return body if isinstance(body, dict) else None


__all__ = ["FinanceApiError", "RequestsFinanceApiClient"]
