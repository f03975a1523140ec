"""Domain error taxonomy.

Data-quality errors describe bad records coming from the remote API. The
aggregation services never let them escape: malformed timestamps exclude a
transaction from bounded ranges, unknown kinds fall back to expense and
orphaned transactions are only reported.
"""


class FinanceDataError(ValueError):
    """Base class for malformed or inconsistent finance records."""


class MalformedTimestamp(FinanceDataError):
    """A transaction timestamp could not be parsed."""


class MalformedAmount(FinanceDataError):
    """A transaction amount could not be read as a non-negative decimal."""


class UnrecognizedKind(FinanceDataError):
    """A transaction kind is neither a known tag nor a known code."""


class MissingReference(FinanceDataError):
    """A transaction references a person absent from the loaded people."""

    def __init__(self, transaction_id: int, person_id: int | None) -> None:
        super().__init__(
            f"Transaction {transaction_id} references unknown person "
            f"{person_id}"
        )
        self.transaction_id = transaction_id
        self.person_id = person_id


class BusinessRuleViolation(ValueError):
    """Input rejected by a client-side business rule before submission."""


__all__ = [
    "FinanceDataError",
    "MalformedTimestamp",
    "MalformedAmount",
    "UnrecognizedKind",
    "MissingReference",
    "BusinessRuleViolation",
]
