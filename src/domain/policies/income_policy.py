"""Policy deciding who may register income."""

from src.domain.constants import MINIMUM_INCOME_AGE
from src.domain.models import Person


def can_receive_income(person: Person) -> bool:
    """Return True when the person is old enough to register income."""
    return person.age >= MINIMUM_INCOME_AGE


__all__ = ["can_receive_income"]
