"""Domain policies package."""

from .income_policy import can_receive_income

__all__ = ["can_receive_income"]
