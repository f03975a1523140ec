"""Domain constants for household finance tracking."""

INCOME_TAGS = ("receita", "income")
EXPENSE_TAGS = ("despesa", "expense")

# Integer codes used by the transactions endpoint.
EXPENSE_CODE = 1
INCOME_CODE = 2

INCOME_LABEL = "Receita"
EXPENSE_LABEL = "Despesa"

MINIMUM_INCOME_AGE = 18

CURRENCY_CODE = "BRL"


__all__ = [
    "INCOME_TAGS",
    "EXPENSE_TAGS",
    "EXPENSE_CODE",
    "INCOME_CODE",
    "INCOME_LABEL",
    "EXPENSE_LABEL",
    "MINIMUM_INCOME_AGE",
    "CURRENCY_CODE",
]
