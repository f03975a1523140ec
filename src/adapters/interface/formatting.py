"""Display formatting shared by the interface adapters."""

from datetime import datetime
from decimal import Decimal

from src.domain.errors import MalformedTimestamp
from src.domain.services import parse_timestamp


def format_brl(value: Decimal) -> str:
    """Format an amount as Brazilian Real, e.g. ``R$ -1.234,50``."""
    sign = "-" if value < 0 else ""
    grouped = f"{abs(value):,.2f}"
    swapped = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"R$ {sign}{swapped}"


def format_date(timestamp) -> str:
    """Format a transaction timestamp as ``dd/mm/yyyy`` ('—' if invalid)."""
    try:
        instant: datetime = parse_timestamp(timestamp)
    except MalformedTimestamp:
        return "—"
    return instant.strftime("%d/%m/%Y")


def normalize_amount_input(text: str) -> str:
    """Turn a typed amount into a decimal literal.

    Accepts both ``1234.56`` and the Brazilian ``1.234,56`` notation.
    """
    cleaned = text.strip().replace("R$", "").replace(" ", "")
    if "," in cleaned:
        cleaned = cleaned.replace(".", "").replace(",", ".")
    return cleaned


__all__ = ["format_brl", "format_date", "normalize_amount_input"]
