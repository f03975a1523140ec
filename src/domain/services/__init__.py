"""Domain services package."""

from .filters import (
    filter_by_date_range,
    in_date_range,
    matches_name_search,
    resolve_unique_match,
)
from .finance import (
    compute_aggregate_totals,
    compute_all_person_totals,
    compute_kind_totals,
    compute_totals_for_person,
    filter_person_totals,
    find_orphan_transactions,
    group_expenses_by_category,
    transactions_for_person,
)
from .normalization import (
    classify_kind,
    normalize_query,
    parse_kind,
    parse_timestamp,
)
from .validation import (
    validate_category_fields,
    validate_person_fields,
    validate_transaction_fields,
)

__all__ = [
    "classify_kind",
    "compute_aggregate_totals",
    "compute_all_person_totals",
    "compute_kind_totals",
    "compute_totals_for_person",
    "filter_by_date_range",
    "filter_person_totals",
    "find_orphan_transactions",
    "group_expenses_by_category",
    "in_date_range",
    "matches_name_search",
    "normalize_query",
    "parse_kind",
    "parse_timestamp",
    "resolve_unique_match",
    "transactions_for_person",
    "validate_category_fields",
    "validate_person_fields",
    "validate_transaction_fields",
]
