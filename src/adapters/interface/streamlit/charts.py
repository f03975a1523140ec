"""Chart and table preparation for the Streamlit dashboard.

Data preparation is kept in plain functions returning Altair-ready rows so
it can be tested without a running Streamlit session.
"""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt

from src.adapters.interface.formatting import format_brl, format_date
from src.domain.constants import EXPENSE_LABEL, INCOME_LABEL
from src.domain.models import (
    CategoryExpense,
    KindTotals,
    Transaction,
    TransactionKind,
)
from src.domain.services import classify_kind

KIND_COLORS = {INCOME_LABEL: "#10b981", EXPENSE_LABEL: "#f43f5e"}
CATEGORY_PALETTE = [
    "#ef4444",
    "#f97316",
    "#eab308",
    "#22c55e",
    "#06b6d4",
    "#6366f1",
    "#a855f7",
]
OTHER_LABEL = "Outras"
RECENT_LIMIT = 3


def prepare_kind_chart_data(
    totals: KindTotals,
) -> list[dict[str, str | float]]:
    """Return the two bars of the income versus expense chart."""
    return [
        {
            "kind": INCOME_LABEL,
            "amount": float(totals.income),
            "amount_label": format_brl(totals.income),
        },
        {
            "kind": EXPENSE_LABEL,
            "amount": float(totals.expense),
            "amount_label": format_brl(totals.expense),
        },
    ]


def prepare_category_chart_data(
    expenses: Sequence[CategoryExpense],
    max_categories: int = 7,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data keeping the first categories in order.

    Categories past ``max_categories`` are summed into a single "Outras"
    slice.

    Args:
        expenses: Expense totals by category label.
        max_categories: Maximum slices before grouping the rest.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    kept = list(expenses[:max_categories])
    rest = expenses[max_categories:]
    other_amount = sum((item.amount for item in rest), start=Decimal("0"))
    if rest and other_amount != 0:
        kept.append(CategoryExpense(label=OTHER_LABEL, amount=other_amount))
    total_amount = sum(
        (item.amount for item in expenses),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for item in kept:
        share = (
            (item.amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": item.label,
                "amount": float(item.amount),
                "amount_label": format_brl(item.amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def prepare_transaction_rows(
    transactions: Sequence[Transaction],
    show_all: bool = False,
) -> list[dict[str, str]]:
    """Return table rows for the movements list.

    Only the first ``RECENT_LIMIT`` transactions are listed unless
    ``show_all`` is set.
    """
    shown = transactions if show_all else transactions[:RECENT_LIMIT]
    rows = []
    for transaction in shown:
        is_income = classify_kind(transaction.kind) is TransactionKind.INCOME
        sign = "+" if is_income else "-"
        rows.append(
            {
                "Data": format_date(transaction.occurred_at),
                "Descrição": transaction.description,
                "Categoria": transaction.category.label,
                "Morador": transaction.person.name or "",
                "Tipo": INCOME_LABEL if is_income else EXPENSE_LABEL,
                "Valor": f"{sign} {format_brl(transaction.amount)}",
            }
        )
    return rows


def build_kind_bar_chart(totals: KindTotals) -> alt.LayerChart:
    """Build the income versus expense bar chart."""
    data = prepare_kind_chart_data(totals)
    base = alt.Chart(alt.Data(values=data)).encode(
        x=alt.X("kind:N", title=None, sort=[INCOME_LABEL, EXPENSE_LABEL]),
        y=alt.Y("amount:Q", axis=None),
    )
    bars = base.mark_bar(
        size=45,
        cornerRadiusTopLeft=8,
        cornerRadiusTopRight=8,
    ).encode(
        color=alt.Color(
            "kind:N",
            scale=alt.Scale(
                domain=list(KIND_COLORS),
                range=list(KIND_COLORS.values()),
            ),
            legend=None,
        ),
        tooltip=[alt.Tooltip("kind:N"), alt.Tooltip("amount_label:N")],
    )
    labels = base.mark_text(dy=-10).encode(text="amount_label:N")
    return alt.layer(bars, labels).properties(height=250)


def build_category_donut_chart(
    expenses: Sequence[CategoryExpense],
    chart_size: int = 260,
) -> alt.Chart:
    """Build the expenses by category donut chart."""
    data, _ = prepare_category_chart_data(expenses)
    return alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.3,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            sort=[row["category"] for row in data],
            scale=alt.Scale(range=CATEGORY_PALETTE),
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(width=chart_size, height=chart_size)


__all__ = [
    "prepare_kind_chart_data",
    "prepare_category_chart_data",
    "prepare_transaction_rows",
    "build_kind_bar_chart",
    "build_category_donut_chart",
]
