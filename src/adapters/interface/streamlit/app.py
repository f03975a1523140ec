"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date

import streamlit as st

from src.adapters.interface.formatting import format_brl, normalize_amount_input
from src.adapters.interface.streamlit.charts import (
    RECENT_LIMIT,
    build_category_donut_chart,
    build_kind_bar_chart,
    prepare_transaction_rows,
)
from src.application.ports.finance_api import FinanceSnapshot
from src.application.use_cases.get_dashboard_summary import (
    DashboardView,
    GetDashboardSummaryUseCase,
)
from src.application.use_cases.get_person_totals import (
    GetPersonTotalsUseCase,
    PersonTotalsView,
)
from src.application.use_cases.load_snapshot import load_finance_snapshot
from src.application.use_cases.manage_categories import (
    RegisterCategoryUseCase,
    RemoveCategoryUseCase,
)
from src.application.use_cases.manage_people import (
    RegisterPersonUseCase,
    RemovePersonUseCase,
)
from src.application.use_cases.register_transaction import (
    RegisterTransactionUseCase,
)
from src.domain.constants import EXPENSE_LABEL, INCOME_LABEL
from src.domain.errors import BusinessRuleViolation
from src.domain.models import (
    Category,
    CategoryPurpose,
    Person,
    TransactionKind,
)
from src.infrastructure.container import build_finance_api
from src.infrastructure.finance_api_client import FinanceApiError
from src.infrastructure.logging.logger import get_usage_logger

PAGES = [
    "Dashboard",
    "Totais por morador",
    "Moradores",
    "Categorias",
    "Transações",
]
_FLASH_KEY = "flash_message"


def _fetch_snapshot() -> FinanceSnapshot:
    """Fetch people and transactions from the finance API."""
    return load_finance_snapshot(build_finance_api())


@st.cache_data(show_spinner=False)
def _load_snapshot() -> FinanceSnapshot:
    """Cached wrapper around _fetch_snapshot.

    Cleared after every write, so filter changes only recompute.
    """
    return _fetch_snapshot()


def _compute_dashboard(
    start_date: date | None,
    end_date: date | None,
) -> DashboardView:
    """Compute the dashboard summary over the cached snapshot."""
    use_case = GetDashboardSummaryUseCase(finance_api=build_finance_api())
    return use_case.execute(
        start_date=start_date,
        end_date=end_date,
        snapshot=_load_snapshot(),
    )


def _compute_person_totals(
    start_date: date | None,
    end_date: date | None,
    query: str,
) -> PersonTotalsView:
    """Compute the per-resident totals over the cached snapshot."""
    use_case = GetPersonTotalsUseCase(finance_api=build_finance_api())
    return use_case.execute(
        start_date=start_date,
        end_date=end_date,
        query=query,
        snapshot=_load_snapshot(),
    )


def _load_people() -> Sequence[Person]:
    """Registered residents from the cached snapshot."""
    return _load_snapshot().people


@st.cache_data(show_spinner=False)
def _load_categories() -> Sequence[Category]:
    """Cached list of registered categories."""
    return build_finance_api().fetch_categories()


def _set_flash(kind: str, message: str) -> None:
    st.session_state[_FLASH_KEY] = (kind, message)


def _render_flash() -> None:
    """Show and consume the pending flash message, if any."""
    flash = st.session_state.pop(_FLASH_KEY, None)
    if not flash:
        return
    kind, message = flash
    if kind == "success":
        st.success(message)
    else:
        st.error(message)


def _run_action(action, success_message: str, usage_event: str) -> bool:
    """Run a write action, queue its flash message and refresh cached data.

    Returns:
        bool: True when the action succeeded.
    """
    try:
        action()
    except (BusinessRuleViolation, FinanceApiError) as exc:
        _set_flash("error", str(exc))
        get_usage_logger().warning(f"{usage_event} rejected: {exc}")
        return False
    st.cache_data.clear()
    _set_flash("success", success_message)
    get_usage_logger().info(usage_event)
    return True


def _render_period_filters(
    key_prefix: str,
) -> tuple[date | None, date | None]:
    """Render the optional start/end date inputs."""
    start_col, end_col = st.columns(2)
    start_date = start_col.date_input(
        "Data inicial",
        value=None,
        format="DD/MM/YYYY",
        key=f"{key_prefix}_start",
    )
    end_date = end_col.date_input(
        "Data final",
        value=None,
        format="DD/MM/YYYY",
        key=f"{key_prefix}_end",
    )
    return start_date, end_date


def _render_totals_cards(income, expense, balance) -> None:
    income_col, expense_col, balance_col = st.columns(3)
    income_col.metric("Total Receitas", format_brl(income))
    expense_col.metric("Total Despesas", format_brl(expense))
    balance_col.metric("Saldo Consolidado", format_brl(balance))


def _render_dashboard() -> None:
    """Render household totals, charts and latest movements."""
    st.header("Dashboard")
    st.caption("Cálculo e resumo financeiro.")
    start_date, end_date = _render_period_filters("dashboard")
    view = _compute_dashboard(start_date, end_date)

    _render_totals_cards(
        view.totals.income,
        view.totals.expense,
        view.totals.balance,
    )

    chart_left, chart_right = st.columns(2)
    with chart_left:
        st.subheader("Receitas x Despesas")
        st.altair_chart(build_kind_bar_chart(view.totals), width="stretch")
    with chart_right:
        st.subheader("Despesas por categoria")
        if view.expenses_by_category:
            st.altair_chart(
                build_category_donut_chart(view.expenses_by_category),
                width="stretch",
            )
        else:
            st.info("Nenhuma despesa no período selecionado.")

    st.subheader("Últimas movimentações")
    if not view.transactions:
        st.info("Nenhuma transação encontrada no período selecionado.")
        return
    show_all = False
    if len(view.transactions) > RECENT_LIMIT:
        show_all = st.toggle("Ver todas", value=False)
    st.dataframe(
        prepare_transaction_rows(view.transactions, show_all=show_all),
        width="stretch",
        hide_index=True,
    )


def _render_person_totals() -> None:
    """Render the per-resident report with search and detail panel."""
    st.header("Relatório por moradores")
    st.caption("Resumo de gastos individuais.")
    query = st.text_input("Buscar por nome", placeholder="Digite um nome")
    start_date, end_date = _render_period_filters("totals")
    view = _compute_person_totals(start_date, end_date, query)

    if view.orphan_count:
        st.warning(
            f"{view.orphan_count} transações referenciam moradores "
            f"inexistentes e foram ignoradas."
        )

    if view.selected is not None:
        selected = view.selected
        st.subheader(f"Resumo financeiro — {selected.person.name}")
        _render_totals_cards(
            selected.income,
            selected.expense,
            selected.balance,
        )
        st.markdown(f"**Transações de {selected.person.name}**")
        if view.selected_transactions:
            st.dataframe(
                prepare_transaction_rows(
                    view.selected_transactions,
                    show_all=True,
                ),
                width="stretch",
                hide_index=True,
            )
        else:
            st.caption("Nenhuma transação encontrada.")

    if not view.rows:
        st.info("Nenhuma pessoa encontrada.")
    else:
        data = [
            {
                "Morador": row.person.name,
                "Receitas": format_brl(row.income),
                "Despesas": format_brl(row.expense),
                "Saldo Líquido": format_brl(row.balance),
            }
            for row in view.rows
        ]
        data.append(
            {
                "Morador": "TOTAL GERAL",
                "Receitas": format_brl(view.aggregate.income),
                "Despesas": format_brl(view.aggregate.expense),
                "Saldo Líquido": format_brl(view.aggregate.balance),
            }
        )
        st.dataframe(data, width="stretch", hide_index=True)

    _render_totals_cards(
        view.aggregate.income,
        view.aggregate.expense,
        view.aggregate.balance,
    )


def _render_people() -> None:
    """Render the residents form and list."""
    st.header("Moradores")
    st.caption("Gestão de residentes da casa.")
    api = build_finance_api()

    with st.form("person_form", clear_on_submit=True):
        name = st.text_input("Nome", placeholder="Ex: Jeronimo, Raiane...")
        age = st.number_input("Idade", min_value=0, step=1, value=18)
        if st.form_submit_button("Cadastrar"):
            _run_action(
                lambda: RegisterPersonUseCase(api).execute(name, int(age)),
                "Morador cadastrado com sucesso!",
                f"person registered: {name}",
            )
            st.rerun()

    people = _load_people()
    st.caption(f"{len(people)} moradores cadastrados")
    for person in people:
        name_col, age_col, action_col = st.columns([4, 1, 1])
        name_col.write(person.name)
        age_col.write(f"{person.age} anos")
        if action_col.button("Remover", key=f"delete_person_{person.id}"):
            _run_action(
                lambda: RemovePersonUseCase(api).execute(person.id),
                "Morador removido com sucesso!",
                f"person removed: {person.id}",
            )
            st.rerun()


def _render_categories() -> None:
    """Render the categories form and list."""
    st.header("Categorias")
    api = build_finance_api()

    with st.form("category_form", clear_on_submit=True):
        label = st.text_input("Descrição", placeholder="Ex: Mercado")
        purpose_label = st.selectbox(
            "Finalidade",
            [EXPENSE_LABEL, INCOME_LABEL],
        )
        if st.form_submit_button("Cadastrar"):
            purpose = (
                CategoryPurpose.INCOME
                if purpose_label == INCOME_LABEL
                else CategoryPurpose.EXPENSE
            )
            _run_action(
                lambda: RegisterCategoryUseCase(api).execute(label, purpose),
                "Categoria cadastrada com sucesso!",
                f"category registered: {label}",
            )
            st.rerun()

    for category in _load_categories():
        label_col, purpose_col, action_col = st.columns([4, 1, 1])
        label_col.write(category.label)
        purpose_col.write(
            INCOME_LABEL
            if category.purpose is CategoryPurpose.INCOME
            else EXPENSE_LABEL
        )
        if action_col.button("Remover", key=f"delete_category_{category.id}"):
            _run_action(
                lambda: RemoveCategoryUseCase(api).execute(category.id),
                "Categoria removida com sucesso!",
                f"category removed: {category.id}",
            )
            st.rerun()


def _render_transactions() -> None:
    """Render the new transaction form."""
    st.header("Nova movimentação")
    st.caption("Registre entradas e saídas do seu caixa.")
    api = build_finance_api()
    people = list(_load_people())
    categories = list(_load_categories())
    if not people or not categories:
        st.warning("Cadastre moradores e categorias antes de lançar.")
        return

    with st.form("transaction_form", clear_on_submit=True):
        person = st.selectbox(
            "Quem?",
            people,
            format_func=lambda item: item.name,
        )
        amount = st.text_input("Valor (R$)", placeholder="0,00")
        kind_label = st.radio(
            "Tipo",
            [EXPENSE_LABEL, INCOME_LABEL],
            horizontal=True,
        )
        description = st.text_input(
            "O que é?",
            placeholder="Ex: Compras do mês",
        )
        category = st.selectbox(
            "Categoria",
            categories,
            format_func=lambda item: item.label,
        )
        if st.form_submit_button("Confirmar lançamento"):
            kind = (
                TransactionKind.INCOME
                if kind_label == INCOME_LABEL
                else TransactionKind.EXPENSE
            )
            _run_action(
                lambda: RegisterTransactionUseCase(api).execute(
                    description,
                    normalize_amount_input(amount),
                    kind,
                    person.id,
                    category.id,
                ),
                "Transação registrada com sucesso!",
                f"transaction recorded for person {person.id}",
            )
            st.rerun()


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finanças da Casa", layout="wide")
    st.title("Finanças da Casa")

    page = st.sidebar.radio("Página", PAGES)
    _render_flash()

    renderers = {
        "Dashboard": _render_dashboard,
        "Totais por morador": _render_person_totals,
        "Moradores": _render_people,
        "Categorias": _render_categories,
        "Transações": _render_transactions,
    }
    try:
        renderers[page]()
    except FinanceApiError as exc:
        st.error(f"Erro ao carregar dados: {exc}")


if __name__ == "__main__":  # pragma: no cover
    main()
