"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt
import streamlit as st

from household_ledger.application.use_cases.get_totals_reports import (
    GetCategoryTotalsUseCase,
    GetPersonTotalsUseCase,
    GetTransactionStatsUseCase,
)
from household_ledger.application.use_cases.manage_transactions import (
    ListRecentTransactionsUseCase,
)
from household_ledger.domain.models import (
    CategoryTotalsReport,
    PersonTotalsReport,
    TransactionDetails,
    TransactionStats,
)
from household_ledger.infrastructure.container import build_household_repository

INCOME_COLOR = "#2e7d32"
EXPENSE_COLOR = "#e76f51"


def _fetch_person_totals() -> PersonTotalsReport:
    """Fetch per-person totals from the household database."""
    use_case = GetPersonTotalsUseCase(build_household_repository())
    return use_case.execute()


@st.cache_data(show_spinner=False, ttl=30)
def _load_person_totals() -> PersonTotalsReport:
    """Cached wrapper around _fetch_person_totals."""
    return _fetch_person_totals()


def _fetch_category_totals() -> CategoryTotalsReport:
    """Fetch per-category totals from the household database."""
    use_case = GetCategoryTotalsUseCase(build_household_repository())
    return use_case.execute()


@st.cache_data(show_spinner=False, ttl=30)
def _load_category_totals() -> CategoryTotalsReport:
    return _fetch_category_totals()


def _fetch_stats() -> TransactionStats:
    return GetTransactionStatsUseCase(build_household_repository()).execute()


def _fetch_recent(limit: int) -> Sequence[TransactionDetails]:
    use_case = ListRecentTransactionsUseCase(build_household_repository())
    return use_case.execute(limit)


def _format_currency(value: Decimal) -> str:
    """Format amounts the way the household reports them."""
    formatted = f"{value:,.2f}"
    formatted = formatted.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"R$ {formatted}"


def _prepare_totals_chart_data(
    rows: Sequence[tuple[str, Decimal, Decimal]],
) -> list[dict[str, str | float]]:
    """Flatten (label, income, expense) rows into Altair records.

    Args:
        rows: One tuple per bar group.

    Returns:
        Records with one entry per label and kind.
    """
    data: list[dict[str, str | float]] = []
    for label, income, expense in rows:
        data.append(
            {
                "label": label,
                "kind": "Receitas",
                "amount": float(income),
                "amount_label": _format_currency(income),
            }
        )
        data.append(
            {
                "label": label,
                "kind": "Despesas",
                "amount": float(expense),
                "amount_label": _format_currency(expense),
            }
        )
    return data


def _render_totals_chart(
    rows: Sequence[tuple[str, Decimal, Decimal]],
    title: str,
) -> None:
    """Render a grouped bar chart of income against expense."""
    st.subheader(title)
    if not rows:
        st.info("Nenhum dado disponível para o gráfico.")
        return
    chart = alt.Chart(
        alt.Data(values=_prepare_totals_chart_data(rows))
    ).mark_bar(cornerRadiusTopLeft=4, cornerRadiusTopRight=4).encode(
        x=alt.X("label:N", title=None),
        xOffset=alt.XOffset("kind:N"),
        y=alt.Y("amount:Q", title="Valor"),
        color=alt.Color(
            "kind:N",
            scale=alt.Scale(
                domain=["Receitas", "Despesas"],
                range=[INCOME_COLOR, EXPENSE_COLOR],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("label:N"),
            alt.Tooltip("kind:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _person_rows(
    report: PersonTotalsReport,
) -> list[tuple[str, Decimal, Decimal]]:
    return [
        (row.name, row.total_income, row.total_expense) for row in report.rows
    ]


def _category_rows(
    report: CategoryTotalsReport,
) -> list[tuple[str, Decimal, Decimal]]:
    return [
        (row.description, row.total_income, row.total_expense)
        for row in report.rows
    ]


def _render_recent(transactions: Sequence[TransactionDetails]) -> None:
    st.subheader("Transações recentes")
    if not transactions:
        st.info("Nenhuma transação registrada.")
        return
    data = [
        {
            "Data": item.transaction.created_at.strftime("%d/%m/%Y %H:%M"),
            "Descrição": item.transaction.description,
            "Pessoa": item.person_name,
            "Categoria": item.category_description,
            "Tipo": item.transaction.type.label,
            "Valor": _format_currency(item.transaction.signed_amount),
        }
        for item in transactions
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Controle de Gastos", layout="wide")
    st.title("Controle de Gastos Residenciais")

    page = st.sidebar.selectbox("Página", ["Resumo", "Por pessoa", "Por categoria"])

    if page == "Resumo":
        stats = _fetch_stats()
        income_col, expense_col, balance_col = st.columns(3)
        income_col.metric("Receitas", _format_currency(stats.total_income))
        expense_col.metric("Despesas", _format_currency(stats.total_expense))
        balance_col.metric("Saldo", _format_currency(stats.balance))
        st.caption(f"{stats.total_transactions} transações registradas")
        limit = st.sidebar.slider("Transações recentes", 1, 100, 10)
        _render_recent(_fetch_recent(limit))
    elif page == "Por pessoa":
        report = _load_person_totals()
        _render_totals_chart(_person_rows(report), "Totais por pessoa")
        st.metric(
            "Saldo líquido",
            _format_currency(report.grand_total.balance),
        )
    else:
        report = _load_category_totals()
        _render_totals_chart(_category_rows(report), "Totais por categoria")
        st.metric(
            "Saldo líquido",
            _format_currency(report.grand_total.balance),
        )


if __name__ == "__main__":  # pragma: no cover
    main()
