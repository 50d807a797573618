"""Tests for the Streamlit app module."""

from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

from household_ledger.adapters.interface.streamlit import app
from household_ledger.domain.models import (
    GrandTotal,
    PersonTotals,
    PersonTotalsReport,
    Transaction,
    TransactionDetails,
    TransactionType,
)


def test_fetch_person_totals_invokes_use_case(monkeypatch):
    report = object()

    class _FakeUseCase:
        def __init__(self, repository):
            self.repository = repository

        def execute(self):
            return report

    monkeypatch.setattr(app, "build_household_repository", lambda: "repo")
    monkeypatch.setattr(app, "GetPersonTotalsUseCase", _FakeUseCase)

    assert app._fetch_person_totals() is report


def test_format_currency_uses_brazilian_separators():
    assert app._format_currency(Decimal("1234567.5")) == "R$ 1.234.567,50"
    assert app._format_currency(Decimal("-20")) == "R$ -20,00"


def test_prepare_totals_chart_data_emits_two_bars_per_label():
    data = app._prepare_totals_chart_data(
        [("Ana", Decimal("100"), Decimal("40.5"))]
    )

    assert data == [
        {
            "label": "Ana",
            "kind": "Receitas",
            "amount": 100.0,
            "amount_label": "R$ 100,00",
        },
        {
            "label": "Ana",
            "kind": "Despesas",
            "amount": 40.5,
            "amount_label": "R$ 40,50",
        },
    ]


def test_person_rows_follow_report_order():
    report = PersonTotalsReport(
        rows=[
            PersonTotals(1, "Ana", Decimal("10"), Decimal("5"), Decimal("5")),
            PersonTotals(2, "Bruno", Decimal("0"), Decimal("2"), Decimal("-2")),
        ],
        grand_total=GrandTotal(Decimal("10"), Decimal("7"), Decimal("3")),
    )

    assert app._person_rows(report) == [
        ("Ana", Decimal("10"), Decimal("5")),
        ("Bruno", Decimal("0"), Decimal("2")),
    ]


class _FakeStreamlit:
    def __init__(self) -> None:
        self.infos: list[str] = []
        self.subheaders: list[str] = []
        self.dataframe_payload = None

    def subheader(self, text):
        self.subheaders.append(text)

    def info(self, text):
        self.infos.append(text)

    def dataframe(self, data, **kwargs):
        self.dataframe_payload = (data, kwargs)


def test_render_recent_shows_table(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    transaction = Transaction(
        id=1,
        description="Mercado",
        amount=Decimal("12.00"),
        type=TransactionType.EXPENSE,
        created_at=datetime(2024, 2, 3, 14, 5),
        person_id=1,
        category_id=1,
    )

    app._render_recent([TransactionDetails(transaction, "Ana", "Alimentação")])

    rows, _ = fake_st.dataframe_payload
    assert rows[0]["Data"] == "03/02/2024 14:05"
    assert rows[0]["Valor"] == "R$ -12,00"
    assert rows[0]["Tipo"] == "Despesa"


def test_render_recent_empty_shows_info(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    app._render_recent([])

    assert fake_st.dataframe_payload is None
    assert fake_st.infos == ["Nenhuma transação registrada."]


def test_render_totals_chart_without_rows(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    app._render_totals_chart([], "Totais por pessoa")

    assert fake_st.subheaders == ["Totais por pessoa"]
    assert fake_st.infos == ["Nenhum dado disponível para o gráfico."]


def test_main_renders_summary(monkeypatch):
    calls = SimpleNamespace(recent_limit=None)

    class _Column:
        def __init__(self):
            self.metrics = []

        def metric(self, label, value):
            self.metrics.append((label, value))

    columns = [_Column(), _Column(), _Column()]

    class _Sidebar:
        def selectbox(self, label, options):
            return "Resumo"

        def slider(self, label, low, high, default):
            return default

    class _St(_FakeStreamlit):
        sidebar = _Sidebar()

        def set_page_config(self, **kwargs):
            pass

        def title(self, text):
            pass

        def columns(self, count):
            return columns

        def caption(self, text):
            self.caption_text = text

    fake_st = _St()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "_fetch_stats",
        lambda: SimpleNamespace(
            total_income=Decimal("10"),
            total_expense=Decimal("4"),
            balance=Decimal("6"),
            total_transactions=2,
        ),
    )

    def _fake_recent(limit):
        calls.recent_limit = limit
        return []

    monkeypatch.setattr(app, "_fetch_recent", _fake_recent)

    app.main()

    assert columns[2].metrics == [("Saldo", "R$ 6,00")]
    assert fake_st.caption_text == "2 transações registradas"
    assert calls.recent_limit == 10
