"""Streamlit dashboard entry point."""

from collections.abc import Mapping, Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from finpilot.adapters.interface.streamlit.dre_sankey import (
    build_dre_sankey,
    build_plotly_figure,
)
from finpilot.application.use_cases.get_budget import (
    GetBudgetOverviewUseCase,
)
from finpilot.application.use_cases.get_cashflow import GetCashflowUseCase
from finpilot.application.use_cases.get_dashboard_summary import (
    DashboardSummary,
    GetDashboardSummaryUseCase,
)
from finpilot.application.use_cases.get_dre import GetDREUseCase
from finpilot.domain.constants import DAY, WEEK
from finpilot.domain.models import (
    BudgetAlert,
    BudgetLine,
    CashflowProjection,
    DREResult,
)
from finpilot.domain.services.budget import EXCEEDED
from finpilot.infrastructure.container import build_ledger_repository
from finpilot.infrastructure.logging.logger import get_usage_logger
from finpilot.utils.date_utils import month_bounds

MONTH_ABBREVIATIONS = (
    "jan",
    "fev",
    "mar",
    "abr",
    "mai",
    "jun",
    "jul",
    "ago",
    "set",
    "out",
    "nov",
    "dez",
)


def _fetch_cashflow(start_date: date, end_date: date) -> CashflowProjection:
    """Fetch the cash-flow projection from the finance store."""
    use_case = GetCashflowUseCase(ledger_repository=build_ledger_repository())
    return use_case.execute(start_date, end_date)


@st.cache_data(show_spinner=False)
def _load_cashflow(start_date: date, end_date: date) -> CashflowProjection:
    """Cached wrapper around _fetch_cashflow for Streamlit sessions."""
    return _fetch_cashflow(start_date, end_date)


def _fetch_dashboard_summary(
    start_date: date,
    end_date: date,
) -> DashboardSummary:
    """Fetch KPIs, budget alerts and due installments."""
    use_case = GetDashboardSummaryUseCase(
        ledger_repository=build_ledger_repository()
    )
    return use_case.execute(start_date, end_date)


@st.cache_data(show_spinner=False)
def _load_dashboard_summary(
    start_date: date,
    end_date: date,
) -> DashboardSummary:
    """Cached wrapper around _fetch_dashboard_summary."""
    return _fetch_dashboard_summary(start_date, end_date)


def _fetch_dre(year: int) -> list[DREResult]:
    """Fetch the twelve monthly income statements of a year."""
    use_case = GetDREUseCase(ledger_repository=build_ledger_repository())
    return use_case.yearly(year)


@st.cache_data(show_spinner=False)
def _load_dre(year: int) -> list[DREResult]:
    """Cached wrapper around _fetch_dre."""
    return _fetch_dre(year)


def _fetch_category_names() -> dict[str, str]:
    """Fetch category display names keyed by id."""
    repository = build_ledger_repository()
    return {
        category.category_id: category.name
        for category in repository.fetch_categories()
    }


@st.cache_data(show_spinner=False)
def _load_category_names() -> dict[str, str]:
    """Cached wrapper around _fetch_category_names."""
    return _fetch_category_names()


def _fetch_budget_overview(month: date) -> list[BudgetLine]:
    """Fetch the planning table of a month."""
    use_case = GetBudgetOverviewUseCase(
        ledger_repository=build_ledger_repository()
    )
    return use_case.execute(month)


@st.cache_data(show_spinner=False)
def _load_budget_overview(month: date) -> list[BudgetLine]:
    """Cached wrapper around _fetch_budget_overview."""
    return _fetch_budget_overview(month)


def _format_currency(value: Decimal, currency_code: str = "BRL") -> str:
    """Format currency values for display (pt-BR separators)."""
    formatted = f"{value:,.2f}".replace(",", "_")
    formatted = formatted.replace(".", ",").replace("_", ".")
    symbol = "R$" if currency_code == "BRL" else currency_code
    return f"{symbol} {formatted}"


def _bucket_label(period_start: date, granularity: str) -> str:
    """Return the axis label of a cash-flow bucket."""
    if granularity == DAY:
        return period_start.strftime("%d/%m")
    if granularity == WEEK:
        return f"Sem {period_start.strftime('%d/%m')}"
    month = MONTH_ABBREVIATIONS[period_start.month - 1]
    return f"{month}/{period_start.strftime('%y')}"


def _prepare_cashflow_chart_data(
    projection: CashflowProjection,
) -> list[dict[str, str | float]]:
    """Flatten buckets into Altair-ready rows (one per series and bucket).

    Args:
        projection: Cash-flow projection to chart.

    Returns:
        Rows with ``period``, ``order``, ``series`` and ``amount`` keys.
    """
    data: list[dict[str, str | float]] = []
    for order, bucket in enumerate(projection.buckets):
        label = _bucket_label(bucket.period_start, projection.granularity)
        for series, amount in (
            ("Entradas", bucket.total_income),
            ("Saídas", bucket.total_expense),
            ("Saldo acumulado", bucket.cumulative_balance),
        ):
            data.append(
                {
                    "period": label,
                    "order": order,
                    "series": series,
                    "amount": float(amount),
                }
            )
    return data


def _budget_alert_message(alert: BudgetAlert) -> str:
    """Return the user-facing message of a budget alert."""
    if alert.level == EXCEEDED:
        return (
            f"{alert.category_name}: você ultrapassou a meta em "
            f"{_format_currency(alert.over_budget)}."
        )
    return (
        f"{alert.category_name}: você já utilizou "
        f"{_format_currency(alert.realized)} de "
        f"{_format_currency(alert.planned)}."
    )


def _render_cashflow_chart(projection: CashflowProjection) -> None:
    """Render income/expense bars with the cumulative balance line."""
    st.subheader("Fluxo de Caixa")
    if not projection.buckets:
        st.info("Sem movimentações no período.")
        return
    data = _prepare_cashflow_chart_data(projection)
    x_axis = alt.X(
        "period:N",
        sort=alt.SortField("order"),
        title=None,
    )
    bars = alt.Chart(alt.Data(values=data)).transform_filter(
        alt.datum.series != "Saldo acumulado"
    ).mark_bar().encode(
        x=x_axis,
        xOffset="series:N",
        y=alt.Y("amount:Q", title="R$"),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(
                domain=["Entradas", "Saídas", "Saldo acumulado"],
                range=["#2e7d32", "#e76f51", "#1b9aaa"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("period:N"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    )
    line = alt.Chart(alt.Data(values=data)).transform_filter(
        alt.datum.series == "Saldo acumulado"
    ).mark_line(point=True).encode(
        x=x_axis,
        y=alt.Y("amount:Q"),
        color=alt.Color("series:N"),
    )
    st.altair_chart(alt.layer(bars, line), width="stretch")
    st.caption(
        f"Saldo final: {_format_currency(projection.final_balance)}"
    )


def _render_kpis(summary: DashboardSummary) -> None:
    """Render the headline metrics."""
    revenue_col, expense_col, profit_col, margin_col = st.columns(4)
    revenue_col.metric("Receita", _format_currency(summary.kpis.revenue))
    expense_col.metric("Despesa", _format_currency(summary.kpis.expense))
    profit_col.metric("Lucro", _format_currency(summary.kpis.profit))
    margin_col.metric("Margem", f"{summary.kpis.margin}%")


def _render_budget_alerts(alerts: Sequence[BudgetAlert]) -> None:
    """Render budget alerts, most critical first."""
    st.subheader("Alertas de Orçamento")
    if not alerts:
        st.success("Nenhuma categoria perto do limite.")
        return
    for alert in alerts:
        if alert.level == EXCEEDED:
            st.error(_budget_alert_message(alert))
        else:
            st.warning(_budget_alert_message(alert))


def _render_dre_table(results: Sequence[DREResult]) -> None:
    """Render the yearly income statement table."""
    data = [
        {
            "Mês": f"{MONTH_ABBREVIATIONS[result.month - 1]}/{result.year}",
            "Receita": _format_currency(result.revenue),
            "Despesa": _format_currency(result.expense),
            "Resultado": _format_currency(result.result),
            "Margem": f"{result.margin}%",
            "Lançamentos": result.entry_count,
        }
        for result in results
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_dre_sankey(
    result: DREResult,
    category_names: Mapping[str, str],
) -> None:
    """Render the revenue-to-expense Sankey of one month."""
    model = build_dre_sankey(result, category_names)
    if model.is_empty:
        st.info("Sem lançamentos no mês selecionado.")
        return
    st.plotly_chart(build_plotly_figure(model))


def _render_budget_overview(lines: Sequence[BudgetLine]) -> None:
    """Render the monthly planning table."""
    data = [
        {
            "Categoria": line.category_name,
            "Meta receita": _format_currency(line.planned_income),
            "Realizado receita": _format_currency(line.realized_income),
            "Status receita": line.income_status,
            "Meta despesa": _format_currency(line.planned_expense),
            "Realizado despesa": _format_currency(line.realized_expense),
            "Status despesa": line.expense_status,
        }
        for line in lines
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="FinPilot", layout="wide")
    st.title("FinPilot")

    page = st.sidebar.selectbox(
        "Página",
        ["Dashboard", "DRE", "Orçamento"],
    )
    today = date.today()
    get_usage_logger().info(f"page_view page={page}")

    if page == "Dashboard":
        month_start, month_end = month_bounds(today)
        start_date = st.sidebar.date_input("Início", value=month_start)
        end_date = st.sidebar.date_input("Fim", value=month_end)
        if start_date > end_date:
            st.warning("A data inicial deve ser anterior à data final.")
            return
        summary = _load_dashboard_summary(start_date, end_date)
        _render_kpis(summary)
        _render_cashflow_chart(_load_cashflow(start_date, end_date))
        _render_budget_alerts(summary.budget_alerts)
        st.caption(
            f"{len(summary.receivables_due)} contas a receber e "
            f"{len(summary.payables_due)} contas a pagar em aberto"
        )
    elif page == "DRE":
        year = int(
            st.sidebar.number_input(
                "Ano",
                min_value=2000,
                max_value=2100,
                value=today.year,
                step=1,
            )
        )
        results = _load_dre(year)
        st.subheader(f"DRE {year}")
        _render_dre_table(results)
        month = st.sidebar.selectbox(
            "Mês",
            list(range(1, 13)),
            index=today.month - 1,
            format_func=lambda value: MONTH_ABBREVIATIONS[value - 1],
        )
        _render_dre_sankey(results[month - 1], _load_category_names())
    else:
        month = st.sidebar.date_input("Mês", value=today)
        month_start, _ = month_bounds(month)
        st.subheader(
            f"Planejamento {MONTH_ABBREVIATIONS[month_start.month - 1]}"
            f"/{month_start.year}"
        )
        _render_budget_overview(_load_budget_overview(month_start))


if __name__ == "__main__":  # pragma: no cover
    main()
