"""Tests for the income statement Sankey model."""

from decimal import Decimal

from finpilot.adapters.interface.streamlit.dre_sankey import (
    DEFICIT_LABEL,
    RESULT_LABEL,
    REVENUE_LABEL,
    SankeyLink,
    build_dre_sankey,
)
from finpilot.domain.constants import UNCATEGORIZED
from finpilot.domain.models import DREResult


def _dre(revenue, expense, revenue_by_category, expense_by_category):
    return DREResult(
        year=2024,
        month=5,
        revenue=Decimal(revenue),
        expense=Decimal(expense),
        margin=Decimal("0"),
        revenue_by_category=revenue_by_category,
        expense_by_category=expense_by_category,
    )


def test_profit_flows_to_result_node() -> None:
    """Revenue categories feed the hub, which feeds expenses and result."""
    result = _dre(
        "1000",
        "600",
        {"sales": Decimal("1000")},
        {"rent": Decimal("600")},
    )

    model = build_dre_sankey(result, {"sales": "Vendas", "rent": "Aluguel"})

    assert model.node_labels == [
        REVENUE_LABEL,
        "Vendas (R)",
        "Aluguel (D)",
        RESULT_LABEL,
    ]
    assert model.links == [
        SankeyLink(1, 0, Decimal("1000")),
        SankeyLink(0, 2, Decimal("600")),
        SankeyLink(0, 3, Decimal("400")),
    ]


def test_deficit_feeds_revenue_node() -> None:
    """A loss adds a deficit source instead of a result target."""
    result = _dre(
        "200",
        "500",
        {"sales": Decimal("200")},
        {UNCATEGORIZED: Decimal("500")},
    )

    model = build_dre_sankey(result, {})

    assert model.node_labels == [
        REVENUE_LABEL,
        "sales (R)",
        DEFICIT_LABEL,
        "Sem Categoria (D)",
    ]
    assert SankeyLink(2, 0, Decimal("300")) in model.links
    assert RESULT_LABEL not in model.node_labels


def test_empty_month_has_no_links() -> None:
    """Months without entries render nothing."""
    model = build_dre_sankey(_dre("0", "0", {}, {}), {})

    assert model.is_empty
    assert model.node_labels == [REVENUE_LABEL]
