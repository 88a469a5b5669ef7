"""Income statement Sankey presentation logic for the Streamlit UI.

This module contains pure, testable transformations from a ``DREResult``
produced by ``GetDREUseCase`` to a Sankey model and Plotly figure.

The layout is fixed to three columns:
    Receitas por categoria -> Receita -> Despesas por categoria
with one optional node for the month result:
    - ``Resultado`` on the right when revenue exceeds expense,
    - ``Déficit`` on the left when expense exceeds revenue.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from finpilot.domain.constants import UNCATEGORIZED, UNCATEGORIZED_LABEL
from finpilot.domain.models import DREResult

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


REVENUE_LABEL = "Receita"
RESULT_LABEL = "Resultado"
DEFICIT_LABEL = "Déficit"


@dataclass(frozen=True)
class SankeyLink:
    """Sankey link edge."""

    source: int
    target: int
    value: Decimal


@dataclass(frozen=True)
class SankeyModel:
    """Model used by the UI to render a Sankey with stable indices."""

    node_labels: list[str]
    links: list[SankeyLink]

    @property
    def is_empty(self) -> bool:
        return not self.links


def _label(category_id: str, category_names: Mapping[str, str]) -> str:
    if category_id == UNCATEGORIZED:
        return UNCATEGORIZED_LABEL
    return category_names.get(category_id, category_id)


def build_dre_sankey(
    result: DREResult,
    category_names: Mapping[str, str],
) -> SankeyModel:
    """Build the Sankey model of one month's income statement.

    Args:
        result: Monthly income statement.
        category_names: Category display names keyed by id.

    Returns:
        SankeyModel: Nodes and links; categories with a zero amount are
        left out.
    """
    labels: list[str] = [REVENUE_LABEL]
    links: list[SankeyLink] = []
    middle = 0

    for category_id, amount in sorted(result.revenue_by_category.items()):
        if amount <= 0:
            continue
        labels.append(f"{_label(category_id, category_names)} (R)")
        links.append(SankeyLink(len(labels) - 1, middle, amount))

    deficit = result.expense - result.revenue
    if deficit > 0:
        labels.append(DEFICIT_LABEL)
        links.append(SankeyLink(len(labels) - 1, middle, deficit))

    for category_id, amount in sorted(result.expense_by_category.items()):
        if amount <= 0:
            continue
        labels.append(f"{_label(category_id, category_names)} (D)")
        links.append(SankeyLink(middle, len(labels) - 1, amount))

    if result.result > 0:
        labels.append(RESULT_LABEL)
        links.append(SankeyLink(middle, len(labels) - 1, result.result))

    return SankeyModel(node_labels=labels, links=links)


def build_plotly_figure(model: SankeyModel) -> "go.Figure":
    """Build a Plotly Sankey figure from a Sankey model.

    Args:
        model: Precomputed Sankey model.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Sankey(
                arrangement="snap",
                node=dict(
                    pad=10,
                    thickness=12,
                    label=model.node_labels,
                    line=dict(color="rgba(0,0,0,0.25)", width=0.5),
                ),
                link=dict(
                    source=[link.source for link in model.links],
                    target=[link.target for link in model.links],
                    value=[float(link.value) for link in model.links],
                ),
                textfont=dict(size=12),
            )
        ]
    )
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=520,
    )
    return fig


__all__ = [
    "REVENUE_LABEL",
    "RESULT_LABEL",
    "DEFICIT_LABEL",
    "SankeyLink",
    "SankeyModel",
    "build_dre_sankey",
    "build_plotly_figure",
]
