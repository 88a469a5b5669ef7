"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class AggregationBucket:
    """One period slice of aggregated cash-flow totals.

    Attributes:
        period_start: First day of the period.
        total_income: Sum of incoming amounts in the period.
        total_expense: Sum of outgoing amounts in the period.
        cumulative_balance: Running balance up to and including the period.
    """

    period_start: date
    total_income: Decimal
    total_expense: Decimal
    cumulative_balance: Decimal

    @property
    def net_balance(self) -> Decimal:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class CashflowProjection:
    """Dense bucket sequence and totals for a date range."""

    granularity: str
    buckets: list[AggregationBucket]
    total_income: Decimal
    total_expense: Decimal

    @property
    def final_balance(self) -> Decimal:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class ResultSummary:
    """Revenue, expense and result of a set of entries."""

    revenue: Decimal
    expense: Decimal

    @property
    def result(self) -> Decimal:
        """Return revenue minus expense."""
        return self.revenue - self.expense


@dataclass(frozen=True)
class DREResult:
    """Cash-basis income statement for one calendar month."""

    year: int
    month: int
    revenue: Decimal
    expense: Decimal
    margin: Decimal
    revenue_by_category: dict[str, Decimal] = field(default_factory=dict)
    expense_by_category: dict[str, Decimal] = field(default_factory=dict)
    entry_count: int = 0

    @property
    def result(self) -> Decimal:
        """Return revenue minus expense."""
        return self.revenue - self.expense


@dataclass(frozen=True)
class DashboardKpis:
    """Headline figures for the dashboard period."""

    revenue: Decimal
    expense: Decimal
    profit: Decimal
    margin: Decimal
    entry_count: int


@dataclass(frozen=True)
class CategoryAmount:
    """Amount aggregated for a given category."""

    category_id: str
    category_name: str
    amount: Decimal


@dataclass(frozen=True)
class AccountReconciliation:
    """Stored versus ledger-derived balance of a bank account."""

    account_id: str
    bank_name: str
    recorded_balance: Decimal
    computed_balance: Decimal

    @property
    def difference(self) -> Decimal:
        """Return recorded minus computed balance."""
        return self.recorded_balance - self.computed_balance


__all__ = [
    "AggregationBucket",
    "CashflowProjection",
    "ResultSummary",
    "DREResult",
    "DashboardKpis",
    "CategoryAmount",
    "AccountReconciliation",
]
