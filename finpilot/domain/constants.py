"""Domain constants for ledger analytics."""

from decimal import Decimal

INCOME = "income"
EXPENSE = "expense"
DIRECTIONS = (INCOME, EXPENSE)

# Store vocabulary for ledger directions.
STORE_DIRECTIONS = {
    "entrada": INCOME,
    "saida": EXPENSE,
}

PENDING = "pending"
PAID = "paid"
OVERDUE = "overdue"
OPEN_STATUSES = (PENDING, OVERDUE)

# Store vocabulary for installment statuses.
STORE_STATUSES = {
    "pendente": PENDING,
    "pago": PAID,
    "atrasado": OVERDUE,
}

RECEIVABLE = "receivable"
PAYABLE = "payable"

DISTRIBUTE = "distribute"
DEDUCT_NEXT = "deduct_next"
DIFFERENCE_STRATEGIES = (DISTRIBUTE, DEDUCT_NEXT)

DAY = "day"
WEEK = "week"
MONTH = "month"

MONTHLY_SPAN_DAYS = 90
WEEKLY_SPAN_DAYS = 15

BUDGET_ALERT_THRESHOLD = Decimal("0.80")

UNCATEGORIZED = "uncategorized"
UNCATEGORIZED_LABEL = "Sem Categoria"

DEFAULT_INCOME_CATEGORIES = (
    "VENDAS",
    "SERVIÇOS",
    "OUTRAS ENTRADAS",
    "RENDIMENTOS APL FINANCEIROS",
)
DEFAULT_EXPENSE_CATEGORIES = (
    "IMPOSTOS",
    "MARKETING",
    "SALÁRIOS",
    "CUSTOS",
    "OUTRAS SAÍDAS",
)


__all__ = [
    "INCOME",
    "EXPENSE",
    "DIRECTIONS",
    "STORE_DIRECTIONS",
    "PENDING",
    "PAID",
    "OVERDUE",
    "OPEN_STATUSES",
    "STORE_STATUSES",
    "RECEIVABLE",
    "PAYABLE",
    "DISTRIBUTE",
    "DEDUCT_NEXT",
    "DIFFERENCE_STRATEGIES",
    "DAY",
    "WEEK",
    "MONTH",
    "MONTHLY_SPAN_DAYS",
    "WEEKLY_SPAN_DAYS",
    "BUDGET_ALERT_THRESHOLD",
    "UNCATEGORIZED",
    "UNCATEGORIZED_LABEL",
    "DEFAULT_INCOME_CATEGORIES",
    "DEFAULT_EXPENSE_CATEGORIES",
]
