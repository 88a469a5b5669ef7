"""CLI adapter printing the income statement (DRE).

``DRE_YEAR`` selects the year (default: current year). When ``DRE_MONTH``
(1-12) is set, only that month is printed; otherwise all twelve months.
"""

from datetime import date
from decimal import Decimal
import os

from finpilot.adapters.cli_utils import format_amount, parse_int
from finpilot.application.use_cases.get_dre import GetDREUseCase
from finpilot.domain.models import DREResult
from finpilot.infrastructure.container import build_ledger_repository
from finpilot.infrastructure.logging.logger import get_app_logger


def _format_line(result: DREResult) -> str:
    return (
        f"{result.year}-{result.month:02d}  "
        f"revenue={format_amount(result.revenue)}  "
        f"expense={format_amount(result.expense)}  "
        f"result={format_amount(result.result)}  "
        f"margin={result.margin}%"
    )


def main() -> None:
    """Run the DRE use case for a month or a whole year."""
    logger = get_app_logger()
    year = parse_int(os.getenv("DRE_YEAR"), logger, "DRE_YEAR")
    month = parse_int(os.getenv("DRE_MONTH"), logger, "DRE_MONTH")
    year = year or date.today().year

    use_case = GetDREUseCase(
        ledger_repository=build_ledger_repository(),
        logger=logger,
    )
    if month is not None:
        print(_format_line(use_case.monthly(month, year)))
        return

    results = use_case.yearly(year)
    for result in results:
        print(_format_line(result))
    revenue = sum((result.revenue for result in results), Decimal("0"))
    expense = sum((result.expense for result in results), Decimal("0"))
    print(
        f"Year {year}: revenue={format_amount(revenue)}, "
        f"expense={format_amount(expense)}, "
        f"result={format_amount(revenue - expense)}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
