"""CLI adapter printing the cash-flow projection for a date range.

The range is read from ``CASHFLOW_START_DATE`` and ``CASHFLOW_END_DATE``
(YYYY-MM-DD). Missing bounds default to the current month.
"""

from datetime import date
import os

from finpilot.adapters.cli_utils import format_amount, parse_date
from finpilot.application.use_cases.get_cashflow import GetCashflowUseCase
from finpilot.infrastructure.container import build_ledger_repository
from finpilot.infrastructure.logging.logger import get_app_logger
from finpilot.utils.date_utils import month_bounds


def main() -> None:
    """Run the cash-flow use case and print one line per bucket."""
    logger = get_app_logger()
    default_start, default_end = month_bounds(date.today())
    start_date = (
        parse_date(os.getenv("CASHFLOW_START_DATE"), logger) or default_start
    )
    end_date = parse_date(os.getenv("CASHFLOW_END_DATE"), logger) or default_end

    use_case = GetCashflowUseCase(
        ledger_repository=build_ledger_repository(),
        logger=logger,
    )
    projection = use_case.execute(start_date, end_date)

    print(
        f"Cash flow {start_date} -> {end_date} "
        f"(granularity={projection.granularity})"
    )
    for bucket in projection.buckets:
        print(
            f"{bucket.period_start.isoformat()}  "
            f"in={format_amount(bucket.total_income)}  "
            f"out={format_amount(bucket.total_expense)}  "
            f"balance={format_amount(bucket.cumulative_balance)}"
        )
    print(
        f"Total income={format_amount(projection.total_income)}, "
        f"total expense={format_amount(projection.total_expense)}, "
        f"final balance={format_amount(projection.final_balance)}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
