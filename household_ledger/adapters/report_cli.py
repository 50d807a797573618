"""CLI adapter printing the per-person or per-category totals report."""

import argparse
from collections.abc import Sequence

from household_ledger.application.use_cases.get_totals_reports import (
    GetCategoryTotalsUseCase,
    GetPersonTotalsUseCase,
)
from household_ledger.domain.models import GrandTotal
from household_ledger.infrastructure.container import build_household_repository
from household_ledger.infrastructure.logging.logger import get_app_logger


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print income, expense and balance totals."
    )
    parser.add_argument(
        "--by",
        choices=("person", "category"),
        default="person",
        help="Group totals by person (default) or by category.",
    )
    return parser.parse_args(argv)


def _format_row(label: str, income, expense, balance) -> str:
    return f"{label:<30} {income:>14,.2f} {expense:>14,.2f} {balance:>14,.2f}"


def _print_report(
    rows: Sequence[tuple[str, object, object, object]],
    grand_total: GrandTotal,
) -> None:
    print(f"{'':<30} {'Receitas':>14} {'Despesas':>14} {'Saldo':>14}")
    for row in rows:
        print(_format_row(*row))
    print(
        _format_row(
            "TOTAL",
            grand_total.total_income,
            grand_total.total_expense,
            grand_total.balance,
        )
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Compute the requested report and print it as a table."""
    args = _parse_args(argv)
    logger = get_app_logger()
    repository = build_household_repository()

    if args.by == "category":
        report = GetCategoryTotalsUseCase(repository, logger=logger).execute()
        rows = [
            (row.description, row.total_income, row.total_expense, row.balance)
            for row in report.rows
        ]
    else:
        report = GetPersonTotalsUseCase(repository, logger=logger).execute()
        rows = [
            (row.name, row.total_income, row.total_expense, row.balance)
            for row in report.rows
        ]
    _print_report(rows, report.grand_total)


if __name__ == "__main__":  # pragma: no cover
    main()
