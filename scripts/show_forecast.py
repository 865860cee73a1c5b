#!/usr/bin/env python3
"""Print current and next month spending forecasts for an expense export."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from spend_forecast import build_forecast_report, read_expense_file
from spend_forecast.formatting import format_currency
from spend_forecast.settings_storage import load_settings


def main(path: Path, settings_path: Optional[Path] = None, now: Optional[datetime] = None) -> None:
    expenses = read_expense_file(path)
    if expenses.empty:
        print("No usable expenses found.")
        return

    report = build_forecast_report(expenses, load_settings(settings_path), now=now)
    symbol = report['currency_symbol']
    current = report['current_month']
    upcoming = report['next_month']

    print(f"Expenses loaded: {len(expenses)}")
    print(f"Monthly budget: {format_currency(report['monthly_budget'], symbol)}")
    print(
        f"Spent in {current.month}: {format_currency(report['spent_this_month'], symbol)} "
        f"({report['budget_used_percent']:.1f}% used)"
    )
    print(f"Projected total for {current.month}: {format_currency(current.forecast, symbol)}")
    if current.message:
        print(f"  {current.message}")
    if upcoming is not None:
        print(f"Forecast for {upcoming.target_month}: {format_currency(upcoming.forecast, symbol)}")
        print(f"  {upcoming.message}")
        print("\nMonthly totals:")
        for month, total in upcoming.monthly_totals.items():
            print(f"  {month}  {format_currency(total, symbol)}")
    for warning in report['warnings']:
        print(f"\n⚠️  {warning}")


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Show spending forecasts for an expense export.')
    parser.add_argument('path', type=Path, help='CSV or JSON file with date and amount columns')
    parser.add_argument('--settings', type=Path, default=None, help='Budget settings JSON file')
    parser.add_argument('--as-of', default=None, help='Reference date for the current month (YYYY-MM-DD)')
    parser.add_argument('--verbose', action='store_true', help='Log forecasting details')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    as_of = datetime.strptime(args.as_of, '%Y-%m-%d') if args.as_of else None
    main(args.path, settings_path=args.settings, now=as_of)
