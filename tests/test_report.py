from datetime import datetime

import pytest

from spend_forecast.report import build_forecast_report


def _history():
    return [{'date': f'2024-{month:02d}-10', 'amount': 2500} for month in range(1, 5)]


def test_report_combines_both_forecasts():
    report = build_forecast_report(
        _history(),
        {'monthly_budget': 2000, 'currency': 'USD'},
        now=datetime(2024, 4, 20),
    )

    assert report['spent_this_month'] == 2500
    assert report['budget_used_percent'] == 100.0
    assert report['current_month'].forecast >= 2500
    assert report['next_month'].forecast == 2500
    assert report['next_month'].target_month == '2024-05'
    assert report['next_month_overrun'] == pytest.approx(500.0)
    assert 'Forecast exceeds budget by $500.00' in report['warnings']
    assert len(report['warnings']) == 2


def test_report_without_expenses():
    report = build_forecast_report([], {'monthly_budget': 1000, 'currency': 'EUR'}, now=datetime(2024, 4, 20))

    assert report['currency_symbol'] == '€'
    assert report['next_month'] is None
    assert report['next_month_overrun'] is None
    assert report['current_month'].forecast == 0
    assert report['warnings'] == []
