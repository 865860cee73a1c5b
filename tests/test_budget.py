from spend_forecast.budget import budget_overrun, budget_overrun_message, budget_usage_percent
from spend_forecast.formatting import currency_symbol, format_currency


def test_usage_percent_is_capped():
    assert budget_usage_percent(500, 2000) == 25.0
    assert budget_usage_percent(3000, 2000) == 100.0


def test_usage_percent_without_budget():
    assert budget_usage_percent(0, 0) == 0.0
    assert budget_usage_percent(10, 0) == 100.0


def test_overrun_only_when_forecast_exceeds_budget():
    assert budget_overrun(2150, 2000) == 150.0
    assert budget_overrun(2000, 2000) is None
    assert budget_overrun(None, 2000) is None


def test_overrun_message_uses_currency_symbol():
    assert budget_overrun_message(2150, 2000) == 'Forecast exceeds budget by $150.00'
    assert budget_overrun_message(2150, 2000, symbol='€') == 'Forecast exceeds budget by €150.00'
    assert budget_overrun_message(1500, 2000) is None


def test_currency_helpers():
    assert currency_symbol('inr') == '₹'
    assert currency_symbol('CHF') == '$'
    assert format_currency(1234.5) == '$1,234.50'
