"""Formatting utilities for currency display."""

from __future__ import annotations

from typing import Union

from . import config

CURRENCY_SYMBOLS = {
    'USD': '$',
    'EUR': '€',
    'GBP': '£',
    'JPY': '¥',
    'INR': '₹',
}


def currency_symbol(code: str) -> str:
    """Return the display symbol for a currency code, ``$`` when unknown.

    Example:
        >>> currency_symbol('EUR')
        '€'
        >>> currency_symbol('CHF')
        '$'
    """
    return CURRENCY_SYMBOLS.get((code or config.DEFAULT_CURRENCY).upper(), '$')


def format_currency(amount: Union[float, int], symbol: str = '$') -> str:
    """Format an amount with a currency symbol and two decimals.

    Example:
        >>> format_currency(1234.5)
        '$1,234.50'
        >>> format_currency(80, symbol='£')
        '£80.00'
    """
    return f"{symbol}{amount:,.2f}"
