"""Persistence helpers for the monthly budget and currency settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from . import config
from .formatting import CURRENCY_SYMBOLS

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: Dict[str, Any] = {
    'monthly_budget': config.DEFAULT_MONTHLY_BUDGET,
    'currency': config.DEFAULT_CURRENCY,
}


def load_settings(path: Path | None = None) -> Dict[str, Any]:
    target = path or config.SETTINGS_PATH
    if not target.exists():
        return DEFAULT_SETTINGS.copy()
    try:
        with target.open('r', encoding='utf-8') as handle:
            data = json.load(handle)
    except (json.JSONDecodeError, OSError):
        logger.warning("Could not read settings from %s; using defaults", target)
        return DEFAULT_SETTINGS.copy()
    if not isinstance(data, dict):
        return DEFAULT_SETTINGS.copy()

    settings = DEFAULT_SETTINGS.copy()
    try:
        budget = float(data.get('monthly_budget', settings['monthly_budget']))
    except (TypeError, ValueError):
        budget = settings['monthly_budget']
    if budget >= 0:
        settings['monthly_budget'] = budget
    currency = str(data.get('currency') or '').upper()
    if currency in CURRENCY_SYMBOLS:
        settings['currency'] = currency
    return settings


def save_settings(monthly_budget: float, currency: str, path: Path | None = None) -> Dict[str, Any]:
    """Validate and write the budget settings, returning what was saved."""
    budget = float(monthly_budget)
    if budget < 0:
        raise ValueError(f"Monthly budget must not be negative (got {monthly_budget!r}).")
    code = (currency or '').upper()
    if code not in CURRENCY_SYMBOLS:
        raise ValueError(f"Unsupported currency '{currency}'.")

    target = path or config.SETTINGS_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        'monthly_budget': budget,
        'currency': code,
    }
    with target.open('w', encoding='utf-8') as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)
    return payload
