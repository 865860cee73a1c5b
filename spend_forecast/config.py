"""Configuration management for the spending forecast engine.

This module centralizes all configuration values including paths,
defaults, and environment variable overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

# Base project root - assumes this file is in spend_forecast/
_PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# Data directories
DATA_DIR = Path(os.getenv("SPEND_FORECAST_DATA_DIR", _PROJECT_ROOT / "data"))

# Budget settings file
SETTINGS_PATH = Path(
    os.getenv("SPEND_FORECAST_SETTINGS_PATH", DATA_DIR / "settings.json")
).resolve()

# Budget defaults used when no settings have been saved yet
DEFAULT_MONTHLY_BUDGET = float(os.getenv("SPEND_FORECAST_MONTHLY_BUDGET", "2000"))
DEFAULT_CURRENCY = os.getenv("SPEND_FORECAST_CURRENCY", "USD").upper()

# Forecasting constants
MOVING_AVERAGE_WINDOW = 3
MIN_REGRESSION_MONTHS = 4
MIN_REGRESSION_DAYS = 2

