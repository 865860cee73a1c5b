"""Unit tests for spend_forecast.records."""

from __future__ import annotations

import json
from datetime import datetime

import pandas as pd
import pytest

from spend_forecast.records import ExpenseRecord, normalize_expenses, read_expense_file


def test_mixed_inputs_keep_only_usable_rows() -> None:
    rows = [
        ExpenseRecord(date=datetime(2024, 1, 5), amount=10.0),
        {'date': '2024-01-06', 'amount': '12.5'},
        {'date': {'seconds': 1704672000, 'nanoseconds': 0}, 'amount': 5},
        {'date': 1704758400000, 'amount': 7},
        {'date': 'not a date', 'amount': 3},
        {'date': '2024-01-10', 'amount': None},
        {'date': '2024-01-11', 'amount': -4},
        {'amount': 9},
    ]
    df = normalize_expenses(rows)

    assert list(df.columns) == ['date', 'amount']
    assert len(df) == 4
    assert df['amount'].sum() == pytest.approx(34.5)
    assert list(df['date'].dt.day) == [5, 6, 8, 9]


def test_timezone_aware_dates_keep_their_wall_clock_day() -> None:
    df = normalize_expenses([{'date': '2024-01-31T23:30:00-05:00', 'amount': 1}])
    assert df.loc[0, 'date'] == pd.Timestamp('2024-01-31 23:30:00')


def test_export_column_names_are_recognised() -> None:
    source = pd.DataFrame({
        'Transaction Date': ['2024-03-01', '2024-03-02'],
        'Amount': [15.0, 25.0],
        'Description': ['Coffee', 'Lunch'],
    })
    snapshot = source.copy()
    df = normalize_expenses(source)

    assert len(df) == 2
    assert df['amount'].tolist() == [15.0, 25.0]
    pd.testing.assert_frame_equal(source, snapshot)


def test_none_gives_empty_frame() -> None:
    df = normalize_expenses(None)
    assert df.empty
    assert list(df.columns) == ['date', 'amount']


def test_read_csv_export(tmp_path) -> None:
    path = tmp_path / 'expenses.csv'
    path.write_text('date,amount,category\n2024-01-02,10.5,Food\n,4,Misc\n2024-01-04,20,Travel\n')
    df = read_expense_file(path)
    assert len(df) == 2
    assert df['amount'].sum() == pytest.approx(30.5)


def test_read_json_export(tmp_path) -> None:
    path = tmp_path / 'expenses.json'
    path.write_text(json.dumps({'expenses': [
        {'date': '2024-02-01', 'amount': 8, 'category': 'Food'},
        {'date': '2024-02-02', 'amount': 'n/a'},
    ]}))
    df = read_expense_file(path)
    assert len(df) == 1


def test_read_unsupported_extension(tmp_path) -> None:
    path = tmp_path / 'expenses.txt'
    path.write_text('2024-01-01 10')
    with pytest.raises(ValueError):
        read_expense_file(path)
