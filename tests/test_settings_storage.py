import pytest

from spend_forecast.settings_storage import DEFAULT_SETTINGS, load_settings, save_settings


def test_missing_file_returns_defaults(tmp_path):
    assert load_settings(tmp_path / 'settings.json') == DEFAULT_SETTINGS


def test_round_trip(tmp_path):
    target = tmp_path / 'nested' / 'settings.json'
    saved = save_settings(1500, 'gbp', path=target)

    assert saved == {'monthly_budget': 1500.0, 'currency': 'GBP'}
    assert load_settings(target) == saved


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    target = tmp_path / 'settings.json'
    target.write_text('{not json', encoding='utf-8')
    assert load_settings(target) == DEFAULT_SETTINGS


def test_invalid_stored_values_are_ignored(tmp_path):
    target = tmp_path / 'settings.json'
    target.write_text('{"monthly_budget": -5, "currency": "XYZ"}', encoding='utf-8')
    assert load_settings(target) == DEFAULT_SETTINGS


def test_save_rejects_bad_values(tmp_path):
    with pytest.raises(ValueError):
        save_settings(-1, 'USD', path=tmp_path / 'settings.json')
    with pytest.raises(ValueError):
        save_settings(100, 'ABC', path=tmp_path / 'settings.json')
    assert not (tmp_path / 'settings.json').exists()
