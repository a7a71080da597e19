import json

import pytest

from expense_insights.config import TIMEZONE_ENV, InsightsConfig, load_config, resolve_config, save_config


@pytest.fixture(autouse=True)
def _no_timezone_env(monkeypatch):
    monkeypatch.delenv(TIMEZONE_ENV, raising=False)


def test_defaults_match_documented_tables():
    config = InsightsConfig()
    assert config.budget_allocation['Bills'] == 0.50
    assert config.category_limits['Travel'] == 8.0
    assert config.high_average_transaction == 50.0
    assert config.trend_cap == 999.0


def test_load_config_from_json(tmp_path):
    target = tmp_path / 'insights.json'
    target.write_text(json.dumps({'high_average_transaction': 75, 'timezone': 'Europe/Berlin'}), encoding='utf-8')
    config = load_config(target, dominance_share=80.0)
    assert config.high_average_transaction == 75
    assert config.timezone == 'Europe/Berlin'
    assert config.dominance_share == 80.0


def test_unknown_keys_are_rejected(tmp_path):
    target = tmp_path / 'insights.json'
    target.write_text(json.dumps({'high_avg': 75}), encoding='utf-8')
    with pytest.raises(ValueError, match='high_avg'):
        load_config(target)


def test_unreadable_config_raises(tmp_path):
    target = tmp_path / 'broken.json'
    target.write_text('{not json', encoding='utf-8')
    with pytest.raises(ValueError):
        load_config(target)


def test_save_and_reload(tmp_path):
    target = tmp_path / 'nested' / 'insights.json'
    original = load_config(None, warning_pattern_penalty=15, savings_rate_penalties=((5.0, 30), (15.0, 5)))
    save_config(original, target)
    assert load_config(target) == original


def test_unknown_timezone_is_rejected():
    with pytest.raises(ValueError, match='Mars/Olympus'):
        InsightsConfig(timezone='Mars/Olympus')
    with pytest.raises(ValueError, match='Mars/Olympus'):
        load_config(None, timezone='Mars/Olympus')


def test_timezone_env_overrides_file_but_not_keywords(tmp_path, monkeypatch):
    target = tmp_path / 'insights.json'
    target.write_text(json.dumps({'timezone': 'Europe/Berlin'}), encoding='utf-8')
    monkeypatch.setenv(TIMEZONE_ENV, 'Asia/Tokyo')
    assert load_config(target).timezone == 'Asia/Tokyo'
    assert load_config(target, timezone='UTC').timezone == 'UTC'
    assert InsightsConfig().timezone == 'Asia/Tokyo'


def test_default_tables_are_not_shared():
    first = resolve_config(None)
    first.budget_allocation['Bills'] = 0.9
    assert resolve_config(None).budget_allocation['Bills'] == 0.50
    assert InsightsConfig().category_limits is not InsightsConfig().category_limits
