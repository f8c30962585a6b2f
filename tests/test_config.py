import json
import pytest
from pydantic import ValidationError

from lagindex.config import Settings, load_settings
from lagindex.types import IntervalMode


def test_defaults():
    s = Settings()
    assert s.assign.interval is IntervalMode.EXACT
    assert s.ingest.column is None
    assert s.log.level == "WARNING"


def test_from_env(monkeypatch):
    monkeypatch.setenv("LAGINDEX_ASSIGN__INTERVAL", "Monthly")
    monkeypatch.setenv("LAGINDEX_LOG__LEVEL", "debug")
    s = Settings.from_env()
    assert s.assign.interval is IntervalMode.MONTHLY
    assert s.log.level == "DEBUG"


def test_invalid_values():
    with pytest.raises(ValidationError):
        Settings.model_validate({"assign": {"interval": "weekly"}})
    with pytest.raises(ValidationError):
        Settings.model_validate({"log": {"level": "chatty"}})


def test_load_settings_json(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"assign": {"interval": "daily"}, "ingest": {"column": "date"}}))
    s = load_settings(p)
    assert s.assign.interval is IntervalMode.DAILY
    assert s.ingest.column == "date"


def test_load_settings_yaml(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("assign:\n  interval: annual\nlog:\n  level: INFO\n")
    s = load_settings(p)
    assert s.assign.interval is IntervalMode.ANNUAL
    assert s.log.level == "INFO"


def test_load_settings_requires_mapping(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("- daily\n")
    with pytest.raises(TypeError):
        load_settings(p)


def test_numeric_column_name_kept_as_string():
    s = Settings.model_validate({"ingest": {"column": 2024}})
    assert s.ingest.column == "2024"
