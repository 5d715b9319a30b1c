# ============================================================================
# HookMonitor - Configuration Tests
# ============================================================================

import pytest

from HookMonitor.config import Config
from HookMonitor.errors import ConfigurationError


def test_defaults():
    config = Config()
    assert config.monitor.trigger_param == "hook_monitor"
    assert config.monitor.entry_priority == -9999
    assert config.monitor.exit_priority == 9999
    assert config.monitor.kinds == ["action", "filter"]
    assert config.report.slow_threshold_seconds == 0.1
    assert config.report.precision == 2
    assert config.sink.output_dir == "runs"


def test_from_yaml(tmp_path):
    path = tmp_path / "hooks.yaml"
    path.write_text("report:\n  slow_threshold_seconds: 0.5\nmonitor:\n  kinds: [action]\n", encoding="utf-8")

    config = Config.from_yaml(str(path))

    assert config.report.slow_threshold_seconds == 0.5
    assert config.monitor.kinds == ["action"]
    assert config.report.precision == 2


def test_from_yaml_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert Config.from_yaml(str(path)) == Config()


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.from_yaml(str(tmp_path / "nope.yaml"))


def test_from_yaml_invalid_values(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("monitor:\n  kinds: []\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        Config.from_yaml(str(path))


def test_from_yaml_not_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        Config.from_yaml(str(path))


def test_env_overrides(tmp_path, monkeypatch):
    path = tmp_path / "hooks.yaml"
    path.write_text("report:\n  precision: 2\n", encoding="utf-8")
    monkeypatch.setenv("HOOKMONITOR_REPORT_SLOW_THRESHOLD_SECONDS", "0.25")
    monkeypatch.setenv("HOOKMONITOR_MONITOR_TRIGGER_PARAM", "debug_hooks")
    monkeypatch.setenv("HOOKMONITOR_LOGGING_LEVEL", "DEBUG")
    monkeypatch.setenv("HOOKMONITOR_REPORT_NOT_A_FIELD", "1")

    config = Config.from_yaml(str(path))

    assert config.report.slow_threshold_seconds == 0.25
    assert config.monitor.trigger_param == "debug_hooks"
    assert config.logging.level == "DEBUG"


def test_from_default_applies_env(monkeypatch):
    monkeypatch.setenv("HOOKMONITOR_REPORT_TOP_FREQUENT", "3")
    assert Config.from_default().report.top_frequent == 3


def test_parse_env_value():
    assert Config._parse_env_value("true") is True
    assert Config._parse_env_value("no") is False
    assert Config._parse_env_value("7") == 7
    assert Config._parse_env_value("0.5") == 0.5
    assert Config._parse_env_value("text") == "text"


def test_env_override_for_list_field(monkeypatch):
    monkeypatch.setenv("HOOKMONITOR_MONITOR_KINDS", "filter")
    assert Config.from_default().monitor.kinds == ["filter"]

    monkeypatch.setenv("HOOKMONITOR_MONITOR_KINDS", "action, filter")
    assert Config.from_default().monitor.kinds == ["action", "filter"]


def test_invalid_env_override_raises_configuration_error(monkeypatch):
    monkeypatch.setenv("HOOKMONITOR_MONITOR_KINDS", "signal")
    with pytest.raises(ConfigurationError):
        Config.from_default()


def test_invalid_env_override_without_config_file(monkeypatch):
    monkeypatch.setenv("HOOKMONITOR_REPORT_PRECISION", "two")
    monkeypatch.setattr("HookMonitor.config.Path.exists", lambda self: False)

    with pytest.raises(ConfigurationError):
        Config.from_default()


def test_sink_export_options():
    config = Config()
    assert config.sink.write_jsonl is False
    assert config.sink.json_indent is None
