"""Tests for loading event manager settings."""

from pathlib import Path

import pytest

from observer_core import ConfigError, EventManagerSettings, default_config_path


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    settings = EventManagerSettings.load(tmp_path / "absent.toml")
    assert settings == EventManagerSettings()
    assert settings.default_priority == 0
    assert settings.log_dispatch is False


def test_load_events_section(tmp_path: Path) -> None:
    config_file = tmp_path / "events.toml"
    config_file.write_text(
        "[events]\ndefault_priority = 25\nlog_dispatch = true\n",
        encoding="utf-8",
    )
    settings = EventManagerSettings.load(config_file)
    assert settings.default_priority == 25
    assert settings.log_dispatch is True


def test_file_without_section_uses_defaults(tmp_path: Path) -> None:
    config_file = tmp_path / "events.toml"
    config_file.write_text("[other]\nvalue = 1\n", encoding="utf-8")
    assert EventManagerSettings.load(str(config_file)) == EventManagerSettings()


@pytest.mark.parametrize(
    "body",
    [
        "[events\n",
        "events = 3\n",
        "[events]\ndefault_priority = 'high'\n",
        "[events]\ndefault_priority = true\n",
        "[events]\nlog_dispatch = 1\n",
        "[events]\nunknown = 1\n",
    ],
)
def test_invalid_settings_raise(tmp_path: Path, body: str) -> None:
    config_file = tmp_path / "events.toml"
    config_file.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError):
        EventManagerSettings.load(config_file)


def test_settings_validate_direct_construction() -> None:
    with pytest.raises(TypeError):
        EventManagerSettings(default_priority="0")  # type: ignore[arg-type]


def test_default_config_path_names_file() -> None:
    assert default_config_path().name == "events.toml"
