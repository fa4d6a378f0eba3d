"""Settings for event managers, stored in a TOML ``[events]`` table."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
import tomllib

from platformdirs import user_config_dir

from .errors import ConfigError

DEFAULT_APP_NAME = "observer-core"
CONFIG_FILE_NAME = "events.toml"


def default_config_path() -> Path:
    """Return the platform-specific default path of the settings file."""

    base_dir = Path(user_config_dir(DEFAULT_APP_NAME, appauthor=False))
    return base_dir / CONFIG_FILE_NAME


@dataclass(frozen=True)
class EventManagerSettings:
    """Tunables shared by every manager built with these settings."""

    default_priority: int = 0
    log_dispatch: bool = False

    def __post_init__(self) -> None:
        _expect("default_priority", self.default_priority, int)
        _expect("log_dispatch", self.log_dispatch, bool)

    @classmethod
    def load(cls, path: Path | str | None = None) -> "EventManagerSettings":
        """Load settings from ``path`` (or the default location).

        A missing file yields the defaults.
        """

        config_path = Path(path) if path is not None else default_config_path()
        if not config_path.exists():
            return cls()

        try:
            with config_path.open("rb") as handle:
                document = tomllib.load(handle)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise ConfigError(f"unable to read settings at {config_path}") from exc

        section = document.get("events", {})
        if not isinstance(section, dict):
            raise ConfigError("malformed [events] section")

        unknown = sorted(set(section) - {"default_priority", "log_dispatch"})
        if unknown:
            raise ConfigError(f"unknown keys in [events]: {', '.join(unknown)}")

        try:
            return cls(**section)
        except TypeError as exc:
            raise ConfigError(str(exc)) from exc


def _expect(label: str, value: Any, kind: type) -> None:
    # bool is an int subclass; keep the two apart
    if kind is int and isinstance(value, bool):
        raise TypeError(f"'{label}' must be an integer")
    if not isinstance(value, kind):
        raise TypeError(f"'{label}' must be of type {kind.__name__}")
