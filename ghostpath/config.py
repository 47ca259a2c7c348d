"""
ghostpath configuration

Loads settings from a TOML file. Lookup order: explicit path, the
GHOSTPATH_CONFIG environment variable (a .env file is honoured), then the
default location ~/.config/ghostpath/config.toml. Missing files mean defaults.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

CONFIG_ENV_VAR = "GHOSTPATH_CONFIG"
DEFAULT_CONFIG_PATHS = ["~/.config/ghostpath/config.toml"]

DEFAULT_CONFIG_TEXT = """# ghostpath configuration

[completion]
enabled = true
# Maximum directory entries examined per keystroke; 0 means no limit.
max_entries = 0

[dialog]
flash_seconds = 1.5
start_path = ""

[ui]
rich = true
ghost_style = "dim"
error_style = "bold red"
"""


class ConfigError(Exception):
    """Raised when the configuration file is unreadable or holds invalid values."""


@dataclass
class CompletionConfig:
    enabled: bool = True
    max_entries: int = 0

    @property
    def entry_cap(self) -> Optional[int]:
        return self.max_entries or None


@dataclass
class DialogConfig:
    flash_seconds: float = 1.5
    start_path: str = ""


@dataclass
class UIConfig:
    rich: bool = True
    ghost_style: str = "dim"
    error_style: str = "bold red"


@dataclass
class AppConfig:
    completion: CompletionConfig = field(default_factory=CompletionConfig)
    dialog: DialogConfig = field(default_factory=DialogConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    path: Optional[Path] = None


def find_config_path(cli_path: Optional[str] = None) -> Optional[Path]:
    """Return the first existing config file, honouring CLI path then env var then defaults."""
    load_dotenv()
    candidates = []
    if cli_path:
        candidates.append(cli_path)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        candidates.append(env_path)
    candidates.extend(DEFAULT_CONFIG_PATHS)

    for candidate in candidates:
        path = Path(candidate).expanduser()
        if path.is_file():
            return path.resolve()
    return None


def initialize_default_config(target: Optional[str] = None) -> Path:
    """Write the default config to ``target`` (or the first default path) and return it."""
    path = Path(target or DEFAULT_CONFIG_PATHS[0]).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    if not path.exists():
        path.write_text(DEFAULT_CONFIG_TEXT, encoding="utf-8")
    return path.resolve()


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table")
    return value


def _bool(section: Dict[str, Any], key: str, default: bool, where: str) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{where}.{key} must be true or false")
    return value


def _str(section: Dict[str, Any], key: str, default: str, where: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"{where}.{key} must be a string")
    return value


def _parse_completion(section: Dict[str, Any]) -> CompletionConfig:
    max_entries = section.get("max_entries", 0)
    if isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries < 0:
        raise ConfigError("completion.max_entries must be a non-negative integer")
    return CompletionConfig(
        enabled=_bool(section, "enabled", True, "completion"),
        max_entries=max_entries,
    )


def _parse_dialog(section: Dict[str, Any]) -> DialogConfig:
    flash_seconds = section.get("flash_seconds", 1.5)
    if isinstance(flash_seconds, bool) or not isinstance(flash_seconds, (int, float)) or flash_seconds <= 0:
        raise ConfigError("dialog.flash_seconds must be a positive number")
    return DialogConfig(
        flash_seconds=float(flash_seconds),
        start_path=_str(section, "start_path", "", "dialog"),
    )


def _parse_ui(section: Dict[str, Any]) -> UIConfig:
    return UIConfig(
        rich=_bool(section, "rich", True, "ui"),
        ghost_style=_str(section, "ghost_style", "dim", "ui"),
        error_style=_str(section, "error_style", "bold red", "ui"),
    )


def load_app_config(path: Optional[Path]) -> AppConfig:
    """Load configuration from ``path``; None or a missing file yields defaults."""
    if path is None or not Path(path).is_file():
        return AppConfig(path=Path(path) if path else None)

    try:
        data = tomllib.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    return AppConfig(
        completion=_parse_completion(_section(data, "completion")),
        dialog=_parse_dialog(_section(data, "dialog")),
        ui=_parse_ui(_section(data, "ui")),
        path=Path(path),
    )
