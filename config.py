"""Configuration management for Bankapp.

Reads configuration from ~/.config/bankapp.toml and creates default config if needed.
Only application settings live here; account data is never written to disk.
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import tomllib
import tomli_w


class ConfigError(Exception):
    """Raised when the configuration file exists but cannot be parsed."""


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    log_level: str
    console_log_level: str
    log_dir: Path
    log_file_enabled: bool
    menu_title: str

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        base_dir = Path.home() / "data" / "bankapp"
        return cls(
            base_dir=base_dir,
            log_level="INFO",
            console_log_level="WARNING",
            log_dir=base_dir / "logs",
            log_file_enabled=True,
            menu_title="Bank Menu",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "bankapp.toml"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Args:
        config_path: Optional explicit path; defaults to get_config_path().

    Returns:
        Config object with loaded or default values.

    Raises:
        ConfigError: If the file exists but is not valid TOML.
    """
    config_path = config_path or get_config_path()

    if not config_path.exists():
        config = Config.default()
        _write_config(config, config_path)
        return config

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e

    defaults = Config.default()

    # Parse with defaults for any missing values
    base_dir = Path(data.get("base_dir", defaults.base_dir)).expanduser()

    log_config = data.get("logging", {})
    log_level = log_config.get("level", defaults.log_level)
    console_log_level = log_config.get("console_level", defaults.console_log_level)
    log_dir = Path(log_config.get("log_dir", base_dir / "logs")).expanduser()
    log_file_enabled = log_config.get("file_enabled", defaults.log_file_enabled)

    menu_config = data.get("menu", {})
    menu_title = menu_config.get("title", defaults.menu_title)

    return Config(
        base_dir=base_dir,
        log_level=log_level,
        console_log_level=console_log_level,
        log_dir=log_dir,
        log_file_enabled=log_file_enabled,
        menu_title=menu_title,
    )


def _write_config(config: Config, config_path: Path) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
        config_path: Destination file.
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "logging": {
            "level": config.log_level,
            "console_level": config.console_log_level,
            "log_dir": str(config.log_dir),
            "file_enabled": config.log_file_enabled,
        },
        "menu": {
            "title": config.menu_title,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
