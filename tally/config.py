"""Configuration file management for tally."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

DEFAULT_SETTINGS: dict[str, Any] = {
    "currency_symbol": "$",
    "log_level": "WARNING",
}


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "tally" / "config.toml"


def get_default_ledger_path() -> Path:
    """Get the ledger snapshot path used when the config names none."""
    return get_xdg_data_home() / "tally" / "ledger.toml"


def default_settings() -> dict[str, Any]:
    return {"ledger_path": str(get_default_ledger_path()), **DEFAULT_SETTINGS}


def create_default_config(config_path: Path | None = None, ledger_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
        ledger_path: Ledger snapshot location to record. If None, uses default.
    """
    if config_path is None:
        config_path = get_config_path()

    default_config = default_settings()
    if ledger_path is not None:
        default_config["ledger_path"] = str(ledger_path)

    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def load_settings(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration merged over the defaults.

    A missing config file yields the defaults.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Settings dictionary with every default key present.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = {}

    return {**default_settings(), **config}


def get_ledger_path(config_path: Path | None = None) -> Path:
    """Get the configured ledger snapshot path."""
    return Path(load_settings(config_path)["ledger_path"]).expanduser()


def set_setting(key: str, value: Any, config_path: Path | None = None) -> None:
    """Add or update one setting in the config file.

    Args:
        key: Setting name.
        value: Setting value.
        config_path: Path to config file. If None, uses default location.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = default_settings()

    config[key] = value
    save_config(config, config_path)
