"""Configuration management for Bookmark Analyzer.

Stores configuration in ~/.bookmark_analyzer/config.toml
"""

import logging
import tempfile
from pathlib import Path
from typing import Optional, Dict, Any

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for older Python

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"


def get_config_dir() -> Path:
    """Get the Bookmark Analyzer configuration directory.

    Not created here; save_config creates it on first write.
    """
    return Path.home() / ".bookmark_analyzer"


def get_config_file() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.toml"


def load_config() -> Dict[str, Any]:
    """Load configuration from the config file."""
    config_file = get_config_file()
    try:
        with open(config_file, "rb") as f:
            return tomllib.load(f)
    except (FileNotFoundError, NotADirectoryError):
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_file, e)
        return {}


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def save_config(config: Dict[str, Any]) -> Optional[str]:
    """Save configuration to the config file.

    Returns:
        Error message or None if successful.
    """
    config_file = get_config_file()

    # Top-level keys must precede any table header
    lines = []
    for key, value in config.items():
        if not isinstance(value, dict):
            lines.append(f"{key} = {_format_value(value)}")
    for section, values in config.items():
        if isinstance(values, dict):
            lines.append(f"[{section}]")
            for key, value in values.items():
                lines.append(f"{key} = {_format_value(value)}")
            lines.append("")

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            f.write("\n".join(lines))
        return None
    except OSError as e:
        return f"Error saving config: {e}"


def get_extract_config() -> Dict[str, Any]:
    """Get extraction settings."""
    return load_config().get("extract", {})


def get_logging_config() -> Dict[str, Any]:
    """Get logging settings."""
    return load_config().get("logging", {})


def get_temp_dir() -> Path:
    """Directory that receives the temporary copy of a Gecko database."""
    temp_dir = get_extract_config().get("temp_dir")
    if temp_dir:
        return Path(temp_dir).expanduser()
    return Path(tempfile.gettempdir())


def get_browser_override() -> Optional[str]:
    """Browser name forced by config instead of detection, if any."""
    browser = get_extract_config().get("browser")
    if isinstance(browser, str) and browser.strip():
        return browser.strip().lower()
    return None


def get_log_level() -> str:
    level = get_logging_config().get("level", DEFAULT_LOG_LEVEL)
    return str(level).upper()


def create_default_config() -> None:
    """Create a default configuration file if it doesn't exist."""
    config_file = get_config_file()
    if config_file.exists():
        return

    default_config = {
        "logging": {
            "level": DEFAULT_LOG_LEVEL,
        },
    }
    error = save_config(default_config)
    if error:
        logger.warning(error)
