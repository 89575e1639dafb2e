"""
Settings Module for Sujiko Explorer

Provides persistent storage for user preferences using JSON.
Settings are stored in config.json in the working directory; command line
flags override them for a single run.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug_enabled": False,
    "strategy_name": "lexicographic",
    "analysis_strategy": "vectorized",
    "workers": 1,
    "progress_interval": 1000,
}


def _is_valid(key: str, value: Any) -> bool:
    """Check a saved value has the type of its default; counts must be positive."""
    default = DEFAULT_SETTINGS[key]
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        return isinstance(value, int) and not isinstance(value, bool) and value >= 1
    return isinstance(value, type(default))


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from config.json.

    Args:
        path: Settings file to read (default: SETTINGS_FILE)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid;
        individual values of the wrong type fall back to their defaults.
    """
    settings_file = Path(path) if path is not None else SETTINGS_FILE
    if not settings_file.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(settings_file, 'r', encoding='utf-8') as f:
            settings = json.load(f)
        if not isinstance(settings, dict):
            raise ValueError("top level must be an object")

        # Merge with defaults to handle missing keys
        result = DEFAULT_SETTINGS.copy()
        for key, value in settings.items():
            if key in DEFAULT_SETTINGS and not _is_valid(key, value):
                logger.warning(f"Invalid value for '{key}' in {settings_file}: {value!r}, "
                               f"using default {DEFAULT_SETTINGS[key]!r}")
                continue
            result[key] = value
        logger.debug(f"Settings loaded: {result}")
        return result

    except (json.JSONDecodeError, ValueError, IOError) as e:
        logger.warning(f"Failed to load settings from {settings_file}: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file to write (default: SETTINGS_FILE)
    """
    settings_file = Path(path) if path is not None else SETTINGS_FILE
    try:
        with open(settings_file, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")
