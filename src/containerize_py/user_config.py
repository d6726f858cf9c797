"""User-level configuration for containerize-py defaults.

Reads from ~/.config/containerize-py/config.yaml. The only recognised key is
``base_image``, the default for ``--from``.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from containerize_py.models import DEFAULT_BASE_IMAGE

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "containerize-py"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

_KNOWN_KEYS = {"base_image"}


def get_config_path() -> Path:
    """Return the path to the user config file."""
    return CONFIG_FILE


def load_user_config() -> dict[str, Any]:
    """Load user configuration from disk.

    Returns an empty dict if the file doesn't exist or is invalid.
    """
    config_path = get_config_path()
    if not config_path.exists():
        return {}

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load user config from {config_path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"User config is not a mapping: {config_path}")
        return {}

    validated: dict[str, Any] = {}
    for key, value in data.items():
        if key not in _KNOWN_KEYS:
            logger.warning(f"Ignoring unknown key '{key}' in user config")
            continue
        if not isinstance(value, str) or not value.strip():
            logger.warning(f"Invalid value '{value}' for '{key}' in user config")
            continue
        validated[key] = value.strip()

    return validated


def get_default_base_image() -> str:
    """Return the base image used when ``--from`` is not given."""
    return load_user_config().get("base_image", DEFAULT_BASE_IMAGE)
