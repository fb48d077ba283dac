"""User settings for the editor.

Settings live in a JSON file in the platform config directory (or the file
named by ``MODIT_CONFIG``). A missing file means defaults; a broken file or
bad values are logged and replaced by defaults so the editor always starts.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants
from .cursor import VerticalMotion

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "settings.json"


@dataclass
class EditorSettings:
    line_numbers: bool = True
    vertical_motion: VerticalMotion = VerticalMotion.PRESERVE
    strip_placeholder_on_save: bool = False


def default_settings_path() -> Path:
    """Return the settings file path, honouring the MODIT_CONFIG override."""
    override = os.environ.get(EditorConstants.CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path(platformdirs.user_config_dir("modit")) / SETTINGS_FILENAME


def _read_settings_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning("Settings file has invalid format (not a dict), ignoring")
        return {}
    return data


def settings_from_dict(data: Dict[str, Any]) -> EditorSettings:
    """Build settings from a raw mapping, keeping defaults for bad entries."""
    settings = EditorSettings()
    known = {f.name for f in fields(EditorSettings)}
    for key, value in data.items():
        if key not in known:
            logger.warning(f"Unknown setting {key!r}, ignoring")
            continue
        if key == "vertical_motion":
            try:
                settings.vertical_motion = VerticalMotion(value)
            except ValueError:
                logger.warning(f"Invalid vertical_motion {value!r}, using default")
            continue
        if not isinstance(value, bool):
            logger.warning(f"Setting {key!r} must be true or false, got {value!r}")
            continue
        setattr(settings, key, value)
    return settings


def load_settings(path: Optional[Path] = None) -> EditorSettings:
    """Load settings from ``path`` or the default location."""
    path = path or default_settings_path()
    settings = settings_from_dict(_read_settings_file(path))
    logger.debug(f"Loaded settings from {path}: {settings}")
    return settings
