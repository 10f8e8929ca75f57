"""
Configuration & Path Management
===============================
Central registry for file paths and for loading the list settings.

The default settings live in `assets/list_settings_default.json`. When the
package is frozen with PyInstaller the assets are looked up in sys._MEIPASS.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_SETTINGS_PATH (str): Absolute path to the default list settings.
    load_settings: Read a JSON settings file into ListSettings.
"""
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from circularscroll.model.settings import ListSettings

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/circularscroll/
    project_root: Path = Path(__file__).parent.parent.parent
    return os.path.join(str(project_root), relative_path)


ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_SETTINGS_PATH: str = os.path.join(ASSETS_PATH, "list_settings_default.json")


def load_settings(path: Optional[str] = None) -> ListSettings:
    """
    Load list settings from a JSON file.

    Falls back to the built-in defaults when `path` is None and the default
    settings file is not shipped.

    Raises:
        FileNotFoundError: if an explicit `path` does not exist.
        ValueError: if the file is not a JSON object or holds invalid settings.
    """
    if path is None:
        if not os.path.exists(DEFAULT_SETTINGS_PATH):
            logger.warning(f"Default settings not found at {DEFAULT_SETTINGS_PATH}, using built-in defaults.")
            return ListSettings()
        path = DEFAULT_SETTINGS_PATH

    if not os.path.exists(path):
        raise FileNotFoundError(f"Settings file not found: {path}")

    logger.info(f"Loading list settings from: {path}")
    with open(path, mode='r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            msg = f"Settings file '{path}' is not valid JSON: {e}"
            logger.error(msg)
            raise ValueError(msg) from e

    if not isinstance(data, dict):
        msg = f"Settings file '{path}' must contain a JSON object."
        logger.error(msg)
        raise ValueError(msg)

    return ListSettings.from_dict(data)
