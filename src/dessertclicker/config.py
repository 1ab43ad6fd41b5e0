"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths (e.g., "C:/Users/...") scattered
   throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (images, JSONs) when the app is frozen into an .exe.
3. Overrides: A few settings can be changed with environment variables.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DESSERT_IMAGES_PATH (str): Directory holding the dessert images.
    BACKGROUND_IMAGE_PATH (str): Bakery background image.
    DEFAULT_CATALOG_PATH (str): Absolute path to the bundled dessert catalog.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CATALOG_ENV_VAR = "DESSERTCLICKER_CATALOG"
LOG_LEVEL_ENV_VAR = "DESSERTCLICKER_LOG_LEVEL"
LOG_FILE_ENV_VAR = "DESSERTCLICKER_LOG_FILE"


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/dessertclicker/, assets ship inside the package
    package_root: Path = Path(__file__).parent
    return os.path.join(str(package_root), relative_path)


def get_catalog_path() -> str:
    """Catalog JSON to load, honouring the DESSERTCLICKER_CATALOG override."""
    override = os.environ.get(CATALOG_ENV_VAR)
    if override:
        logger.info(f"Using catalog override from {CATALOG_ENV_VAR}: {override}")
        return override
    return DEFAULT_CATALOG_PATH


def get_log_level(default: int = logging.INFO) -> int:
    """Logging level named by DESSERTCLICKER_LOG_LEVEL (e.g. "DEBUG")."""
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        print(f"WARNING: Unknown log level '{name}', using default")
        return default
    return level


def get_log_file() -> Optional[str]:
    return os.environ.get(LOG_FILE_ENV_VAR) or None


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DESSERT_IMAGES_PATH: str = os.path.join(ASSETS_PATH, "desserts")
BACKGROUND_IMAGE_PATH: str = os.path.join(ASSETS_PATH, "bakery_back.svg")
DEFAULT_CATALOG_PATH: str = os.path.join(ASSETS_PATH, "desserts.json")

# Status bar message time, same as a long Android toast
NOTIFICATION_DURATION_MS: int = 3500
IMAGE_SIZE_PX: int = 150

if not os.path.exists(ASSETS_PATH):
    print(f"WARNING: Assets path not found at {ASSETS_PATH}")
