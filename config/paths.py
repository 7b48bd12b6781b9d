"""
Application Paths - Centralized path definitions for Fasty

Module nay dinh nghia cac duong dan va bien moi truong dung trong ung dung.
Tap trung o mot noi de tranh hardcode rai rac.

App data duoc luu tai: ~/.fasty/
- logs/      : Log files
"""

import os
from pathlib import Path


# =============================================================================
# Ten ung dung - Single source of truth cho naming
# =============================================================================
APP_NAME = "fasty"

# =============================================================================
# Thu muc goc cua ung dung
# =============================================================================
APP_DIR = Path.home() / f".{APP_NAME}"

# =============================================================================
# Cac thu muc con
# =============================================================================
LOG_DIR = APP_DIR / "logs"

# =============================================================================
# Environment Variables - Ten bien moi truong cho debug mode
# =============================================================================
DEBUG_ENV_VAR = "FASTY_DEBUG"

# Kiem tra debug mode tu environment variable
DEBUG_MODE = os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes")


def ensure_app_directories() -> None:
    """
    Tao cac thu muc can thiet neu chua ton tai.
    Goi boi get_logger() truoc khi tao log file.
    """
    APP_DIR.mkdir(parents=True, exist_ok=True)
    LOG_DIR.mkdir(parents=True, exist_ok=True)
