"""Configuration constants and .env loading.

WHY: Centralizes all configurable values (default systems, where user
system definitions live, log level, output separator) so they are easy to
find and override without touching the CLI code.

HOW: python-dotenv loads the .env file on import. Constants are module
level strings read from the environment with a fallback default. The
data_dir() function resolves the user definition directory lazily so tests
can change the environment.

RULES:
- Every default can be overridden via environment variables
- BIBICODE_DATA_DIR wins over XDG_DATA_HOME, which wins over ~/.local/share
- Nothing here touches the core conversion modules
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the working directory (where the command is run from)
load_dotenv()

APP_NAME = "bibicode"

# ---------------------------------------------------------------------------
# CLI defaults
# ---------------------------------------------------------------------------

DEFAULT_FROM = os.getenv("BIBICODE_DEFAULT_FROM", "dec")
DEFAULT_TO = os.getenv("BIBICODE_DEFAULT_TO", "dec")
DEFAULT_OUTPUT_SEPARATOR = os.getenv("BIBICODE_OUTPUT_SEPARATOR", " ")
LOG_LEVEL = os.getenv("BIBICODE_LOG_LEVEL", "WARNING").upper()

AUTODETECT_NAME = "auto"
"""Pseudo system name that makes the CLI pick the source system per number."""

# ---------------------------------------------------------------------------
# User definition directory
# ---------------------------------------------------------------------------

DEFINITION_SUFFIX = ".json"


def data_dir() -> Path:
    """Return the directory holding user numeral system definitions.

    WHY: Users keep their own systems as ``<name>.json`` files and refer to
    them by name, like the built-in catalog.

    HOW: BIBICODE_DATA_DIR if set, else $XDG_DATA_HOME/bibicode, else
    ~/.local/share/bibicode.

    RULES:
    - The directory is not created; a missing directory means no user systems
    """
    explicit = os.getenv("BIBICODE_DATA_DIR", "").strip()
    if explicit:
        return Path(explicit).expanduser()
    xdg_home = os.getenv("XDG_DATA_HOME", "").strip()
    if xdg_home:
        return Path(xdg_home).expanduser() / APP_NAME
    return Path.home() / ".local" / "share" / APP_NAME
