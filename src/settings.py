"""Static configuration for linescope.

Optional user-editable settings (currently only logging) live in a JSON file
so they can be changed without touching Python. Search options come from the
command line and the environment, not from this file.
"""

import json
import os

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# Settings file location; LINESCOPE_CONFIG points at an alternative file.
CONFIG_PATH = os.getenv("LINESCOPE_CONFIG", os.path.join(PROJECT_ROOT, "config.json"))

# Presence of this variable (any value, even empty) turns on case-insensitive search.
IGNORE_CASE_ENV = "IGNORE_CASE"

# Result file written by --save-output, relative to the working directory.
OUTPUT_PATH = "output.txt"

# Encoding for both the searched file and the result file.
FILE_ENCODING = "utf-8"


def _load_json_config(path: str) -> dict:
    """Load the settings file, falling back to defaults when it is absent."""

    if not os.path.exists(path):
        return {}

    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


_CONFIG = _load_json_config(CONFIG_PATH)

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Logging configuration (optional, disabled unless "enabled": true).
LOGGING = _CONFIG.get("logging", {})
