"""Static configuration for contactscope.

All user-editable settings (contacts file, filter defaults, logging) live in
a single JSON file for quick edits without touching Python.
"""

import json
import os

from dotenv import load_dotenv

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# CONTACTSCOPE_CONFIG may come from the environment or a local .env file.
load_dotenv()
CONFIG_PATH = os.getenv("CONTACTSCOPE_CONFIG", os.path.join(PROJECT_ROOT, "config.json"))


def _load_json_config() -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(CONFIG_PATH):
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _resolve_path(path: str) -> str:
    """Resolve relative paths against the config file's directory."""

    if os.path.isabs(path):
        return path
    return os.path.join(os.path.dirname(os.path.abspath(CONFIG_PATH)), path)


_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Address book the CLI reads contacts from.
CONTACTS_PATH = _resolve_path(_CONFIG.get("contacts_path", "contacts.json"))

# Filter defaults used when a command omits --component or --mode.
# - CACHE_SIZE: how many distinct filters keep memoized results (0 disables)
_filter = _CONFIG.get("filter", {})
DEFAULT_COMPONENT = _filter.get("default_component", "name")
DEFAULT_MODE = _filter.get("default_mode", "has")
CACHE_SIZE = int(_filter.get("cache_size", 32))

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
