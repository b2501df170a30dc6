"""
config_manager.py
-----------------
JSON configuration loader for game data files.

Features:
- Looks in the working directory first, then the packaged config folder
- Recursively merges loaded values onto defaults
- Ignores '_notes' keys for human-readable configs
"""

import json
import os

from skyguard.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

PACKAGE_CONFIG_ROOT = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
    "config"
)

SEARCH_DIRS = [
    ".",
    os.path.join(".", "config"),
    PACKAGE_CONFIG_ROOT,
]


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON configuration file.

    Args:
        filename: Filename or full path (.json)
        default_dict: Default fallback config
        strict: If True, raise exception on missing or unreadable file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    path = resolve_path(filename)

    try:
        data = _load_json(path)
        if not isinstance(data, dict):
            raise ValueError(f"{filename} must contain a JSON object")
        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, ValueError, FileNotFoundError, OSError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or invalid: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})


def resolve_path(filename):
    """Return the first existing match for filename across SEARCH_DIRS."""
    if os.path.isabs(filename):
        return filename

    for directory in SEARCH_DIRS:
        candidate = os.path.join(directory, filename)
        if os.path.isfile(candidate):
            return candidate

    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {k: (_merge_dicts(v, {}) if isinstance(v, dict) else v)
              for k, v in default.items()}
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
