"""
config_manager.py
-----------------
Configuration loader for bundled game data.

Features:
- Supports .json and .yaml files
- Resolves bare filenames against the package config directory
- Recursively merges loaded data over caller-supplied defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json

import yaml

from endless_runner.core.debug.debug_logger import DebugLogger
from endless_runner.core.runtime.game_settings import Assets


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False, config_dir=None):
    """
    Load a configuration file and merge it over defaults.

    Args:
        filename: Filename relative to the config directory, or an absolute path
        default_dict: Defaults used for any key the file does not set
        strict: If True, raise instead of falling back to defaults
        config_dir: Override for the directory bare filenames resolve against

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    path = resolve_path(filename, config_dir)

    try:
        if path.endswith((".yaml", ".yml")):
            data = _load_yaml(path)
        else:
            data = _load_json(path)

        return _merge_dicts(default_dict, data)

    except FileNotFoundError as e:
        if strict:
            raise FileNotFoundError(f"Config not found: {filename}") from e
        DebugLogger.warn(f"Missing config {path} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})

    except (json.JSONDecodeError, yaml.YAMLError, ValueError, OSError) as e:
        if strict:
            raise
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})


def resolve_path(filename, config_dir=None):
    """Map a config filename onto the filesystem."""
    if os.path.isabs(filename):
        return filename
    base = config_dir or Assets.CONFIG_DIR
    return os.path.join(base, filename.replace("\\", "/").lstrip("/"))


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    _check_mapping(path, data)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_yaml(path):
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    _check_mapping(path, data)
    DebugLogger.system(f"Loaded {os.path.basename(path)} (YAML)", category="loading")
    return data


def _check_mapping(path, data):
    if not isinstance(data, dict):
        raise ValueError(f"{os.path.basename(path)} must contain a mapping at top level")


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {}
    for key, value in default.items():
        merged[key] = _merge_dicts(value, {}) if isinstance(value, dict) else value

    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
