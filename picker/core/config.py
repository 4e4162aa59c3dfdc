"""Picker configuration management."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

CONFIG_DIR = Path.home() / ".config" / "app-picker"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_CONFIG = {
    # Previous snapshots kept for undo/debugging
    "history_limit": 50,
    # Verbose per-event logging
    "debug": False,
}

_LOG = logging.getLogger("picker")


def normalize_config(config):
    """Fill in defaults and coerce values to their expected types."""
    normalized = DEFAULT_CONFIG.copy()
    if isinstance(config, dict):
        normalized.update(config)

    try:
        history_limit = int(normalized.get("history_limit"))
    except (TypeError, ValueError):
        history_limit = DEFAULT_CONFIG["history_limit"]
    normalized["history_limit"] = max(history_limit, 0)
    normalized["debug"] = bool(normalized.get("debug"))
    return normalized


def load_config():
    """Load config from file or fall back to defaults."""
    try:
        if CONFIG_FILE.exists():
            with open(CONFIG_FILE, encoding="utf-8") as f:
                saved = json.load(f)
                return normalize_config(saved)
    except (OSError, ValueError) as exc:
        _LOG.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)
    return normalize_config({})


def save_config(config):
    """Save config to file."""
    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        normalized = normalize_config(config)
        tmp_path = CONFIG_FILE.with_suffix(".json.tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(normalized, f, indent=2)
        tmp_path.replace(CONFIG_FILE)
    except OSError as exc:
        _LOG.warning("Failed to save config to %s: %s", CONFIG_FILE, exc)


def configure_logging(config) -> None:
    """Set up logging; debug output is opt-in via config or PICKER_DEBUG=1."""
    debug = config.get("debug") or os.environ.get("PICKER_DEBUG") == "1"
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    _LOG.setLevel(logging.DEBUG if debug else logging.WARNING)
