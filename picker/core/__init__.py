"""Platform-agnostic picker storage logic."""

from picker.core.config import (
    CONFIG_DIR,
    CONFIG_FILE,
    DEFAULT_CONFIG,
    configure_logging,
    load_config,
    normalize_config,
    save_config,
)
from picker.core.migration import migrate_storage, needs_migration
from picker.core.reducer import UnknownAppError, reduce, replay
from picker.core.state import (
    DEFAULT_HEIGHT,
    DEFAULT_STORAGE,
    SUPPORT_MESSAGE_NEVER,
    AppEntry,
    Storage,
    storage_to_dict,
)
from picker.core.store import Store
from picker.core import events, selectors

__all__ = [
    "AppEntry",
    "Storage",
    "DEFAULT_HEIGHT",
    "DEFAULT_STORAGE",
    "SUPPORT_MESSAGE_NEVER",
    "storage_to_dict",
    "migrate_storage",
    "needs_migration",
    "reduce",
    "replay",
    "UnknownAppError",
    "Store",
    "CONFIG_DIR",
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "configure_logging",
    "load_config",
    "normalize_config",
    "save_config",
    "events",
    "selectors",
]
