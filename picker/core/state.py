"""Persisted picker storage: the app list and its sibling fields."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_HEIGHT = 200

# supportMessage value meaning "never show the support prompt again".
SUPPORT_MESSAGE_NEVER = -1


@dataclass(frozen=True)
class AppEntry:
    """One app the user can cycle to from the picker."""

    name: str
    hot_code: str | None = None
    is_installed: bool = False
    user_removed: bool = False

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "hotCode": self.hot_code,
            "isInstalled": self.is_installed,
            "userRemoved": self.user_removed,
        }


@dataclass(frozen=True)
class Storage:
    """Immutable snapshot of everything persisted together."""

    apps: tuple[AppEntry, ...] = ()
    support_message: int = 0
    is_setup: bool = False
    height: int = DEFAULT_HEIGHT


DEFAULT_STORAGE = Storage()


def storage_to_dict(storage: Storage) -> dict:
    """Return the JSON-ready persisted shape of *storage*."""
    return {
        "apps": [app.to_dict() for app in storage.apps],
        "supportMessage": storage.support_message,
        "isSetup": storage.is_setup,
        "height": storage.height,
    }
