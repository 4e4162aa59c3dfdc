"""Bring persisted storage written by older versions up to the current shape."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping

from picker.core.state import DEFAULT_STORAGE, AppEntry, Storage

LOG = logging.getLogger("picker")


def needs_migration(raw: Any) -> bool:
    """Return True if any stored app predates the ``userRemoved`` field."""
    if not isinstance(raw, Mapping):
        return False
    apps = raw.get("apps")
    if not isinstance(apps, list):
        return False
    return any(isinstance(app, Mapping) and "userRemoved" not in app for app in apps)


def _migrate_app(raw_app: Any) -> AppEntry | None:
    if not isinstance(raw_app, Mapping):
        LOG.warning("Dropping stored app that is not an object: %r", raw_app)
        return None
    name = raw_app.get("name")
    if not isinstance(name, str):
        LOG.warning("Dropping stored app without a name: %r", raw_app)
        return None
    user_removed = raw_app.get("userRemoved")
    return AppEntry(
        name=name,
        hot_code=raw_app.get("hotCode"),
        is_installed=bool(raw_app.get("isInstalled", False)),
        # Storage written before apps could be removed has no userRemoved key.
        user_removed=False if user_removed is None else bool(user_removed),
    )


def _migrate_apps(raw_apps: Any) -> tuple[AppEntry, ...]:
    if raw_apps is None:
        return ()
    if not isinstance(raw_apps, list):
        LOG.warning("Ignoring stored apps that are not a list: %r", raw_apps)
        return ()

    apps: list[AppEntry] = []
    seen_names: set[str] = set()
    seen_codes: set[str] = set()
    for raw_app in raw_apps:
        app = _migrate_app(raw_app)
        if app is None:
            continue
        if app.name in seen_names:
            LOG.warning("Dropping duplicate stored app %s", app.name)
            continue
        seen_names.add(app.name)
        if app.hot_code is not None:
            if app.hot_code in seen_codes:
                LOG.warning("Clearing duplicate hotkey %s on %s", app.hot_code, app.name)
                app = replace(app, hot_code=None)
            else:
                seen_codes.add(app.hot_code)
        apps.append(app)
    return tuple(apps)


def migrate_storage(raw: Mapping[str, Any] | Storage | None) -> Storage:
    """Return a current-shape ``Storage`` built from persisted data.

    Accepts the camelCase JSON shape, or a ``Storage`` that is already current
    (returned as is). Apps keep their order and field values; only the absent
    ``userRemoved`` flag is filled in. Missing top-level fields take their
    defaults, and a payload that is not an object yields the default storage.
    """
    if isinstance(raw, Storage):
        return raw
    if not isinstance(raw, Mapping):
        LOG.warning("Stored data is not an object, starting from defaults: %r", raw)
        return DEFAULT_STORAGE

    return Storage(
        apps=_migrate_apps(raw.get("apps")),
        support_message=raw.get("supportMessage", DEFAULT_STORAGE.support_message),
        is_setup=bool(raw.get("isSetup", DEFAULT_STORAGE.is_setup)),
        height=raw.get("height", DEFAULT_STORAGE.height),
    )
