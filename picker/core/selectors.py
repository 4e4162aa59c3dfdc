"""Read-only lookups over a storage snapshot."""

from __future__ import annotations

from collections import Counter

from picker.core.state import AppEntry, Storage


def index_of(storage: Storage, name: str) -> int:
    """Return the list position of *name*, or -1 if it is not stored."""
    for i, app in enumerate(storage.apps):
        if app.name == name:
            return i
    return -1


def find_app(storage: Storage, name: str) -> AppEntry | None:
    index = index_of(storage, name)
    return None if index == -1 else storage.apps[index]


def installed_apps(storage: Storage) -> list[AppEntry]:
    """Apps shown in the picker, in cycling order."""
    return [app for app in storage.apps if app.is_installed and not app.user_removed]


def removed_apps(storage: Storage) -> list[AppEntry]:
    """Apps the user hid and may restore."""
    return [app for app in storage.apps if app.user_removed]


def hot_code_map(storage: Storage) -> dict[str, str]:
    """Map each bound key-code to the name of the app holding it."""
    return {app.hot_code: app.name for app in storage.apps if app.hot_code is not None}


def app_for_hot_code(storage: Storage, code: str) -> AppEntry | None:
    """Return the installed app a key press should open, if any."""
    for app in installed_apps(storage):
        if app.hot_code == code:
            return app
    return None


def check_invariants(storage: Storage) -> list[str]:
    """Describe every way *storage* breaks the app list rules; empty if none."""
    problems = []

    names = Counter(app.name for app in storage.apps)
    for name, count in names.items():
        if count > 1:
            problems.append(f"app {name!r} stored {count} times")

    codes = Counter(app.hot_code for app in storage.apps if app.hot_code is not None)
    for code, count in codes.items():
        if count > 1:
            problems.append(f"hotkey {code!r} bound to {count} apps")

    for app in storage.apps:
        if app.is_installed and app.user_removed:
            problems.append(f"app {app.name!r} is both installed and removed")

    return problems
