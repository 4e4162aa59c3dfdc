"""Storage engine: applies one event to a storage snapshot.

``reduce`` never mutates its input. Every handler returns either the same
``Storage`` object (nothing changed) or a new one that shares all untouched
entries with the old snapshot.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Iterable

from picker.core import events
from picker.core.migration import migrate_storage
from picker.core.selectors import index_of
from picker.core.state import DEFAULT_STORAGE, SUPPORT_MESSAGE_NEVER, AppEntry, Storage

LOG = logging.getLogger("picker")


class UnknownAppError(LookupError):
    """An event referenced an app name that is not in storage."""

    def __init__(self, app_name: str):
        super().__init__(f"No stored app named {app_name!r}")
        self.app_name = app_name


def _with_app(storage: Storage, index: int, app: AppEntry) -> Storage:
    apps = storage.apps[:index] + (app,) + storage.apps[index + 1 :]
    return replace(storage, apps=apps)


def _readied_app(storage: Storage, event: events.ReadiedApp) -> Storage:
    return replace(storage, is_setup=True)


def _confirmed_reset(storage: Storage, event: events.ConfirmedReset) -> Storage:
    return DEFAULT_STORAGE


def _received_startup_storage(storage: Storage, event: events.ReceivedStartupStorage) -> Storage:
    return migrate_storage(event.storage)


def _retrieved_installed_apps(storage: Storage, event: events.RetrievedInstalledApps) -> Storage:
    installed = set(event.names)

    apps = []
    changed = False
    for app in storage.apps:
        # Only installed apps the user has not removed show in the picker.
        is_installed = app.name in installed and not app.user_removed
        if app.is_installed != is_installed:
            app = replace(app, is_installed=is_installed)
            changed = True
        apps.append(app)

    known = {app.name for app in apps}
    for name in event.names:
        if name not in known:
            apps.append(AppEntry(name=name, hot_code=None, is_installed=True, user_removed=False))
            known.add(name)
            changed = True

    if not changed:
        return storage
    return replace(storage, apps=tuple(apps))


def _updated_hot_code(storage: Storage, event: events.UpdatedHotCode) -> Storage:
    target = index_of(storage, event.app_name)
    if target == -1:
        raise UnknownAppError(event.app_name)

    apps = list(storage.apps)
    if event.value is not None:
        for i, app in enumerate(apps):
            if app.hot_code == event.value:
                apps[i] = replace(app, hot_code=None)
                break
    apps[target] = replace(apps[target], hot_code=event.value)
    return replace(storage, apps=tuple(apps))


def _removed_app(storage: Storage, event: events.RemovedApp) -> Storage:
    index = index_of(storage, event.app_name)
    if index == -1:
        return storage
    app = replace(storage.apps[index], is_installed=False, user_removed=True)
    return _with_app(storage, index, app)


def _restored_app(storage: Storage, event: events.RestoredApp) -> Storage:
    index = index_of(storage, event.app_name)
    if index == -1:
        return storage
    # Provisional: the next installed-apps scan corrects is_installed if the
    # app has gone from the system meanwhile.
    app = replace(storage.apps[index], is_installed=True, user_removed=False)
    return _with_app(storage, index, app)


def _reordered_app(storage: Storage, event: events.ReorderedApp) -> Storage:
    if event.source_name == event.destination_name:
        return storage
    source = index_of(storage, event.source_name)
    destination = index_of(storage, event.destination_name)
    if source == -1 or destination == -1:
        LOG.debug(
            "Ignoring reorder of %s onto %s: app not found",
            event.source_name,
            event.destination_name,
        )
        return storage

    apps = list(storage.apps)
    moved = apps.pop(source)
    apps.insert(destination, moved)
    return replace(storage, apps=tuple(apps))


def _clicked_donate(storage: Storage, event: events.ClickedDonate) -> Storage:
    return replace(storage, support_message=SUPPORT_MESSAGE_NEVER)


def _clicked_maybe_later(storage: Storage, event: events.ClickedMaybeLater) -> Storage:
    return replace(storage, support_message=event.timestamp)


def _changed_picker_window_bounds(storage: Storage, event: events.ChangedPickerWindowBounds) -> Storage:
    return replace(storage, height=event.height)


_HANDLERS: dict[type, Callable[[Storage, object], Storage]] = {
    events.ReadiedApp: _readied_app,
    events.ConfirmedReset: _confirmed_reset,
    events.ReceivedStartupStorage: _received_startup_storage,
    events.RetrievedInstalledApps: _retrieved_installed_apps,
    events.UpdatedHotCode: _updated_hot_code,
    events.RemovedApp: _removed_app,
    events.RestoredApp: _restored_app,
    events.ReorderedApp: _reordered_app,
    events.ClickedDonate: _clicked_donate,
    events.ClickedMaybeLater: _clicked_maybe_later,
    events.ChangedPickerWindowBounds: _changed_picker_window_bounds,
}


def reduce(storage: Storage, event: object) -> Storage:
    """Apply *event* to *storage* and return the next storage.

    Events the engine does not handle return *storage* unchanged. Raises
    ``UnknownAppError`` when a hotkey is assigned to an app that is not stored;
    the input snapshot is left as it was.
    """
    handler = _HANDLERS.get(type(event))
    if handler is None:
        LOG.debug("No storage change for event %r", event)
        return storage
    return handler(storage, event)


def replay(stream: Iterable[object], storage: Storage = DEFAULT_STORAGE) -> Storage:
    """Fold *stream* over *storage* in order and return the final storage."""
    for event in stream:
        storage = reduce(storage, event)
    return storage
