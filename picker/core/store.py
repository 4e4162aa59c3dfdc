"""Dispatcher that owns the live storage snapshot."""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import TYPE_CHECKING, Callable

from picker.core.config import DEFAULT_CONFIG, normalize_config
from picker.core.events import RetrievedInstalledApps, UpdatedHotCode
from picker.core.reducer import UnknownAppError, reduce
from picker.core.state import DEFAULT_STORAGE, Storage

if TYPE_CHECKING:
    from picker.platform.base import HotCodeSource, InstalledAppsScanner

LOG = logging.getLogger("picker")

Listener = Callable[[Storage, object], None]


class Store:
    """Applies events one at a time and tells listeners about new snapshots.

    Views hold a reference to the store, never to a snapshot they can change:
    every snapshot is immutable and ``apply`` swaps in the next one. Replaced
    snapshots are kept (up to ``history_limit``) so a change can be undone.
    """

    def __init__(self, storage: Storage | None = None, history_limit: int = DEFAULT_CONFIG["history_limit"]):
        self._state = storage if storage is not None else DEFAULT_STORAGE
        self._history: deque[Storage] = deque(maxlen=history_limit)
        self._listeners: list[Listener] = []
        # Key capture delivers events from the pynput listener thread.
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config, storage: Storage | None = None) -> "Store":
        return cls(storage, history_limit=normalize_config(config)["history_limit"])

    @property
    def state(self) -> Storage:
        return self._state

    @property
    def history(self) -> tuple[Storage, ...]:
        """Earlier snapshots, oldest first."""
        return tuple(self._history)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener(storage, event)* after each change; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def apply(self, event) -> Storage:
        """Apply *event* to the current snapshot and return the new one.

        A rejected event re-raises ``UnknownAppError`` and leaves the current
        snapshot in place.
        """
        with self._lock:
            previous = self._state
            try:
                current = reduce(previous, event)
            except UnknownAppError as exc:
                LOG.warning("Rejected %s: %s", type(event).__name__, exc)
                raise

            if current is previous:
                LOG.debug("%s left storage unchanged", type(event).__name__)
                return current

            LOG.debug("%s applied (%d apps)", type(event).__name__, len(current.apps))
            self._history.append(previous)
            self._state = current
            self._notify(event)
            return current

    def scan_installed(self, scanner: InstalledAppsScanner) -> Storage:
        """Apply a fresh installed-apps scan from *scanner*."""
        return self.apply(RetrievedInstalledApps(scanner.scan()))

    def bind_next_key(self, app_name: str, source: HotCodeSource) -> None:
        """Bind the next key captured by *source* to *app_name*."""
        source.capture(lambda code: self._bind_captured(app_name, code))

    def _bind_captured(self, app_name: str, code: str) -> None:
        try:
            self.apply(UpdatedHotCode(app_name, code))
        except UnknownAppError:
            # Already logged by apply; the app went away while waiting for the key.
            LOG.debug("Dropped captured key %s for %s", code, app_name)

    def undo(self) -> bool:
        """Restore the previous snapshot. Returns False if there is none."""
        with self._lock:
            if not self._history:
                return False
            self._state = self._history.pop()
            self._notify(None)
            return True

    def _notify(self, event) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state, event)
            except Exception:
                LOG.exception("Storage listener %r failed", listener)
