"""Events the storage engine understands.

Each event is a small frozen value. Views, the installed-apps scanner and the
startup loader build these and hand them to the store; nothing here touches
the storage itself.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Mapping


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class ReadiedApp:
    """First-run setup finished."""


@dataclass(frozen=True)
class ConfirmedReset:
    """User confirmed wiping all stored data."""


@dataclass(frozen=True)
class ReceivedStartupStorage:
    """Previously persisted storage, possibly written by an older version."""

    storage: Mapping[str, Any]


@dataclass(frozen=True)
class RetrievedInstalledApps:
    """Complete list of app names the system currently reports as installed."""

    names: tuple[str, ...] = ()

    def __post_init__(self):
        # Accept any iterable of names but store an immutable tuple; a lone
        # string is one name, not a sequence of characters.
        names = (self.names,) if isinstance(self.names, str) else tuple(self.names)
        object.__setattr__(self, "names", names)


@dataclass(frozen=True)
class UpdatedHotCode:
    app_name: str
    value: str | None


@dataclass(frozen=True)
class RemovedApp:
    app_name: str


@dataclass(frozen=True)
class RestoredApp:
    app_name: str


@dataclass(frozen=True)
class ReorderedApp:
    """Drag-and-drop finished: move *source_name* to where *destination_name* is."""

    source_name: str
    destination_name: str


@dataclass(frozen=True)
class ClickedDonate:
    pass


@dataclass(frozen=True)
class ClickedMaybeLater:
    timestamp: int = field(default_factory=_now_ms)


@dataclass(frozen=True)
class ChangedPickerWindowBounds:
    height: int
