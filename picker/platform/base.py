"""Interfaces for the collaborators that feed events into the store."""

from __future__ import annotations

from typing import Callable, Protocol


class InstalledAppsScanner(Protocol):
    """Reports which known apps are currently installed on the system."""

    def scan(self) -> list[str]:
        """Return the complete list of installed app names."""


class HotCodeSource(Protocol):
    """Turns the next physical key press into a key-code string."""

    def capture(self, on_code: Callable[[str], None]) -> None:
        """Call *on_code* with the code of the next bindable key press."""

    def cancel(self) -> None:
        """Stop waiting for a key press."""
