"""macOS platform adapter implementations."""

from picker.platform.macos.keycodes import HotCodeCapture, KeyCodes, key_to_code

__all__ = [
    "HotCodeCapture",
    "KeyCodes",
    "key_to_code",
]
