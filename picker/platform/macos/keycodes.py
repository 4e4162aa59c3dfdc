"""Key-code capture for hotkey bindings.

Hotkeys are stored as physical key-code names ("KeyA", "Digit1", "Space").
Keys are resolved from the macOS virtual keycode, so the name follows the key
position rather than the keyboard layout; the typed character is only a
fallback for keys pynput reports without a keycode.
"""

from __future__ import annotations

import logging
from typing import Callable

LOG = logging.getLogger("picker")


class KeyCodes:
    """Lookup tables from pynput keys to stored key-code names."""

    # macOS ANSI virtual keycodes (kVK_ANSI_*), by physical position.
    VIRTUAL = {
        0x00: "KeyA", 0x01: "KeyS", 0x02: "KeyD", 0x03: "KeyF", 0x04: "KeyH",
        0x05: "KeyG", 0x06: "KeyZ", 0x07: "KeyX", 0x08: "KeyC", 0x09: "KeyV",
        0x0A: "IntlBackslash", 0x0B: "KeyB", 0x0C: "KeyQ", 0x0D: "KeyW",
        0x0E: "KeyE", 0x0F: "KeyR", 0x10: "KeyY", 0x11: "KeyT",
        0x12: "Digit1", 0x13: "Digit2", 0x14: "Digit3", 0x15: "Digit4",
        0x16: "Digit6", 0x17: "Digit5", 0x18: "Equal", 0x19: "Digit9",
        0x1A: "Digit7", 0x1B: "Minus", 0x1C: "Digit8", 0x1D: "Digit0",
        0x1E: "BracketRight", 0x1F: "KeyO", 0x20: "KeyU", 0x21: "BracketLeft",
        0x22: "KeyI", 0x23: "KeyP", 0x25: "KeyL", 0x26: "KeyJ", 0x27: "Quote",
        0x28: "KeyK", 0x29: "Semicolon", 0x2A: "Backslash", 0x2B: "Comma",
        0x2C: "Slash", 0x2D: "KeyN", 0x2E: "KeyM", 0x2F: "Period",
        0x32: "Backquote",
    }

    # Characters that are not letters or digits.
    PUNCTUATION = {
        "-": "Minus",
        "=": "Equal",
        "[": "BracketLeft",
        "]": "BracketRight",
        "\\": "Backslash",
        ";": "Semicolon",
        "'": "Quote",
        ",": "Comma",
        ".": "Period",
        "/": "Slash",
        "`": "Backquote",
        "§": "IntlBackslash",
    }

    # pynput ``Key`` member names that can hold a binding.
    SPECIAL = {
        "space": "Space",
        "enter": "Enter",
        "tab": "Tab",
        "backspace": "Backspace",
        "delete": "Delete",
        "home": "Home",
        "end": "End",
        "page_up": "PageUp",
        "page_down": "PageDown",
        "up": "ArrowUp",
        "down": "ArrowDown",
        "left": "ArrowLeft",
        "right": "ArrowRight",
    }

    @classmethod
    def from_char(cls, char: str) -> str | None:
        if len(char) != 1:
            return None
        if "a" <= char.lower() <= "z":
            return f"Key{char.upper()}"
        if char.isdigit() and char.isascii():
            return f"Digit{char}"
        return cls.PUNCTUATION.get(char)

    @classmethod
    def from_name(cls, name: str) -> str | None:
        if name in cls.SPECIAL:
            return cls.SPECIAL[name]
        if name.startswith("f") and name[1:].isdigit():
            return name.upper()
        return None


def key_to_code(key) -> str | None:
    """Translate a pynput key into its key-code name, or None if it can't be bound."""
    vk = getattr(key, "vk", None)
    if vk in KeyCodes.VIRTUAL:
        return KeyCodes.VIRTUAL[vk]
    char = getattr(key, "char", None)
    if char:
        return KeyCodes.from_char(char)
    name = getattr(key, "name", None)
    if name:
        return KeyCodes.from_name(name)
    return None


class HotCodeCapture:
    """Waits for the next bindable key press using a pynput listener."""

    def __init__(self):
        self._listener = None
        self._on_code: Callable[[str], None] | None = None

    @property
    def is_capturing(self) -> bool:
        return self._on_code is not None

    def capture(self, on_code: Callable[[str], None]) -> None:
        """Call *on_code* with the code of the next bindable key press."""
        from pynput import keyboard as pynput_keyboard

        self.cancel()
        self._on_code = on_code
        self._listener = pynput_keyboard.Listener(on_press=self._on_press)
        self._listener.daemon = True
        self._listener.start()

    def cancel(self) -> None:
        """Stop waiting for a key press."""
        if self._listener is not None:
            self._listener.stop()
            self._listener = None
        self._on_code = None

    def _on_press(self, key):
        """Handle key press event (pynput)."""
        code = key_to_code(key)
        if code is None:
            LOG.debug("Ignoring unbindable key %r", key)
            return
        on_code = self._on_code
        self.cancel()
        if on_code is not None:
            on_code(code)
