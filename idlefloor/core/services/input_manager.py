"""
input_manager.py
----------------
Turns pygame keyboard events into the single key each tick consumes.

Keys are plain strings: one printable character ("c", "a", "1") or a named
key ("left", "right", "enter", "esc"). Only the most recent key pressed
since the last tick is kept; "no key" is None.
"""

import pygame

from idlefloor.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

NAMED_KEYS = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_RETURN: "enter",
    pygame.K_KP_ENTER: "enter",
    pygame.K_ESCAPE: "esc",
}


class InputManager:
    """
    Latches the last key pressed between ticks.

    Usage:
        for event in pygame.event.get():
            input_manager.handle_event(event)
        key = input_manager.consume_key()   # once per tick
    """

    def __init__(self, named_keys=None):
        DebugLogger.init_entry("InputManager")
        self.named_keys = named_keys or NAMED_KEYS
        self._pending = None

    def handle_event(self, event) -> bool:
        """
        Record a KEYDOWN event.

        Returns:
            True if the event produced a key
        """
        if event.type != pygame.KEYDOWN:
            return False

        key = self.translate(event)
        if key is None:
            return False

        self._pending = key
        DebugLogger.trace(f"Key pressed: {key}", category="input")
        return True

    def translate(self, event):
        """Map a pygame key event to a key string, or None if unsupported."""
        if event.key in self.named_keys:
            return self.named_keys[event.key]

        char = getattr(event, "unicode", "")
        if isinstance(char, str) and len(char) == 1 and char.isprintable() and not char.isspace():
            return char.lower()
        return None

    def consume_key(self):
        """Return the latched key and clear it."""
        key, self._pending = self._pending, None
        return key
