"""
message_manager.py
------------------
Queue of timed overlay messages.

Only the front message is shown and counts down; it disappears when its
duration runs out or the player presses Enter.
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from idlefloor.core.debug.debug_logger import DebugLogger
from idlefloor.ui.text import wrap


class TextLocation(Enum):
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass
class Message:
    text: str
    location: TextLocation = TextLocation.CENTER
    duration: float = 5.0


class MessageManager:
    """Keeps track of messages and their timers."""

    DISMISS_KEY = "enter"

    def __init__(self):
        self.messages = deque()

    def add_message(self, message: Message) -> None:
        self.messages.append(message)
        DebugLogger.system(f"Queued message ({len(self.messages)}): {message.text[:40]}", category="message")

    def update(self, key, dt: float) -> None:
        """Count down the front message, dropping it once expired or dismissed."""
        if not self.messages:
            return

        message = self.messages[0]
        message.duration -= dt
        if message.duration <= 0 or key == self.DISMISS_KEY:
            self.messages.popleft()

    def current(self) -> Optional[Message]:
        return self.messages[0] if self.messages else None

    def render_one(self, columns: int) -> List[str]:
        """Front message wrapped to half the available columns."""
        message = self.current()
        if message is None:
            return []
        return wrap(message.text, columns // 2)

    def __len__(self) -> int:
        return len(self.messages)
