"""
display_manager.py
------------------
Terminal-style window: draws feature lines and the front message.

Responsibilities:
- Window creation
- Monospace text rendering of lines and styled spans
- Message overlay at the center or bottom of the screen
"""

import pygame

from idlefloor.core.debug.debug_logger import DebugLogger
from idlefloor.core.runtime.game_settings import Colors, Display, Fonts
from idlefloor.systems.messages.message_manager import TextLocation
from idlefloor.ui.text import TextSpan


class DisplayManager:
    """Owns the pygame window and a monospace font."""

    def __init__(self, width=Display.WIDTH, height=Display.HEIGHT):
        DebugLogger.init_entry("DisplayManager")

        self.width = width
        self.height = height
        self.window = pygame.display.set_mode((width, height))
        pygame.display.set_caption(Display.CAPTION)

        self.font = pygame.font.SysFont(Fonts.NAME, Fonts.SIZE)
        self.char_width, self.line_height = self.font.size("M")
        self.line_height += Display.LINE_SPACING

        DebugLogger.init_sub(f"Window {width}x{height}, {self.columns} columns", level=1)

    @property
    def columns(self) -> int:
        return max((self.width - 2 * Display.MARGIN) // max(self.char_width, 1), 1)

    @property
    def rows(self) -> int:
        return max((self.height - 2 * Display.MARGIN) // max(self.line_height, 1), 1)

    # ===========================================================
    # Drawing
    # ===========================================================

    def render(self, lines, messages) -> None:
        """Clear, draw every line top-down, overlay the front message, flip."""
        self.window.fill(Colors.BACKGROUND)

        for row, line in enumerate(lines[:self.rows]):
            self._draw_line(line, Display.MARGIN, Display.MARGIN + row * self.line_height)

        self._draw_message(messages)
        pygame.display.flip()

    def _draw_line(self, line, x, y) -> None:
        spans = [TextSpan(line)] if isinstance(line, str) else line
        for span in spans:
            if not span.text:
                continue
            self.font.set_bold(span.bold)
            self.font.set_strikethrough(span.strike)
            surface = self.font.render(span.text, True, span.color or Colors.TEXT)
            self.window.blit(surface, (x, y))
            x += surface.get_width()
        self.font.set_bold(False)
        self.font.set_strikethrough(False)

    def _draw_message(self, messages) -> None:
        message = messages.current()
        if message is None:
            return

        wrapped = messages.render_one(self.columns)
        rows = len(wrapped)
        if message.location == TextLocation.CENTER:
            top = self.height // 2
        else:
            top = self.height - Display.MARGIN - rows * self.line_height

        box_width = max(len(text) for text in wrapped) * self.char_width + 2 * Display.MARGIN
        box = pygame.Rect(0, 0, box_width, rows * self.line_height + Display.MARGIN)
        box.midtop = (self.width // 2, top - Display.MARGIN // 2)
        pygame.draw.rect(self.window, Colors.MESSAGE_BG, box)

        for i, text in enumerate(wrapped):
            x = self.width // 2 - (len(text) * self.char_width) // 2
            self._draw_line([TextSpan(text, Colors.WHITE, bold=True)], x, top + i * self.line_height)
