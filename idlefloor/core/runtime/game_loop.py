"""
game_loop.py
------------
Defines the GameLoop class: the fixed-step tick driver.

Responsibilities
----------------
- Initialize pygame, the window and the input latch
- Pump pygame events every frame
- Run one tick per Timing.TICK seconds: route the latest key, update the
  selected feature, advance the message queue
- Render the menu or the active feature every frame
"""

import pygame

from idlefloor.core.runtime.game_settings import Display, Timing
from idlefloor.core.runtime.game_state import create_state
from idlefloor.core.services.display_manager import DisplayManager
from idlefloor.core.services.input_manager import InputManager
from idlefloor.core.debug.debug_logger import DebugLogger
from idlefloor.features.feature_manager import FeatureManager
from idlefloor.systems.messages.message_manager import Message, MessageManager, TextLocation


class GameLoop:
    """Core runtime controller that owns the shared state."""

    def __init__(self):
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.font.init()
        DebugLogger.init_entry("Pygame")

        self.display = DisplayManager(Display.WIDTH, Display.HEIGHT)
        self.input_manager = InputManager()
        self.messages = MessageManager()
        self.messages.add_message(Message(
            "Welcome to the game! First, go into the Counter feature. "
            "You leave a feature with [q].",
            TextLocation.CENTER,
            5.0,
        ))

        DebugLogger.init_entry("Game State")
        self.state = create_state()
        self.features = FeatureManager()

        self.clock = pygame.time.Clock()
        DebugLogger.init_sub("Game Clock Initialized", level=1)

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    def run(self):
        """Main loop that runs until the player quits or closes the window."""
        DebugLogger.section("Game Loop")

        accumulator = 0.0
        try:
            while not self.state.quit:
                frame_time = min(self.clock.tick(Display.FPS) / 1000.0, Timing.MAX_FRAME_TIME)
                accumulator += frame_time

                self._handle_events()

                while accumulator >= Timing.TICK and not self.state.quit:
                    key = self.input_manager.consume_key()
                    self.features.tick(key, Timing.TICK, self.state, self.messages)
                    accumulator -= Timing.TICK

                self._draw()
        except KeyboardInterrupt:
            DebugLogger.system("Interrupted")
        finally:
            pygame.quit()
            DebugLogger.system("Pygame terminated")

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.state.quit = True
                DebugLogger.action("Quit signal received")
                break
            self.input_manager.handle_event(event)

    def _draw(self):
        lines = self.features.render(self.state, self.display.columns)
        self.display.render(lines, self.messages)
