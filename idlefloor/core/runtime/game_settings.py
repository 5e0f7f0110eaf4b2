"""
game_settings.py
----------------
Centralized constants for the host window and the tick loop.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Window configuration."""
    WIDTH: int = 960
    HEIGHT: int = 540
    FPS: int = 60
    CAPTION: str = "idlefloor"
    MARGIN: int = 8
    LINE_SPACING: int = 4


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    NAME: str = "monospace"
    SIZE: int = 18


# ===========================================================
# Timing
# ===========================================================

class Timing:
    """Fixed-step tick timing."""
    TICK_MS: int = 100
    TICK: float = TICK_MS / 1000.0
    # Countdowns are rounded to this many places after each step
    TIMER_DECIMALS: int = 6
    MAX_FRAME_TIME: float = 0.5


# ===========================================================
# Colors
# ===========================================================

class Colors:
    """RGB colors shared by features and the display."""
    BACKGROUND = (12, 12, 16)
    TEXT = (220, 220, 220)
    DIM = (110, 110, 110)
    WHITE = (255, 255, 255)
    RED = (220, 70, 70)
    GREEN = (90, 200, 90)
    BLUE = (90, 140, 230)
    CYAN = (80, 200, 210)
    MAGENTA = (200, 90, 200)
    YELLOW = (230, 210, 80)
    DARK_YELLOW = (170, 140, 40)
    MESSAGE_BG = (30, 30, 40)
