from idlefloor.core.debug.debug_logger import DebugLogger
from idlefloor.features.base_feature import BaseFeature, register_feature


@register_feature("exit")
class ExitFeature(BaseFeature):
    """Quits the application as soon as it is selected."""

    DEFAULT_INFO = {
        "key": "esc",
        "name": "Quit",
        "color": "DIM",
        "description": "Exit the application.",
    }

    def update(self, dt, state, messages):
        if not state.quit:
            DebugLogger.action("Quit selected", category="feature")
        state.quit = True

    def render(self, state, features):
        return ["See you later!"]
