"""
feature_manager.py
------------------
Owns the feature list and routes each tick to the menu or the active feature.
"""

from typing import List, Optional

from idlefloor.core.debug.debug_logger import DebugLogger
from idlefloor.core.runtime.game_settings import Colors
from idlefloor.core.services.config_manager import load_config
from idlefloor.features.base_feature import FEATURE_REGISTRY, BaseFeature, FeatureInfo
from idlefloor.ui.text import Line, TextSpan, key_name

# Feature classes register themselves on import
from idlefloor.features.exit_feature import ExitFeature
from idlefloor.features.counter_feature import CounterFeature
from idlefloor.features.fight_feature import FightFeature
from idlefloor.features.inventory_feature import InventoryFeature
from idlefloor.features.shop_feature import ShopFeature


DEFAULT_FEATURE_ORDER = [ExitFeature, CounterFeature, FightFeature, InventoryFeature, ShopFeature]


def create_features(config_name: str = "features.yaml") -> List[BaseFeature]:
    """Instantiate features in menu order from features.yaml."""
    config = load_config(config_name, default_dict={"features": []})
    entries = config.get("features") or []

    if not entries:
        DebugLogger.warn("No feature config found, using built-in menu", category="feature")
        return [cls() for cls in DEFAULT_FEATURE_ORDER]

    features = []
    for entry in entries:
        feature_cls = FEATURE_REGISTRY.get(entry.get("id"))
        if feature_cls is None:
            DebugLogger.warn(f"Unknown feature id: {entry.get('id')}", category="feature")
            continue
        features.append(feature_cls(FeatureInfo.from_config(entry)))

    DebugLogger.init_sub(f"Loaded {len(features)} features")
    return features


class FeatureManager:
    """Menu selection, per-tick stepping and line rendering."""

    LEAVE_KEY = "q"

    def __init__(self, features: Optional[List[BaseFeature]] = None):
        self.features = features if features is not None else create_features()

    def selected(self, state) -> Optional[BaseFeature]:
        if state.selected_feature is None:
            return None
        return self.features[state.selected_feature]

    # ===========================================================
    # Input
    # ===========================================================

    def process_input(self, key, state) -> None:
        """
        Route one key.

        Inside a feature, [q] returns to the menu and any other key is
        stored on the state for the feature. In the menu, a key selects the
        first available feature bound to it.
        """
        if state.selected_feature is not None:
            if key == self.LEAVE_KEY:
                DebugLogger.action(f"Left {self.selected(state).info.name}", category="feature")
                state.selected_feature = None
                state.key = None
            else:
                state.key = key
            return

        state.key = None
        if key is None:
            return

        for index, feature in enumerate(self.features):
            if feature.info.key == key and feature.is_available(state):
                state.selected_feature = index
                DebugLogger.action(f"Entered {feature.info.name}", category="feature")
                return

    # ===========================================================
    # Step
    # ===========================================================

    def step(self, dt: float, state, messages, key=None) -> None:
        """Update the selected feature, then the message queue."""
        feature = self.selected(state)
        if feature is not None:
            feature.update(dt, state, messages)
        messages.update(key, dt)

    def tick(self, key, dt: float, state, messages) -> None:
        """One full tick: input routing followed by the step."""
        self.process_input(key, state)
        self.step(dt, state, messages, key)

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, state, columns: int = 80) -> List[Line]:
        """Lines for the active feature, or the feature menu."""
        feature = self.selected(state)
        if feature is None:
            return [self.render_menu(state)]

        title = [feature.info.title()] + feature.get_top_bar(state)
        return [title, "=" * columns] + feature.render(state, self.features)

    def render_menu(self, state) -> List[TextSpan]:
        spans = []
        for feature in self.features:
            info = feature.info
            if feature.is_available(state):
                spans.append(TextSpan(f"[{key_name(info.key)}]"))
                spans.append(TextSpan(info.name, info.color, bold=True))
                spans.append(TextSpan(" "))
            elif state.count >= info.visible_count:
                spans.append(TextSpan(info.name, Colors.DIM, strike=True))
                spans.append(TextSpan(" "))
        return spans
