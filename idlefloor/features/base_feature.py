"""
base_feature.py
---------------
Abstract base class for all features.
Defines the interface the tick driver uses and the feature registry.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from idlefloor.core.runtime.game_settings import Colors
from idlefloor.ui.text import Line, TextSpan


# Feature type registry
FEATURE_REGISTRY: Dict[str, type] = {}


def register_feature(feature_id: str):
    """Decorator to register feature types by config id."""

    def decorator(cls):
        FEATURE_REGISTRY[feature_id] = cls
        cls.FEATURE_ID = feature_id
        return cls

    return decorator


@dataclass(frozen=True)
class FeatureInfo:
    """Menu metadata for a feature."""
    key: str
    name: str
    color: Tuple[int, int, int] = Colors.TEXT
    description: str = ""
    visible_count: int = 0
    unlock_count: int = 0
    counter_string: str = ""

    @classmethod
    def from_config(cls, data: dict) -> "FeatureInfo":
        color = data.get("color", "TEXT")
        if isinstance(color, str):
            color = getattr(Colors, color.upper(), Colors.TEXT)
        return cls(
            key=str(data["key"]),
            name=data.get("name", data.get("id", "?")),
            color=tuple(color),
            description=data.get("description", ""),
            visible_count=int(data.get("visible_count", 0)),
            unlock_count=int(data.get("unlock_count", 0)),
            counter_string=data.get("counter_string", ""),
        )

    def title(self) -> TextSpan:
        return TextSpan(self.name, self.color, bold=True)


class BaseFeature(ABC):
    """
    Base class for all features.

    Attributes:
        info: Menu metadata (key, name, unlock thresholds)
    """

    FEATURE_ID = ""
    DEFAULT_INFO: Optional[dict] = None

    def __init__(self, info: Optional[FeatureInfo] = None):
        if info is None:
            info = FeatureInfo.from_config(self.DEFAULT_INFO)
        self.info = info

    def get_info(self) -> FeatureInfo:
        return self.info

    # ===========================================================
    # Availability
    # ===========================================================

    def is_unlocked(self, state) -> bool:
        """Extra unlock condition besides the counter threshold."""
        return True

    def is_available(self, state) -> bool:
        """True when the feature can be selected from the menu."""
        return self.is_unlocked(state) and state.count >= self.info.unlock_count

    # ===========================================================
    # Standard Methods (Must implement in subclasses)
    # ===========================================================

    def get_top_bar(self, state) -> List[TextSpan]:
        """Spans shown after the feature name on the title line."""
        return []

    @abstractmethod
    def update(self, dt: float, state, messages) -> None:
        """Advance the feature by one tick."""
        pass

    @abstractmethod
    def render(self, state, features) -> List[Line]:
        """Display lines below the title bar."""
        pass
