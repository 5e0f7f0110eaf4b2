"""
counter_feature.py
------------------
The starting activity: press [c] to count up and unlock other features.
"""

from typing import List

from idlefloor.features.base_feature import BaseFeature, register_feature
from idlefloor.systems.messages.message_manager import Message, TextLocation
from idlefloor.ui.text import TextSpan


@register_feature("counter")
class CounterFeature(BaseFeature):

    DEFAULT_INFO = {
        "key": "c",
        "name": "Counter",
        "color": "CYAN",
        "description": "A simple counter that increments when the 'c' key is pressed.",
    }

    INCREMENT_KEY = "c"

    def get_top_bar(self, state):
        return [TextSpan(" [c]Increment")]

    def update(self, dt, state, messages):
        if state.key == self.INCREMENT_KEY:
            state.count += 1

        if state.count == 0:
            messages.add_message(Message(
                "Keep going until you reach 10 count, you will unlock the fight feature! "
                "You can hide messages by pressing [Enter].",
                TextLocation.CENTER,
                10.0,
            ))
            state.count += 1

    def render(self, state, features):
        lines = [f"Count: {state.count}", ""]
        lines.extend(self.get_unlocks(state, features))
        return lines

    @staticmethod
    def get_unlocks(state, features) -> List[str]:
        """Upcoming unlocks that are already visible."""
        unlocks = []
        for feature in features:
            info = feature.get_info()
            if feature.is_available(state):
                continue
            if state.count >= info.visible_count:
                unlocks.append(f"{info.unlock_count}{info.counter_string} unlocks {info.name}")
        return unlocks
