from idlefloor.flags.flag import Flag, FlagQueue, flag_handler
from idlefloor.features.base_feature import BaseFeature, register_feature
from idlefloor.ui.text import TextSpan, rarity_span


class InventoryFlag(Flag):
    SHOW_DETAILED = 0


@flag_handler(InventoryFlag.SHOW_DETAILED)
def _on_show_detailed(flags: FlagQueue, state) -> None:
    # Display toggle only; nothing to transition.
    pass


@register_feature("inventory")
class InventoryFeature(BaseFeature):
    """Lists held items; [d] toggles descriptions."""

    DEFAULT_INFO = {
        "key": "i",
        "name": "Inventory",
        "color": "WHITE",
        "description": "View your inventory.",
        "unlock_count": 100,
        "counter_string": " and more than 1 gold",
    }

    KEY_DETAILS = "d"

    def __init__(self, info=None):
        super().__init__(info)
        # Never drained: the mark itself is the toggle state
        self.flags = FlagQueue(InventoryFlag)

    def is_unlocked(self, state):
        return len(state.inventory.items) > 0

    def get_top_bar(self, state):
        inventory = state.inventory
        return [TextSpan(f" | Items: {inventory.cur_size}/{inventory.max_size}", bold=True)]

    def update(self, dt, state, messages):
        if state.key == self.KEY_DETAILS:
            if self.flags.is_marked(InventoryFlag.SHOW_DETAILED):
                self.flags.unmark(InventoryFlag.SHOW_DETAILED)
            else:
                self.flags.mark(InventoryFlag.SHOW_DETAILED)

    def render(self, state, features):
        detailed = self.flags.is_marked(InventoryFlag.SHOW_DETAILED)
        lines = []
        for item in state.inventory.items:
            line = [TextSpan(f"[{item.amount}] "), rarity_span(item.rarity, item.name)]
            if detailed:
                line.append(TextSpan(f" {item.description}"))
            lines.append(line)
        lines.append("")
        lines.append("[d] Toggle details")
        return lines
