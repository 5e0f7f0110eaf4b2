"""
shop_feature.py
---------------
Spends gold on permanent player stat upgrades.

Upgrade definitions come from the "shop" section of combat.json. Each
purchase multiplies the next price by cost_growth.
"""

from idlefloor.core.debug.debug_logger import DebugLogger
from idlefloor.core.runtime.game_settings import Colors
from idlefloor.features.base_feature import BaseFeature, register_feature
from idlefloor.systems.messages.message_manager import Message, TextLocation
from idlefloor.ui.text import TextSpan


GOLD_ITEM = "gold"


@register_feature("shop")
class ShopFeature(BaseFeature):

    DEFAULT_INFO = {
        "key": "s",
        "name": "Shop",
        "color": "YELLOW",
        "description": "A shop where you can buy upgrades to help you in your adventure.",
        "visible_count": 50,
        "unlock_count": 200,
    }

    def get_top_bar(self, state):
        return [
            TextSpan(" | Gold: "),
            TextSpan(str(state.inventory.get_amount(GOLD_ITEM)), Colors.DARK_YELLOW, bold=True),
        ]

    @staticmethod
    def cost(upgrade: dict, owned: int) -> int:
        return int(upgrade["base_cost"] * (upgrade["cost_growth"] ** owned))

    def update(self, dt, state, messages):
        for upgrade_id, upgrade in state.shop_config.items():
            if state.key == str(upgrade["key"]):
                self.buy(upgrade_id, state, messages)
                return

    def buy(self, upgrade_id: str, state, messages) -> bool:
        """Purchase one level of an upgrade if the player can afford it."""
        upgrade = state.shop_config[upgrade_id]
        price = self.cost(upgrade, state.upgrades.count(upgrade_id))
        gold = state.inventory.get_amount(GOLD_ITEM)

        if gold < price:
            messages.add_message(Message(
                f"Not enough gold for {upgrade['label']} ({gold}/{price}).",
                TextLocation.BOTTOM,
                2.0,
            ))
            return False

        state.inventory.remove(GOLD_ITEM, price)
        state.upgrades.add(upgrade_id)

        player = state.fight.player
        stat = upgrade["stat"]
        amount = float(upgrade["amount"])
        setattr(player, stat, getattr(player, stat) + amount)
        if stat == "max_health":
            player.health = min(player.health + amount, player.max_health)

        DebugLogger.action(f"Bought {upgrade_id} for {price} gold ({stat} +{amount:g})", category="shop")
        return True

    def render(self, state, features):
        lines = []
        for upgrade_id, upgrade in state.shop_config.items():
            owned = state.upgrades.count(upgrade_id)
            price = self.cost(upgrade, owned)
            affordable = state.inventory.get_amount(GOLD_ITEM) >= price
            lines.append([
                TextSpan(f"[{upgrade['key']}] {upgrade['label']} "),
                TextSpan(f"(+{upgrade['amount']:g} {upgrade['stat'].replace('_', ' ')}) ", Colors.DIM),
                TextSpan(f"{price} gold", Colors.YELLOW if affordable else Colors.DIM),
                TextSpan(f"  owned {owned}"),
            ])
        return lines
