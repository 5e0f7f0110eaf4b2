"""
game_state.py
-------------
Shared state handed to the active feature once per tick.
"""

from typing import Optional

from idlefloor.systems.combat.fight_data import DEFAULT_COMBAT_CONFIG, FightData, load_combat_config
from idlefloor.systems.inventory.inventory import Inventory


class Upgrades:
    """Shop purchase counts keyed by upgrade id."""

    def __init__(self):
        self.owned = {}

    def count(self, upgrade_id: str) -> int:
        return self.owned.get(upgrade_id, 0)

    def add(self, upgrade_id: str) -> None:
        self.owned[upgrade_id] = self.count(upgrade_id) + 1


class GameState:
    def __init__(self, combat_config: Optional[dict] = None):
        combat_config = combat_config or DEFAULT_COMBAT_CONFIG

        # Host control
        self.key = None
        self.selected_feature: Optional[int] = None
        self.quit = False

        # Progress
        self.count = 0
        self.fight = FightData(combat_config)
        self.inventory = Inventory()
        self.upgrades = Upgrades()
        self.shop_config = combat_config.get("shop", {})


def create_state() -> GameState:
    """Fresh state with balance loaded from combat.json."""
    return GameState(load_combat_config())
