"""
inventory.py
------------
Item stacks owned by the player.

Responsibilities
----------------
- Load the item catalogue from items.json
- Add, remove and query item amounts by id
- Enforce the distinct-item capacity
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional

from idlefloor.core.services.config_manager import load_config
from idlefloor.core.debug.debug_logger import DebugLogger


class Rarity(IntEnum):
    COMMON = 0
    UNCOMMON = 1
    RARE = 2
    EPIC = 3
    LEGENDARY = 4
    MYTHIC = 5


DEFAULT_CATALOGUE = {
    "gold": {"name": "Gold", "description": "A shiny coin", "rarity": "COMMON"},
    "xp": {"name": "XP", "description": "Experience Points", "rarity": "UNCOMMON"},
}

_CATALOGUE = None


def get_catalogue() -> Dict[str, dict]:
    """Item definitions keyed by id, loaded once."""
    global _CATALOGUE
    if _CATALOGUE is None:
        _CATALOGUE = load_config("items.json", default_dict=DEFAULT_CATALOGUE)
    return _CATALOGUE


@dataclass
class Item:
    id: str
    name: str
    description: str
    amount: int
    rarity: Rarity


def create_item(item_id: str) -> Optional[Item]:
    """Build an empty stack for a catalogue id, or None if unknown."""
    data = get_catalogue().get(item_id)
    if data is None:
        return None

    try:
        rarity = Rarity[data.get("rarity", "COMMON").upper()]
    except KeyError:
        DebugLogger.warn(f"Unknown rarity for item '{item_id}'", category="inventory")
        rarity = Rarity.COMMON

    return Item(
        id=item_id,
        name=data.get("name", item_id),
        description=data.get("description", ""),
        amount=0,
        rarity=rarity,
    )


class Inventory:
    """Ordered item stacks with a cap on distinct items."""

    DEFAULT_MAX_SIZE = 10

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE):
        self.items: List[Item] = []
        self.max_size = max_size

    @property
    def cur_size(self) -> int:
        return len(self.items)

    def add(self, item_id: str, amount: int) -> bool:
        """
        Add amount to a stack, creating it if there is room.

        Returns:
            False if the id is unknown or the inventory is full
        """
        if amount <= 0:
            return False

        existing = self.get(item_id)
        if existing is None:
            if self.cur_size >= self.max_size:
                DebugLogger.warn(f"Inventory full, dropped {amount} {item_id}", category="inventory")
                return False
            existing = create_item(item_id)
            if existing is None:
                return False
            self.items.append(existing)

        existing.amount += amount
        DebugLogger.state(f"+{amount} {existing.name} ({existing.amount})", category="inventory")
        return True

    def remove(self, item_id: str, amount: int) -> None:
        """Remove up to amount; an emptied stack leaves the inventory."""
        existing = self.get(item_id)
        if existing is None or amount <= 0:
            return

        existing.amount -= amount
        if existing.amount <= 0:
            self.items.remove(existing)

    def get(self, item_id: str) -> Optional[Item]:
        return next((item for item in self.items if item.id == item_id), None)

    def contains(self, item_id: str) -> bool:
        return self.get(item_id) is not None

    def get_amount(self, item_id: str) -> int:
        """Amount held, or 0."""
        item = self.get(item_id)
        return item.amount if item else 0
