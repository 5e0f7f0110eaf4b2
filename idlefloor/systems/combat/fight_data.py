"""
fight_data.py
-------------
Combat context: player and enemy stats, floor progress, timers and level.

Currency and XP amounts live in the inventory, not here.
"""

from dataclasses import dataclass
from typing import Optional

from idlefloor.core.services.config_manager import load_config


DEFAULT_COMBAT_CONFIG = {
    "player": {
        "attack": 1.0,
        "defense": 0.0,
        "max_health": 10.0,
    },
    "timers": {
        "respawn": 2.0,
        "attack": 0.5,
        "enemy": 1.0,
    },
    "regen_rate": 0.5,
    "max_floor": 1,
    "enemy_required": 10,
    "exp": {
        "base": 10,
        "growth": 1.5,
    },
    "shop": {
        "attack": {"key": "1", "label": "Sharpen blade", "stat": "attack",
                   "amount": 1.0, "base_cost": 10, "cost_growth": 2.0},
        "defense": {"key": "2", "label": "Thicken armor", "stat": "defense",
                    "amount": 0.5, "base_cost": 15, "cost_growth": 2.0},
        "health": {"key": "3", "label": "Train stamina", "stat": "max_health",
                   "amount": 5.0, "base_cost": 20, "cost_growth": 1.8},
    },
}


def load_combat_config() -> dict:
    """combat.json merged over the built-in defaults."""
    return load_config("combat.json", default_dict=DEFAULT_COMBAT_CONFIG)


@dataclass
class Living:
    attack: float
    defense: float
    health: float
    max_health: float

    @property
    def is_depleted(self) -> bool:
        return self.health <= 0


class FightData:
    """Everything the combat flags read and write, apart from currency."""

    def __init__(self, config: Optional[dict] = None):
        config = config or DEFAULT_COMBAT_CONFIG
        player = config["player"]
        timers = config["timers"]

        self.player = Living(
            attack=float(player["attack"]),
            defense=float(player["defense"]),
            health=float(player["max_health"]),
            max_health=float(player["max_health"]),
        )
        self.enemy: Optional[Living] = None

        # Floor progress
        self.floor = 0
        self.max_floor = int(config["max_floor"])
        self.enemy_count = 0
        # Floor of the last killing blow, until ENEMY_DEAD pays it out
        self.kill_floor: Optional[int] = None
        self.enemy_required = int(config["enemy_required"])

        # Timers count down to zero; a flag resets them to max
        self.respawn_max = float(timers["respawn"])
        self.attack_max = float(timers["attack"])
        self.enemy_max = float(timers["enemy"])
        self.respawn_timer = self.respawn_max
        self.attack_timer = self.attack_max
        self.enemy_timer = self.enemy_max

        self.regen_rate = float(config["regen_rate"])

        # Leveling
        self.xp_base = config["exp"]["base"]
        self.xp_growth = config["exp"]["growth"]
        self.level = 1
        self.xp_to_next_level = int(self.xp_base)

        # Lifetime counters
        self.kills = 0
        self.deaths = 0

    def reset_timers(self) -> None:
        self.respawn_timer = self.respawn_max
        self.attack_timer = self.attack_max
        self.enemy_timer = self.enemy_max
