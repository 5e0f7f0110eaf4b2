"""
fight_feature.py
----------------
Floor-based auto-battler driven by the FightFlag state machine.

Responsibilities
----------------
- Move between floors and request attacks from single-key input
- Drain the combat flag queue once per tick
- Advance the respawn, attack and enemy countdowns
- Regenerate player health while resting on floor 0

Tick order: input -> flag drain -> timers -> regeneration.
"""

from idlefloor.core.debug.debug_logger import DebugLogger
from idlefloor.core.runtime.game_settings import Colors, Timing
from idlefloor.features.base_feature import BaseFeature, register_feature
from idlefloor.flags.flag import FlagQueue
from idlefloor.systems.combat import combat_formula
from idlefloor.systems.combat.fight_flags import ENCOUNTER_FLAGS, FightFlag
from idlefloor.systems.messages.message_manager import Message, TextLocation
from idlefloor.ui.text import TextSpan, health_bar, timer_bar


def count_down(timer: float, dt: float) -> float:
    """Step a countdown; rounding keeps 0.5 s at exactly five 0.1 s ticks."""
    return round(timer - dt, Timing.TIMER_DECIMALS)


@register_feature("fight")
class FightFeature(BaseFeature):

    DEFAULT_INFO = {
        "key": "f",
        "name": "Fight",
        "color": "RED",
        "description": "Climb the floors and defeat enemies for gold and experience.",
        "visible_count": 5,
        "unlock_count": 10,
    }

    KEY_FLOOR_DOWN = "left"
    KEY_FLOOR_UP = "right"
    KEY_ATTACK = "a"

    def __init__(self, info=None):
        super().__init__(info)
        self.flags = FlagQueue(FightFlag)
        self._welcomed = False

    # ===========================================================
    # Tick
    # ===========================================================

    def update(self, dt, state, messages):
        if not self._welcomed:
            self._welcomed = True
            messages.add_message(Message(
                "Use [<-] and [->] to change floor. Enemies appear on floor 1 and above; "
                "press [a] to attack when your blade is ready. Rest on floor 0 to heal.",
                TextLocation.BOTTOM,
                8.0,
            ))

        self.process_input(state.key, state)
        self.flags.drain(state)
        self.update_timers(dt, state)

    def process_input(self, key, state) -> None:
        """Floor movement and attack requests. Unknown keys do nothing."""
        fight = state.fight

        if key == self.KEY_FLOOR_DOWN:
            self.change_floor(state, fight.floor - 1)
        elif key == self.KEY_FLOOR_UP:
            self.change_floor(state, fight.floor + 1)
        elif key == self.KEY_ATTACK:
            if fight.attack_timer <= 0:
                self.flags.mark(FightFlag.ATTACK)

    def change_floor(self, state, target: int) -> None:
        """Clamp to [0, max_floor]; entering a new floor restarts the encounter."""
        fight = state.fight
        target = max(0, min(target, fight.max_floor))
        if target == fight.floor:
            return

        fight.floor = target
        fight.enemy = None
        fight.reset_timers()
        for flag in ENCOUNTER_FLAGS:
            self.flags.unmark(flag)

        DebugLogger.action(f"Moved to floor {fight.floor}", category="combat")

    def update_timers(self, dt: float, state) -> None:
        """Count down the encounter timers and raise the flags they trigger."""
        fight = state.fight

        if fight.enemy is None:
            if fight.floor > 0:
                fight.respawn_timer = count_down(fight.respawn_timer, dt)
                if fight.respawn_timer <= 0:
                    self.flags.mark(FightFlag.RESPAWN)
        else:
            fight.attack_timer = count_down(fight.attack_timer, dt)
            fight.enemy_timer = count_down(fight.enemy_timer, dt)
            if fight.enemy_timer <= 0:
                self.flags.mark(FightFlag.ENEMY_ATTACK)

        if fight.floor == 0:
            combat_formula.heal(fight.player, fight.regen_rate * dt)

    # ===========================================================
    # Rendering
    # ===========================================================

    def get_top_bar(self, state):
        fight = state.fight
        return [
            TextSpan(f" | Floor {fight.floor}/{fight.max_floor}"),
            TextSpan(f" | Lv {fight.level}", Colors.GREEN, bold=True),
        ]

    def render(self, state, features):
        fight = state.fight
        player = fight.player
        lines = [
            f"[<-] Floor {fight.floor} [->]    (max {fight.max_floor})",
            "",
            [
                TextSpan("You    ", Colors.GREEN, bold=True),
                TextSpan(f"{health_bar(player.health, player.max_health)} "
                         f"{player.health:.1f}/{player.max_health:g}"),
                TextSpan(f"  atk {player.attack:g} def {player.defense:g}", Colors.DIM),
            ],
        ]

        enemy = fight.enemy
        if enemy is not None:
            lines.append([
                TextSpan("Enemy  ", Colors.RED, bold=True),
                TextSpan(f"{health_bar(enemy.health, enemy.max_health)} "
                         f"{enemy.health:.1f}/{enemy.max_health:g}"),
                TextSpan(f"  atk {enemy.attack:.1f} def {enemy.defense:.1f}", Colors.DIM),
            ])
            lines.append("")
            ready = "ready!" if fight.attack_timer <= 0 else ""
            lines.append(f"[a] Attack {timer_bar(fight.attack_timer, fight.attack_max)} {ready}")
            lines.append(f"Enemy      {timer_bar(fight.enemy_timer, fight.enemy_max)}")
        elif fight.floor == 0:
            lines.append("Resting... no enemies on floor 0.")
            lines.append("")
        else:
            lines.append(f"Enemy approaching {timer_bar(fight.respawn_timer, fight.respawn_max)}")
            lines.append("")

        lines.append("")
        if fight.floor == fight.max_floor and fight.floor > 0:
            lines.append(f"Kills on this floor: {fight.enemy_count}/{fight.enemy_required}")
        lines.append(
            f"Level {fight.level}  XP {state.inventory.get_amount('xp')}/{fight.xp_to_next_level}"
            f"  Gold {state.inventory.get_amount('gold')}"
        )
        lines.append([TextSpan(f"Kills {fight.kills}  Deaths {fight.deaths}", Colors.DIM)])
        return lines
