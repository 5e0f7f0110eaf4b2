"""
fight_flags.py
--------------
Combat state machine expressed as deferred flags.

Each handler receives the sink queue for the next generation and the shared
GameState. A kill or a death raised here is handled on the following tick.
"""

from idlefloor.core.debug.debug_logger import DebugLogger
from idlefloor.flags.flag import Flag, FlagQueue, flag_handler
from idlefloor.systems.combat import combat_formula
from idlefloor.systems.exp.exp_manager import ExpManager


GOLD_ITEM = "gold"


class FightFlag(Flag):
    """Combat transitions, handled in this order within a tick."""
    ATTACK = 0
    ENEMY_ATTACK = 1
    RESPAWN = 2
    ENEMY_DEAD = 3
    PLAYER_DEAD = 4


# Flags tied to the current encounter; a floor change cancels them.
# ENEMY_DEAD is not one of them: a kill already landed is still paid out.
ENCOUNTER_FLAGS = (
    FightFlag.ATTACK,
    FightFlag.ENEMY_ATTACK,
    FightFlag.RESPAWN,
)


@flag_handler(FightFlag.ATTACK)
def _on_attack(flags: FlagQueue, state) -> None:
    fight = state.fight
    enemy = fight.enemy
    if enemy is None or enemy.is_depleted:
        return

    damage = combat_formula.calculate_damage(fight.player, enemy)
    fight.attack_timer = fight.attack_max

    if combat_formula.apply_damage(enemy, damage):
        fight.kill_floor = fight.floor
        flags.mark(FightFlag.ENEMY_DEAD)


@flag_handler(FightFlag.ENEMY_ATTACK)
def _on_enemy_attack(flags: FlagQueue, state) -> None:
    fight = state.fight
    enemy = fight.enemy
    if enemy is None or enemy.is_depleted:
        return

    damage = combat_formula.calculate_damage(enemy, fight.player)
    fight.enemy_timer = fight.enemy_max

    if combat_formula.apply_damage(fight.player, damage):
        flags.mark(FightFlag.PLAYER_DEAD)


@flag_handler(FightFlag.RESPAWN)
def _on_respawn(flags: FlagQueue, state) -> None:
    fight = state.fight
    if fight.enemy is not None or fight.floor <= 0:
        return

    fight.enemy = combat_formula.enemy_for_floor(fight.floor)
    fight.respawn_timer = fight.respawn_max
    fight.enemy_timer = fight.enemy_max
    DebugLogger.state(f"Enemy spawned on floor {fight.floor} ({fight.enemy.health:g} hp)", category="combat")


@flag_handler(FightFlag.ENEMY_DEAD)
def _on_enemy_dead(flags: FlagQueue, state) -> None:
    fight = state.fight
    kill_floor = fight.kill_floor
    if kill_floor is None:
        return
    fight.kill_floor = None

    # The player may already have left the floor the kill happened on
    if fight.enemy is not None and fight.enemy.is_depleted:
        fight.enemy = None
        fight.enemy_timer = fight.enemy_max
    fight.kills += 1

    reward = kill_floor
    state.inventory.add(GOLD_ITEM, reward)
    levels = ExpManager(fight, state.inventory).exp_up(reward)

    # Only kills on the highest unlocked floor count toward the next one
    if kill_floor == fight.max_floor:
        fight.enemy_count += 1
        if fight.enemy_count >= fight.enemy_required:
            fight.max_floor += 1
            fight.enemy_count = 0
            DebugLogger.state(f"Floor {fight.max_floor} unlocked", category="combat")

    DebugLogger.state(
        f"Enemy defeated on floor {kill_floor}: +{reward} gold, +{levels} level(s)",
        category="combat"
    )


@flag_handler(FightFlag.PLAYER_DEAD)
def _on_player_dead(flags: FlagQueue, state) -> None:
    fight = state.fight
    fight.player.health = fight.player.max_health
    fight.enemy = None
    fight.floor = 0
    fight.reset_timers()
    fight.deaths += 1

    gold = state.inventory.get_amount(GOLD_ITEM)
    state.inventory.remove(GOLD_ITEM, gold - gold // 2)

    DebugLogger.state(f"Player died, gold {gold} -> {gold // 2}", category="combat")
