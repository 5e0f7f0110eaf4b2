"""
test_fight_flags.py
-------------------
Combat transitions driven straight through the flag queue.

Covers:
1. Attack / enemy attack damage and timer resets
2. Kill and death handling one generation after the killing blow
3. Rewards, level-ups and floor unlocks
4. Handlers staying total when their precondition vanished
"""

import pytest

from idlefloor.flags.flag import FlagQueue
from idlefloor.systems.combat.fight_flags import FightFlag


@pytest.fixture
def flags():
    return FlagQueue(FightFlag)


# ===========================================================
# Attack
# ===========================================================

@pytest.mark.scenario
def test_attack_damages_enemy_and_resets_timer(fight_state, flags, make_enemy):
    """Scenario A: 1 attack vs 0 defense on a 3 hp enemy."""
    fight = fight_state.fight
    fight.enemy = make_enemy(health=3.0)
    fight.attack_timer = 0.0

    flags.mark(FightFlag.ATTACK)
    flags.drain(fight_state)

    assert fight.enemy.health == pytest.approx(2.0)
    assert fight.attack_timer == fight.attack_max
    assert not flags.is_marked(FightFlag.ENEMY_DEAD)


@pytest.mark.scenario
def test_killing_blow_defers_enemy_dead(fight_state, flags, make_enemy):
    """Scenario B: the kill is processed on the following drain."""
    fight = fight_state.fight
    fight.max_floor = 2
    fight.floor = 2
    fight.enemy = make_enemy(health=1.0)

    flags.mark(FightFlag.ATTACK)
    flags.drain(fight_state)

    assert fight.enemy is not None
    assert fight.enemy.health == 0.0
    assert flags.is_marked(FightFlag.ENEMY_DEAD)
    assert fight.enemy_count == 0
    assert fight.kill_floor == 2

    flags.drain(fight_state)

    assert fight.enemy is None
    assert fight.enemy_count == 1
    assert fight_state.inventory.get_amount("gold") == 2
    assert fight_state.inventory.get_amount("xp") == 2
    assert not flags
    assert fight.kill_floor is None


def test_attack_is_blocked_by_high_defense(fight_state, flags, make_enemy):
    fight = fight_state.fight
    fight.enemy = make_enemy(defense=5.0, health=3.0)

    flags.mark(FightFlag.ATTACK)
    flags.drain(fight_state)

    assert fight.enemy.health == 3.0


def test_attack_without_enemy_is_a_no_op(fight_state, flags):
    fight = fight_state.fight
    fight.attack_timer = -0.2

    flags.mark(FightFlag.ATTACK)
    flags.drain(fight_state)

    assert fight.enemy is None
    assert fight.attack_timer == -0.2
    assert not flags


# ===========================================================
# Enemy attack and death
# ===========================================================

@pytest.mark.scenario
def test_lethal_enemy_attack_then_player_dead(fight_state, flags, make_enemy):
    """Scenario C: health clamps at zero, death resolves on the next drain."""
    fight = fight_state.fight
    fight.player.health = 0.5
    fight.enemy = make_enemy(attack=1.0)
    fight.enemy_timer = 0.0
    fight_state.inventory.add("gold", 7)

    flags.mark(FightFlag.ENEMY_ATTACK)
    flags.drain(fight_state)

    assert fight.player.health == 0.0
    assert fight.enemy_timer == fight.enemy_max
    assert flags.is_marked(FightFlag.PLAYER_DEAD)

    flags.drain(fight_state)

    assert fight.player.health == fight.player.max_health
    assert fight.floor == 0
    assert fight.enemy is None
    assert fight_state.inventory.get_amount("gold") == 3
    assert fight.deaths == 1


def test_enemy_attack_respects_player_defense(fight_state, flags, make_enemy):
    fight = fight_state.fight
    fight.player.defense = 0.4
    fight.enemy = make_enemy(attack=1.0)

    flags.mark(FightFlag.ENEMY_ATTACK)
    flags.drain(fight_state)

    assert fight.player.health == pytest.approx(9.4)
    assert not flags.is_marked(FightFlag.PLAYER_DEAD)


def test_depleted_enemy_does_not_strike_back(fight_state, flags, make_enemy):
    fight = fight_state.fight
    fight.enemy = make_enemy(health=0.0, max_health=3.0)

    flags.mark(FightFlag.ENEMY_ATTACK)
    flags.drain(fight_state)

    assert fight.player.health == fight.player.max_health


@pytest.mark.parametrize("gold, expected", [(0, 0), (1, 0), (2, 1), (9, 4), (10, 5)])
def test_death_halves_gold_rounding_down(fight_state, flags, gold, expected):
    fight_state.inventory.add("gold", gold)

    flags.mark(FightFlag.PLAYER_DEAD)
    flags.drain(fight_state)

    assert fight_state.inventory.get_amount("gold") == expected


def test_death_resets_encounter_timers(fight_state, flags):
    fight = fight_state.fight
    fight.respawn_timer = 0.3
    fight.attack_timer = -1.0
    fight.enemy_timer = 0.1

    flags.mark(FightFlag.PLAYER_DEAD)
    flags.drain(fight_state)

    assert fight.respawn_timer == fight.respawn_max
    assert fight.attack_timer == fight.attack_max
    assert fight.enemy_timer == fight.enemy_max


# ===========================================================
# Respawn
# ===========================================================

@pytest.mark.parametrize("floor", [1, 5, 8])
def test_respawn_spawns_scaled_enemy(fight_state, flags, floor):
    fight = fight_state.fight
    fight.max_floor = 10
    fight.floor = floor
    fight.respawn_timer = -0.05
    fight.enemy_timer = 0.2

    flags.mark(FightFlag.RESPAWN)
    flags.drain(fight_state)

    assert fight.enemy is not None
    assert fight.enemy.health == fight.enemy.max_health == 3 + 2 * floor
    assert fight.enemy.attack == pytest.approx(0.9 + 0.1 * floor)
    assert fight.enemy_timer == fight.enemy_max
    assert fight.respawn_timer == fight.respawn_max


def test_respawn_is_ignored_on_floor_zero(state, flags):
    flags.mark(FightFlag.RESPAWN)
    flags.drain(state)
    assert state.fight.enemy is None


def test_respawn_keeps_existing_enemy(fight_state, flags, make_enemy):
    fight = fight_state.fight
    enemy = make_enemy(health=1.5, max_health=5.0)
    fight.enemy = enemy

    flags.mark(FightFlag.RESPAWN)
    flags.drain(fight_state)

    assert fight.enemy is enemy


# ===========================================================
# Rewards and progress
# ===========================================================

@pytest.mark.scenario
def test_kill_reward_overflows_into_level_up(fight_state, flags, make_enemy):
    """Scenario E through the flag: 12 XP crosses the first threshold of 10."""
    fight = fight_state.fight
    fight.max_floor = 12
    fight.floor = 12
    fight.enemy = make_enemy(health=0.0, max_health=27.0)
    fight.kill_floor = 12

    flags.mark(FightFlag.ENEMY_DEAD)
    flags.drain(fight_state)

    assert fight.level == 2
    assert fight_state.inventory.get_amount("xp") == 2
    assert fight.xp_to_next_level == 15


def test_kills_below_max_floor_do_not_count(fight_state, flags, make_enemy):
    fight = fight_state.fight
    fight.max_floor = 3
    fight.floor = 2
    fight.enemy = make_enemy(health=0.0, max_health=7.0)
    fight.kill_floor = 2

    flags.mark(FightFlag.ENEMY_DEAD)
    flags.drain(fight_state)

    assert fight.enemy_count == 0
    assert fight.kills == 1
    assert fight_state.inventory.get_amount("gold") == 2


def test_reaching_quota_unlocks_next_floor(fight_state, flags, make_enemy):
    fight = fight_state.fight
    fight.enemy_required = 3
    fight.enemy_count = 2
    fight.enemy = make_enemy(health=0.0, max_health=5.0)
    fight.kill_floor = 1

    flags.mark(FightFlag.ENEMY_DEAD)
    flags.drain(fight_state)

    assert fight.max_floor == 2
    assert fight.enemy_count == 0
    assert fight.floor == 1


def test_enemy_dead_without_recorded_kill_awards_nothing(fight_state, flags):
    flags.mark(FightFlag.ENEMY_DEAD)
    flags.drain(fight_state)

    assert fight_state.inventory.get_amount("gold") == 0
    assert fight_state.fight.kills == 0


def test_simultaneous_flags_resolve_in_declaration_order(fight_state, flags, make_enemy):
    """ATTACK runs before ENEMY_ATTACK, so a killed enemy does not hit back."""
    fight = fight_state.fight
    fight.enemy = make_enemy(attack=3.0, health=1.0)

    flags.mark(FightFlag.ENEMY_ATTACK)
    flags.mark(FightFlag.ATTACK)
    flags.drain(fight_state)

    assert fight.enemy.health == 0.0
    assert fight.player.health == fight.player.max_health
    assert flags.marked() == [FightFlag.ENEMY_DEAD]


def test_recorded_kill_pays_out_after_leaving_the_floor(fight_state, flags):
    """The enemy is already gone, but the kill on floor 1 still counts."""
    fight = fight_state.fight
    fight.floor = 0
    fight.kill_floor = 1

    flags.mark(FightFlag.ENEMY_DEAD)
    flags.drain(fight_state)

    assert fight.kills == 1
    assert fight.enemy_count == 1
    assert fight_state.inventory.get_amount("gold") == 1
    assert fight_state.inventory.get_amount("xp") == 1
    assert fight.kill_floor is None


def test_payout_leaves_a_live_enemy_alone(fight_state, flags, make_enemy):
    fight = fight_state.fight
    enemy = make_enemy(health=4.0, max_health=5.0)
    fight.enemy = enemy
    fight.kill_floor = 1

    flags.mark(FightFlag.ENEMY_DEAD)
    flags.drain(fight_state)

    assert fight.enemy is enemy
    assert fight.kills == 1
