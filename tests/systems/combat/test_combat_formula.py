"""
test_combat_formula.py
----------------------
Damage clamping, health clamping and enemy scaling.
"""

import pytest

from idlefloor.systems.combat import combat_formula
from idlefloor.systems.combat.fight_data import Living


def _living(attack=0.0, defense=0.0, health=10.0, max_health=10.0):
    return Living(attack=attack, defense=defense, health=health, max_health=max_health)


@pytest.mark.parametrize("attack, defense, expected", [
    (1.0, 0.0, 1.0),
    (1.0, 1.0, 0.0),
    (1.0, 2.5, 0.0),   # Defense never heals
    (3.5, 0.5, 3.0),
    (0.0, 0.0, 0.0),
])
def test_damage_is_attack_minus_defense_never_negative(attack, defense, expected):
    damage = combat_formula.calculate_damage(_living(attack=attack), _living(defense=defense))
    assert damage == pytest.approx(expected)
    assert damage >= 0


def test_apply_damage_clamps_at_zero():
    target = _living(health=0.5)
    assert combat_formula.apply_damage(target, 2.0) is True
    assert target.health == 0.0


def test_apply_damage_reports_survival():
    target = _living(health=3.0)
    assert combat_formula.apply_damage(target, 1.0) is False
    assert target.health == 2.0


def test_heal_clamps_at_max_health():
    target = _living(health=9.8)
    combat_formula.heal(target, 0.5)
    assert target.health == 10.0


@pytest.mark.parametrize("floor, attack, defense, health", [
    (1, 1.0, 0.0, 5.0),
    (5, 1.4, 0.0, 13.0),
    (6, 1.5, 0.1, 15.0),
    (10, 1.9, 0.5, 23.0),
])
def test_enemy_scaling(floor, attack, defense, health):
    enemy = combat_formula.enemy_for_floor(floor)
    assert enemy.attack == pytest.approx(attack)
    assert enemy.defense == pytest.approx(defense)
    assert enemy.health == enemy.max_health == pytest.approx(health)
