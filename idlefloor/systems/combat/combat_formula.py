"""
combat_formula.py
-----------------
Pure combat math: damage, clamped health changes and enemy scaling.
"""

from idlefloor.systems.combat.fight_data import Living


def calculate_damage(attacker: Living, defender: Living) -> float:
    """Defense can cancel an attack entirely but never heals."""
    return max(attacker.attack - defender.defense, 0.0)


def apply_damage(target: Living, amount: float) -> bool:
    """
    Subtract amount from target's health, clamped at zero.

    Returns:
        True if the target is depleted afterwards
    """
    target.health = max(target.health - max(amount, 0.0), 0.0)
    return target.is_depleted


def heal(target: Living, amount: float) -> None:
    """Add health, clamped at max_health."""
    target.health = min(target.health + max(amount, 0.0), target.max_health)


def enemy_for_floor(floor: int) -> Living:
    """Enemy stats as a function of floor."""
    health = 3.0 + 2.0 * floor
    return Living(
        attack=0.9 + 0.1 * floor,
        defense=max(0.0, 0.1 * (floor - 5)),
        health=health,
        max_health=health,
    )
