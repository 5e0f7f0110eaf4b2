from idlefloor.core.debug.debug_logger import DebugLogger


XP_ITEM = "xp"


class ExpManager:
    """
    Adds XP to the inventory and converts overflow into levels.
    """

    def __init__(self, fight, inventory):
        self.fight = fight
        self.inventory = inventory

    # Exp Up
    def exp_up(self, amount: int) -> int:
        """
        Called when an enemy is defeated.
        Adds EXP and levels up as many times as the total allows.

        Returns:
            Number of levels gained
        """
        if amount <= 0:
            return 0

        self.inventory.add(XP_ITEM, amount)
        DebugLogger.state(
            f"[Exp Up] +{amount} ({self.inventory.get_amount(XP_ITEM)}/{self.fight.xp_to_next_level})",
            category="exp"
        )

        gained = 0
        while self.is_level_up():
            self.level_up()
            gained += 1
        return gained

    def is_level_up(self) -> bool:
        """Return True if current EXP >= required EXP."""
        return self.inventory.get_amount(XP_ITEM) >= self.fight.xp_to_next_level

    def level_up(self) -> None:
        """
        1. Carry the overflow EXP
        2. Increase level
        3. Calculate next level EXP
        """
        self.inventory.remove(XP_ITEM, self.fight.xp_to_next_level)
        self.fight.level += 1
        self.fight.xp_to_next_level = self.calculate_next_exp(self.fight.level)

        DebugLogger.state(
            f"[LEVEL UP] Level : {self.fight.level} "
            f"(Next Required EXP: {self.fight.xp_to_next_level})",
            category="exp"
        )

    def calculate_next_exp(self, lv: int) -> int:
        """Geometric EXP curve."""
        return max(1, int(self.fight.xp_base * (self.fight.xp_growth ** (lv - 1))))
