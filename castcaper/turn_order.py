"""Action-bar turn order shared by party members and enemies.

Every combatant waits on a cooldown that counts down toward zero. A global
cycle bar runs alongside; when no cooldown is due before the cycle bar
empties, the cycle itself takes the turn and is then refilled.
"""

import random
from dataclasses import dataclass

FULL = 100.0

PARTY_SCALE = (0.9, 0.2)
ENEMY_SCALE = (0.75, 0.5)


@dataclass
class Combatant:
    """Someone who takes turns: a higher haste means a shorter wait."""

    haste: float
    enemy: bool = False
    alive: bool = True


class TurnOrder:
    """Cooldowns for a list of combatants plus the global cycle bar."""

    def __init__(self, combatants, rng=None):
        combatants = list(combatants)
        if not combatants:
            raise ValueError("a turn order needs at least one combatant")
        self.combatants = combatants
        self.rng = rng if rng is not None else random.Random()
        self.turn_cd = [0.0] * len(combatants)
        self.prev_turn_cd = [0.0] * len(combatants)
        self.global_progress = FULL
        self.prev_global_progress = FULL
        self.cycle = 1
        self.next_turn = None

    def roll(self, index):
        """Give a combatant a new randomised cooldown and return it."""
        combatant = self.combatants[index]
        low, span = ENEMY_SCALE if combatant.enemy else PARTY_SCALE
        scale = low + self.rng.random() * span
        self.turn_cd[index] = FULL - combatant.haste * scale
        return self.turn_cd[index]

    def _first_living_ally(self):
        return next(
            (i for i, c in enumerate(self.combatants) if not c.enemy and c.alive),
            0,
        )

    def select_next(self):
        """Pick whoever acts next, or None when the global cycle comes first."""
        lowest = self._first_living_ally()
        for i, combatant in enumerate(self.combatants):
            if combatant.alive and self.turn_cd[i] < self.turn_cd[lowest]:
                lowest = i
        self.next_turn = None if self.turn_cd[lowest] > self.global_progress else lowest
        return self.next_turn

    def advance(self):
        """Move time forward to the selected turn, remembering the old values."""
        self.prev_turn_cd = list(self.turn_cd)
        self.prev_global_progress = self.global_progress

        due = self.turn_cd[self.next_turn] if self.next_turn is not None else float("inf")
        if self.global_progress < due:
            due = self.global_progress
        else:
            self.global_progress -= due

        self.turn_cd = [cd - due for cd in self.turn_cd]

    def start(self):
        """Roll everyone, then select and advance to the first turn."""
        for index in range(len(self.combatants)):
            self.roll(index)
        self.select_next()
        self.advance()
        return self.next_turn

    def next_cycle(self):
        """Refill the global cycle bar and count a new cycle."""
        self.global_progress = FULL
        self.cycle += 1
        return self.cycle