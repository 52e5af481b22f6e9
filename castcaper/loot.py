"""Loot handling: which party members can use an item, stat panel text and the loot pile."""

from dataclasses import dataclass
from enum import IntEnum

GAIN_COLOUR = 0x00FF00
LOSS_COLOUR = 0xFF0000

MAIN_STAT_NAMES = ("Strength", "Agility", "Intelligence")
ITEM_STAT_NAMES = ("Critical", "Haste", "Mastery", "Resistance", "Avoidance", "Leech")

_PARTY_INDICES = {
    0: (0, 3),
    1: (4, 5),
    2: (1, 2),
}


class MainStat(IntEnum):
    """The primary attribute an item carries."""

    STR = 0
    AGI = 1
    INT = 2

    @property
    def label(self):
        return MAIN_STAT_NAMES[self]


@dataclass(frozen=True)
class ItemStats:
    """The stats printed on an item."""

    main_stat_type: MainStat
    main_stat: int = 0
    crit: int = 0
    haste: int = 0
    mastery: int = 0
    res: int = 0
    avoid: int = 0
    leech: int = 0

    def secondary(self):
        """The secondary stats in display order."""
        return (self.crit, self.haste, self.mastery, self.res, self.avoid, self.leech)


def party_indices(main_stat):
    """The two party slots whose members can equip an item of this main stat."""
    return _PARTY_INDICES[MainStat(main_stat)]


def item_stat_lines(stats):
    """Text lines of an item panel: the main stat, then every non-zero secondary stat."""
    lines = [f"*{stats.main_stat} {MainStat(stats.main_stat_type).label}"]
    lines.extend(
        f"*{value} {name}"
        for value, name in zip(stats.secondary(), ITEM_STAT_NAMES)
        if value != 0
    )
    return lines


def _diff_line(diff, name):
    if diff > 0:
        return f"*{diff} {name}", GAIN_COLOUR
    return f"{diff} {name}", LOSS_COLOUR


def comparison_lines(new_stats, old_stats):
    """The (text, colour) changes shown if old_stats were replaced by new_stats.

    Nothing is listed when both items have no main stat.
    """
    if new_stats.main_stat == 0 and old_stats.main_stat == 0:
        return []
    lines = []
    main_diff = new_stats.main_stat - old_stats.main_stat
    if main_diff != 0:
        lines.append(_diff_line(main_diff, MainStat(new_stats.main_stat_type).label))
    for new, old, name in zip(new_stats.secondary(), old_stats.secondary(), ITEM_STAT_NAMES):
        diff = new - old
        if diff != 0:
            lines.append(_diff_line(diff, name))
    return lines


class LootPile:
    """The items dropped after a fight, with the one currently selected."""

    def __init__(self, items):
        self.items = list(items)
        self.selection = 0

    @property
    def empty(self):
        return not self.items

    @property
    def selected(self):
        if self.empty:
            raise IndexError("the loot pile is empty")
        return self.items[self.selection]

    def remove(self, index):
        """Take an item out of the pile, keeping the selection on a valid item."""
        if not 0 <= index < len(self.items):
            raise IndexError(f"no loot at index {index}")
        item = self.items.pop(index)
        if self.selection >= len(self.items):
            self.selection = len(self.items) - 1
        return item

    def move_selection(self, step):
        """Move the selection by step, wrapping around the pile."""
        if self.empty:
            raise IndexError("the loot pile is empty")
        self.selection = (self.selection + step) % len(self.items)
        return self.selection