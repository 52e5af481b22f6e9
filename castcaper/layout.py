"""Combat screen layout: enemy placement, ambush text, status icons and target cycling."""

from dataclasses import dataclass

CENTRE_X = 222
SINGLE_ROW_Y = 100
TOP_ROW_Y = 26
BOTTOM_ROW_Y = 190
SPACING = 162

ICONS_PER_ROW = 4


@dataclass(frozen=True)
class EnemyNames:
    """How one enemy type is named in messages."""

    singular: str
    plural: str
    prefix: str = "a"


@dataclass
class StatusEffect:
    """An over-time effect on a party member and where its icon sits."""

    target: int
    damage: bool = False
    ui_x: int = 0
    ui_y: int = 0


def _row_x(row_index, row_count):
    centre_index = (row_count - 1) // 2
    x = CENTRE_X + (row_index - centre_index) * SPACING
    if row_count % 2 == 0:
        x -= SPACING // 2
    return x


def enemy_position(index, total):
    """Return the (x, y) screen position of enemy index among total enemies."""
    if total < 1:
        raise ValueError(f"there must be at least one enemy, got {total}")
    if not 0 <= index < total:
        raise IndexError(f"enemy {index} is outside 0..{total - 1}")

    if total == 1:
        return CENTRE_X, SINGLE_ROW_Y
    if total == 2:
        offset = SPACING // 2
        return (CENTRE_X - offset if index == 0 else CENTRE_X + offset), SINGLE_ROW_Y
    if total == 3:
        return CENTRE_X + (index - 1) * SPACING, SINGLE_ROW_Y

    top_count = (total + 1) // 2
    bottom_count = total // 2
    if index < top_count:
        return _row_x(index, top_count), TOP_ROW_Y
    return _row_x(index - top_count, bottom_count), BOTTOM_ROW_Y


def ambush_message(counts, names):
    """Describe the enemies present, e.g. '2 rats, and a bat'."""
    present = [(count, name) for count, name in zip(counts, names) if count > 0]
    parts = []
    for processed, (count, name) in enumerate(present):
        if processed > 0:
            parts.append(", and " if processed == len(present) - 1 else ", ")
        if count > 1:
            parts.append(f"{count} {name.plural}")
        else:
            parts.append(f"{name.prefix} {name.singular}")
    return "".join(parts)


def layout_status_effects(effects, target_index):
    """Place the icons of every effect on target_index and return how many there are.

    Damage effects go in one row; other effects fill a grid four icons wide.
    """
    damage_count = 0
    other_count = 0
    for effect in effects:
        if effect.target != target_index:
            continue
        if effect.damage:
            effect.ui_x, effect.ui_y = damage_count, 0
            damage_count += 1
        else:
            effect.ui_x, effect.ui_y = other_count % ICONS_PER_ROW, other_count // ICONS_PER_ROW
            other_count += 1
    return damage_count + other_count


def cycle_target(alive, current, step):
    """Step from current by step (wrapping) until a living target or current is reached."""
    count = len(alive)
    if count == 0:
        raise ValueError("there are no targets to cycle through")
    index = current
    while True:
        index = (index + step) % count
        if alive[index] or index == current:
            return index


def first_alive(alive):
    """Index of the first living target, or None when all are dead."""
    return next((i for i, living in enumerate(alive) if living), None)