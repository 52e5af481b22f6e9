"""Combat statistics derived from gear, resource regeneration and cooldown ticking."""

from dataclasses import dataclass
from enum import Enum

MAIN_STAT_SCALING = 3

# Divisors applied per level to leech, avoidance and resistance.
_BOSS_DIVISORS = (20, 5, 5)
_COMBAT_DIVISORS = (5, 3, 3)

MANA_REGEN_DIVISOR = 10
ENERGY_REGEN_DIVISOR = 4


@dataclass(frozen=True)
class MemberStats:
    """Raw totals a party member gets from gear."""

    main_stat: int = 0
    crit: int = 0
    haste: int = 0
    mastery: int = 0
    res: int = 0
    avoid: int = 0
    leech: int = 0


@dataclass(frozen=True)
class BaseStats:
    """Percentages a specialisation starts with before gear."""

    crit: float = 0.0
    haste: float = 0.0
    mastery: float = 0.0


@dataclass(frozen=True)
class CombatStats:
    """The figures combat actually works with."""

    coeff: int
    crit: float
    haste: float
    damage_multi: float
    leech: float
    avoid: float
    damage_taken: float


class SecondaryType(Enum):
    """The secondary resource a specialisation spends."""

    NONE = "none"
    MANA = "mana"
    ENERGY = "energy"


def combat_stats(member, base, level, boss=False):
    """Turn raw stats into combat figures; the boss fight uses stiffer divisors."""
    if level <= 0:
        raise ValueError(f"level must be positive, got {level}")
    leech_div, avoid_div, res_div = _BOSS_DIVISORS if boss else _COMBAT_DIVISORS
    return CombatStats(
        coeff=member.main_stat * MAIN_STAT_SCALING,
        crit=base.crit + member.crit / level,
        haste=base.haste + member.haste / level,
        damage_multi=1.0 + (base.mastery + member.mastery / level) / 100,
        leech=member.leech / (level * leech_div),
        avoid=member.avoid / (level * avoid_div),
        damage_taken=1.0 - member.res / (level * res_div) / 100,
    )


def regenerate_secondary(kind, current, maximum):
    """Return the secondary resource after one global cycle of regeneration."""
    kind = SecondaryType(kind)
    if kind is SecondaryType.MANA:
        divisor = MANA_REGEN_DIVISOR
    elif kind is SecondaryType.ENERGY:
        divisor = ENERGY_REGEN_DIVISOR
    else:
        return current
    return min(current + int(maximum) // divisor, maximum)


def tick_cooldowns(cooldowns, off_gcd_flags, off_gcd):
    """Count down by one every running cooldown whose off-GCD flag equals off_gcd."""
    cooldowns = list(cooldowns)
    flags = list(off_gcd_flags)
    if len(cooldowns) != len(flags):
        raise ValueError(
            f"{len(cooldowns)} cooldowns but {len(flags)} off-GCD flags"
        )
    return [
        cd - 1 if bool(flag) == bool(off_gcd) and cd > 0 else cd
        for cd, flag in zip(cooldowns, flags)
    ]