"""Engine pieces for a party-based dungeon crawler: drawing, input, title screen and combat rules."""

__version__ = "0.1.0"