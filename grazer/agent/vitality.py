"""Vitality — the gazelle's named needs and abilities.

Every stat lives in ``[0, 100]``.  Only hunger and thirst drift on their
own; hunger also drops when the gazelle eats.  The remaining stats are
carried unchanged until a rule is added that moves them.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields

STAT_MIN = 0.0
STAT_MAX = 100.0


def clamp_stat(value: float) -> float:
    """Clamp ``value`` into the valid stat range."""
    return min(STAT_MAX, max(STAT_MIN, float(value)))


@dataclass
class VitalityStats:
    """Physical and mental state of a gazelle.

    Attributes:
        health: Overall condition; the game ends at 0.
        hunger: Need for food; rises each tick, falls on eating.
        thirst: Need for water; rises each tick.
        fear: Sense of danger; a high value colours the gazelle's thoughts.
    """

    health: float = 100.0
    stamina: float = 80.0
    movement_speed: float = 60.0
    agility: float = 90.0
    endurance: float = 75.0
    stealth: float = 70.0
    recovery_rate: float = 65.0
    strength: float = 50.0
    physical_alertness: float = 85.0
    resistance_to_injury: float = 55.0
    fear: float = 40.0
    hunger: float = 60.0
    thirst: float = 55.0
    curiosity: float = 50.0
    mental_alertness: float = 70.0
    confidence: float = 45.0
    social_interaction: float = 65.0
    doubt: float = 30.0
    stress: float = 50.0
    mental_focus: float = 55.0

    def __post_init__(self) -> None:
        """Clamp every stat into ``[0, 100]``."""
        for f in fields(self):
            setattr(self, f.name, clamp_stat(getattr(self, f.name)))

    def adjust(self, name: str, delta: float) -> float:
        """Add ``delta`` to the named stat, clamped, and return the new value.

        Raises:
            ValueError: If ``name`` is not a vitality stat.
        """
        if name not in _STAT_NAMES:
            msg = f"unknown vitality stat {name!r}"
            raise ValueError(msg)
        value = clamp_stat(getattr(self, name) + delta)
        setattr(self, name, value)
        return value

    def as_dict(self) -> dict[str, float]:
        """Return the stats as a plain ``name -> value`` mapping."""
        return asdict(self)


_STAT_NAMES = frozenset(f.name for f in fields(VitalityStats))
