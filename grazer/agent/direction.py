"""Direction — the eight compass headings a gazelle can face and step in.

``N`` is ``+y`` and ``E`` is ``+x``.  A direction decides both the
movement delta and the arrow drawn next to the gazelle.
"""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """Compass heading with a one-cell movement delta."""

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"

    @property
    def delta(self) -> tuple[int, int]:
        """Return the ``(dx, dy)`` step for this heading."""
        return _DELTAS[self]

    @property
    def arrow(self) -> str:
        """Return a single-character arrow for display."""
        return _ARROWS[self]

    @classmethod
    def parse(cls, value: str | Direction) -> Direction:
        """Return the Direction named by ``value`` (case-insensitive).

        Raises:
            ValueError: If ``value`` names no compass heading.
        """
        if isinstance(value, Direction):
            return value
        try:
            return cls(value.strip().upper())
        except ValueError:
            msg = f"unknown direction {value!r}"
            raise ValueError(msg) from None


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.N: (0, 1),
    Direction.NE: (1, 1),
    Direction.E: (1, 0),
    Direction.SE: (1, -1),
    Direction.S: (0, -1),
    Direction.SW: (-1, -1),
    Direction.W: (-1, 0),
    Direction.NW: (-1, 1),
}

_ARROWS: dict[Direction, str] = {
    Direction.N: "↑",
    Direction.NE: "↗",
    Direction.E: "→",
    Direction.SE: "↘",
    Direction.S: "↓",
    Direction.SW: "↙",
    Direction.W: "←",
    Direction.NW: "↖",
}
