"""Keyboard bindings from key names to gazelle headings.

Names follow ``pygame.key.name`` so the table can be used (and tested)
without opening a display.
"""

from __future__ import annotations

from grazer.agent.direction import Direction

KEY_BINDINGS: dict[str, Direction] = {
    "up": Direction.N,
    "right": Direction.E,
    "down": Direction.S,
    "left": Direction.W,
    "home": Direction.NW,
    "page up": Direction.NE,
    "end": Direction.SW,
    "page down": Direction.SE,
    "space": Direction.N,
}


def direction_for_key(name: str) -> Direction | None:
    """Return the heading bound to key ``name``, or None if unbound."""
    return KEY_BINDINGS.get(name.lower())
