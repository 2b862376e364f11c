"""Policies — pluggable move deciders for the automated gazelle mover.

A policy is any callable that takes the gazelle's surrounding view (see
``Gazelle.surrounding_view``) and returns a Direction.  The engine never
assumes how the choice is made, so a scripted route, a random walk or an
external decision service can be swapped in freely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from grazer.agent.direction import Direction
from grazer.agent.gazelle import VIEW_BEFORE, VIEW_FOOD, VIEW_OPEN

if TYPE_CHECKING:
    from numpy.random import Generator

View = list[list[str]]


class MovePolicy(Protocol):
    """Chooses the next heading from a surrounding view."""

    def __call__(self, view: View) -> Direction: ...


@dataclass
class RandomPolicy:
    """Picks a uniformly random heading and ignores the view."""

    rng: Generator

    def __call__(self, view: View) -> Direction:
        directions = list(Direction)
        return directions[int(self.rng.integers(len(directions)))]


@dataclass
class ScriptedPolicy:
    """Replays a fixed route of headings, looping when it runs out.

    Attributes:
        route: Headings to replay in order.
    """

    route: list[Direction]
    _index: int = field(init=False, default=0, repr=False)

    def __post_init__(self) -> None:
        if not self.route:
            msg = "scripted route must contain at least one direction"
            raise ValueError(msg)
        self.route = [Direction.parse(d) for d in self.route]

    def __call__(self, view: View) -> Direction:
        direction = self.route[self._index % len(self.route)]
        self._index += 1
        return direction


@dataclass
class FoodSeekingPolicy:
    """Steps toward the nearest visible food, otherwise wanders.

    Only headings whose neighbouring view cell is open or food are
    considered.  Among them the one that minimises Chebyshev distance to
    the closest ``F`` wins (ties broken by Manhattan distance); with no
    food in sight a random open heading is taken.

    Attributes:
        rng: Seeded random generator for the fallback wander.
        centre: Index of the gazelle's own row/column in the view.
    """

    rng: Generator
    centre: int = VIEW_BEFORE

    def __call__(self, view: View) -> Direction:
        walkable = [
            d for d in Direction if self._cell(view, *d.delta) in (VIEW_OPEN, VIEW_FOOD)
        ]
        if not walkable:
            walkable = list(Direction)

        food = [
            (col - self.centre, row - self.centre)
            for row, line in enumerate(view)
            for col, ch in enumerate(line)
            if ch == VIEW_FOOD
        ]
        if not food:
            return walkable[int(self.rng.integers(len(walkable)))]

        def distance_after(direction: Direction) -> tuple[int, int]:
            dx, dy = direction.delta
            return min(
                (max(abs(fx - dx), abs(fy - dy)), abs(fx - dx) + abs(fy - dy))
                for fx, fy in food
            )

        return min(walkable, key=distance_after)

    def _cell(self, view: View, dx: int, dy: int) -> str | None:
        row, col = self.centre + dy, self.centre + dx
        if 0 <= row < len(view) and 0 <= col < len(view[row]):
            return view[row][col]
        return None
