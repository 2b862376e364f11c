"""Gazelle -- the single grazing agent and its state machine.

The gazelle has a position, a heading, a set of vitality stats and a
line of "thoughts" describing its dominant need.  Two independent events
change it:

- **Moves** step one cell in a compass direction.  Steps are clamped at
  the grid edge (never wrapped) and refused outright when the target
  cell holds a tree.  Stepping onto food eats all of it.
- **Vitality ticks** let hunger and thirst creep upward and rewrite the
  thoughts from the most pressing need.

Both events write ``thoughts``; whichever ran last wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from grazer.agent.direction import Direction
from grazer.agent.vitality import VitalityStats
from grazer.world.grid import is_valid_position

if TYPE_CHECKING:
    from numpy.random import Generator

    from grazer.world.grid import Grid

logger = logging.getLogger(__name__)

# -- Constants ---------------------------------------------------------------

THOUGHT_INITIAL = "Just grazing..."
THOUGHT_MOVED = "Just moved."
THOUGHT_ATE = "Yum! That was tasty!"
THOUGHT_HUNGRY = "I'm getting really hungry..."
THOUGHT_THIRSTY = "I need to find water soon..."
THOUGHT_AFRAID = "I feel unsafe. Need to be careful."
THOUGHT_CONTENT = "Just grazing and enjoying the day."

HUNGER_ALERT = 80.0
THIRST_ALERT = 80.0
FEAR_ALERT = 70.0

HUNGER_RATE = 0.1
THIRST_RATE = 0.1
FEEDING_RELIEF = 20.0

VIEW_BEFORE = 5
VIEW_AFTER = 4

VIEW_TREE = "T"
VIEW_FOOD = "F"
VIEW_OPEN = "."
VIEW_OUT_OF_BOUNDS = "#"


class MoveOutcome(Enum):
    """How a requested move resolved."""

    BLOCKED = auto()
    MOVED = auto()
    ATE = auto()


@dataclass(frozen=True)
class MoveResult:
    """The effect of one ``Gazelle.move`` call.

    Attributes:
        outcome: Whether the step was blocked, plain, or ended on food.
        direction: The requested heading.
        from_pos: Position before the move.
        to_pos: Position after the move (equal to ``from_pos`` when
            blocked or clamped in both axes).
        food_eaten: Amount of food consumed at ``to_pos``.
    """

    outcome: MoveOutcome
    direction: Direction
    from_pos: tuple[int, int]
    to_pos: tuple[int, int]
    food_eaten: int = 0

    @property
    def blocked(self) -> bool:
        """Return True if the move was refused."""
        return self.outcome is MoveOutcome.BLOCKED


def derive_thought(stats: VitalityStats) -> str:
    """Return the thought for the gazelle's most pressing need."""
    if stats.hunger > HUNGER_ALERT:
        return THOUGHT_HUNGRY
    if stats.thirst > THIRST_ALERT:
        return THOUGHT_THIRSTY
    if stats.fear > FEAR_ALERT:
        return THOUGHT_AFRAID
    return THOUGHT_CONTENT


def view_to_string(view: list[list[str]]) -> str:
    """Join a surrounding view into newline-terminated rows of text."""
    return "\n".join("".join(row) for row in view) + "\n"


@dataclass
class Gazelle:
    """The grazing agent.

    Attributes:
        x: Current column.
        y: Current row.
        direction: Heading the gazelle last moved (or was placed) in.
        vitality: Needs and abilities, each in ``[0, 100]``.
        thoughts: Text describing the latest event or dominant need.
    """

    x: int
    y: int
    direction: Direction = Direction.N
    vitality: VitalityStats = field(default_factory=VitalityStats)
    thoughts: str = THOUGHT_INITIAL

    @property
    def position(self) -> tuple[int, int]:
        """Return ``(x, y)``."""
        return self.x, self.y

    @classmethod
    def place(cls, grid: Grid, rng: Generator) -> Gazelle:
        """Create a gazelle on a random cell with neither tree nor food.

        Must run after terrain and food generation.

        Args:
            grid: The fully generated world grid.
            rng: Seeded random generator.

        Returns:
            A new Gazelle facing a random direction.

        Raises:
            RuntimeError: If every cell holds a tree or food.
        """
        free = grid.empty_cells()
        if not free:
            msg = f"no free cell to place a gazelle on a {grid.size}x{grid.size} grid"
            raise RuntimeError(msg)
        cell = free[int(rng.integers(len(free)))]
        directions = list(Direction)
        direction = directions[int(rng.integers(len(directions)))]
        logger.info(
            "Gazelle placed at (%d, %d) facing %s",
            cell.x,
            cell.y,
            direction.value,
        )
        return cls(x=cell.x, y=cell.y, direction=direction)

    def target_of(self, direction: Direction, size: int) -> tuple[int, int]:
        """Return the cell a step in ``direction`` lands on, clamped per axis."""
        dx, dy = direction.delta
        nx = min(max(self.x + dx, 0), size - 1)
        ny = min(max(self.y + dy, 0), size - 1)
        return nx, ny

    def move(
        self,
        direction: Direction | str,
        grid: Grid,
        *,
        feeding_relief: float = FEEDING_RELIEF,
    ) -> MoveResult:
        """Try to step one cell in ``direction``.

        A step into a tree is refused and leaves the gazelle untouched.
        Otherwise the gazelle moves (possibly not at all, when clamped at
        an edge), turns to face ``direction``, and eats any food on the
        target cell.

        Args:
            direction: Requested heading.
            grid: The world grid (food on the target cell is cleared).
            feeding_relief: Hunger removed by eating.

        Returns:
            A MoveResult describing what happened.
        """
        direction = Direction.parse(direction)
        origin = self.position
        nx, ny = self.target_of(direction, grid.size)
        assert is_valid_position(nx, ny, grid.size)
        cell = grid.cells[ny][nx]

        if cell.has_tree:
            logger.debug("Move %s from %s blocked by tree", direction.value, origin)
            return MoveResult(MoveOutcome.BLOCKED, direction, origin, origin)

        self.x, self.y = nx, ny
        self.direction = direction

        if cell.food > 0:
            eaten = cell.food
            cell.food = 0
            self.vitality.adjust("hunger", -feeding_relief)
            self.thoughts = THOUGHT_ATE
            logger.debug("Gazelle ate %d food at (%d, %d)", eaten, nx, ny)
            return MoveResult(MoveOutcome.ATE, direction, origin, (nx, ny), eaten)

        self.thoughts = THOUGHT_MOVED
        logger.debug("Gazelle moved %s to (%d, %d)", direction.value, nx, ny)
        return MoveResult(MoveOutcome.MOVED, direction, origin, (nx, ny))

    def update_vitality(
        self,
        *,
        hunger_rate: float = HUNGER_RATE,
        thirst_rate: float = THIRST_RATE,
    ) -> str:
        """Advance needs by one tick and rewrite the thoughts.

        Returns:
            The new thoughts.
        """
        self.vitality.adjust("hunger", hunger_rate)
        self.vitality.adjust("thirst", thirst_rate)
        self.thoughts = derive_thought(self.vitality)
        return self.thoughts

    def surrounding_view(
        self,
        grid: Grid,
        *,
        before: int = VIEW_BEFORE,
        after: int = VIEW_AFTER,
    ) -> list[list[str]]:
        """Return a fixed-size character map centred on the gazelle.

        Rows run over ``dy`` and columns over ``dx``, both from
        ``-before`` to ``+after``.  Cells are ``T`` (tree), ``F`` (food),
        ``.`` (open) or ``#`` (outside the grid).
        """
        view: list[list[str]] = []
        for dy in range(-before, after + 1):
            row: list[str] = []
            for dx in range(-before, after + 1):
                vx, vy = self.x + dx, self.y + dy
                if not is_valid_position(vx, vy, grid.size):
                    row.append(VIEW_OUT_OF_BOUNDS)
                    continue
                cell = grid.cells[vy][vx]
                if cell.has_tree:
                    row.append(VIEW_TREE)
                elif cell.food > 0:
                    row.append(VIEW_FOOD)
                else:
                    row.append(VIEW_OPEN)
            view.append(row)
        return view
