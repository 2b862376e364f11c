"""Pygame 2D visualization for the grazer simulation.

Draws the grid, trees, food and the gazelle in a window.  Arrow and
navigation keys move the gazelle; vitality ticks and automated moves run
on their own timers while the display refreshes at the Pygame frame rate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pygame

from grazer.simulation.engine import GameStatus
from grazer.ui.keymap import direction_for_key

if TYPE_CHECKING:
    from grazer.agent.policies import MovePolicy
    from grazer.simulation.engine import SimulationEngine

# Colour palette
_BG = (30, 25, 15)
_GROUND = (222, 184, 135)
_TREE = (34, 100, 34)
_GAZELLE = (140, 80, 30)
_TEXT = (220, 220, 220)

# Food colour range (pale green -> deep green) by amount
_FOOD_LO = np.array([170, 210, 90], dtype=np.float64)
_FOOD_HI = np.array([60, 160, 20], dtype=np.float64)


class PygameRenderer:
    """Renders a SimulationEngine state into a Pygame window.

    Attributes:
        engine: The simulation engine to visualise.
        policy: Decides automated moves.
        cell_size: Pixel size of each grid cell.
        screen: The Pygame display surface.
    """

    def __init__(
        self,
        engine: SimulationEngine,
        policy: MovePolicy,
        cell_size: int = 8,
    ) -> None:
        """Initialise the renderer.

        Args:
            engine: The simulation engine to render.
            policy: Move policy consulted on the automated-move timer.
            cell_size: Pixel width/height per grid cell.
        """
        self.engine = engine
        self.policy = policy
        self.cell_size = cell_size
        self._tick_accumulator = 0.0
        self._ai_timer = 0.0

        side = engine.grid.size * cell_size
        self._panel_width = 280
        self._win_w = side + self._panel_width
        self._win_h = max(side, 640)

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("Grazer")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True
        self.paused = False

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, advance timers, render.

        Args:
            fps: Target frames per second.
        """
        cfg = self.engine.config
        while self.running:
            dt = self.clock.tick(fps) / 1000.0  # seconds elapsed
            self._handle_events()
            if not self.paused and self.engine.status is GameStatus.RUNNING:
                self._tick_accumulator += cfg.vitality_ticks_per_second * dt
                steps = int(self._tick_accumulator)
                self._tick_accumulator -= steps
                for _ in range(steps):
                    self.engine.tick()

                self._ai_timer += dt
                if self._ai_timer >= cfg.ai_move_interval:
                    self._ai_timer -= cfg.ai_move_interval
                    self.engine.ai_move(self.policy)
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_p:
                    self.paused = not self.paused
                elif event.key == pygame.K_r:
                    self.engine.reset()
                    self._tick_accumulator = 0.0
                    self._ai_timer = 0.0
                else:
                    direction = direction_for_key(pygame.key.name(event.key))
                    if direction is not None and not self.paused:
                        self.engine.move(direction)

    def _to_screen(self, x: int, y: int) -> tuple[int, int]:
        """Map grid ``(x, y)`` to the top-left pixel of its square (N is up)."""
        cs = self.cell_size
        return x * cs, (self.engine.grid.size - 1 - y) * cs

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_grid()
        self._draw_gazelle()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_grid(self) -> None:
        """Draw ground, trees, and food shaded by amount."""
        cs = self.cell_size
        lo, hi = self.engine.config.food_amount
        span = max(hi - lo, 1)
        for row in self.engine.grid.cells:
            for cell in row:
                px, py = self._to_screen(cell.x, cell.y)
                if cell.has_tree:
                    colour = _TREE
                elif cell.food > 0:
                    t = min((cell.food - lo) / span, 1.0)
                    colour = (_FOOD_LO + t * (_FOOD_HI - _FOOD_LO)).astype(int).tolist()
                else:
                    colour = _GROUND
                pygame.draw.rect(self.screen, colour, (px, py, cs, cs))

    def _draw_gazelle(self) -> None:
        """Draw the gazelle as a dot with a short line toward its heading."""
        cs = self.cell_size
        gazelle = self.engine.gazelle
        px, py = self._to_screen(gazelle.x, gazelle.y)
        cx, cy = px + cs // 2, py + cs // 2
        radius = max(2, cs // 2)
        pygame.draw.circle(self.screen, _GAZELLE, (cx, cy), radius)
        dx, dy = gazelle.direction.delta
        tip = (cx + dx * cs, cy - dy * cs)
        pygame.draw.line(self.screen, _GAZELLE, (cx, cy), tip, 2)

    def _draw_info_panel(self) -> None:
        """Draw position, thoughts and vitality stats on the right."""
        panel_x = self.engine.grid.size * self.cell_size + 10
        y = 10
        gazelle = self.engine.gazelle
        stats = gazelle.vitality

        lines = [
            f"Tick: {self.engine.ticks}",
            f"Moves: {self.engine.moves}",
            f"{'PAUSED' if self.paused else self.engine.status.name}",
            "",
            f"Position: ({gazelle.x}, {gazelle.y})",
            f"Facing: {gazelle.direction.value} {gazelle.direction.arrow}",
            f'"{gazelle.thoughts}"',
            "",
            "--- Vitality ---",
        ]
        lines += [f"{name}: {value:.1f}" for name, value in stats.as_dict().items()]
        lines += [
            "",
            "--- Controls ---",
            "Arrows/Home/End/PgUp/PgDn: move",
            "P: pause  R: restart  ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 16
