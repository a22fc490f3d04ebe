#!/usr/bin/env python3
"""
Solar system toy application entry point.

What this module does
- Opens a resizable pygame window and drives a single-threaded frame loop:
  poll input, tick the simulation, draw the HUD, flip, wait for the next frame.
- Translates pygame events into the simulation's input handlers (wheel zoom,
  drag pan, resize) and the Randomize action (button or ``R`` key).

Threading model
- Everything runs on the main thread. Input handlers mutate the simulation
  state between frames, so no locking is needed.

Running
1) Install dependencies: `pip install -e .`
2) Run this module: `python solar_sim.py --planets 8 --seed 42`

Controls
- Mouse wheel: zoom | Left-drag: pan | R or the Randomize button: new system
- Esc or closing the window quits.
"""

import argparse
import logging
import sys
from typing import List, Optional

import pygame

from solarsim.camera import wheel_delta_from_notches
from solarsim.constants import PLANET_COUNT, TARGET_FPS, VIEW_HEIGHT, VIEW_WIDTH
from solarsim.render import Button, Canvas, draw_hud
from solarsim.simulation import (
    AnimationLoop,
    RenderSurfaceError,
    SimulationState,
    on_pointer_down,
    on_pointer_move,
    on_pointer_up,
    on_resize,
    on_wheel,
)

logger = logging.getLogger("solar_sim")


class PygameRenderer:
    """
    Pygame window plus the animation loop that draws into it.
    Handles zoom, panning, resizing and the Randomize button.
    """

    def __init__(self, sim: SimulationState, size=(VIEW_WIDTH, VIEW_HEIGHT), fps: int = TARGET_FPS):
        self.sim = sim
        self.size = size
        self.fps = fps
        self.surface = None
        self.clock = None
        self.loop: Optional[AnimationLoop] = None
        self.button = Button("Randomize")

    def open(self):
        """Create the window; failure here is the one fatal startup error."""
        try:
            pygame.init()
            pygame.display.set_caption("Solar System Simulation")
            self.surface = pygame.display.set_mode(self.size, pygame.RESIZABLE)
        except pygame.error as exc:
            pygame.quit()
            raise RenderSurfaceError(f"could not open a drawing surface: {exc}") from exc
        w, h = self.surface.get_size()
        on_resize(self.sim, w, h)
        self.button.layout(w)
        self.clock = pygame.time.Clock()
        self.loop = AnimationLoop(self.sim, Canvas(self.surface, self.sim.camera))
        self._set_cursor(dragging=False)

    def run(self):
        self.open()
        self.loop.mount()
        logger.info("Running with %d planets at %d FPS", self.sim.planet_count, self.fps)
        try:
            while self.loop.running:
                self.handle_events()
                if not self.loop.running:
                    break
                self.loop.tick()
                draw_hud(self.surface, self.button)
                pygame.display.flip()
                self.clock.tick(self.fps)
        finally:
            self.loop.unmount()
            pygame.quit()
            logger.info("Shut down")

    def randomize(self):
        self.sim.randomize()
        logger.info("Randomized system with %d planets", len(self.sim.planets))

    def _set_cursor(self, dragging: bool):
        cursor = pygame.SYSTEM_CURSOR_SIZEALL if dragging else pygame.SYSTEM_CURSOR_HAND
        try:
            pygame.mouse.set_cursor(cursor)
        except pygame.error:
            logger.debug("System cursors unavailable")

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.loop.unmount()

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.loop.unmount()
                elif event.key == pygame.K_r:
                    self.randomize()

            elif event.type == pygame.VIDEORESIZE:
                self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self.loop.canvas.surface = self.surface
                on_resize(self.sim, event.w, event.h)
                self.button.layout(event.w)

            elif event.type == pygame.MOUSEWHEEL:
                on_wheel(self.sim, wheel_delta_from_notches(event.y))

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    if self.button.contains(event.pos):
                        self.randomize()
                    else:
                        on_pointer_down(self.sim, event.pos)
                        self._set_cursor(dragging=True)

            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button == 1:
                    on_pointer_up(self.sim)
                    self._set_cursor(dragging=False)

            elif event.type == pygame.WINDOWLEAVE:
                on_pointer_up(self.sim)
                self.button.hovered = False
                self._set_cursor(dragging=False)

            elif event.type == pygame.MOUSEMOTION:
                self.button.hovered = self.button.contains(event.pos)
                on_pointer_move(self.sim, event.pos)


def _positive_int(value: str) -> int:
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Animated sun-and-planets gravity toy")
    parser.add_argument("--planets", type=_non_negative_int, default=PLANET_COUNT,
                        help="number of planets per randomize (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="random seed for reproducible systems")
    parser.add_argument("--width", type=_positive_int, default=VIEW_WIDTH,
                        help="window width in pixels (default: %(default)s)")
    parser.add_argument("--height", type=_positive_int, default=VIEW_HEIGHT,
                        help="window height in pixels (default: %(default)s)")
    parser.add_argument("--fps", type=_positive_int, default=TARGET_FPS,
                        help="frame rate cap (default: %(default)s)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging verbosity (default: %(default)s)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    sim = SimulationState(planet_count=args.planets, seed=args.seed)
    renderer = PygameRenderer(sim, size=(args.width, args.height), fps=args.fps)
    try:
        renderer.run()
    except RenderSurfaceError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
