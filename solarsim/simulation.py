#!/usr/bin/env python3
"""
Simulation state, reset, per-frame tick and the animation loop.

All mutable state lives in one ``SimulationState`` that is handed explicitly to
the tick and to the input handlers; nothing here is module-global.

Frame order
1) clear the background
2) run SUBSTEPS rounds of sun-attracts-planet + planet integration
3) draw stars, then the sun, then the planets under the camera transform
"""
import logging
import math
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np
import pygame

from .camera import Camera2D, DragState
from .constants import (
    PLANET_COUNT,
    PLANET_DISTANCE_SPREAD,
    PLANET_LIGHTNESS,
    PLANET_MASS_SPREAD,
    PLANET_MIN_DISTANCE,
    PLANET_MIN_MASS,
    PLANET_SATURATION,
    STAR_COUNT,
    STAR_FIELD_SIZE,
    STAR_MAX_RADIUS,
    SUBSTEPS,
    SUBSTEP_DT,
    SUN_MASS,
)
from .data_models import Planet, Star, Sun
from .physics import orbit_state, step_substeps

logger = logging.getLogger(__name__)


class LoopStatus(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class LoopStoppedError(RuntimeError):
    """Raised when a frame is requested from a loop that is not running."""


class RenderSurfaceError(RuntimeError):
    """Raised when no drawing surface can be obtained at startup."""


def hsl_color(hue: float, saturation: float, lightness: float) -> Tuple[int, int, int]:
    """RGB tuple for an HSL color (hue in degrees, others in percent)."""
    c = pygame.Color(0, 0, 0)
    c.hsla = (hue % 360.0, saturation, lightness, 100)
    return (c.r, c.g, c.b)


def make_stars(rng: np.random.Generator, count: int = STAR_COUNT) -> List[Star]:
    """Scatter ``count`` stars uniformly over the star field square."""
    xs = (rng.random(count) - 0.5) * STAR_FIELD_SIZE
    ys = (rng.random(count) - 0.5) * STAR_FIELD_SIZE
    radii = rng.random(count) * STAR_MAX_RADIUS
    alphas = rng.random(count)
    return [
        Star(position=(float(x), float(y)), radius=float(r), alpha=float(a))
        for x, y, r, a in zip(xs, ys, radii, alphas)
    ]


def make_planets(rng: np.random.Generator, count: int = PLANET_COUNT,
                 sun_mass: float = SUN_MASS) -> List[Planet]:
    """
    Spawn ``count`` planets on counter-clockwise circular orbits.

    Each planet gets a random angle, a distance in the configured band, the
    circular-orbit speed for that distance, a random mass and a random hue.
    """
    planets = []
    for _ in range(count):
        angle = float(rng.random()) * math.pi * 2
        distance = PLANET_MIN_DISTANCE + float(rng.random()) * PLANET_DISTANCE_SPREAD
        position, velocity = orbit_state(angle, distance, sun_mass)
        mass = PLANET_MIN_MASS + float(rng.random()) * PLANET_MASS_SPREAD
        color = hsl_color(float(rng.random()) * 360.0, PLANET_SATURATION, PLANET_LIGHTNESS)
        planets.append(Planet(mass=mass, position=position, velocity=velocity, color=color))
    return planets


class SimulationState:
    """
    Everything one running simulation owns.

    Attributes:
        sun: The fixed central body.
        planets: Orbiting bodies, replaced wholesale on randomize.
        stars: Background star field, replaced wholesale on randomize.
        camera: Pan/zoom view transform.
        drag: Pointer drag tracker feeding the camera.
        planet_count: Number of planets created by each randomize.
    """

    def __init__(self, planet_count: int = PLANET_COUNT, seed: Optional[int] = None):
        self.planet_count = planet_count
        self.rng = np.random.default_rng(seed)
        self.camera = Camera2D()
        self.drag = DragState()
        self.sun = Sun()
        self.planets: List[Planet] = []
        self.stars: List[Star] = []
        self.randomize()

    def randomize(self) -> None:
        """Replace the sun, planets and stars with freshly randomized ones."""
        self.stars = make_stars(self.rng)
        self.sun = Sun()
        self.planets = make_planets(self.rng, self.planet_count, self.sun.mass)
        logger.debug("Randomized: %d planets, %d stars", len(self.planets), len(self.stars))


def step(state: SimulationState, substeps: int = SUBSTEPS, dt: float = SUBSTEP_DT) -> None:
    step_substeps(state.sun, state.planets, substeps, dt)


def draw_scene(state: SimulationState, canvas) -> None:
    """Draw stars, the sun, then planets (fixed z-order)."""
    for star in state.stars:
        star.render(canvas)
    state.sun.render(canvas)
    for planet in state.planets:
        planet.render(canvas)


def tick(state: SimulationState, canvas) -> None:
    """Advance one frame and draw it."""
    canvas.clear()
    step(state)
    draw_scene(state, canvas)


# Input handlers


def on_wheel(state: SimulationState, delta_y: float) -> None:
    state.camera.apply_wheel(delta_y)


def on_pointer_down(state: SimulationState, pos) -> None:
    state.drag.pointer_down(pos)


def on_pointer_move(state: SimulationState, pos) -> None:
    state.drag.pointer_move(state.camera, pos)


def on_pointer_up(state: SimulationState) -> None:
    state.drag.pointer_up()


def on_resize(state: SimulationState, width: int, height: int) -> None:
    state.camera.set_viewport_size(width, height)


class AnimationLoop:
    """
    Two-state frame loop: STOPPED until mounted, RUNNING until unmounted.

    ``tick`` is only valid while RUNNING, so a loop left running against a
    torn-down surface is detectable.
    """

    def __init__(self, state: SimulationState, canvas):
        self.state = state
        self.canvas = canvas
        self.status = LoopStatus.STOPPED
        self.frames = 0

    @property
    def running(self) -> bool:
        return self.status is LoopStatus.RUNNING

    def mount(self) -> None:
        if self.running:
            return
        self.status = LoopStatus.RUNNING
        logger.debug("Animation loop mounted")

    def unmount(self) -> None:
        if not self.running:
            return
        self.status = LoopStatus.STOPPED
        logger.debug("Animation loop stopped after %d frames", self.frames)

    def tick(self) -> None:
        if not self.running:
            raise LoopStoppedError("animation loop is not running")
        tick(self.state, self.canvas)
        self.frames += 1
