#!/usr/bin/env python3
"""
Data models for the solar system toy.

This module defines the bodies shared between physics, rendering, and input.

Variants
- Sun: the fixed central mass. Pinned at the origin, never integrated, drawn as
  a glowing gradient disc.
- Planet: a moving body whose visual radius equals its mass. Keeps a bounded
  trail of sampled past positions.
- Star: static background decoration, no physics.

Units and usage
- Positions, radii and velocities are in world units; the camera maps them to
  pixels.
- Every body draws itself onto a ``solarsim.render.Canvas`` in world space.
"""
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Tuple

from .constants import (
    HIGHLIGHT_ALPHA,
    HIGHLIGHT_COLOR,
    STAR_COLOR,
    SUBSTEP_DT,
    SUN_COLOR,
    SUN_GLOW_INNER,
    SUN_GLOW_OUTER,
    SUN_GLOW_STOPS,
    SUN_MASS,
    SUN_RADIUS,
    TRAIL_LENGTH,
    TRAIL_MAX_ALPHA,
    TRAIL_SAMPLE_INTERVAL,
    TRAIL_WIDTH,
)
from .physics import gravitational_force
from .vector_utils import Vec2, vec_add, vec_scale

Color = Tuple[int, int, int]


class Body:
    """Behaviour shared by every simulated point mass."""

    mass: float
    position: Vec2
    velocity: Vec2

    def attract(self, other: "Body", dt: float = SUBSTEP_DT) -> None:
        """
        Pull ``other`` toward this body for one substep.

        Only ``other.velocity`` changes; this body is left untouched.
        """
        force = gravitational_force(self.position, self.mass, other.position, other.mass)
        accel = vec_scale(force, 1.0 / other.mass)
        other.velocity = vec_add(other.velocity, vec_scale(accel, dt))

    def integrate(self, dt: float = SUBSTEP_DT) -> None:
        raise NotImplementedError

    def render(self, canvas) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class Sun(Body):
    """
    Fixed central body.

    Fields:
    - mass: Attracting mass
    - position: Always the origin
    - velocity: Always zero
    - radius: Nominal radius; the glow extends to three times this
    - color: Core color
    """
    mass: float = SUN_MASS
    position: Vec2 = (0.0, 0.0)
    velocity: Vec2 = (0.0, 0.0)
    radius: float = SUN_RADIUS
    color: Color = SUN_COLOR

    def integrate(self, dt: float = SUBSTEP_DT) -> None:
        """The sun is pinned; integration leaves it unchanged."""

    def render(self, canvas) -> None:
        canvas.radial_gradient(
            self.position,
            self.radius * SUN_GLOW_INNER,
            self.radius * SUN_GLOW_OUTER,
            SUN_GLOW_STOPS,
        )


@dataclass
class Planet(Body):
    """
    Orbiting body.

    Fields:
    - mass: Mass; also the visual radius
    - position: 2D position (x, y)
    - velocity: 2D velocity (vx, vy)
    - color: RGB tuple used for rendering
    - trail: Sampled past positions, oldest first, at most TRAIL_LENGTH long
    - frame_counter: Number of integration calls so far
    """
    mass: float
    position: Vec2
    velocity: Vec2
    color: Color = (200, 200, 255)
    trail: Deque[Vec2] = field(default_factory=lambda: deque(maxlen=TRAIL_LENGTH))
    frame_counter: int = 0

    @property
    def radius(self) -> float:
        return self.mass

    def integrate(self, dt: float = SUBSTEP_DT) -> None:
        """Drift by the current velocity and sample the trail every few calls."""
        self.position = vec_add(self.position, vec_scale(self.velocity, dt))
        self.frame_counter += 1
        if self.frame_counter % TRAIL_SAMPLE_INTERVAL == 0:
            self.add_trail_point()

    def add_trail_point(self) -> None:
        """Append the current position to the trail."""
        self.trail.append(self.position)

    def render(self, canvas) -> None:
        n = len(self.trail)
        if n > 1:
            for i in range(n - 1):
                alpha = (i / n) * TRAIL_MAX_ALPHA
                canvas.line(self.trail[i], self.trail[i + 1], self.color, TRAIL_WIDTH, alpha)

        r = self.radius
        canvas.fill_circle(self.position, r, self.color)
        # Specular highlight toward the upper-left
        highlight = (self.position[0] - r * 0.3, self.position[1] - r * 0.3)
        canvas.fill_circle(highlight, r / 3, HIGHLIGHT_COLOR, HIGHLIGHT_ALPHA)


@dataclass(frozen=True)
class Star:
    """Background star; immutable and never updated."""
    position: Vec2
    radius: float
    alpha: float

    def render(self, canvas) -> None:
        canvas.fill_circle(self.position, self.radius, STAR_COLOR, self.alpha)
