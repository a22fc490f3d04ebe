#!/usr/bin/env python3
"""
Gravity model for the solar system toy.

Responsibilities
- Compute the inverse-square pull of one body on another and fold it into the
  target's velocity.
- Advance a sun-plus-planets system by one frame using several explicit
  substeps.
- Provide the circular-orbit speed used when planets are spawned.

Model
- Only the sun exerts force; planets do not attract each other and the sun is
  never moved.
- Integration is semi-implicit Euler: velocity is kicked first, then position
  is drifted with the updated velocity. With the small substep this keeps
  circular orbits closed over long runs.

Numerical notes
- The separation used in the inverse-square law is clamped to
  ``MIN_SEPARATION`` so coincident bodies never produce NaN or infinite
  velocities. Direction for exactly coincident bodies is the zero vector.
"""

import math
from typing import Iterable, Tuple

from .constants import G, MIN_SEPARATION, SUBSTEPS, SUBSTEP_DT
from .vector_utils import Vec2, vec_dist, vec_norm, vec_scale, vec_sub


def gravitational_force(source_pos: Vec2, source_mass: float,
                        target_pos: Vec2, target_mass: float,
                        g: float = G,
                        min_separation: float = MIN_SEPARATION) -> Vec2:
    """
    Force exerted by the source on the target, pointing toward the source.

        F = G * m_source * m_target / max(d, min_separation)^2

    Args:
        source_pos: Position of the attracting body.
        source_mass: Mass of the attracting body.
        target_pos: Position of the attracted body.
        target_mass: Mass of the attracted body.

    Returns:
        (fx, fy) force acting on the target.
    """
    d = max(vec_dist(source_pos, target_pos), min_separation)
    direction = vec_norm(vec_sub(source_pos, target_pos))
    magnitude = g * source_mass * target_mass / (d * d)
    return vec_scale(direction, magnitude)


def circular_orbit_velocity(central_mass: float, orbital_radius: float, g: float = G) -> float:
    """
    Speed needed for a circular orbit around a fixed central mass.

    Gravity supplies exactly the centripetal force, G*M/r^2 = v^2/r, so
    v = sqrt(G * M / r).
    """
    if orbital_radius <= 0:
        return 0.0
    return math.sqrt(g * central_mass / orbital_radius)


def step_substeps(sun, planets: Iterable, substeps: int = SUBSTEPS, dt: float = SUBSTEP_DT) -> None:
    """
    Advance one rendered frame: ``substeps`` rounds of sun-attracts-planet
    followed by the planet's own integration.
    """
    planets = list(planets)
    for _ in range(substeps):
        for planet in planets:
            sun.attract(planet, dt)
            planet.integrate(dt)


def orbit_state(angle: float, distance: float, central_mass: float,
                g: float = G) -> Tuple[Vec2, Vec2]:
    """
    Position and counter-clockwise circular-orbit velocity for a body placed
    at ``angle`` radians and ``distance`` from a central mass at the origin.
    """
    speed = circular_orbit_velocity(central_mass, distance, g)
    position = (math.cos(angle) * distance, math.sin(angle) * distance)
    velocity = (-math.sin(angle) * speed, math.cos(angle) * speed)
    return position, velocity
