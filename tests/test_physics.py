import math

import pytest

from solarsim.constants import G, SUBSTEP_DT, SUN_MASS
from solarsim.data_models import Planet, Sun
from solarsim.physics import (
    circular_orbit_velocity,
    gravitational_force,
    orbit_state,
    step_substeps,
)
from solarsim.vector_utils import vec_dist


def test_substep_dt_matches_frame_split():
    assert SUBSTEP_DT == pytest.approx(0.004)


def test_force_points_toward_source_with_inverse_square_magnitude():
    fx, fy = gravitational_force((0.0, 0.0), 2000.0, (300.0, 0.0), 10.0)
    assert fx == pytest.approx(-G * 2000.0 * 10.0 / 300.0 ** 2)
    assert fy == 0.0


def test_coincident_bodies_give_finite_zero_force():
    f = gravitational_force((5.0, 5.0), 2000.0, (5.0, 5.0), 10.0)
    assert f == (0.0, 0.0)


def test_near_coincident_bodies_are_clamped():
    planet = Planet(mass=10.0, position=(1e-9, 0.0), velocity=(0.0, 0.0))
    Sun().attract(planet)
    vx, vy = planet.velocity
    assert math.isfinite(vx) and math.isfinite(vy)
    # Clamped to unit separation: a = G * M / 1^2
    assert vx == pytest.approx(-G * SUN_MASS * SUBSTEP_DT)


def test_circular_orbit_velocity():
    assert circular_orbit_velocity(2000.0, 300.0) == pytest.approx(math.sqrt(500 * 2000 / 300))
    assert circular_orbit_velocity(2000.0, 300.0) == pytest.approx(57.735, abs=1e-3)
    assert circular_orbit_velocity(2000.0, 0.0) == 0.0


def test_orbit_state_velocity_is_perpendicular():
    position, velocity = orbit_state(1.1, 250.0, SUN_MASS)
    assert math.hypot(*position) == pytest.approx(250.0)
    assert position[0] * velocity[0] + position[1] * velocity[1] == pytest.approx(0.0, abs=1e-9)
    assert math.hypot(*velocity) == pytest.approx(circular_orbit_velocity(SUN_MASS, 250.0))


def test_sun_is_never_moved():
    sun = Sun()
    planet = Planet(mass=12.0, position=(200.0, 0.0), velocity=(0.0, 30.0))
    for _ in range(100):
        sun.attract(planet)
        sun.integrate()
        planet.integrate()
    assert sun.position == (0.0, 0.0)
    assert sun.velocity == (0.0, 0.0)


def test_first_substep_east_of_sun():
    sun = Sun()
    speed = math.sqrt(500 * 2000 / 300)
    planet = Planet(mass=10.0, position=(300.0, 0.0), velocity=(0.0, speed))

    sun.attract(planet)
    planet.integrate()

    dt = 0.016 / 4
    expected_vx = -(500 * 2000 * 10.0 / 300.0 ** 2) / 10.0 * dt
    assert planet.velocity[0] == pytest.approx(expected_vx)
    assert planet.velocity[1] == pytest.approx(speed)
    assert planet.position[0] == pytest.approx(300.0 + expected_vx * dt)
    assert planet.position[1] == pytest.approx(speed * dt)


def test_circular_orbit_stays_bounded():
    sun = Sun()
    r = 300.0
    planet = Planet(mass=10.0, position=(r, 0.0),
                    velocity=(0.0, circular_orbit_velocity(sun.mass, r)))

    worst = 0.0
    # ~16 simulated seconds, about half an orbit
    for _ in range(1000):
        step_substeps(sun, [planet])
        worst = max(worst, abs(vec_dist(sun.position, planet.position) - r))
    assert worst < 0.01 * r


def test_step_substeps_runs_each_planet_per_substep():
    sun = Sun()
    planets = [
        Planet(mass=5.0, position=(200.0, 0.0), velocity=(0.0, 10.0)),
        Planet(mass=8.0, position=(0.0, 400.0), velocity=(-10.0, 0.0)),
    ]
    step_substeps(sun, planets, substeps=4)
    assert [p.frame_counter for p in planets] == [4, 4]
