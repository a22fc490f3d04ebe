import pygame
import pytest

from solarsim.camera import Camera2D
from solarsim.constants import SUN_GLOW_STOPS
from solarsim.data_models import Planet, Star, Sun
from solarsim.render import Canvas, gradient_color, thick_line_polygon


@pytest.fixture
def canvas():
    cam = Camera2D()
    cam.set_viewport_size(200, 200)
    surf = pygame.Surface((200, 200))
    surf.fill((0, 0, 0))
    return Canvas(surf, cam)


def test_gradient_stops():
    assert gradient_color(0.0, SUN_GLOW_STOPS) == (255, 255, 255, 255)
    assert gradient_color(-1.0, SUN_GLOW_STOPS) == (255, 255, 255, 255)
    assert gradient_color(0.1, SUN_GLOW_STOPS) == (255, 215, 0, 255)
    assert gradient_color(1.0, SUN_GLOW_STOPS) == (255, 140, 0, 0)
    assert gradient_color(2.0, SUN_GLOW_STOPS) == (255, 140, 0, 0)


def test_gradient_interpolates_alpha():
    r, g, b, a = gradient_color(0.25, SUN_GLOW_STOPS)
    assert (r, b) == (255, 0)
    assert 140 < g < 215
    assert 102 < a < 255


def test_glow_fades_out_as_orange():
    for t in (0.5, 0.7, 0.9, 0.99):
        r, g, b, a = gradient_color(t, SUN_GLOW_STOPS)
        assert (r, g, b) == (255, 140, 0)
        assert 0 <= a < 102


def test_thick_line_polygon():
    quad = thick_line_polygon((0.0, 0.0), (10.0, 0.0), 2.0)
    assert quad == [(0.0, 1.0), (10.0, 1.0), (10.0, -1.0), (0.0, -1.0)]
    assert thick_line_polygon((1.0, 1.0), (1.0, 1.0), 2.0) is None


def test_sun_core_is_white(canvas):
    Sun().render(canvas)
    assert tuple(canvas.surface.get_at((100, 100)))[:3] == (255, 255, 255)
    # Outside the glow stays untouched
    assert tuple(canvas.surface.get_at((0, 0)))[:3] == (0, 0, 0)


def test_planet_body_drawn_in_world_space(canvas):
    planet = Planet(mass=10.0, position=(50.0, 0.0), velocity=(0.0, 0.0), color=(255, 0, 0))
    planet.render(canvas)
    assert tuple(canvas.surface.get_at((156, 100)))[:3] == (255, 0, 0)


def test_zoom_and_offset_move_drawing(canvas):
    canvas.camera.zoom = 2.0
    canvas.camera.offset = [-20.0, 0.0]
    planet = Planet(mass=5.0, position=(20.0, 0.0), velocity=(0.0, 0.0), color=(0, 255, 0))
    planet.render(canvas)
    # Screen x = 100 - 20 + 40, radius 10 px
    assert tuple(canvas.surface.get_at((128, 100)))[:3] == (0, 255, 0)


def test_translucent_star_blends(canvas):
    Star(position=(0.0, 0.0), radius=1.0, alpha=0.5).render(canvas)
    r, g, b = tuple(canvas.surface.get_at((100, 100)))[:3]
    assert 100 < r < 160
    assert r == g == b


def test_trail_segments_drawn(canvas):
    planet = Planet(mass=1.0, position=(90.0, 90.0), velocity=(0.0, 0.0), color=(0, 0, 255))
    planet.trail.extend([(-50.0, 0.0), (-40.0, 0.0), (-30.0, 0.0), (-20.0, 0.0)])
    planet.render(canvas)
    # Last segment has the highest alpha
    assert canvas.surface.get_at((75, 100))[2] > 0


def test_offscreen_primitives_are_skipped(canvas):
    canvas.fill_circle((1e9, 1e9), 5.0, (255, 255, 255))
    canvas.line((0.0, 0.0), (1e9, 0.0), (255, 255, 255), 2.0)
    canvas.radial_gradient((1e9, 0.0), 7.0, 105.0, SUN_GLOW_STOPS)
    assert tuple(canvas.surface.get_at((100, 100)))[:3] == (0, 0, 0)
