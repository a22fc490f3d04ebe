#!/usr/bin/env python3
"""
Rendering adapter over a pygame surface.

``Canvas`` exposes the handful of immediate-mode primitives the bodies need
(filled circle, line, radial gradient) in world coordinates, applying the
camera transform and per-primitive alpha. Alpha-blended shapes go through
``pygame.gfxdraw``, which blends RGBA colors onto opaque surfaces.

The HUD (title, help line and Randomize button) is drawn in screen space.
"""
import functools
import math
from typing import Optional, Sequence, Tuple

import pygame
from pygame import gfxdraw

from .camera import Camera2D
from .constants import BACKGROUND_COLOR, HUD_TEXT_COLOR, SAFE_COORD_LIMIT

RGBA = Tuple[int, int, int, int]
GradientStops = Sequence[Tuple[float, RGBA]]


def _safe_point(pt) -> Optional[Tuple[int, int]]:
    try:
        x, y = int(round(pt[0])), int(round(pt[1]))
    except (OverflowError, ValueError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


def _alpha_byte(alpha: float) -> int:
    return max(0, min(255, int(round(alpha * 255))))


def gradient_color(t: float, stops: GradientStops) -> RGBA:
    """
    Color of a piecewise-linear gradient at offset ``t``.

    Offsets before the first stop take the first stop's color and offsets past
    the last stop take the last one's.
    """
    if t <= stops[0][0]:
        return tuple(stops[0][1])
    for (t0, c0), (t1, c1) in zip(stops, stops[1:]):
        if t <= t1:
            f = 0.0 if t1 == t0 else (t - t0) / (t1 - t0)
            return tuple(int(round(a + (b - a) * f)) for a, b in zip(c0, c1))
    return tuple(stops[-1][1])


@functools.lru_cache(maxsize=64)
def _glow_sprite(inner_px: int, outer_px: int, stops) -> pygame.Surface:
    """Pre-render a radial gradient disc of radius ``outer_px`` with per-pixel alpha."""
    size = outer_px * 2 + 1
    sprite = pygame.Surface((size, size), pygame.SRCALPHA)
    span = max(outer_px - inner_px, 1)
    # Paint outside-in so each ring keeps its own color
    for r in range(outer_px, 0, -1):
        t = (r - inner_px) / span
        pygame.draw.circle(sprite, gradient_color(t, stops), (outer_px, outer_px), r)
    return sprite


def thick_line_polygon(a: Tuple[float, float], b: Tuple[float, float], width: float):
    """Corners of a quad covering the segment a-b with the given pixel width."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    length = math.hypot(dx, dy)
    if length == 0:
        return None
    nx = -dy / length * width / 2
    ny = dx / length * width / 2
    return [
        (a[0] + nx, a[1] + ny),
        (b[0] + nx, b[1] + ny),
        (b[0] - nx, b[1] - ny),
        (a[0] - nx, a[1] - ny),
    ]


class Canvas:
    """
    World-space drawing surface.

    Wraps a pygame ``Surface`` and the camera whose transform is applied to
    every primitive.
    """

    def __init__(self, surface: pygame.Surface, camera: Camera2D):
        self.surface = surface
        self.camera = camera

    def clear(self, color=BACKGROUND_COLOR) -> None:
        self.surface.fill(color)

    def _visible(self, pt: Tuple[int, int], r: int) -> bool:
        w, h = self.surface.get_size()
        return -r <= pt[0] <= w + r and -r <= pt[1] <= h + r

    def fill_circle(self, center, radius: float, color, alpha: float = 1.0) -> None:
        a = _alpha_byte(alpha)
        if a == 0:
            return
        pt = _safe_point(self.camera.world_to_screen(center))
        if pt is None:
            return
        r = int(round(radius * self.camera.zoom))
        if not self._visible(pt, r):
            return
        rgba = tuple(color[:3]) + (a,)
        if r <= 0:
            gfxdraw.pixel(self.surface, pt[0], pt[1], rgba)
        else:
            gfxdraw.filled_circle(self.surface, pt[0], pt[1], r, rgba)

    def line(self, start, end, color, width: float = 1.0, alpha: float = 1.0) -> None:
        a = _alpha_byte(alpha)
        if a == 0:
            return
        p1 = self.camera.world_to_screen(start)
        p2 = self.camera.world_to_screen(end)
        s1 = _safe_point(p1)
        s2 = _safe_point(p2)
        if s1 is None or s2 is None:
            return
        rgba = tuple(color[:3]) + (a,)
        width_px = width * self.camera.zoom
        if width_px <= 1.5:
            gfxdraw.line(self.surface, s1[0], s1[1], s2[0], s2[1], rgba)
            return
        quad = thick_line_polygon(p1, p2, width_px)
        if quad is None:
            return
        pts = [_safe_point(p) for p in quad]
        if any(p is None for p in pts):
            return
        gfxdraw.filled_polygon(self.surface, pts, rgba)

    def radial_gradient(self, center, inner: float, outer: float, stops: GradientStops) -> None:
        zoom = self.camera.zoom
        outer_px = int(round(outer * zoom))
        if outer_px < 1:
            return
        inner_px = int(round(inner * zoom))
        pt = _safe_point(self.camera.world_to_screen(center))
        if pt is None or not self._visible(pt, outer_px):
            return
        sprite = _glow_sprite(inner_px, outer_px, tuple(stops))
        self.surface.blit(sprite, (pt[0] - outer_px, pt[1] - outer_px))


class Button:
    """Translucent rectangular button anchored to the top-right corner."""

    def __init__(self, label: str, size=(130, 38), margin: int = 20):
        self.label = label
        self.size = size
        self.margin = margin
        self.rect = pygame.Rect(0, margin, size[0], size[1])
        self.hovered = False

    def layout(self, viewport_width: int) -> None:
        self.rect.topleft = (viewport_width - self.margin - self.size[0], self.margin)

    def contains(self, pos) -> bool:
        return self.rect.collidepoint(pos)

    def draw(self, surface: pygame.Surface) -> None:
        panel = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        panel.fill((255, 255, 255, 51 if self.hovered else 26))
        pygame.draw.rect(panel, (255, 255, 255, 77), panel.get_rect(), 1, border_radius=4)
        surface.blit(panel, self.rect.topleft)
        font = _get_font()
        img = font.render(self.label, True, HUD_TEXT_COLOR)
        surface.blit(img, img.get_rect(center=self.rect.center))


_cached_font = None
_cached_title_font = None


def _get_font(title: bool = False):
    global _cached_font, _cached_title_font
    if not pygame.font.get_init():
        pygame.font.init()
    if _cached_font is None:
        _cached_font = pygame.font.SysFont("consolas", 16)
        _cached_title_font = pygame.font.SysFont("consolas", 20, bold=True)
    return _cached_title_font if title else _cached_font


def draw_text(surface, text, x, y, color, title=False):
    img = _get_font(title).render(text, True, color)
    surface.blit(img, (x, y))


def draw_hud(surface: pygame.Surface, button: Button) -> None:
    draw_text(surface, "Solar System Simulation", 20, 20, HUD_TEXT_COLOR, title=True)
    draw_text(surface, "Scroll to Zoom | Drag to Pan | R: Randomize", 20, 50, HUD_TEXT_COLOR)
    button.draw(surface)
