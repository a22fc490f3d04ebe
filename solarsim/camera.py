#!/usr/bin/env python3
"""
Camera utilities for 2D world-to-screen transforms.

The camera is purely a view transform: screen = viewport center + offset +
world * zoom. Input handlers mutate it; physics never reads it.
"""
from typing import Optional, Tuple

from .constants import (
    DEFAULT_ZOOM,
    MAX_ZOOM,
    MIN_ZOOM,
    VIEW_HEIGHT,
    VIEW_WIDTH,
    WHEEL_DELTA_PER_NOTCH,
    ZOOM_SENSITIVITY,
)
from .vector_utils import clamp


class Camera2D:
    """
    Simple 2D camera that maps world coordinates to screen pixels.

    Attributes:
        offset: pan offset in screen pixels, kept as a mutable list [x, y].
        zoom: scale factor, clamped to [MIN_ZOOM, MAX_ZOOM].
        viewport_size: (width, height) in pixels.
    """

    def __init__(self, offset=(0.0, 0.0), zoom=DEFAULT_ZOOM):
        self.offset = [offset[0], offset[1]]
        self.zoom = clamp(zoom, MIN_ZOOM, MAX_ZOOM)
        self.viewport_size = (VIEW_WIDTH, VIEW_HEIGHT)

    def set_viewport_size(self, w: int, h: int) -> None:
        self.viewport_size = (w, h)

    def origin(self) -> Tuple[float, float]:
        """Screen position of the world origin."""
        return (self.viewport_size[0] / 2 + self.offset[0],
                self.viewport_size[1] / 2 + self.offset[1])

    def world_to_screen(self, pos: Tuple[float, float]) -> Tuple[float, float]:
        ox, oy = self.origin()
        return (ox + pos[0] * self.zoom, oy + pos[1] * self.zoom)

    def apply_wheel(self, delta_y: float) -> None:
        """Zoom by a browser-style wheel delta; positive delta zooms out."""
        self.zoom = clamp(self.zoom - delta_y * ZOOM_SENSITIVITY, MIN_ZOOM, MAX_ZOOM)

    def pan_pixels(self, dx_pixels, dy_pixels):
        self.offset[0] += dx_pixels
        self.offset[1] += dy_pixels


def wheel_delta_from_notches(notches: float) -> float:
    """Convert pygame wheel notches (positive = away from user) to a deltaY."""
    return -notches * WHEEL_DELTA_PER_NOTCH


class DragState:
    """
    Pointer drag tracker that pans a camera.

    Pointer down begins a drag, moves add the pointer delta to the camera
    offset, and pointer up or leave ends it.
    """

    def __init__(self):
        self.dragging = False
        self.last_pointer: Optional[Tuple[float, float]] = None

    def pointer_down(self, pos: Tuple[float, float]) -> None:
        self.dragging = True
        self.last_pointer = (pos[0], pos[1])

    def pointer_move(self, camera: Camera2D, pos: Tuple[float, float]) -> None:
        if not self.dragging or self.last_pointer is None:
            return
        camera.pan_pixels(pos[0] - self.last_pointer[0], pos[1] - self.last_pointer[1])
        self.last_pointer = (pos[0], pos[1])

    def pointer_up(self) -> None:
        self.dragging = False
        self.last_pointer = None
