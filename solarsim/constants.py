#!/usr/bin/env python3
"""
Shared constants for the solar system toy (arbitrary world units).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""

# Gravity model
G = 500.0  # toy gravitational constant
SUN_MASS = 2000.0
SUN_RADIUS = 35.0
MIN_SEPARATION = 1.0  # world units; clamps inverse-square distance

# Integration
FRAME_DT = 0.016  # seconds of simulation time per rendered frame
SUBSTEPS = 4
SUBSTEP_DT = FRAME_DT / SUBSTEPS

# Planets
PLANET_COUNT = 8
PLANET_MIN_DISTANCE = 150.0
PLANET_DISTANCE_SPREAD = 400.0
PLANET_MIN_MASS = 5.0
PLANET_MASS_SPREAD = 10.0
PLANET_SATURATION = 70  # percent, HSL
PLANET_LIGHTNESS = 60  # percent, HSL

# Trails
TRAIL_LENGTH = 400
TRAIL_SAMPLE_INTERVAL = 5  # store one position every N integrations
TRAIL_MAX_ALPHA = 0.8
TRAIL_WIDTH = 2.0  # world units

# Star field
STAR_COUNT = 300
STAR_FIELD_SIZE = 4000.0
STAR_MAX_RADIUS = 1.5

# Camera
DEFAULT_ZOOM = 1.0
MIN_ZOOM = 0.1
MAX_ZOOM = 5.0
ZOOM_SENSITIVITY = 0.001
WHEEL_DELTA_PER_NOTCH = 100.0  # one wheel notch in browser-style deltaY units

# Rendering (viewport)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 800
TARGET_FPS = 60
BACKGROUND_COLOR = (11, 12, 21)
SUN_COLOR = (255, 215, 0)
STAR_COLOR = (255, 255, 255)
HIGHLIGHT_COLOR = (255, 255, 255)
HIGHLIGHT_ALPHA = 0.3
HUD_TEXT_COLOR = (255, 255, 255)

# Sun glow gradient stops: (offset, (r, g, b, a)) with alpha in 0..255
SUN_GLOW_STOPS = (
    (0.0, (255, 255, 255, 255)),
    (0.1, (255, 215, 0, 255)),
    (0.4, (255, 140, 0, 102)),
    (1.0, (255, 140, 0, 0)),
)
SUN_GLOW_INNER = 0.2  # inner radius as a fraction of SUN_RADIUS
SUN_GLOW_OUTER = 3.0  # outer radius as a multiple of SUN_RADIUS

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
