#!/usr/bin/env python3
"""
Shared constants for the gravity simulator (arbitrary simulation units).

These are the defaults behind SimulationConfig. Keeping them in one place
keeps the presets, the command line and the tests consistent.
"""

# Physics controls
DEFAULT_G = 0.2  # scaled gravitational constant of the classic setup
DENSE_G = 0.003  # weaker coupling used with the larger population
DEFAULT_MIN_DISTANCE = 1e-3  # distance floor for coincident or near-coincident bodies
DEFAULT_TIMESTEP = 1.0  # one integration step per frame

# Population
DEFAULT_BODY_COUNT = 15
DENSE_BODY_COUNT = 90
DEFAULT_POSITION_RANGE = (-280.0, 280.0)  # per axis
DEFAULT_MASS_RANGE = (0.1, 100.0)
MAX_RESAMPLE_ATTEMPTS = 1000  # when drawing distinct initial positions

# Update ordering
POLICY_SNAPSHOT = "snapshot"
POLICY_SEQUENTIAL = "sequential"

# Viewport recentering
RECENTER_BEFORE_DRAW = "before_draw"
RECENTER_AFTER_DRAW = "after_draw"

# Rendering (window)
VIEW_WIDTH = 1401
VIEW_HEIGHT = 1401
DEFAULT_VIEW_SCALE = 1.0
FPS = 60
WINDOW_TITLE = "Gravity"
BACKGROUND_COLOR = (0, 0, 0)
BODY_COLOR = (255, 255, 255)
ORIGIN_COLOR = (255, 80, 80)
DRIFT_COLOR = (80, 200, 255)

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000

# Frames between DEBUG stats lines
STATS_EVERY_N_FRAMES = 300
