# constants.py

"""
Application Constants

This module defines static configuration values for the star field.
These are not expected to change between runs; user-tunable values live in
config.json and are carried by settings.Settings.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Default screen dimensions (overridden by config.json 'window')
WIDTH = 1280  # Pixels
HEIGHT = 720  # Pixels

# Window Title
TITLE = "Starfield"

# Colors (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

# Star trail colors
GREEN_80S = (0x82, 0xFF, 0x1A)  # #82FF1A
BLUE_80S = (0x05, 0xAF, 0xEC)   # #05AFEC
PINK_80S = (0xFE, 0x02, 0x93)   # #FE0293

# Star motion
VEL_INIT_MULTIPLIER = 0.01      # Initial velocity as a fraction of spawn distance.
SPEED_GROWTH_MULTIPLIER = 0.001 # Size growth per unit of speed, per frame.

# Field controller multipliers (applied to the 0-100 raw settings)
ACCELERATION_MULTIPLIER = 0.0001
PROXIMITY_MULTIPLIER = 0.00002

# Frame clock
INIT_FPS = 30         # Assumed framerate before any frame has been measured.
WEIGHT_RATIO = 0.01   # Exponential smoothing ratio for the weighted delta time.

# Setting ranges: (min, max, step)
GOAL_FPS_RANGE = (2, 200, 2)
ACCELERATION_RANGE = (0, 100, 2)
PROXIMITY_RANGE = (0, 100, 2)

# Setting defaults
DEFAULT_COLORFUL = True
DEFAULT_GOAL_FPS = 60
DEFAULT_ACCELERATION = 10
DEFAULT_PROXIMITY = 50

# Frames between throttled stats log lines
STATS_LOG_INTERVAL = 100
