# pixel_noise/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the noise
engine and its presets. These values are used if they are not explicitly
provided by the user's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC EFFECT.
Instead, pass a configuration dictionary to the ScaledSampler instance.
================================================================================
"""

import numpy as np

# --- Noise Field ---
DEFAULT_SEED = 0

# The lattice wraps every 256 cells. The permutation and gradient tables are
# stored twice over (512 entries) so corner lookups never need a modulo.
LATTICE_SIZE = 256
TABLE_SIZE = LATTICE_SIZE * 2

# Seeds strictly between 0 and 1 are treated as fractional entropy and
# expanded into integer range by this factor before flooring.
FRACTIONAL_SEED_SCALE = 65536

# The 12 edge-midpoint gradients of a cube. Only the first two components are
# read by the 2D noise.
GRADIENT_SET = np.array([
    [1, 1, 0], [-1, 1, 0], [1, -1, 0], [-1, -1, 0],
    [1, 0, 1], [-1, 0, 1], [1, 0, -1], [-1, 0, -1],
    [0, 1, 1], [0, -1, 1], [0, 1, -1], [0, -1, -1],
], dtype=np.float64)
GRADIENT_SET.setflags(write=False)

# How a corner gradient is combined with the corner offset.
# 'x_component': the cached gradient x-component is the corner contribution.
# 'dot': full 2D dot product of (gx, gy) with the corner-relative offset.
GRADIENT_MODE = 'x_component'
GRADIENT_MODES = ('x_component', 'dot')

# --- Effect Presets ---
# Each preset samples at (x * scale, y * scale + time * time_factor) and
# multiplies the result by amplitude. The time term slowly scrolls the field
# along the y-axis to fake animation without rebuilding any tables.
PRESETS = {
    "color_variation": {"scale": 0.05, "amplitude": 0.2, "time_factor": 0.01},
    "gas_opacity": {"scale": 0.1, "amplitude": 0.4, "time_factor": 0.02},
    "temp_variation": {"scale": 0.03, "amplitude": 0.15, "time_factor": 0.005},
}

# --- Preview Baking ---
PREVIEW_WIDTH = 256
PREVIEW_HEIGHT = 256
PREVIEW_FRAMES = 1
PREVIEW_TIME_STEP = 10.0
PREVIEW_OUTPUT_DIR = "noise_previews"

# Base colors used when rendering the presets to images.
PREVIEW_BASE_COLOR = (194, 178, 128)  # Sand-like pixel for color jitter
PREVIEW_GAS_ALPHA = 160
PREVIEW_GAS_COLOR = (120, 200, 120)
PREVIEW_BASE_TEMPERATURE = 0.5  # Normalized [0, 1]

# --- Temperature Levels (Normalized 0.0 to 1.0) ---
TEMP_LEVELS = {
    "coldest": 0.05,
    "cold": 0.25,
    "temperate": 0.75,
    "hot": 0.95,
    "hottest": 1.0
}
