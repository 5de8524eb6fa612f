# pixel_noise/color_maps.py

"""
================================================================================
SHARED COLOR MAPPING UTILITIES
================================================================================
This module converts preset noise fields into pixel values: jittered RGB
colors, gas alpha and temperature tints.

It is designed to be a pure, stateless utility with no dependency on any
rendering backend, so the same functions serve the preview baker and any
real-time renderer.
================================================================================
"""
import numpy as np
from . import config as DEFAULTS

COLOR_MAP_TEMPERATURE = {
    "coldest": (0, 0, 100),
    "cold": (0, 0, 255),
    "temperate": (255, 255, 0),
    "hot": (255, 0, 0),
    "hottest": (150, 0, 0)
}

def _band(t: np.ndarray, start: float, end: float, color_a: tuple, color_b: tuple) -> np.ndarray:
    """Linear blend from color_a to color_b as t moves from start to end."""
    w = (t - start) / (end - start)
    return (1 - w) * np.array(color_a) + w * np.array(color_b)

# --- Color Lookup Table (LUT) Generation ---
def create_temperature_lut() -> np.ndarray:
    """Creates a 256-entry color LUT for normalized temperatures."""
    t = np.linspace(0.0, 1.0, 256)[..., np.newaxis]
    color_map = COLOR_MAP_TEMPERATURE
    levels = DEFAULTS.TEMP_LEVELS

    colors = np.select(
        [t < levels["cold"], t < levels["temperate"], t < levels["hot"]],
        [
            _band(t, 0.0, levels["cold"], color_map["coldest"], color_map["cold"]),
            _band(t, levels["cold"], levels["temperate"], color_map["cold"], color_map["temperate"]),
            _band(t, levels["temperate"], levels["hot"], color_map["temperate"], color_map["hot"]),
        ],
        default=_band(t, levels["hot"], 1.0, color_map["hot"], color_map["hottest"])
    )
    return colors.astype(np.uint8)

# --- Effect Application ---
def apply_color_variation(base_rgb, variation: np.ndarray) -> np.ndarray:
    """
    Brightens or darkens a base color per pixel.
    A variation of 0.2 makes the pixel 20% brighter; -0.2 makes it 20% darker.
    """
    base = np.asarray(base_rgb, dtype=np.float64)
    colors = base * (1.0 + np.asarray(variation)[..., np.newaxis])
    return np.clip(colors, 0, 255).astype(np.uint8)

def gas_alpha(base_alpha: float, opacity_noise: np.ndarray) -> np.ndarray:
    """Scales a base alpha by (1 + noise) and clips it to a valid byte."""
    alpha = base_alpha * (1.0 + np.asarray(opacity_noise))
    return np.clip(alpha, 0, 255).astype(np.uint8)

def temperature_colors(base_temperature, variation: np.ndarray, temp_lut: np.ndarray) -> np.ndarray:
    """
    Shifts normalized temperatures [0, 1] by the variation and maps them
    through a pre-computed LUT.
    """
    shifted = np.clip(np.asarray(base_temperature) + np.asarray(variation), 0.0, 1.0)
    indices = (shifted * 255).astype(np.uint8)
    return temp_lut[indices]

def noise_to_grayscale(values: np.ndarray, amplitude: float = 1.0) -> np.ndarray:
    """Maps noise in [-amplitude, amplitude] to grayscale bytes [0, 255]."""
    normalized = (np.asarray(values) + amplitude) / (2 * amplitude)
    gray_values = (np.clip(normalized, 0.0, 1.0) * 255).astype(np.uint8)
    return np.stack([gray_values] * 3, axis=-1)
