# pixel_noise/sampler.py

"""
================================================================================
SCALED SAMPLER & EFFECT PRESETS
================================================================================
This module wraps a NoiseField with frequency/amplitude scaling and exposes
named presets for the pixel effects that consume the noise (color jitter, gas
opacity, temperature shading).

Data Contract:
---------------
- Inputs (on initialization):
    - field (NoiseField): The noise field to sample. Owned by the caller.
    - config (dict): Optional overrides. Recognized key: 'presets', a dict of
      preset name -> {'scale', 'amplitude', 'time_factor'}.
    - logger: An optional Python logging object for runtime messages.
- Outputs:
    - Scalars (or NumPy arrays for the *_grid variants) roughly within
      [-amplitude, amplitude].
- Side Effects: reseed() rebuilds the wrapped field's tables.
- Invariants: Presets are pure functions of (x, y, time, scale) and the
  field's current tables.
================================================================================
"""

import logging
import numpy as np

from . import config as DEFAULTS
from .noise import NoiseField


class ScaledSampler:
    """Applies frequency/amplitude scaling and named presets to a NoiseField."""

    def __init__(self, field: NoiseField, config: dict = None, logger: logging.Logger = None):
        self.field = field
        self.user_config = config or {}
        self.logger = logger or logging.getLogger(__name__)

        # --- Consolidate Configuration ---
        # User overrides are merged per preset, so a config can change just one
        # constant of one preset.
        user_presets = self.user_config.get('presets', {})
        self.presets = {}
        for name, defaults in DEFAULTS.PRESETS.items():
            self.presets[name] = {**defaults, **user_presets.get(name, {})}

        unknown = set(user_presets) - set(self.presets)
        if unknown:
            raise ValueError(f"Unknown preset(s) in config: {sorted(unknown)}")

        self.logger.debug(f"ScaledSampler presets: {self.presets}")

    def sample_scaled(self, x, y, frequency=1, amplitude=1) -> float:
        """Samples the field at (x * frequency, y * frequency), scaled by amplitude."""
        return self.field.sample(x * frequency, y * frequency) * amplitude

    def sample_scaled_grid(self, x, y, frequency=1, amplitude=1) -> np.ndarray:
        """Array version of sample_scaled."""
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        return self.field.sample_grid(x * frequency, y * frequency) * amplitude

    def _preset(self, name: str) -> dict:
        try:
            return self.presets[name]
        except KeyError:
            raise ValueError(
                f"Unknown preset '{name}'. Expected one of {sorted(self.presets)}."
            ) from None

    def sample_preset(self, name: str, x, y, time=0, scale=None) -> float:
        """Evaluates a named preset at a single coordinate."""
        preset = self._preset(name)
        if scale is None:
            scale = preset['scale']
        return self.sample_scaled(
            x * scale, y * scale + time * preset['time_factor'], 1, preset['amplitude']
        )

    def preset_grid(self, name: str, x, y, time=0, scale=None) -> np.ndarray:
        """Evaluates a named preset over coordinate arrays."""
        preset = self._preset(name)
        if scale is None:
            scale = preset['scale']
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        return self.sample_scaled_grid(
            x * scale, y * scale + time * preset['time_factor'], 1, preset['amplitude']
        )

    # --- Named Presets ---
    def color_variation(self, x, y, time=0, scale=None) -> float:
        """Per-pixel color jitter."""
        return self.sample_preset("color_variation", x, y, time, scale)

    def gas_opacity(self, x, y, time=0, scale=None) -> float:
        """Opacity variation for gas pixels."""
        return self.sample_preset("gas_opacity", x, y, time, scale)

    def temp_variation(self, x, y, time=0, scale=None) -> float:
        """Smooth transitioning value for temperature visualization."""
        return self.sample_preset("temp_variation", x, y, time, scale)

    def reseed(self, seed):
        """Reseeds the wrapped noise field."""
        self.field.seed(seed)
        self.logger.info(f"Sampler reseeded (normalized seed: {self.field.current_seed})")


def create_sampler(config: dict = None, logger: logging.Logger = None,
                   rng: np.random.Generator = None) -> ScaledSampler:
    """
    Builds a NoiseField and a ScaledSampler around it.

    The seed is taken from config['seed'] when present, otherwise drawn from
    the injected rng, otherwise the package default.
    """
    config = config or {}
    logger = logger or logging.getLogger(__name__)
    gradient_mode = config.get('gradient_mode', DEFAULTS.GRADIENT_MODE)

    if 'seed' in config:
        field = NoiseField(seed=config['seed'], gradient_mode=gradient_mode, logger=logger)
    elif rng is not None:
        field = NoiseField.from_rng(rng, gradient_mode=gradient_mode, logger=logger)
    else:
        field = NoiseField(seed=DEFAULTS.DEFAULT_SEED, gradient_mode=gradient_mode, logger=logger)

    return ScaledSampler(field, config=config, logger=logger)
