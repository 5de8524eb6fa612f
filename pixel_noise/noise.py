# pixel_noise/noise.py

"""
================================================================================
NOISE FIELD
================================================================================
This module provides a seeded 2D Perlin-style lattice noise field. It owns the
permutation and gradient lookup tables and evaluates the interpolated noise at
continuous 2D coordinates.

Data Contract:
---------------
- Inputs (on initialization):
    - seed: Any real number. Normalized before the tables are built.
    - gradient_mode: 'x_component' (default) or 'dot'.
    - logger: An optional Python logging object for runtime messages.
- Public Methods:
    - seed(value): Rebuilds both tables from a new seed.
    - sample(x, y): Noise at a single coordinate (float).
    - sample_grid(x, y): Noise over NumPy coordinate arrays.
- Outputs:
    - Unclamped noise values, close to [-1, 1].
- Side Effects: Logs table rebuilds at DEBUG level.
- Invariants:
    - perm[i] == perm[i + 256] and grad_p[i] == grad_p[i + 256] for i < 256.
    - Given the same seed, every sample is bit-identical.
    - Non-finite inputs propagate to non-finite outputs. Nothing is raised.
================================================================================
"""

import logging
import math
import numbers

import numpy as np
from numba import njit

from . import config as DEFAULTS


@njit
def fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)

@njit
def lerp(a, b, t):
    "Linear interpolation."
    return (1 - t) * a + t * b

@njit
def _wrap(cell):
    """Wraps a floored lattice coordinate into [0, 255] like `cell & 255`."""
    # NaN and infinity convert to 0 under 32-bit integer semantics.
    if not math.isfinite(cell):
        return 0
    return int(cell - 256.0 * np.floor(cell / 256.0))

@njit
def _noise_2d(perm, grad_x, grad_y, x, y, full_dot):
    """
    Evaluates the noise at a single point. The gradient tables are passed in
    explicitly so this function stays pure and JIT-compilable.
    """
    # Find the unit grid cell containing the point.
    cell_x = np.floor(x)
    cell_y = np.floor(y)
    # Relative coordinates of the point within that cell.
    x = x - cell_x
    y = y - cell_y
    xi = _wrap(cell_x)
    yi = _wrap(cell_y)

    i00 = xi + perm[yi]
    i01 = xi + perm[yi + 1]
    i10 = xi + 1 + perm[yi]
    i11 = xi + 1 + perm[yi + 1]

    if full_dot:
        n00 = grad_x[i00] * x + grad_y[i00] * y
        n01 = grad_x[i01] * x + grad_y[i01] * (y - 1)
        n10 = grad_x[i10] * (x - 1) + grad_y[i10] * y
        n11 = grad_x[i11] * (x - 1) + grad_y[i11] * (y - 1)
    else:
        # The cached x-component is the corner contribution itself.
        n00 = grad_x[i00]
        n01 = grad_x[i01]
        n10 = grad_x[i10]
        n11 = grad_x[i11]

    u = fade(x)
    return lerp(lerp(n00, n10, u), lerp(n01, n11, u), fade(y))

@njit
def _noise_2d_flat(perm, grad_x, grad_y, x, y, full_dot):
    """Evaluates the noise for every entry of two flat coordinate arrays."""
    out = np.empty(x.shape[0])
    for k in range(x.shape[0]):
        out[k] = _noise_2d(perm, grad_x, grad_y, x[k], y[k], full_dot)
    return out


def normalize_seed(value) -> int:
    """
    Converts any real number into the integer used to build the tables.

    Fractional seeds in (0, 1) are expanded by 65536, everything is floored,
    and seeds below 256 are copied into the high byte so both bytes used by
    the table construction carry entropy.
    """
    if isinstance(value, numbers.Integral):
        seed = int(value)
    else:
        value = float(value)
        if not math.isfinite(value):
            return 0
        if 0 < value < 1:
            value *= DEFAULTS.FRACTIONAL_SEED_SCALE
        seed = math.floor(value)

    if seed < 256:
        seed |= seed << 8
    return seed


class NoiseField:
    """
    A seeded 2D lattice noise field.
    The field holds no external resources; it is mutated only by seed().
    """
    fade = staticmethod(fade)
    lerp = staticmethod(lerp)

    def __init__(self, seed=DEFAULTS.DEFAULT_SEED, gradient_mode: str = DEFAULTS.GRADIENT_MODE,
                 logger: logging.Logger = None):
        """
        Initializes the field and builds its tables.

        Args:
            seed: Initial seed, any real number.
            gradient_mode (str): How corner gradients are applied.
            logger (logging.Logger, optional): The logger for runtime messages.
        """
        self.logger = logger or logging.getLogger(__name__)

        if gradient_mode not in DEFAULTS.GRADIENT_MODES:
            raise ValueError(
                f"Unknown gradient mode '{gradient_mode}'. "
                f"Expected one of {DEFAULTS.GRADIENT_MODES}."
            )
        self.gradient_mode = gradient_mode
        self._full_dot = gradient_mode == 'dot'

        # The identity base permutation. Reseeding derives new tables from it
        # and never shuffles it.
        self.base = np.arange(DEFAULTS.LATTICE_SIZE, dtype=np.uint8)
        self.current_seed = None

        self.seed(seed)
        self.logger.info(
            f"NoiseField initialized with seed: {self.current_seed} "
            f"(gradient mode: {self.gradient_mode})"
        )

    @classmethod
    def from_rng(cls, rng: np.random.Generator, gradient_mode: str = DEFAULTS.GRADIENT_MODE,
                 logger: logging.Logger = None) -> "NoiseField":
        """Creates a field seeded with a fraction drawn from an injected generator."""
        return cls(seed=rng.random(), gradient_mode=gradient_mode, logger=logger)

    def seed(self, value):
        """
        Rebuilds the permutation and gradient tables from a seed.
        Calling this twice with the same value produces identical tables.
        """
        seed = normalize_seed(value)
        low_byte = seed & 0xFF
        high_byte = (seed >> 8) & 0xFF

        # Odd indices draw from the low seed byte, even indices from the high one.
        masks = np.where(self.base & 1, low_byte, high_byte)
        values = (self.base ^ masks).astype(np.uint8)

        gradients = DEFAULTS.GRADIENT_SET[values % 12]

        # Fresh arrays on every reseed; the old tables are never edited in place.
        self.perm = np.stack([values, values]).flatten()
        self.grad_p = np.stack([gradients[:, 0], gradients[:, 0]]).flatten()
        self.grad_p_y = np.stack([gradients[:, 1], gradients[:, 1]]).flatten()
        self.current_seed = seed

        self.logger.debug(f"Noise tables rebuilt from seed {value!r} (normalized: {seed}).")

    def sample(self, x, y) -> float:
        """Returns the noise value at (x, y)."""
        return float(_noise_2d(
            self.perm, self.grad_p, self.grad_p_y,
            float(x), float(y), self._full_dot
        ))

    def sample_grid(self, x, y) -> np.ndarray:
        """
        Returns the noise over coordinate arrays. Inputs are broadcast
        against each other; the output has the broadcast shape.
        """
        x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))
        shape = x.shape
        flat_x = np.ascontiguousarray(x).ravel()
        flat_y = np.ascontiguousarray(y).ravel()
        values = _noise_2d_flat(
            self.perm, self.grad_p, self.grad_p_y,
            flat_x, flat_y, self._full_dot
        )
        return values.reshape(shape)
