# pixel_noise/__init__.py

# This file makes the 'pixel_noise' directory a Python package.
# We can also use it to define the public API of the package.

from .noise import NoiseField, fade, lerp, normalize_seed
from .sampler import ScaledSampler, create_sampler

__all__ = ["NoiseField", "ScaledSampler", "create_sampler", "fade", "lerp", "normalize_seed"]
