"""Pytest configuration and fixtures."""

import logging

import pytest

from pixel_noise.noise import NoiseField
from pixel_noise.sampler import ScaledSampler


@pytest.fixture
def logger() -> logging.Logger:
    """A named logger for components under test."""
    return logging.getLogger("pixel_noise.tests")


@pytest.fixture
def field(logger: logging.Logger) -> NoiseField:
    """A noise field seeded with the package default (0)."""
    return NoiseField(logger=logger)


@pytest.fixture
def sampler(field: NoiseField, logger: logging.Logger) -> ScaledSampler:
    """A sampler wrapping the default field with default presets."""
    return ScaledSampler(field, logger=logger)
