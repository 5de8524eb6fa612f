"""Unit tests for the scaled sampler and its presets."""

import numpy as np
import pytest

from pixel_noise import config as DEFAULTS
from pixel_noise.noise import NoiseField
from pixel_noise.sampler import ScaledSampler, create_sampler

POINTS = [(0.0, 0.0), (13.0, 7.0), (101.5, -33.25), (640.0, 480.0), (-7.3, 2048.9)]


class TestScaledSampler:
    """Test frequency/amplitude scaling."""

    def test_sample_scaled_defaults_are_passthrough(self, sampler: ScaledSampler, field: NoiseField):
        for x, y in POINTS:
            assert sampler.sample_scaled(x, y) == field.sample(x, y)

    def test_sample_scaled_applies_frequency_and_amplitude(self, sampler: ScaledSampler, field: NoiseField):
        field.seed(99)
        for x, y in POINTS:
            assert sampler.sample_scaled(x, y, 0.3, 2.5) == field.sample(x * 0.3, y * 0.3) * 2.5

    def test_sample_scaled_grid_matches_scalar(self, sampler: ScaledSampler):
        xs = np.array([p[0] for p in POINTS])
        ys = np.array([p[1] for p in POINTS])
        grid = sampler.sample_scaled_grid(xs, ys, 0.7, 3.0)
        for k, (x, y) in enumerate(POINTS):
            assert grid[k] == sampler.sample_scaled(x, y, 0.7, 3.0)

    def test_reseed_delegates_to_field(self, sampler: ScaledSampler, logger):
        sampler.reseed(4660)
        reference = NoiseField(seed=4660, logger=logger)
        assert sampler.field.current_seed == 4660
        np.testing.assert_array_equal(sampler.field.perm, reference.perm)
        assert sampler.sample_scaled(3.3, 4.4) == reference.sample(3.3, 4.4)


class TestPresets:
    """Test the named effect presets."""

    def test_color_variation_wiring(self, sampler: ScaledSampler, field: NoiseField):
        for seed in (0, 12345):
            field.seed(seed)
            for x, y in POINTS:
                assert sampler.color_variation(x, y, 0) == field.sample(x * 0.05, y * 0.05) * 0.2

    def test_gas_opacity_scrolls_with_time(self, sampler: ScaledSampler, field: NoiseField):
        field.seed(0.42)
        for x, y in POINTS:
            expected = field.sample(x * 0.1, y * 0.1 + 25.0 * 0.02) * 0.4
            assert sampler.gas_opacity(x, y, 25.0) == expected

    def test_temp_variation_custom_scale(self, sampler: ScaledSampler, field: NoiseField):
        field.seed(8)
        for x, y in POINTS:
            expected = field.sample(x * 0.2, y * 0.2 + 10.0 * 0.005) * 0.15
            assert sampler.temp_variation(x, y, 10.0, scale=0.2) == expected

    def test_default_constants(self, sampler: ScaledSampler):
        assert sampler.presets["color_variation"] == {"scale": 0.05, "amplitude": 0.2, "time_factor": 0.01}
        assert sampler.presets["gas_opacity"] == {"scale": 0.1, "amplitude": 0.4, "time_factor": 0.02}
        assert sampler.presets["temp_variation"] == {"scale": 0.03, "amplitude": 0.15, "time_factor": 0.005}

    @pytest.mark.parametrize("name", sorted(DEFAULTS.PRESETS))
    def test_presets_stay_within_amplitude(self, sampler: ScaledSampler, name):
        amplitude = DEFAULTS.PRESETS[name]["amplitude"]
        xs, ys = np.meshgrid(np.arange(64.0), np.arange(48.0))
        values = sampler.preset_grid(name, xs, ys, time=3.0)
        assert values.shape == (48, 64)
        assert np.all(np.abs(values) <= amplitude)

    @pytest.mark.parametrize("name", sorted(DEFAULTS.PRESETS))
    def test_preset_grid_matches_scalar(self, sampler: ScaledSampler, name):
        sampler.reseed(2718)
        xs = np.array([p[0] for p in POINTS])
        ys = np.array([p[1] for p in POINTS])
        grid = sampler.preset_grid(name, xs, ys, time=42.0)
        for k, (x, y) in enumerate(POINTS):
            assert grid[k] == sampler.sample_preset(name, x, y, 42.0)

    def test_unknown_preset_raises(self, sampler: ScaledSampler):
        with pytest.raises(ValueError, match="Unknown preset 'lava_glow'"):
            sampler.sample_preset("lava_glow", 1.0, 1.0)


class TestConfiguration:
    """Test preset overrides and the sampler factory."""

    def test_partial_preset_override(self, field: NoiseField, logger):
        config = {"presets": {"gas_opacity": {"amplitude": 1.0}}}
        sampler = ScaledSampler(field, config=config, logger=logger)
        assert sampler.presets["gas_opacity"] == {"scale": 0.1, "amplitude": 1.0, "time_factor": 0.02}
        assert sampler.presets["color_variation"] == DEFAULTS.PRESETS["color_variation"]
        assert sampler.gas_opacity(10.0, 20.0) == field.sample(1.0, 2.0) * 1.0

    def test_override_does_not_leak_into_defaults(self, field: NoiseField, logger):
        ScaledSampler(field, config={"presets": {"color_variation": {"scale": 9.0}}}, logger=logger)
        assert DEFAULTS.PRESETS["color_variation"]["scale"] == 0.05

    def test_unknown_preset_in_config_raises(self, field: NoiseField, logger):
        with pytest.raises(ValueError, match="Unknown preset"):
            ScaledSampler(field, config={"presets": {"smoke": {"scale": 1.0}}}, logger=logger)

    def test_create_sampler_uses_config_seed(self, logger):
        sampler = create_sampler({"seed": 5}, logger=logger)
        assert sampler.field.current_seed == 5 | (5 << 8)

    def test_create_sampler_config_seed_wins_over_rng(self, logger):
        sampler = create_sampler({"seed": 4660}, logger=logger, rng=np.random.default_rng(1))
        assert sampler.field.current_seed == 4660

    def test_create_sampler_from_rng(self, logger):
        a = create_sampler(logger=logger, rng=np.random.default_rng(21))
        b = create_sampler(logger=logger, rng=np.random.default_rng(21))
        assert a.field.current_seed == b.field.current_seed
        assert a.color_variation(5.0, 6.0) == b.color_variation(5.0, 6.0)

    def test_create_sampler_default_seed(self, logger):
        sampler = create_sampler(logger=logger)
        assert sampler.field.current_seed == DEFAULTS.DEFAULT_SEED
        assert sampler.field.gradient_mode == "x_component"

    def test_create_sampler_gradient_mode(self, logger):
        sampler = create_sampler({"gradient_mode": "dot"}, logger=logger)
        assert sampler.field.gradient_mode == "dot"

    def test_samplers_do_not_share_state(self, logger):
        a = create_sampler({"seed": 1}, logger=logger)
        b = create_sampler({"seed": 1}, logger=logger)
        a.reseed(999)
        assert b.field.current_seed == 1 | (1 << 8)
