# bake_noise.py

"""
================================================================================
OFFLINE NOISE PREVIEW BAKER
================================================================================
This script is a command-line tool for rendering one of the effect presets to
a sequence of PNG frames ("baking"). Each frame advances the preset's time
term, so the frames show the slow drift the effect produces in a game.

Usage:
    python bake_noise.py --preset gas_opacity --seed 42 --frames 8
    python bake_noise.py --config path/to/config.json --grayscale
================================================================================
"""
import os
import sys
import json
import logging
import argparse
import hashlib
import time
import numpy as np
from PIL import Image
from tqdm import tqdm

# Add project root to Python path to allow importing from pixel_noise
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from pixel_noise.sampler import ScaledSampler, create_sampler
from pixel_noise import color_maps
from pixel_noise import config as DEFAULTS


def load_config(config_path: str, logger: logging.Logger):
    """Loads a JSON config file. Returns None if it cannot be read."""
    logger.info(f"Loading configuration from: {config_path}")
    try:
        with open(config_path, 'r') as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.critical(f"Failed to load or parse config file: {e}")
        return None

def render_frame(sampler: ScaledSampler, preset: str, width: int, height: int,
                 time_value: float, temp_lut: np.ndarray, grayscale: bool = False) -> np.ndarray:
    """
    Renders one preset frame as an (height, width, channels) uint8 array.
    Gas opacity renders RGBA; every other mode renders RGB.
    """
    xs, ys = np.meshgrid(np.arange(width, dtype=np.float64), np.arange(height, dtype=np.float64))
    values = sampler.preset_grid(preset, xs, ys, time=time_value)

    if grayscale:
        return color_maps.noise_to_grayscale(values, sampler.presets[preset]['amplitude'])

    if preset == "color_variation":
        return color_maps.apply_color_variation(DEFAULTS.PREVIEW_BASE_COLOR, values)
    elif preset == "gas_opacity":
        alpha = color_maps.gas_alpha(DEFAULTS.PREVIEW_GAS_ALPHA, values)
        rgb = np.broadcast_to(np.array(DEFAULTS.PREVIEW_GAS_COLOR, dtype=np.uint8), values.shape + (3,))
        return np.concatenate([rgb, alpha[..., np.newaxis]], axis=-1)
    else: # temp_variation
        return color_maps.temperature_colors(DEFAULTS.PREVIEW_BASE_TEMPERATURE, values, temp_lut)

def save_frame(color_array: np.ndarray, directory: str, index: int) -> str:
    """Saves a frame with Pillow and returns its file name. RGB or RGBA follows the channel count."""
    filename = f"frame_{index:04d}.png"
    Image.fromarray(np.ascontiguousarray(color_array)).save(os.path.join(directory, filename), 'PNG')
    return filename

def bake_noise(sampler: ScaledSampler, preset: str, output_dir: str, logger: logging.Logger,
               width: int = DEFAULTS.PREVIEW_WIDTH, height: int = DEFAULTS.PREVIEW_HEIGHT,
               frames: int = DEFAULTS.PREVIEW_FRAMES, time_step: float = DEFAULTS.PREVIEW_TIME_STEP,
               grayscale: bool = False) -> dict:
    """
    Renders `frames` frames of a preset into output_dir and writes a
    manifest.json next to them. Returns the manifest.
    """
    os.makedirs(output_dir, exist_ok=True)
    logger.info(f"Baking {frames} frame(s) of '{preset}' at {width}x{height} into '{output_dir}'")

    temp_lut = color_maps.create_temperature_lut()
    start_time = time.perf_counter()

    frame_entries = []
    for index in tqdm(range(frames), desc="Baking Frames"):
        time_value = index * time_step
        color_array = render_frame(sampler, preset, width, height, time_value, temp_lut, grayscale)
        filename = save_frame(color_array, output_dir, index)
        frame_entries.append({
            "file": filename,
            "time": time_value,
            "md5": hashlib.md5(color_array.tobytes()).hexdigest(),
        })

    manifest = {
        "preset": preset,
        "seed": sampler.field.current_seed,
        "gradient_mode": sampler.field.gradient_mode,
        "constants": sampler.presets[preset],
        "resolution": [width, height],
        "grayscale": grayscale,
        "frames": frame_entries,
    }
    with open(os.path.join(output_dir, "manifest.json"), 'w') as f:
        json.dump(manifest, f, indent=2)

    end_time = time.perf_counter()
    logger.info(f"Baking complete! Total time: {end_time - start_time:.2f} seconds.")
    return manifest

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Offline preview baker for the pixel noise presets.")
    parser.add_argument("--config", type=str, help="Path to a JSON configuration file for the sampler.")
    parser.add_argument("--preset", choices=sorted(DEFAULTS.PRESETS), default="color_variation",
                        help="The effect preset to render.")
    parser.add_argument("--seed", type=float, help="Seed for the noise field. Overrides the config seed.")
    parser.add_argument("--random-seed", action="store_true",
                        help="Draw the seed from a fresh random generator when no seed is given.")
    parser.add_argument("--width", type=int, default=DEFAULTS.PREVIEW_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULTS.PREVIEW_HEIGHT)
    parser.add_argument("--frames", type=int, default=DEFAULTS.PREVIEW_FRAMES)
    parser.add_argument("--time-step", type=float, default=DEFAULTS.PREVIEW_TIME_STEP,
                        help="Time advanced between consecutive frames.")
    parser.add_argument("--grayscale", action="store_true", help="Render the raw preset values in grayscale.")
    parser.add_argument("--out", type=str, default=DEFAULTS.PREVIEW_OUTPUT_DIR, help="Output directory.")
    args = parser.parse_args(argv)

    # --- Setup Logging ---
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )
    logger = logging.getLogger("NoiseBaker")

    # --- Load Configuration ---
    config = {}
    if args.config:
        config = load_config(args.config, logger)
        if config is None:
            return 1
    if args.seed is not None:
        # Whole-number seeds stay integers so they are used exactly.
        config['seed'] = int(args.seed) if args.seed.is_integer() else args.seed

    rng = np.random.default_rng() if args.random_seed else None
    sampler = create_sampler(config=config, logger=logger, rng=rng)

    bake_noise(
        sampler, args.preset, args.out, logger,
        width=args.width, height=args.height,
        frames=args.frames, time_step=args.time_step,
        grayscale=args.grayscale
    )
    logger.info(f"Frames and manifest.json saved to: {args.out}")
    return 0


# --- Command-Line Interface ---
if __name__ == "__main__":
    sys.exit(main())
