"""Average and dominant colours of an image.

Samples up to 5000 pixels (fixed seed, so output is repeatable). Reports:

  average    per-channel mean of the sampled pixels, alpha included
  dominant   the most common colours after quantizing RGB to 32-level bins
             (bin centres), with percentages and nearest CSS names

Fully transparent pixels are left out of the dominant census.

Example:
    rgba-kit sample screenshot.png
    rgba-kit sample logo.png --count 3 --json
"""

import os

import numpy as np
from PIL import Image

from rgba_kit.core.color import Color
from rgba_kit.core.palette import nearest_name
from rgba_kit.core.report import color_fields
from rgba_kit.core.types import Command, Report, non_negative_int

command = Command(name='sample', help='Average colour and dominant quantized colours of an image.')


def _sample_pixels(image: Image.Image, n_samples: int = 5000) -> np.ndarray:
    pixels = np.array(image.convert('RGBA')).reshape(-1, 4)
    if len(pixels) > n_samples:
        indices = np.random.default_rng(42).choice(len(pixels), n_samples, replace=False)
        pixels = pixels[indices]
    return pixels


def average_color(pixels: np.ndarray) -> Color:
    r, g, b, a = pixels.astype(float).mean(axis=0)
    return Color(r, g, b, a)


def dominant_colors(pixels: np.ndarray, count: int = 5) -> list[tuple[Color, float]]:
    """Return [(colour, pct)] for the most common quantized colours."""
    visible = pixels[pixels[:, 3] > 0][:, :3]
    if len(visible) == 0:
        return []
    quantized = (visible.astype(int) // 32) * 32 + 16
    unique, counts = np.unique(quantized, axis=0, return_counts=True)
    order = np.argsort(-counts, kind='stable')[:count]
    total = counts.sum()
    return [(Color(*unique[i]), round(float(counts[i]) / float(total) * 100.0, 1)) for i in order]


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='Path to a PNG/JPG image')
    parser.add_argument(
        '-n',
        '--count',
        type=non_negative_int,
        default=5,
        help='Number of dominant colours (default: 5)',
    )


@command.run
def run(report: Report, args, settings) -> None:
    if not os.path.isfile(args.image):
        raise FileNotFoundError(f'image not found: {args.image}')

    with Image.open(args.image) as image:
        pixels = _sample_pixels(image)

    dominant = []
    for color, pct in dominant_colors(pixels, args.count):
        name, _dist = nearest_name(color)
        dominant.append({'hex': color_fields(color)['hex'], 'pct': pct, 'nearest': name})

    report.add(args.image, {'samples': len(pixels), **color_fields(average_color(pixels)), 'dominant': dominant})
