"""Named reference colours (the CSS basic keywords) and nearest-name lookup.

Names are for reporting only: from_string does not accept them.
Distances are RGB Euclidean, alpha ignored.
"""

import numpy as np

from rgba_kit.core.color import Color

NAMED: dict[str, str] = {
    'black': '#000000',
    'silver': '#c0c0c0',
    'gray': '#808080',
    'white': '#ffffff',
    'maroon': '#800000',
    'red': '#ff0000',
    'purple': '#800080',
    'fuchsia': '#ff00ff',
    'green': '#008000',
    'lime': '#00ff00',
    'olive': '#808000',
    'yellow': '#ffff00',
    'navy': '#000080',
    'blue': '#0000ff',
    'teal': '#008080',
    'aqua': '#00ffff',
    'orange': '#ffa500',
}

_NAMES = list(NAMED)
_RGB = np.array([[int(h[i : i + 2], 16) for i in (1, 3, 5)] for h in NAMED.values()], dtype=int)


def nearest_name(color: Color, threshold: float = 30) -> tuple[str | None, float]:
    """Return (name, distance) of the closest named colour.

    Name is None when nothing lies within `threshold`.
    """
    dists = np.linalg.norm(_RGB - np.array(color.rgb, dtype=int), axis=1)
    idx = int(np.argmin(dists))
    dist = round(float(dists[idx]), 1)
    if dist > threshold:
        return None, dist
    return _NAMES[idx], dist
