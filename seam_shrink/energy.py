"""Backward energy from squared RGB differences of neighbouring pixels.

Each pixel samples the pair of pixels around it along both axes. Sampling
positions are clamped so that border pixels reuse the pair of their nearest
interior neighbour instead of wrapping or padding, e.g. column 0 and column 1
both use columns (0, 2).
"""

from typing import Optional, Tuple

import numpy as np

from .errors import DegenerateGridError

MAX_ENERGY = float(np.sqrt(2 * 3 * 255 ** 2))


def _sample_pairs(size: int) -> Tuple[np.ndarray, np.ndarray]:
    """Get the clamped (lower, upper) sampling indices along one axis"""
    centre = np.minimum(np.maximum(np.arange(size), 1), size - 2)
    lo = np.clip(centre - 1, 0, size - 1)
    hi = np.clip(centre + 1, 0, size - 1)
    return lo, hi


def compute_energy(pixels: np.ndarray, width: Optional[int] = None,
                   height: Optional[int] = None) -> np.ndarray:
    """Compute the energy map of the logical region of an RGB buffer.

    :param pixels: An RGB buffer of shape (H, W, 3).
    :param width: Logical width, defaults to the buffer width. Columns beyond
        it are never read.
    :param height: Logical height, defaults to the buffer height.
    :return: A float64 energy map of shape (height, width).
    """
    assert pixels.ndim == 3
    buf_h, buf_w = pixels.shape[:2]
    width = buf_w if width is None else width
    height = buf_h if height is None else height
    if width < 1 or height < 1 or width > buf_w or height > buf_h:
        raise DegenerateGridError(
            'Invalid logical size {}x{} for a buffer of {}x{}'.format(
                width, height, buf_w, buf_h))

    region = pixels[:height, :width].astype(np.int64)

    lo, hi = _sample_pairs(width)
    diff_x = region[:, hi] - region[:, lo]
    grad_x = (diff_x * diff_x).sum(axis=2)

    lo, hi = _sample_pairs(height)
    diff_y = region[hi] - region[lo]
    grad_y = (diff_y * diff_y).sum(axis=2)

    return np.sqrt((grad_x + grad_y).astype(np.float64))


def energy_to_image(energy: np.ndarray,
                    max_energy: Optional[float] = None) -> np.ndarray:
    """Render an energy map as a grayscale intensity image.

    Intensities are scaled linearly so that ``max_energy`` (the maximum of the
    map by default) maps to 255. A map without any energy renders black.
    """
    energy = np.asarray(energy, dtype=np.float64)
    if energy.ndim != 2 or energy.size == 0:
        raise DegenerateGridError('Invalid energy of shape {}: expected a '
                                  'non-empty 2D map'.format(energy.shape))
    if max_energy is None:
        max_energy = float(energy.max())
    if max_energy <= 0:
        return np.zeros(energy.shape, dtype=np.uint8)
    intensity = 255 * np.clip(energy, 0, max_energy) / max_energy
    return intensity.astype(np.uint8)
