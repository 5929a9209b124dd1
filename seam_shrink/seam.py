"""Minimum-energy seams by dynamic programming.

A single routine finds top-to-bottom seams. Left-to-right seams are found by
running it over the transposed energy map, so a horizontal seam holds one row
index per column.
"""

import numpy as np

from .errors import DegenerateGridError

VERTICAL = 'vertical'
HORIZONTAL = 'horizontal'
VALID_DIRECTIONS = (VERTICAL, HORIZONTAL)


def _check_energy(energy: np.ndarray) -> np.ndarray:
    """Ensure the energy to be a non-empty 2D map"""
    energy = np.asarray(energy, dtype=np.float64)
    if energy.ndim != 2 or energy.size == 0:
        raise DegenerateGridError('Invalid energy of shape {}: expected a '
                                  'non-empty 2D map'.format(energy.shape))
    return energy


def _oriented(energy: np.ndarray, direction: str) -> np.ndarray:
    if direction not in VALID_DIRECTIONS:
        raise ValueError('Invalid direction {}: expected {}'.format(
            direction, VALID_DIRECTIONS))
    return energy if direction == VERTICAL else energy.T


def _get_seam(energy: np.ndarray) -> np.ndarray:
    """Compute the minimum top-to-bottom seam of a 2D energy view.

    Cumulative costs and parent columns live in two flat row-major tables.
    Among equal predecessors the left one wins over the middle one, which
    wins over the right one; at the borders the missing neighbour is replaced
    by the clamped column.
    """
    h, w = energy.shape
    cost = np.empty(h * w, dtype=np.float64)
    parent = np.zeros(h * w, dtype=np.int32)
    cost[:w] = energy[0]

    cols = np.arange(w, dtype=np.int32)
    left = np.maximum(cols - 1, 0)
    right = np.minimum(cols + 1, w - 1)

    for r in range(1, h):
        prev = cost[(r - 1) * w:r * w]
        # argmin keeps the first minimum: left, then middle, then right
        pick = np.argmin(np.vstack((prev[left], prev, prev[right])), axis=0)
        pred = np.choose(pick, (left, cols, right))
        parent[r * w:(r + 1) * w] = pred
        cost[r * w:(r + 1) * w] = prev[pred] + energy[r]

    c = int(np.argmin(cost[(h - 1) * w:]))
    seam = np.empty(h, dtype=np.int32)
    for r in range(h - 1, -1, -1):
        seam[r] = c
        c = parent[r * w + c]

    return seam


def find_seam(energy: np.ndarray, direction: str = VERTICAL) -> np.ndarray:
    """Find the connected seam of minimum total energy.

    :param energy: A 2D energy map of shape (H, W).
    :param direction: ``vertical`` for a top-to-bottom seam holding one column
        index per row, or ``horizontal`` for a left-to-right seam holding one
        row index per column.
    :return: The seam indices. Adjacent entries differ by at most 1.
    """
    energy = _check_energy(energy)
    return _get_seam(_oriented(energy, direction))


def find_seam_cost(energy: np.ndarray, seam: np.ndarray,
                   direction: str = VERTICAL) -> float:
    """Sum the energy of the pixels along a seam"""
    energy = _oriented(_check_energy(energy), direction)
    seam = np.asarray(seam, dtype=np.int64)
    assert seam.shape == (energy.shape[0],)
    return float(energy[np.arange(seam.size), seam].sum())
