import logging
from typing import Union

import numpy as np
from numba import njit

from .energy import compute_energy
from .errors import DegenerateGridError, InvalidDimensionError
from .grid import PixelGrid
from .seam import HORIZONTAL, VERTICAL, find_seam, find_seam_cost

logger = logging.getLogger(__name__)

WIDTH_FIRST = 'width-first'
HEIGHT_FIRST = 'height-first'
VALID_ORDERS = (WIDTH_FIRST, HEIGHT_FIRST)


@njit
def _shift_rows_left(pixels, seam, width, height):
    """Drop pixel seam[r] of every row, moving its right part one step left"""
    channels = pixels.shape[2]
    for r in range(height):
        for c in range(seam[r], width - 1):
            for k in range(channels):
                pixels[r, c, k] = pixels[r, c + 1, k]


def _check_seam(seam: np.ndarray, length: int, extent: int) -> np.ndarray:
    """Ensure the seam to cover ``length`` lines within ``[0, extent)``"""
    seam = np.asarray(seam)
    if seam.ndim != 1 or seam.size != length:
        raise ValueError('Invalid seam of shape {}: expected {} '
                         'indices'.format(seam.shape, length))
    if not np.issubdtype(seam.dtype, np.integer):
        raise ValueError('Invalid seam of dtype {}: expected integer '
                         'indices'.format(seam.dtype))
    seam = seam.astype(np.int64)
    if seam.min() < 0 or seam.max() >= extent:
        raise ValueError('Invalid seam: indices must lie within [0, {})'
                         .format(extent))
    return seam


def remove_vertical_seam(pixels: np.ndarray, seam: np.ndarray, width: int,
                         height: int) -> int:
    """Remove a vertical seam in place and return the new logical width.

    Pixels right of the seam move one column left. The last logical column of
    the buffer is left stale.
    """
    assert pixels.ndim == 3
    if width < 2 or height < 1:
        raise DegenerateGridError('Cannot remove a vertical seam from a {}x{} '
                                  'grid: expected width >= 2'.format(width,
                                                                     height))
    if width > pixels.shape[1] or height > pixels.shape[0]:
        raise DegenerateGridError(
            'Invalid logical size {}x{} for a buffer of {}x{}'.format(
                width, height, pixels.shape[1], pixels.shape[0]))
    seam = _check_seam(seam, height, width)
    _shift_rows_left(pixels, seam, width, height)
    return width - 1


def remove_horizontal_seam(pixels: np.ndarray, seam: np.ndarray, width: int,
                           height: int) -> int:
    """Remove a horizontal seam in place and return the new logical height.

    Pixels below the seam move one row up. The last logical row of the buffer
    is left stale.
    """
    assert pixels.ndim == 3
    if height < 2 or width < 1:
        raise DegenerateGridError('Cannot remove a horizontal seam from a '
                                  '{}x{} grid: expected height >= 2'.format(
                                      width, height))
    if width > pixels.shape[1] or height > pixels.shape[0]:
        raise DegenerateGridError(
            'Invalid logical size {}x{} for a buffer of {}x{}'.format(
                width, height, pixels.shape[1], pixels.shape[0]))
    seam = _check_seam(seam, width, height)
    _shift_rows_left(pixels.transpose((1, 0, 2)), seam, height, width)
    return height - 1


def _reduce_width(grid: PixelGrid, delta_width: int) -> None:
    """Remove delta_width vertical seams from the grid"""
    for i in range(delta_width):
        energy = compute_energy(grid.pixels, grid.width, grid.height)
        seam = find_seam(energy, VERTICAL)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('vertical seam %d/%d: energy %.2f', i + 1,
                         delta_width, find_seam_cost(energy, seam, VERTICAL))
        grid.width = remove_vertical_seam(grid.pixels, seam, grid.width,
                                          grid.height)


def _reduce_height(grid: PixelGrid, delta_height: int) -> None:
    """Remove delta_height horizontal seams from the grid"""
    for i in range(delta_height):
        energy = compute_energy(grid.pixels, grid.width, grid.height)
        seam = find_seam(energy, HORIZONTAL)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('horizontal seam %d/%d: energy %.2f', i + 1,
                         delta_height, find_seam_cost(energy, seam, HORIZONTAL))
        grid.height = remove_horizontal_seam(grid.pixels, seam, grid.width,
                                             grid.height)


def _check_count(count: int, name: str, extent: int, dimension: str) -> int:
    """Ensure a seam count to be an integer within [0, extent)"""
    try:
        valid = not isinstance(count, bool) and int(count) == count
    except (TypeError, ValueError):
        valid = False
    if not valid:
        raise InvalidDimensionError('Invalid {} {!r}: expected an '
                                    'integer'.format(name, count))
    count = int(count)
    if count < 0:
        raise InvalidDimensionError('Invalid {} {}: expected >= 0'.format(
            name, count))
    if count >= extent:
        raise InvalidDimensionError(
            'Invalid {} {}: expected less than the source {} '
            '(< {})'.format(name, count, dimension, extent))
    return count


def resize(src: Union[np.ndarray, PixelGrid], remove_width: int = 0,
           remove_height: int = 0, order: str = WIDTH_FIRST) -> np.ndarray:
    """Shrink an image using the content-aware seam-carving algorithm.

    The energy map is recomputed from scratch before every seam. All seams of
    one direction are removed before any seam of the other direction.

    :param src: A source image in RGB format, or a PixelGrid whose logical
        region is used. The source is never modified.
    :param remove_width: The number of vertical seams to remove. Must be less
        than the source width.
    :param remove_height: The number of horizontal seams to remove. Must be
        less than the source height.
    :param order: The order to remove vertical and horizontal seams. Could be
        one of ``width-first`` or ``height-first``.
    :return: A resized copy of the source image.
    """
    if isinstance(src, PixelGrid):
        src = src.crop()
    grid = PixelGrid.from_array(src)
    src_w, src_h = grid.size

    remove_width = _check_count(remove_width, 'remove_width', src_w, 'width')
    remove_height = _check_count(remove_height, 'remove_height', src_h,
                                 'height')

    if order not in VALID_ORDERS:
        raise ValueError('Invalid order {}: expected {}'.format(
            order, VALID_ORDERS))

    logger.info('Carving %dx%d to %dx%d (%s)', src_w, src_h,
                src_w - remove_width, src_h - remove_height, order)

    if order == WIDTH_FIRST:
        _reduce_width(grid, remove_width)
        _reduce_height(grid, remove_height)
    else:
        _reduce_height(grid, remove_height)
        _reduce_width(grid, remove_width)

    assert grid.size == (src_w - remove_width, src_h - remove_height)
    return grid.crop()
