from typing import Optional

import numpy as np

from .errors import DegenerateGridError


def _check_src(src: np.ndarray) -> np.ndarray:
    """Ensure the source to be a non-empty RGB image"""
    src = np.asarray(src, dtype=np.uint8)
    if src.size == 0 or src.ndim != 3 or src.shape[2] != 3:
        raise DegenerateGridError('Invalid src of shape {}: expected a '
                                  'non-empty 3D RGB image'.format(src.shape))
    return src


class PixelGrid:
    """A fixed-capacity RGB buffer with a shrinking logical extent.

    Seam removal compacts pixels towards the top-left corner of ``pixels`` and
    decrements ``width`` or ``height``. Whatever lies outside the logical
    region is stale and must not be read; use :meth:`view` or :meth:`crop`.
    """

    def __init__(self, pixels: np.ndarray, width: Optional[int] = None,
                 height: Optional[int] = None):
        assert pixels.ndim == 3 and pixels.dtype == np.uint8
        cap_h, cap_w, _ = pixels.shape
        self.pixels = pixels
        self.width = cap_w if width is None else width
        self.height = cap_h if height is None else height
        if not (1 <= self.width <= cap_w and 1 <= self.height <= cap_h):
            raise DegenerateGridError(
                'Invalid logical size {}x{}: expected within 1x1 and the '
                'capacity {}x{}'.format(self.width, self.height, cap_w, cap_h))

    @classmethod
    def from_array(cls, src: np.ndarray) -> 'PixelGrid':
        """Create a grid owning a private copy of an RGB image array"""
        src = _check_src(src)
        return cls(np.array(src, dtype=np.uint8, copy=True))

    @property
    def size(self):
        return self.width, self.height

    def view(self) -> np.ndarray:
        """The logical region, sharing memory with the buffer"""
        return self.pixels[:self.height, :self.width]

    def crop(self) -> np.ndarray:
        """A contiguous copy of the logical region"""
        return self.view().copy()

    def __repr__(self):
        cap_h, cap_w, _ = self.pixels.shape
        return '{}(size={}x{}, capacity={}x{})'.format(
            type(self).__name__, self.width, self.height, cap_w, cap_h)
