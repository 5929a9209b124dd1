import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from .grid import PixelGrid

logger = logging.getLogger(__name__)


def load_grid(path: Union[str, Path]) -> PixelGrid:
    """Load an image file as an RGB pixel grid"""
    logger.info('Loading source image from %s', path)
    with Image.open(path) as img:
        src = np.asarray(img.convert('RGB'))
    return PixelGrid.from_array(src)


def save_grid(grid: Union[PixelGrid, np.ndarray], path: Union[str, Path]):
    """Save a pixel grid or an RGB/grayscale image array to an image file.

    The file format is chosen by Pillow from the file suffix. Missing parent
    directories are created.
    """
    dst = grid.crop() if isinstance(grid, PixelGrid) else np.asarray(
        grid, dtype=np.uint8)
    logger.info('Saving output image to %s', path)
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(dst).save(path)
