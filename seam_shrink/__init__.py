__version__ = "0.1.0"

from .carve import (HEIGHT_FIRST, VALID_ORDERS, WIDTH_FIRST,
                    remove_horizontal_seam, remove_vertical_seam, resize)
from .energy import MAX_ENERGY, compute_energy, energy_to_image
from .errors import (DegenerateGridError, InvalidDimensionError,
                     SeamCarvingError)
from .grid import PixelGrid
from .seam import (HORIZONTAL, VALID_DIRECTIONS, VERTICAL, find_seam,
                   find_seam_cost)
