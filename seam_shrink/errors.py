class SeamCarvingError(ValueError):
    """Base class for all errors raised by seam_shrink"""


class InvalidDimensionError(SeamCarvingError):
    """Requested seam count does not fit the source dimensions"""


class DegenerateGridError(SeamCarvingError):
    """Grid, energy matrix or seam has an empty or malformed extent"""
