"""Error kinds raised by the CMAC core."""


class CMACError(Exception):
    """Base class for CMAC failures."""


class InvalidParametersError(CMACError, ValueError):
    """Raised for invalid hyperparameters, bounds, or datasets."""


class IndexOutOfRangeError(CMACError, IndexError):
    """Raised when an association index or weight window leaves the weight array."""


class DegenerateInterpolationError(CMACError, ZeroDivisionError):
    """Raised when an input sits exactly on a clamped grid point (zero total distance)."""
