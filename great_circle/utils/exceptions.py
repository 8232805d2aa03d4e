"""
Custom exception hierarchy for great-circle.

All custom exceptions inherit from GreatCircleError for easy catching.
"""
from typing import Optional


class GreatCircleError(Exception):
    """Base exception for all great-circle errors."""
    pass


class ConfigurationError(GreatCircleError):
    """Configuration-related errors.

    Raised when a route configuration cannot be loaded or validated.

    Example:
        >>> raise ConfigurationError("Invalid route config: missing 'origin' field")
    """
    pass


class GeometryError(GreatCircleError):
    """Geometric calculation errors.

    Base class for failures raised while building coordinates or paths.
    """
    pass


class LatitudeRangeError(GeometryError, ValueError):
    """Latitude outside the range [-90, 90].

    Attributes:
        latitude: The rejected latitude in degrees
    """

    def __init__(self, message: str, latitude: Optional[float] = None):
        super().__init__(message)
        self.latitude = latitude

    def __str__(self):
        base = super().__str__()
        if self.latitude is not None:
            return f"{base} (latitude={self.latitude})"
        return base


class UnsupportedPathError(GeometryError, NotImplementedError):
    """Great circle path that the ascending-node decomposition cannot handle.

    Raised for paths starting at a pole, purely meridional paths and
    endpoints that do not define a unique path.

    Attributes:
        reason: Short tag for the limitation ('polar', 'meridional', 'antipodal')
    """

    def __init__(self, message: str, reason: Optional[str] = None):
        super().__init__(message)
        self.reason = reason

    def __str__(self):
        base = super().__str__()
        if self.reason:
            return f"{base} (reason={self.reason})"
        return base


class AntipodalPointsError(UnsupportedPathError):
    """Endpoints are antipodal, so the great circle between them is not unique.

    Example:
        >>> raise AntipodalPointsError("Points are antipodal")
    """

    def __init__(self, message: str):
        super().__init__(message, reason="antipodal")
