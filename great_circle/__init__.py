"""
Spherical geometry toolkit.

Points on a sphere and directed great circle paths between them: antipodes,
bearings, displacement along a path, and the path and central angle
connecting two points.

Example:
    >>> from great_circle import Coordinate, GreatCirclePath
    >>> valparaiso = Coordinate(-33.0, -71.6)
    >>> shanghai = Coordinate(31.4, 121.8)
    >>> path, angle = GreatCirclePath.path_and_angle_between_points(valparaiso, shanghai)
    >>> target, final_azimuth = path.displace_by_angle(angle)
    >>> target.is_close_to(shanghai)
    True
"""
from great_circle.core import (
    Coordinate,
    GreatCirclePath,
    Displacement,
    PathAndAngle,
    ToleranceDefaults,
    is_close_to,
    are_close,
)
from great_circle.utils.exceptions import (
    GreatCircleError,
    GeometryError,
    LatitudeRangeError,
    UnsupportedPathError,
    AntipodalPointsError,
)
from great_circle.utils.logging_config import configure_library_logging

__version__ = "0.1.0"

configure_library_logging()

__all__ = [
    'Coordinate',
    'GreatCirclePath',
    'Displacement',
    'PathAndAngle',
    'ToleranceDefaults',
    'is_close_to',
    'are_close',
    'GreatCircleError',
    'GeometryError',
    'LatitudeRangeError',
    'UnsupportedPathError',
    'AntipodalPointsError',
]
