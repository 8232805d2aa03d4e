"""
Core spherical geometry: tolerances, angle helpers, coordinates and
great circle paths.
"""
from great_circle.core.tolerance import (
    ToleranceDefaults,
    is_close_to,
    are_close,
)
from great_circle.core.angles import (
    DEGREE,
    MINUTE,
    SECOND,
    normalize_to_azimuth,
    normalize_to_longitude,
    normalize_to_latitude,
    sin_cos_with_degrees,
    atan2_to_degrees,
    sin_cos_angle_from_atan2,
    degrees_to_degree_minutes,
    degrees_to_degree_seconds,
    to_string_nearest_degree,
    to_string_nearest_minute,
    to_string_nearest_second,
    to_format_spec,
)
from great_circle.core.coordinate import Coordinate
from great_circle.core.path import (
    GreatCirclePath,
    Displacement,
    PathAndAngle,
)

__all__ = [
    'ToleranceDefaults',
    'is_close_to',
    'are_close',
    'DEGREE',
    'MINUTE',
    'SECOND',
    'normalize_to_azimuth',
    'normalize_to_longitude',
    'normalize_to_latitude',
    'sin_cos_with_degrees',
    'atan2_to_degrees',
    'sin_cos_angle_from_atan2',
    'degrees_to_degree_minutes',
    'degrees_to_degree_seconds',
    'to_string_nearest_degree',
    'to_string_nearest_minute',
    'to_string_nearest_second',
    'to_format_spec',
    'Coordinate',
    'GreatCirclePath',
    'Displacement',
    'PathAndAngle',
]
