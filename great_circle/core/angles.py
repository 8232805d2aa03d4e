"""
Angle helpers for spherical geometry.

Provides normalization into the azimuth, longitude and latitude conventions,
degree-based trigonometry shortcuts, degree/minute/second decomposition and
the numeric format handling shared by the string representations.

Conventions:
    - Azimuth: degrees clockwise from north, in (0, 360]
    - Longitude: degrees east, in [-180, 180)
    - Latitude: degrees north, in [-90, 90]
"""
import math
import re
from typing import Optional, Tuple


DEGREE = "°"
MINUTE = "'"
SECOND = '"'

DEFAULT_FORMAT = ".2f"

# "F2" style fixed-point shorthand
_FIXED_POINT_SHORTHAND = re.compile(r"^[Ff](\d*)$")


def normalize_to_azimuth(angle: float) -> float:
    """
    Normalize an angle to the azimuth range (0, 360].

    A full turn is reported as 360 rather than 0.

    Example:
        >>> normalize_to_azimuth(-90)
        270.0
        >>> normalize_to_azimuth(720)
        360.0
    """
    value = angle % 360
    if value == 0:
        return 360.0
    return float(value)


def normalize_to_longitude(angle: float) -> float:
    """
    Normalize an angle to the longitude range [-180, 180).

    Example:
        >>> normalize_to_longitude(180)
        -180.0
        >>> normalize_to_longitude(410)
        50.0
    """
    value = normalize_to_azimuth(angle)
    if value >= 180:
        value -= 360
    return value


def normalize_to_latitude(angle: float) -> float:
    """
    Normalize an angle to the latitude range [-90, 90].

    Values beyond a pole continue over the top of the sphere, so 110
    becomes 70 and -110 becomes -70.

    Example:
        >>> normalize_to_latitude(110)
        70.0
    """
    value = normalize_to_longitude(angle)
    if abs(value) <= 90:
        return value
    return math.copysign(180.0, value) - value


def sin_cos_with_degrees(angle: float) -> Tuple[float, float]:
    """
    Compute the sine and cosine of an angle given in degrees.

    Returns:
        Tuple of (sin, cos)
    """
    radians = math.radians(angle)
    return math.sin(radians), math.cos(radians)


def atan2_to_degrees(y: float, x: float) -> float:
    """Quadrant-correct arctangent of y/x in degrees."""
    return math.degrees(math.atan2(y, x))


def sin_cos_angle_from_atan2(y: float, x: float) -> Tuple[float, float, float]:
    """
    Compute the angle atan2(y, x) together with its sine and cosine.

    The sine and cosine come straight from the normalized (y, x) pair
    instead of being re-evaluated from the angle.

    Args:
        y: Unnormalized numerator
        x: Unnormalized denominator

    Returns:
        Tuple of (sin, cos, angle_degrees)
    """
    norm = math.hypot(y, x)
    return y / norm, x / norm, atan2_to_degrees(y, x)


def degrees_to_degree_minutes(angle: float) -> Tuple[int, float]:
    """
    Split an angle into whole degrees and decimal minutes.

    Degrees are truncated toward zero and carry the sign; minutes are
    always non-negative.

    Example:
        >>> degrees_to_degree_minutes(-120.5)
        (-120, 30.0)
    """
    degrees = int(angle)
    minutes = abs((angle - degrees) * 60)
    return degrees, minutes


def degrees_to_degree_seconds(angle: float) -> Tuple[int, int, float]:
    """
    Split an angle into whole degrees, whole minutes and decimal seconds.

    Example:
        >>> degrees_to_degree_seconds(-120.75)
        (-120, 45, 0.0)
    """
    degrees = int(angle)
    fraction = abs(angle - degrees)
    minutes = int(fraction * 60)
    seconds = (fraction * 60 - minutes) * 60
    return degrees, minutes, seconds


def to_string_nearest_degree(angle: float) -> str:
    """Render an angle as whole degrees, e.g. ``120°``."""
    return f"{int(angle)}{DEGREE}"


def to_string_nearest_minute(angle: float) -> str:
    """Render an angle as degrees and whole minutes, e.g. ``120°52'``."""
    degrees, minutes = degrees_to_degree_minutes(angle)
    return f"{degrees}{DEGREE}{int(minutes)}{MINUTE}"


def to_string_nearest_second(angle: float) -> str:
    """Render an angle as degrees, minutes and whole seconds, e.g. ``120°52'12"``."""
    degrees, minutes, seconds = degrees_to_degree_seconds(angle)
    return f"{degrees}{DEGREE}{minutes}{MINUTE}{int(seconds)}{SECOND}"


def to_format_spec(fmt: Optional[str] = None) -> str:
    """
    Translate a numeric format into a Python format spec.

    Accepts either a Python format spec (``".1f"``) or the fixed-point
    shorthand ``"F<digits>"`` (``"F0"`` becomes ``".0f"``, a bare ``"F"``
    uses two decimals). Empty values give the default ``".2f"``.

    Raises:
        ValueError: If the spec cannot format a float

    Example:
        >>> to_format_spec("F3")
        '.3f'
        >>> to_format_spec("")
        '.2f'
    """
    if not fmt:
        return DEFAULT_FORMAT

    match = _FIXED_POINT_SHORTHAND.match(fmt)
    if match:
        digits = match.group(1) or "2"
        return f".{int(digits)}f"

    # Raises ValueError for anything float.__format__ rejects
    format(0.0, fmt)
    return fmt
