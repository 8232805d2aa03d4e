"""
Coordinates (latitude/longitude locations) on a sphere.
"""
import math
from dataclasses import dataclass
from typing import ClassVar, Optional

from great_circle.core.angles import DEGREE, normalize_to_longitude, to_format_spec
from great_circle.core.tolerance import ToleranceDefaults, are_close, is_close_to
from great_circle.utils.exceptions import LatitudeRangeError


@dataclass(frozen=True)
class Coordinate:
    """
    A location on a sphere given by latitude and longitude in degrees.

    Latitude must lie in [-90, 90]. Any finite longitude is accepted and stored
    normalized to [-180, 180). Longitude is meaningless at the poles but
    must still be given; comparisons ignore it there.

    Attributes:
        latitude: Latitude in degrees N
        longitude: Longitude in degrees E

    Example:
        >>> valparaiso = Coordinate(-33.0, -71.6)
        >>> print(valparaiso)
        33.00° S, 71.60° W
        >>> f"{Coordinate(75, 10):F0}"
        '75° N, 10° E'
    """

    NORTH_POLE: ClassVar["Coordinate"]
    SOUTH_POLE: ClassVar["Coordinate"]
    ORIGIN: ClassVar["Coordinate"]

    latitude: float
    longitude: float

    def __post_init__(self):
        # Also rejects NaN
        if not -90 <= self.latitude <= 90:
            raise LatitudeRangeError(
                "The latitude must be between -90 and 90", latitude=self.latitude
            )
        if not math.isfinite(self.longitude):
            raise ValueError(f"The longitude must be finite, got {self.longitude}")
        object.__setattr__(self, 'latitude', float(self.latitude))
        object.__setattr__(self, 'longitude', normalize_to_longitude(self.longitude))

    def is_a_pole(self) -> bool:
        """Whether the latitude is sufficiently close to 90 or -90."""
        return is_close_to(abs(self.latitude), 90)

    def antipode(self) -> "Coordinate":
        """The point diametrically opposite this one."""
        return Coordinate(-self.latitude, self.longitude + 180)

    def is_close_to(
        self,
        other: "Coordinate",
        relative_tolerance: float = ToleranceDefaults.RELATIVE,
        absolute_tolerance: float = ToleranceDefaults.ABSOLUTE,
    ) -> bool:
        """
        Check whether another coordinate is sufficiently close to this one.

        Latitudes are compared symmetrically. Longitudes are skipped when
        either point is a pole; otherwise their difference, wrapped into
        [-180, 180), must be close to zero so that points either side of
        the date line still compare equal.

        Args:
            other: Coordinate to compare against
            relative_tolerance: Relative tolerance for the comparisons
            absolute_tolerance: Absolute tolerance for the comparisons

        Returns:
            True if the two coordinates describe (nearly) the same point
        """
        result = are_close(
            self.latitude, other.latitude, relative_tolerance, absolute_tolerance
        )
        # Polar points can have any longitude
        if self.is_a_pole() or other.is_a_pole():
            return result

        lon_diff = normalize_to_longitude(self.longitude - other.longitude)
        return result and is_close_to(lon_diff, 0.0, relative_tolerance, absolute_tolerance)

    def is_antipodal_to(self, other: "Coordinate") -> bool:
        """Whether another coordinate is (nearly) antipodal to this one."""
        return other.is_close_to(self.antipode())

    def to_string(self, fmt: Optional[str] = None) -> str:
        """
        Format the coordinate, e.g. ``"75.00° N, 10.00° E"``.

        Args:
            fmt: Numeric format for both values, either a Python format
                spec (".1f") or fixed-point shorthand ("F1"). Defaults to
                two decimals.
        """
        spec = to_format_spec(fmt)
        north_or_south = "N" if self.latitude >= 0 else "S"
        east_or_west = "E" if self.longitude >= 0 else "W"
        return (
            f"{abs(self.latitude):{spec}}{DEGREE} {north_or_south}, "
            f"{abs(self.longitude):{spec}}{DEGREE} {east_or_west}"
        )

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec)


Coordinate.NORTH_POLE = Coordinate(90, 0)
Coordinate.SOUTH_POLE = Coordinate(-90, 0)
Coordinate.ORIGIN = Coordinate(0, 0)
