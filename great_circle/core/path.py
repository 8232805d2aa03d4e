"""
Great circle paths on a sphere.

A path is a great circle together with a starting point and a direction of
travel. Every path is parameterized from its ascending node, the point
where it crosses the equator heading north: with the node azimuth and the
central angle measured from the node, positions and headings along the path
follow from right spherical triangles without re-solving the general
spherical laws of sines and cosines for each query.

References:
    https://en.wikipedia.org/wiki/Great-circle_navigation
"""
import math
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Tuple

from great_circle.core.angles import (
    DEGREE,
    atan2_to_degrees,
    normalize_to_azimuth,
    normalize_to_longitude,
    sin_cos_angle_from_atan2,
    sin_cos_with_degrees,
    to_format_spec,
)
from great_circle.core.coordinate import Coordinate
from great_circle.core.tolerance import is_close_to
from great_circle.utils.exceptions import AntipodalPointsError, UnsupportedPathError
from great_circle.utils.logging_config import get_logger

logger = get_logger(__name__)


class Displacement(NamedTuple):
    """Position and heading reached by travelling along a path."""
    coordinate: Coordinate
    azimuth: float


class PathAndAngle(NamedTuple):
    """Path connecting two points and the central angle between them."""
    path: "GreatCirclePath"
    angle: float


@dataclass(frozen=True)
class GreatCirclePath:
    """
    Directed great circle path with a designated starting point.

    The equator travelled eastward and westward are different paths, and so
    are two eastward equator paths starting at different longitudes.

    Paths starting at a pole, and purely meridional paths (azimuth a
    multiple of 180), are not supported.

    Attributes:
        initial_coordinate: Starting point of the path
        initial_azimuth: Heading at the starting point in degrees clockwise
            from north, normalized to (0, 360]
        node_azimuth: Heading at the ascending node
        node_longitude: Longitude of the ascending node
        node_angle: Central angle from the ascending node to the starting point

    Example:
        >>> path = GreatCirclePath(Coordinate(10, 70), 30)
        >>> str(path)
        '10.00° N, 70.00° E; 30.00°'
        >>> position, azimuth = path.displace_by_angle(45)
    """

    initial_coordinate: Coordinate
    initial_azimuth: float

    node_azimuth: float = field(init=False)
    node_longitude: float = field(init=False)
    node_angle: float = field(init=False)

    _sin_node_azi: float = field(init=False, repr=False, compare=False)
    _cos_node_azi: float = field(init=False, repr=False, compare=False)
    _tan_node_azi: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.initial_coordinate.is_a_pole():
            raise UnsupportedPathError(
                "Great circle paths starting at a pole are not supported",
                reason="polar",
            )

        initial_azimuth = normalize_to_azimuth(self.initial_azimuth)
        if any(is_close_to(initial_azimuth, meridional) for meridional in (0, 180, 360)):
            raise UnsupportedPathError(
                "Meridional great circle paths are not supported",
                reason="meridional",
            )
        object.__setattr__(self, 'initial_azimuth', initial_azimuth)

        sin_init_lat, cos_init_lat = sin_cos_with_degrees(self.initial_latitude)
        tan_init_lat = sin_init_lat / cos_init_lat
        sin_init_azi, cos_init_azi = sin_cos_with_degrees(initial_azimuth)

        # Ascending node heading (Clairaut: sin(azimuth) * cos(latitude) is constant)
        sin_node_azi = sin_init_azi * cos_init_lat
        cos_node_azi = math.sqrt(1 - sin_node_azi * sin_node_azi)
        if cos_node_azi:
            tan_node_azi = sin_node_azi / cos_node_azi
        else:
            # Equator travelled due east or west
            tan_node_azi = math.copysign(math.inf, sin_node_azi)
        node_azimuth = normalize_to_azimuth(atan2_to_degrees(sin_node_azi, cos_node_azi))

        sin_node_angle, cos_node_angle, node_angle = sin_cos_angle_from_atan2(
            tan_init_lat, cos_init_azi
        )
        node_lon_diff = atan2_to_degrees(sin_node_azi * sin_node_angle, cos_node_angle)
        node_longitude = normalize_to_longitude(self.initial_longitude - node_lon_diff)

        object.__setattr__(self, 'node_azimuth', node_azimuth)
        object.__setattr__(self, 'node_longitude', node_longitude)
        object.__setattr__(self, 'node_angle', node_angle)
        object.__setattr__(self, '_sin_node_azi', sin_node_azi)
        object.__setattr__(self, '_cos_node_azi', cos_node_azi)
        object.__setattr__(self, '_tan_node_azi', tan_node_azi)

    @classmethod
    def from_lat_lon(
        cls, initial_latitude: float, initial_longitude: float, initial_azimuth: float
    ) -> "GreatCirclePath":
        """Build a path from the starting latitude, longitude and azimuth."""
        return cls(Coordinate(initial_latitude, initial_longitude), initial_azimuth)

    @property
    def initial_latitude(self) -> float:
        return self.initial_coordinate.latitude

    @property
    def initial_longitude(self) -> float:
        return self.initial_coordinate.longitude

    def displace_by_angle(self, angle: float) -> Displacement:
        """
        Find the point a given central angle along the path from the start.

        Args:
            angle: Central angle from the starting point in degrees;
                negative values travel backwards along the path

        Returns:
            Displacement with the new coordinate and the azimuth of the
            path there, normalized to (0, 360]

        Example:
            >>> path = GreatCirclePath(Coordinate.ORIGIN, 90)
            >>> position, azimuth = path.displace_by_angle(30)
            >>> print(position, azimuth)
            0.00° N, 30.00° E 90.0
        """
        sin_angle, cos_angle = sin_cos_with_degrees(angle + self.node_angle)

        sin_lat = self._cos_node_azi * sin_angle
        cos_lat = math.sqrt(1 - sin_lat * sin_lat)
        latitude = atan2_to_degrees(sin_lat, cos_lat)

        lon_diff = atan2_to_degrees(self._sin_node_azi * sin_angle, cos_angle)
        longitude = lon_diff + self.node_longitude

        azimuth = atan2_to_degrees(self._tan_node_azi, cos_angle)
        return Displacement(Coordinate(latitude, longitude), normalize_to_azimuth(azimuth))

    def displace_to_longitude(self, longitude: float) -> Tuple[float, float]:
        """
        Find where the path crosses a given meridian.

        A non-meridional great circle crosses every meridian exactly once,
        so the point is unique.

        Args:
            longitude: Longitude of the meridian in degrees E

        Returns:
            Tuple of (latitude, azimuth) of the path at that longitude,
            azimuth normalized to (0, 360]
        """
        sin_lon_diff, cos_lon_diff = sin_cos_with_degrees(longitude - self.node_longitude)

        # tan(latitude) = sin(longitude from node) / tan(node azimuth)
        latitude = atan2_to_degrees(sin_lon_diff / self._tan_node_azi, 1.0)

        # cos(central angle from node) = cos(longitude from node) * cos(latitude)
        cos_angle = cos_lon_diff * math.cos(math.radians(latitude))
        azimuth = atan2_to_degrees(self._tan_node_azi, cos_angle)
        return latitude, normalize_to_azimuth(azimuth)

    @staticmethod
    def path_and_angle_between_points(
        initial: Coordinate, final: Coordinate
    ) -> PathAndAngle:
        """
        Construct the great circle path between two points.

        Args:
            initial: Starting point
            final: Ending point

        Returns:
            PathAndAngle with the path starting at ``initial`` heading toward
            ``final`` and the central angle between them in degrees

        Raises:
            AntipodalPointsError: If the points are antipodal, since the great
                circle path between them is not unique
            UnsupportedPathError: If either point is a pole or the points lie
                on a meridional great circle

        Example:
            >>> valparaiso = Coordinate(-33.0, -71.6)
            >>> shanghai = Coordinate(31.4, 121.8)
            >>> path, angle = GreatCirclePath.path_and_angle_between_points(
            ...     valparaiso, shanghai
            ... )
            >>> f"{angle:.2f}"
            '168.56'
        """
        if initial.is_antipodal_to(final):
            logger.debug("path_rejected", reason="antipodal", initial=str(initial), final=str(final))
            raise AntipodalPointsError(
                "The given points are antipodal; "
                "the great circle path between them is not unique"
            )
        if initial.is_a_pole() or final.is_a_pole():
            logger.debug("path_rejected", reason="polar", initial=str(initial), final=str(final))
            raise UnsupportedPathError(
                "Great circle paths through the poles are not supported",
                reason="polar",
            )

        lon_diff = final.longitude - initial.longitude
        lon_diff_mod = lon_diff % 180
        if is_close_to(lon_diff_mod, 0) or is_close_to(lon_diff_mod, 180):
            logger.debug("path_rejected", reason="meridional", initial=str(initial), final=str(final))
            raise UnsupportedPathError(
                "Meridional great circle paths are not supported",
                reason="meridional",
            )

        sin_lon_diff, cos_lon_diff = sin_cos_with_degrees(lon_diff)
        sin_init_lat, cos_init_lat = sin_cos_with_degrees(initial.latitude)
        sin_final_lat, cos_final_lat = sin_cos_with_degrees(final.latitude)

        # Initial bearing
        y = cos_final_lat * sin_lon_diff
        x = cos_init_lat * sin_final_lat - sin_init_lat * cos_final_lat * cos_lon_diff
        initial_azimuth = atan2_to_degrees(y, x)

        # Central angle
        y = math.hypot(y, x)
        x = sin_init_lat * sin_final_lat + cos_init_lat * cos_final_lat * cos_lon_diff
        angle = atan2_to_degrees(y, x)

        path = GreatCirclePath(initial, initial_azimuth)
        logger.debug(
            "path_solved",
            initial=str(initial),
            final=str(final),
            initial_azimuth=path.initial_azimuth,
            central_angle=angle,
        )
        return PathAndAngle(path, angle)

    def to_string(self, fmt: Optional[str] = None) -> str:
        """
        Format the path, e.g. ``"75.00° N, 10.00° E; 30.00°"``.

        Args:
            fmt: Numeric format used for latitude, longitude and azimuth
        """
        spec = to_format_spec(fmt)
        return f"{self.initial_coordinate.to_string(spec)}; {self.initial_azimuth:{spec}}{DEGREE}"

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec)
