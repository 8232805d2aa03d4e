"""
Tests for GreatCirclePath.
"""
import math
import pytest
from great_circle.core.angles import normalize_to_longitude
from great_circle.core.coordinate import Coordinate
from great_circle.core.path import GreatCirclePath, Displacement, PathAndAngle
from great_circle.utils.exceptions import (
    AntipodalPointsError,
    GeometryError,
    UnsupportedPathError,
)


VALPARAISO = Coordinate(-33.0, -71.6)
SHANGHAI = Coordinate(31.4, 121.8)


def assert_same_heading(actual: float, expected: float, abs_tol: float = 1e-9):
    """Compare azimuths modulo 360."""
    assert normalize_to_longitude(actual - expected) == pytest.approx(0.0, abs=abs_tol)


class TestConstruction:
    """Tests for path construction and validation."""

    def test_initial_point_polar(self):
        """Paths starting at a pole are not supported."""
        with pytest.raises(UnsupportedPathError) as exc_info:
            GreatCirclePath(Coordinate.NORTH_POLE, 10)

        assert exc_info.value.reason == "polar"

    def test_initial_point_south_pole(self):
        """Unsupported paths are NotImplementedError and GeometryError."""
        with pytest.raises(NotImplementedError):
            GreatCirclePath(Coordinate.SOUTH_POLE, 10)
        with pytest.raises(GeometryError):
            GreatCirclePath(Coordinate(-90, 45), 10)

    def test_azimuth_northward(self):
        """Purely northward paths are not supported."""
        with pytest.raises(UnsupportedPathError) as exc_info:
            GreatCirclePath(Coordinate.ORIGIN, 0)

        assert exc_info.value.reason == "meridional"

    def test_azimuth_southward(self):
        """Purely southward paths are not supported."""
        with pytest.raises(UnsupportedPathError):
            GreatCirclePath(Coordinate.ORIGIN, 180)

    def test_azimuth_northward_wrapped(self):
        """An azimuth just short of a full turn is still northward."""
        with pytest.raises(UnsupportedPathError):
            GreatCirclePath(Coordinate.ORIGIN, 360 - 1e-8)

    @pytest.mark.parametrize("azimuth", [360, -180, 540, 720])
    def test_azimuth_meridional_multiples(self, azimuth):
        """Any multiple of 180 is meridional."""
        with pytest.raises(UnsupportedPathError):
            GreatCirclePath(Coordinate(20, 30), azimuth)

    def test_azimuth_normalized(self):
        """The initial azimuth is stored in (0, 360]."""
        assert GreatCirclePath(Coordinate(10, 70), -90).initial_azimuth == pytest.approx(270)
        assert GreatCirclePath(Coordinate(10, 70), 390).initial_azimuth == pytest.approx(30)

    def test_from_lat_lon(self):
        """The latitude/longitude constructor matches the coordinate one."""
        assert GreatCirclePath.from_lat_lon(10, 70, 30) == GreatCirclePath(Coordinate(10, 70), 30)

    def test_initial_latitude_and_longitude(self):
        """Initial latitude and longitude come from the coordinate."""
        path = GreatCirclePath.from_lat_lon(10, 70, 30)
        assert path.initial_latitude == 10
        assert path.initial_longitude == 70

    def test_deterministic(self):
        """Paths built from the same inputs are equal, derived fields included."""
        a = GreatCirclePath(VALPARAISO, 265.59)
        b = GreatCirclePath(Coordinate(-33.0, -71.6), 265.59)
        assert a == b
        assert a.node_longitude == b.node_longitude


class TestAscendingNode:
    """Tests for the derived ascending-node parameters."""

    def test_equator_eastward(self):
        """Eastward along the equator, the start is the node."""
        path = GreatCirclePath(Coordinate.ORIGIN, 90)
        assert path.node_azimuth == pytest.approx(90)
        assert path.node_angle == pytest.approx(0, abs=1e-12)
        assert path.node_longitude == pytest.approx(0, abs=1e-12)

    def test_node_on_equator(self):
        """Travelling back by the node angle lands on the equator at the node."""
        path = GreatCirclePath(Coordinate(40, -20), 60)
        node, azimuth = path.displace_by_angle(-path.node_angle)
        assert node.latitude == pytest.approx(0, abs=1e-9)
        assert node.longitude == pytest.approx(path.node_longitude)
        assert azimuth == pytest.approx(path.node_azimuth)

    def test_node_heads_north(self):
        """The node azimuth points into the northern half of the compass."""
        for azimuth in (30, 120, 230, 330):
            node_azimuth = GreatCirclePath(Coordinate(25, 40), azimuth).node_azimuth
            assert node_azimuth < 90 or node_azimuth > 270

    def test_clairaut_constant(self):
        """sin(azimuth) * cos(latitude) is the same at the start and the node."""
        path = GreatCirclePath(Coordinate(35, 10), 70)
        start = math.sin(math.radians(70)) * math.cos(math.radians(35))
        assert math.sin(math.radians(path.node_azimuth)) == pytest.approx(start)

    def test_valparaiso_node(self):
        """Node parameters for the trans-Pacific route."""
        path = GreatCirclePath(VALPARAISO, -94.413022)
        assert path.node_azimuth == pytest.approx(303.2607, abs=1e-3)
        assert path.node_angle == pytest.approx(-96.7572, abs=1e-3)
        assert path.node_longitude == pytest.approx(-169.6650, abs=1e-3)


class TestDisplaceByAngle:
    """Tests for displace_by_angle method."""

    def test_returns_displacement(self):
        """Result is a Displacement that unpacks to (coordinate, azimuth)."""
        result = GreatCirclePath(Coordinate(10, 70), 30).displace_by_angle(10)
        assert isinstance(result, Displacement)
        coordinate, azimuth = result
        assert isinstance(coordinate, Coordinate)
        assert coordinate == result.coordinate
        assert azimuth == result.azimuth

    @pytest.mark.parametrize("latitude,longitude,azimuth", [
        (10, 70, 30),
        (-33.0, -71.6, 265.59),
        (60, -120, 135),
        (-40, 10, 250),
        (0, 0, 45),
    ])
    def test_zero_displacement(self, latitude, longitude, azimuth):
        """Displacing by zero returns the starting point and heading."""
        path = GreatCirclePath(Coordinate(latitude, longitude), azimuth)
        coordinate, final_azimuth = path.displace_by_angle(0)
        assert coordinate.is_close_to(path.initial_coordinate)
        assert_same_heading(final_azimuth, path.initial_azimuth)

    def test_equator_eastward(self):
        """Eastward along the equator only the longitude changes."""
        path = GreatCirclePath(Coordinate.ORIGIN, 90)
        coordinate, azimuth = path.displace_by_angle(30)
        assert coordinate.latitude == pytest.approx(0, abs=1e-12)
        assert coordinate.longitude == pytest.approx(30)
        assert azimuth == pytest.approx(90)

    def test_equator_westward(self):
        """Westward along the equator the heading stays at 270."""
        path = GreatCirclePath(Coordinate(0, 10), 270)
        coordinate, azimuth = path.displace_by_angle(50)
        assert coordinate.latitude == pytest.approx(0, abs=1e-12)
        assert coordinate.longitude == pytest.approx(-40)
        assert azimuth == pytest.approx(270)

    def test_half_circle_reaches_antipode(self):
        """Travelling 180 degrees reaches the antipode heading the mirrored way."""
        start = Coordinate(10, 70)
        coordinate, azimuth = GreatCirclePath(start, 30).displace_by_angle(180)
        assert coordinate.is_antipodal_to(start)
        assert azimuth == pytest.approx(150)

    def test_full_circle_returns(self):
        """Travelling 360 degrees returns to the start."""
        path = GreatCirclePath(Coordinate(-25, 135), 300)
        coordinate, azimuth = path.displace_by_angle(360)
        assert coordinate.is_close_to(path.initial_coordinate)
        assert_same_heading(azimuth, path.initial_azimuth)

    def test_quarter_circle_from_equator(self):
        """Starting on the equator at 45 degrees, 90 degrees on reaches 45 N."""
        coordinate, azimuth = GreatCirclePath(Coordinate.ORIGIN, 45).displace_by_angle(90)
        assert coordinate.latitude == pytest.approx(45)
        assert coordinate.longitude == pytest.approx(90)
        assert azimuth == pytest.approx(90)

    def test_backwards(self):
        """Negative angles retrace the path."""
        path = GreatCirclePath(Coordinate(15, 25), 75)
        forward, forward_azimuth = path.displace_by_angle(40)
        back, back_azimuth = GreatCirclePath(forward, forward_azimuth).displace_by_angle(-40)
        assert back.is_close_to(path.initial_coordinate)
        assert_same_heading(back_azimuth, path.initial_azimuth)

    def test_azimuth_range(self):
        """Returned azimuths are normalized to (0, 360]."""
        path = GreatCirclePath(VALPARAISO, 265.59)
        for angle in range(-360, 361, 30):
            _, azimuth = path.displace_by_angle(angle)
            assert 0 < azimuth <= 360


class TestDisplaceToLongitude:
    """Tests for displace_to_longitude method."""

    @pytest.mark.parametrize("latitude,longitude,azimuth,angle", [
        (10, 70, 30, 150),
        (10, 70, 30, -200),
        (-40, 10, 250, 100),
        (60, -120, 135, 300),
        (0, 0, 45, 90),
        (-33.0, -71.6, 265.59, 168.56),
    ])
    def test_matches_displace_by_angle(self, latitude, longitude, azimuth, angle):
        """The meridian crossing agrees with displacement by angle."""
        path = GreatCirclePath(Coordinate(latitude, longitude), azimuth)
        coordinate, expected_azimuth = path.displace_by_angle(angle)

        result_latitude, result_azimuth = path.displace_to_longitude(coordinate.longitude)
        assert result_latitude == pytest.approx(coordinate.latitude, abs=1e-9)
        assert_same_heading(result_azimuth, expected_azimuth)

    def test_at_initial_longitude(self):
        """At the starting longitude we recover the starting point."""
        path = GreatCirclePath(Coordinate(10, 70), 30)
        latitude, azimuth = path.displace_to_longitude(70)
        assert latitude == pytest.approx(10)
        assert azimuth == pytest.approx(30)

    def test_equator(self):
        """Along the equator every meridian is crossed at latitude 0."""
        latitude, azimuth = GreatCirclePath(Coordinate.ORIGIN, 90).displace_to_longitude(-135)
        assert latitude == pytest.approx(0, abs=1e-12)
        assert azimuth == pytest.approx(90)


class TestPathAndAngleBetweenPoints:
    """Tests for path_and_angle_between_points."""

    def test_valparaiso_to_shanghai(self):
        """Trans-Pacific route: angle, headings and landing point."""
        result = GreatCirclePath.path_and_angle_between_points(VALPARAISO, SHANGHAI)
        assert isinstance(result, PathAndAngle)
        path, angle = result

        assert angle == pytest.approx(168.56, abs=5e-3)
        assert path.initial_azimuth == pytest.approx(360 - 94.41, abs=5e-3)
        assert path.initial_coordinate == VALPARAISO

        target, final_azimuth = path.displace_by_angle(angle)
        assert target.is_close_to(SHANGHAI)
        assert final_azimuth == pytest.approx(360 - 78.42, abs=5e-3)

    def test_equator_points(self):
        """Two points on the equator are joined by the equator."""
        path, angle = GreatCirclePath.path_and_angle_between_points(
            Coordinate(0, 10), Coordinate(0, 40)
        )
        assert angle == pytest.approx(30)
        assert path.initial_azimuth == pytest.approx(90)

    def test_reverse_route(self):
        """The reverse route has the same angle and lands back on the start."""
        _, angle = GreatCirclePath.path_and_angle_between_points(VALPARAISO, SHANGHAI)
        path, reverse_angle = GreatCirclePath.path_and_angle_between_points(SHANGHAI, VALPARAISO)
        assert reverse_angle == pytest.approx(angle)
        target, _ = path.displace_by_angle(reverse_angle)
        assert target.is_close_to(VALPARAISO)

    @pytest.mark.parametrize("initial,final", [
        (Coordinate(51.5, -0.1), Coordinate(40.7, -74.0)),
        (Coordinate(35.7, 139.7), Coordinate(-33.9, 151.2)),
        (Coordinate(10, 170), Coordinate(-20, -160)),
        (Coordinate(-60, -10), Coordinate(-55, 100)),
    ])
    def test_lands_on_destination(self, initial, final):
        """Displacing by the central angle always reaches the destination."""
        path, angle = GreatCirclePath.path_and_angle_between_points(initial, final)
        target, _ = path.displace_by_angle(angle)
        assert target.is_close_to(final)
        assert 0 < angle < 180

    def test_antipodal_points(self):
        """Antipodal points do not define a unique path."""
        with pytest.raises(AntipodalPointsError) as exc_info:
            GreatCirclePath.path_and_angle_between_points(
                Coordinate(10, 70), Coordinate(-10, -110)
            )

        assert exc_info.value.reason == "antipodal"
        assert isinstance(exc_info.value, UnsupportedPathError)

    def test_polar_endpoint(self):
        """Routes to or from a pole are not supported."""
        with pytest.raises(UnsupportedPathError) as exc_info:
            GreatCirclePath.path_and_angle_between_points(Coordinate(10, 70), Coordinate.NORTH_POLE)
        assert exc_info.value.reason == "polar"

        with pytest.raises(UnsupportedPathError):
            GreatCirclePath.path_and_angle_between_points(Coordinate.SOUTH_POLE, Coordinate(10, 70))

    def test_poles_are_antipodal(self):
        """Pole to pole is reported as antipodal first."""
        with pytest.raises(AntipodalPointsError):
            GreatCirclePath.path_and_angle_between_points(
                Coordinate.NORTH_POLE, Coordinate.SOUTH_POLE
            )

    @pytest.mark.parametrize("final", [
        Coordinate(40, 20),
        Coordinate(-30, -160),
        Coordinate(5, 20 + 1e-9),
    ])
    def test_meridional_points(self, final):
        """Points on the same or opposite meridian are not supported."""
        with pytest.raises(UnsupportedPathError) as exc_info:
            GreatCirclePath.path_and_angle_between_points(Coordinate(10, 20), final)
        assert exc_info.value.reason == "meridional"


class TestFormatting:
    """Tests for string formatting."""

    def test_default_format(self):
        """Default format uses two decimals for all values."""
        path = GreatCirclePath.from_lat_lon(10, 70, 30)
        assert path.to_string() == "10.00° N, 70.00° E; 30.00°"
        assert str(path) == "10.00° N, 70.00° E; 30.00°"

    def test_custom_format(self):
        """Custom format applies to coordinate and azimuth."""
        path = GreatCirclePath.from_lat_lon(10, 70, 30)
        assert path.to_string("F0") == "10° N, 70° E; 30°"
        assert f"{path:.1f}" == "10.0° N, 70.0° E; 30.0°"

    def test_normalized_azimuth_shown(self):
        """Negative headings are shown in (0, 360]."""
        path = GreatCirclePath.from_lat_lon(-10, -70, -45)
        assert path.to_string("F0") == "10° S, 70° W; 315°"
