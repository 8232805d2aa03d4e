"""
Tests for custom exceptions.
"""
import pytest
from great_circle.utils.exceptions import (
    GreatCircleError,
    ConfigurationError,
    GeometryError,
    LatitudeRangeError,
    UnsupportedPathError,
    AntipodalPointsError,
)


def test_base_exception():
    """Test base exception."""
    with pytest.raises(GreatCircleError):
        raise GreatCircleError("Base error")


def test_configuration_error():
    """Test configuration error."""
    with pytest.raises(ConfigurationError):
        raise ConfigurationError("Invalid config")

    # Should also be catchable as base class
    with pytest.raises(GreatCircleError):
        raise ConfigurationError("Invalid config")


def test_latitude_range_error():
    """Test latitude range error with the offending value."""
    error = LatitudeRangeError("Latitude out of range", latitude=95.5)

    assert error.latitude == 95.5
    assert "latitude=95.5" in str(error)
    assert isinstance(error, ValueError)


def test_latitude_range_error_without_value():
    """Message is unchanged when no latitude is attached."""
    assert str(LatitudeRangeError("Latitude out of range")) == "Latitude out of range"


def test_unsupported_path_error_with_reason():
    """Test unsupported path error with reason tag."""
    error = UnsupportedPathError("Not supported", reason="meridional")

    assert error.reason == "meridional"
    assert "reason=meridional" in str(error)
    assert isinstance(error, NotImplementedError)


def test_unsupported_path_error_without_reason():
    """Reason is optional and omitted from the message when absent."""
    error = UnsupportedPathError("Not supported")

    assert error.reason is None
    assert str(error) == "Not supported"


def test_antipodal_points_error():
    """Antipodal errors are unsupported paths tagged 'antipodal'."""
    with pytest.raises(UnsupportedPathError) as exc_info:
        raise AntipodalPointsError("Points are antipodal")

    assert exc_info.value.reason == "antipodal"


def test_range_and_unsupported_are_distinct():
    """Range violations and unsupported paths are separate kinds."""
    assert not issubclass(LatitudeRangeError, UnsupportedPathError)
    assert not issubclass(UnsupportedPathError, LatitudeRangeError)


def test_exception_inheritance():
    """Test that all custom exceptions inherit from base."""
    exceptions = [
        ConfigurationError,
        GeometryError,
        LatitudeRangeError,
        UnsupportedPathError,
        AntipodalPointsError,
    ]

    for exc_class in exceptions:
        assert issubclass(exc_class, GreatCircleError)
