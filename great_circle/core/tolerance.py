"""
Floating-point tolerance comparisons.

Both checks combine an absolute and a relative tolerance in the manner of
numpy.isclose; they differ only in which magnitude scales the relative part.
"""


class ToleranceDefaults:
    """Default tolerances for is_close_to and are_close."""
    # Relative to the magnitude of the inputs
    RELATIVE = 1e-6
    # Independent of the inputs
    ABSOLUTE = 1e-8


def is_close_to(
    value: float,
    target: float,
    relative_tolerance: float = ToleranceDefaults.RELATIVE,
    absolute_tolerance: float = ToleranceDefaults.ABSOLUTE,
) -> bool:
    """
    Check whether a value is sufficiently close to a target.

    The total tolerance is ``absolute_tolerance + relative_tolerance * |target|``,
    so the target is treated asymmetrically as the "true" value.

    Args:
        value: The value to test
        target: The reference value
        relative_tolerance: Tolerance relative to the magnitude of target
        absolute_tolerance: Tolerance independent of the inputs

    Returns:
        True if the difference is within the combined tolerance

    Example:
        >>> is_close_to(1 - 1e-6, 1)
        True
        >>> is_close_to(1 - 2.1e-6, 1)
        False
    """
    return abs(value - target) <= absolute_tolerance + relative_tolerance * abs(target)


def are_close(
    value1: float,
    value2: float,
    relative_tolerance: float = ToleranceDefaults.RELATIVE,
    absolute_tolerance: float = ToleranceDefaults.ABSOLUTE,
) -> bool:
    """
    Check whether two values are sufficiently close to each other.

    The relative part is scaled by the mean magnitude of both values,
    so neither argument is privileged.

    Args:
        value1: First value
        value2: Second value
        relative_tolerance: Tolerance relative to the mean magnitude
        absolute_tolerance: Tolerance independent of the inputs

    Returns:
        True if the difference is within the combined tolerance

    Example:
        >>> are_close(1 - 1e-7, 1 + 1e-7)
        True
        >>> are_close(1, 1 + 1.1e-6)
        False
    """
    scale = 0.5 * (abs(value1) + abs(value2))
    return abs(value1 - value2) <= absolute_tolerance + relative_tolerance * scale
