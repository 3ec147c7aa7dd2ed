"""Evenly spaced contour levels and axis coordinates."""

import numpy as np

from .errors import InvalidArgumentError


def validate_count(name: str, value) -> int:
    """Returns value as int if it is an integer >= 1, else raises InvalidArgumentError."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidArgumentError(f"{name} must be >= 1, got {value}")
    return int(value)


def spacing(start: float, stop: float, count: int) -> float:
    """Distance between neighbouring values; 0 when there is a single value."""
    if count > 1:
        return (stop - start) / (count - 1)
    return 0.0


def evenly_spaced(start: float, stop: float, count: int) -> np.ndarray:
    """Returns count values from start to stop, endpoints included.

    Values are computed as start + k * step. With count == 1 the result is
    just [start]. NaN and infinite bounds propagate.

    Raises:
        InvalidArgumentError: If count is not an integer >= 1.
    """
    count = validate_count("count", count)
    return start + np.arange(count, dtype=np.float64) * spacing(start, stop, count)


def generate_contour_levels(minimum: float, maximum: float, level_count: int) -> np.ndarray:
    """Generates level_count evenly spaced isoline thresholds.

    Args:
        minimum: Lowest level, usually the smallest sample value.
        maximum: Highest level, usually the largest sample value.
        level_count: Number of levels, at least 1.

    Returns:
        Array of levels, minimum first.
    """
    level_count = validate_count("level_count", level_count)
    return evenly_spaced(minimum, maximum, level_count)
