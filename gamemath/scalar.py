"""Scalar helpers: clamping, interpolation and range mapping."""

from __future__ import annotations

__all__ = ["clamp", "lerp", "normalize", "remap"]


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Limit ``value`` to the range ``[minimum, maximum]``.

    The lower bound is applied first and the upper bound second, so when
    ``minimum`` exceeds ``maximum`` the result is ``maximum``.
    """
    result = minimum if value < minimum else value
    if result > maximum:
        result = maximum
    return result


def lerp(start: float, end: float, amount: float) -> float:
    """Linearly interpolate between ``start`` and ``end`` by ``amount``."""
    return start + amount * (end - start)


def normalize(value: float, start: float, end: float) -> float:
    """Express ``value`` as a fraction of the range from ``start`` to ``end``.

    Raises ZeroDivisionError when the range is empty.
    """
    return (value - start) / (end - start)


def remap(
    value: float,
    input_start: float,
    input_end: float,
    output_start: float,
    output_end: float,
) -> float:
    """Map ``value`` from the input range onto the output range.

    Raises ZeroDivisionError when the input range is empty.
    """
    return (value - input_start) / (input_end - input_start) * (
        output_end - output_start
    ) + output_start