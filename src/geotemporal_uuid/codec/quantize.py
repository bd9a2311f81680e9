"""Linear fixed-point quantization of bounded floats.

A value in ``[lower, upper]`` maps to an unsigned integer in
``[0, 2**bits - 1]``; both endpoints are exactly representable.
"""

from __future__ import annotations

import math

from ..exceptions import OutOfRangeError


def _steps(bits: int) -> int:
    if bits < 1:
        raise ValueError(f"bits must be positive, got {bits}")
    return (1 << bits) - 1


def quantize(value: float, lower: float, upper: float, bits: int, name: str = "value") -> int:
    """Scale ``value`` onto ``bits`` bits, rounding half away from zero.

    Args:
        value: Value to quantize
        lower: Inclusive lower bound
        upper: Inclusive upper bound
        bits: Target width
        name: Field name used in error messages

    Returns:
        Unsigned integer in ``[0, 2**bits - 1]``

    Raises:
        OutOfRangeError: If value is NaN or outside ``[lower, upper]``
    """
    if not lower <= value <= upper:
        raise OutOfRangeError(
            f"{name.capitalize()} must be between {lower:g} and {upper:g}, got {value}"
        )

    normalized = (value - lower) / (upper - lower)
    return math.floor(normalized * _steps(bits) + 0.5)


def dequantize(raw: int, lower: float, upper: float, bits: int) -> float:
    """Map a quantized integer back onto ``[lower, upper]``."""
    return (raw / _steps(bits)) * (upper - lower) + lower


def resolution(lower: float, upper: float, bits: int) -> float:
    """Distance between two adjacent quantized values."""
    return (upper - lower) / _steps(bits)


def max_error(lower: float, upper: float, bits: int) -> float:
    """Worst-case round-trip error, half a quantization step."""
    return resolution(lower, upper, bits) / 2
