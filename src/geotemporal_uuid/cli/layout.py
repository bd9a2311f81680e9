"""Bit layout report CLI command."""

from __future__ import annotations

from ..codec.layout import LATITUDE_RANGE, LONGITUDE_RANGE, BitLayout
from ..codec.quantize import max_error, resolution

# Rough metres per degree along a meridian
_METRES_PER_DEGREE = 111_320.0

_RANGES = {
    "latitude": LATITUDE_RANGE,
    "longitude": LONGITUDE_RANGE,
}


def print_layout(layout: BitLayout) -> None:
    """Print segment widths, precision and the absolute bit map of a layout.

    Args:
        layout: Layout to describe
    """
    print("|" * 7, "geotemporal-uuid: bit layout", "|" * 7)
    print(
        f"{layout.total_bits} bits: {layout.payload_bits} payload, "
        f"{len(layout.reserved)} reserved"
    )
    print()

    print(f"{'Segment':<12} {'Bits':>5}  Notes")
    print("-" * 60)
    for segment in layout.segments:
        note = "interleaved" if segment in layout.interleaved else "tail"
        if segment.name in _RANGES:
            lower, upper = _RANGES[segment.name]
            step = resolution(lower, upper, segment.width)
            worst = max_error(lower, upper, segment.width)
            note += (
                f", step {step:.3e} deg, max error {worst:.3e} deg"
                f" (~{worst * _METRES_PER_DEGREE:.2f} m)"
            )
        elif segment.name == "timestamp":
            note += ", milliseconds since 1970-01-01T00:00:00Z"
        print(f"{segment.name:<12} {segment.width:>5}  {note}")
    print()

    print("Bit map (position: content)")
    rows = layout.describe()
    for start in range(0, len(rows), 8):
        chunk = rows[start : start + 8]
        print(f"  {chunk[0][0]:>3}: " + " ".join(f"{label:<14}" for _, label in chunk).rstrip())
