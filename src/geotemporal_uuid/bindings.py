"""Host-embedding entry points.

Flat functions for embedding the codec behind a foreign boundary (a JS
bridge, an RPC shim, a spreadsheet UDF). Arguments and results are plain
strings and numbers. The ``try_`` variants report failures as data for
hosts that cannot catch Python exceptions.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .codec.geocodec import GeoTemporalCodec
from .exceptions import GeoTemporalError
from .timeparse import resolve_time

T = TypeVar("T")

_DEFAULT_CODEC = GeoTemporalCodec()


def generate_uuid(
    lat: float, lon: float, time_input: Any = None, codec: GeoTemporalCodec | None = None
) -> str:
    """Generate an identifier string.

    Args:
        lat: Latitude in degrees
        lon: Longitude in degrees
        time_input: None (now), milliseconds as a number or numeric string,
            an ISO-8601 string, or a datetime
        codec: Codec to use; the module default when omitted

    Returns:
        Canonical ``8-4-4-4-12`` string

    Raises:
        TimeFormatError: If time_input cannot be interpreted
        OutOfRangeError: If lat or lon is out of range
    """
    codec = codec or _DEFAULT_CODEC
    instant = resolve_time(time_input, clock=codec.now)
    return str(codec.encode(lat, lon, instant))


def decode_uuid(uuid_str: str, codec: GeoTemporalCodec | None = None) -> list[float]:
    """Decode an identifier string into ``[latitude, longitude, timestamp_ms]``.

    Raises:
        MalformedInputError: If uuid_str is not a valid identifier string
    """
    codec = codec or _DEFAULT_CODEC
    fields = codec.decode(uuid_str)
    return [fields.latitude, fields.longitude, float(fields.timestamp_ms)]


@dataclass(frozen=True)
class BindingResult(Generic[T]):
    """Outcome of a ``try_`` call: either a value or an error message."""

    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {"ok": self.ok, "value": self.value, "error": self.error}


def _capture(call: Callable[[], T]) -> BindingResult[T]:
    try:
        return BindingResult(value=call())
    except GeoTemporalError as err:
        return BindingResult(error=str(err))


def try_generate_uuid(
    lat: float, lon: float, time_input: Any = None, codec: GeoTemporalCodec | None = None
) -> BindingResult[str]:
    """Like :func:`generate_uuid`, returning failures as a message."""
    return _capture(lambda: generate_uuid(lat, lon, time_input, codec))


def try_decode_uuid(
    uuid_str: str, codec: GeoTemporalCodec | None = None
) -> BindingResult[list[float]]:
    """Like :func:`decode_uuid`, returning failures as a message."""
    return _capture(lambda: decode_uuid(uuid_str, codec))
