"""geotemporal_uuid: time-ordered identifiers that carry a location

A GeoTemporal UUID packs a latitude, a longitude, a millisecond timestamp and
a random disambiguator into 128 bits. Timestamp, longitude and latitude bits
are interleaved most-significant first, so identifiers for one location sort
by time; the version and variant nibbles of a standard UUID are kept as
fixed markers.

Layout (122 payload bits + 6 marker bits):
- Timestamp: 48 bits, milliseconds since the Unix epoch
- Longitude: 25 bits over [-180, 180]
- Latitude: 24 bits over [-90, 90]
- Random: 25 bits

Quick Start:
    >>> from datetime import datetime, timezone
    >>> from geotemporal_uuid import decode, encode
    >>>
    >>> uid = encode(40.6892, -74.0445, datetime(2021, 1, 1, tzinfo=timezone.utc))
    >>> fields = decode(uid)
    >>> round(fields.latitude, 4), round(fields.longitude, 4)
    (40.6892, -74.0445)
    >>> fields.timestamp.isoformat()
    '2021-01-01T00:00:00+00:00'
"""

from __future__ import annotations

from .bindings import BindingResult, decode_uuid, generate_uuid, try_decode_uuid, try_generate_uuid
from .codec import (
    CANONICAL_LAYOUT,
    BitLayout,
    CodecConfig,
    GeoTemporalCodec,
    Segment,
    decode,
    encode,
)
from .exceptions import (
    GeoTemporalError,
    LayoutError,
    MalformedInputError,
    OutOfRangeError,
    TimeFormatError,
)
from .models import DecodedFields, GeoTemporalUuid
from .timeparse import TimeInput, resolve_time

__version__ = "0.1.0"

__all__ = [
    # Core API
    "GeoTemporalUuid",
    "DecodedFields",
    "encode",
    "decode",
    "GeoTemporalCodec",
    "CodecConfig",
    # Layout
    "BitLayout",
    "Segment",
    "CANONICAL_LAYOUT",
    # Time arguments
    "TimeInput",
    "resolve_time",
    # Host bindings
    "generate_uuid",
    "decode_uuid",
    "try_generate_uuid",
    "try_decode_uuid",
    "BindingResult",
    # Exceptions
    "GeoTemporalError",
    "OutOfRangeError",
    "MalformedInputError",
    "TimeFormatError",
    "LayoutError",
    # Version
    "__version__",
]
