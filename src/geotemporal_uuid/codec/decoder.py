"""Decoder: 128-bit identifier back into coordinates and time.

Decoding walks the same layout schedule as encoding. It never fails for a
well-formed 16-byte identifier; reserved bits are skipped unchecked.
"""

from __future__ import annotations

import logging
from typing import Union

from ..models.fields import DecodedFields
from ..models.identifier import GeoTemporalUuid
from .layout import CANONICAL_LAYOUT, LATITUDE_RANGE, LONGITUDE_RANGE, BitLayout
from .quantize import dequantize

logger = logging.getLogger(__name__)

IdentifierLike = Union[GeoTemporalUuid, bytes, str]


def as_identifier(value: IdentifierLike) -> GeoTemporalUuid:
    """Coerce bytes or a string into a GeoTemporalUuid.

    Raises:
        MalformedInputError: If the bytes are not 16 long or the string is not
            32 hex digits once hyphens are stripped
    """
    if isinstance(value, GeoTemporalUuid):
        return value
    if isinstance(value, str):
        return GeoTemporalUuid.from_string(value)
    return GeoTemporalUuid.from_bytes(value)


def decode(identifier: IdentifierLike, *, layout: BitLayout = CANONICAL_LAYOUT) -> DecodedFields:
    """Recover latitude, longitude and timestamp from an identifier.

    Args:
        identifier: GeoTemporalUuid, 16 raw bytes, or a hex string in grouped
            or bare form
        layout: Layout the identifier was packed with

    Returns:
        DecodedFields with coordinates within the quantization bound and the
        exact millisecond timestamp

    Raises:
        MalformedInputError: If identifier cannot be parsed (bad length or hex)

    Examples:
        ```python
        from geotemporal_uuid import decode

        fields = decode("017cb0d9-ee00-7d9c-8e1f-4a5b6c7d8e9f")
        print(fields.latitude, fields.longitude, fields.timestamp)
        ```
    """
    uid = as_identifier(identifier)
    values = layout.unpack(uid.bytes)
    logger.debug("Unpacked %s from %s", values, uid)

    return DecodedFields(
        latitude=dequantize(values["latitude"], *LATITUDE_RANGE, layout.width_of("latitude")),
        longitude=dequantize(values["longitude"], *LONGITUDE_RANGE, layout.width_of("longitude")),
        timestamp_ms=values["timestamp"],
        random_bits=values["random"],
    )
