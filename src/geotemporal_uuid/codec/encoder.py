"""Encoder: coordinates and time into a 128-bit identifier.

Latitude and longitude are quantized onto their segment widths, the
timestamp becomes a millisecond count masked to its segment width, and a
random draw fills the tail. The layout then interleaves and packs the
fields around the reserved marker bits.
"""

from __future__ import annotations

import logging
from datetime import datetime

from ..exceptions import OutOfRangeError
from ..models.fields import datetime_to_millis
from ..models.identifier import GeoTemporalUuid
from .config import DEFAULT_CONFIG, CodecConfig
from .layout import CANONICAL_LAYOUT, LATITUDE_RANGE, LONGITUDE_RANGE, BitLayout
from .quantize import quantize

logger = logging.getLogger(__name__)


def encode(
    latitude: float,
    longitude: float,
    timestamp: datetime | None = None,
    random_bits: int | None = None,
    *,
    config: CodecConfig = DEFAULT_CONFIG,
    layout: BitLayout = CANONICAL_LAYOUT,
) -> GeoTemporalUuid:
    """Encode a location and instant into a GeoTemporal identifier.

    Identifiers built for the same location sort by timestamp, whatever the
    random draw, since the timestamp leads every interleave round and the
    random bits sit at the end of the payload.

    Args:
        latitude: Degrees in [-90, 90]
        longitude: Degrees in [-180, 180]
        timestamp: Instant to encode; ``config.clock()`` when omitted. Naive
            datetimes are taken to be UTC.
        random_bits: Explicit tail value; drawn from ``config.entropy`` when
            omitted
        config: Clock and entropy sources
        layout: Bit layout with ``timestamp``, ``longitude``, ``latitude``
            and ``random`` segments

    Returns:
        The packed identifier

    Raises:
        OutOfRangeError: If a coordinate is outside its domain or NaN, or an
            explicit random_bits does not fit the random segment

    Note:
        Millisecond counts that do not fit the timestamp segment wrap around
        instead of raising. With 48 bits this only affects instants before
        1970, which come back from decode as far-future counts.

    Examples:
        ```python
        from datetime import datetime, timezone
        from geotemporal_uuid import encode

        uid = encode(40.6892, -74.0445, datetime(2021, 1, 1, tzinfo=timezone.utc))
        print(uid)
        ```
    """
    lat_raw = quantize(latitude, *LATITUDE_RANGE, layout.width_of("latitude"), name="latitude")
    lon_raw = quantize(longitude, *LONGITUDE_RANGE, layout.width_of("longitude"), name="longitude")

    if timestamp is None:
        timestamp = config.clock()
    ts_bits = layout.width_of("timestamp")
    ts_raw = datetime_to_millis(timestamp) & ((1 << ts_bits) - 1)

    rand_bits = layout.width_of("random")
    if random_bits is None:
        random_bits = config.entropy(rand_bits)
    elif not 0 <= random_bits < 1 << rand_bits:
        raise OutOfRangeError(
            f"random_bits must fit in {rand_bits} bits (0 to {(1 << rand_bits) - 1}), "
            f"got {random_bits}"
        )

    logger.debug(
        "Packing timestamp=%d longitude=%d latitude=%d random=%d",
        ts_raw,
        lon_raw,
        lat_raw,
        random_bits,
    )

    data = layout.pack(
        {
            "timestamp": ts_raw,
            "longitude": lon_raw,
            "latitude": lat_raw,
            "random": random_bits,
        }
    )
    return GeoTemporalUuid(data)
