"""Decoded field values.

This module provides the pydantic model returned by decode(). Latitude and
longitude are recovered to within the quantization bound of their layout
widths; the timestamp is exact to the millisecond.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import OutOfRangeError

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def millis_to_datetime(ms: int) -> datetime:
    """Convert milliseconds since the Unix epoch into an aware UTC datetime.

    Raises:
        OutOfRangeError: If the instant lies outside the ``datetime`` range
    """
    try:
        return UNIX_EPOCH + timedelta(milliseconds=ms)
    except OverflowError as err:
        raise OutOfRangeError(f"Timestamp {ms} ms is outside the supported datetime range") from err


def datetime_to_millis(value: datetime) -> int:
    """Count whole milliseconds since the Unix epoch, flooring sub-millisecond parts.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - UNIX_EPOCH) // timedelta(milliseconds=1)


class DecodedFields(BaseModel):
    """Values recovered from an identifier.

    Attributes:
        latitude: Degrees, within the latitude quantization bound
        longitude: Degrees, within the longitude quantization bound
        timestamp_ms: Milliseconds since the Unix epoch, exact
        random_bits: Raw tail bits; they carry no meaning of their own

    Example:
        >>> fields = DecodedFields(latitude=1.5, longitude=-2.0, timestamp_ms=0, random_bits=7)
        >>> fields.timestamp.isoformat()
        '1970-01-01T00:00:00+00:00'
        >>> lat, lon, ts = fields.as_tuple()
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    timestamp_ms: int = Field(ge=0)
    random_bits: int = Field(default=0, ge=0)

    @property
    def timestamp(self) -> datetime:
        """The timestamp as an aware UTC datetime.

        Raises:
            OutOfRangeError: If timestamp_ms lies beyond ``datetime.max``, which
                happens for arbitrary bit patterns and for pre-epoch instants
                that wrapped around the 48-bit field.
        """
        return millis_to_datetime(self.timestamp_ms)

    def as_tuple(self) -> tuple[float, float, datetime]:
        """Return ``(latitude, longitude, timestamp)``."""
        return (self.latitude, self.longitude, self.timestamp)
