"""Value types for geotemporal_uuid.

This module provides the identifier type and the pydantic model holding
decoded field values.
"""

from __future__ import annotations

from .fields import DecodedFields, datetime_to_millis, millis_to_datetime
from .identifier import GeoTemporalUuid

__all__ = [
    "GeoTemporalUuid",
    "DecodedFields",
    "datetime_to_millis",
    "millis_to_datetime",
]
