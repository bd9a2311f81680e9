"""Bit-layout codec for GeoTemporal identifiers.

This module provides encoding and decoding between (latitude, longitude,
timestamp) and 128-bit identifiers, driven by a declarative bit layout.
"""

from __future__ import annotations

from .config import CodecConfig
from .decoder import decode
from .encoder import encode
from .geocodec import GeoTemporalCodec
from .layout import CANONICAL_LAYOUT, BitLayout, Segment

__all__ = [
    "encode",
    "decode",
    "GeoTemporalCodec",
    "CodecConfig",
    "BitLayout",
    "Segment",
    "CANONICAL_LAYOUT",
]
