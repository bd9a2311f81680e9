"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from geotemporal_uuid import CodecConfig, GeoTemporalCodec


@pytest.fixture
def marker_bits() -> int:
    """Reserved marker bits of every identifier, as an integer mask."""
    return sum(1 << (127 - position) for position in (49, 50, 51, 64))


@pytest.fixture
def new_year_2021() -> datetime:
    """2021-01-01T00:00:00Z."""
    return datetime(2021, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def fixed_codec(new_year_2021: datetime) -> GeoTemporalCodec:
    """Codec with a frozen clock and all-zero random draws."""
    return GeoTemporalCodec(CodecConfig(clock=lambda: new_year_2021, entropy=lambda bits: 0))


@pytest.fixture
def epoch_codec() -> GeoTemporalCodec:
    """Codec whose clock reads the Unix epoch and whose entropy is zero."""
    epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
    return GeoTemporalCodec(CodecConfig(clock=lambda: epoch, entropy=lambda bits: 0))
