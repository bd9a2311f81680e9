"""Codec object binding a configuration and a layout."""

from __future__ import annotations

from datetime import datetime

from ..models.fields import DecodedFields
from ..models.identifier import GeoTemporalUuid
from .config import DEFAULT_CONFIG, CodecConfig
from .decoder import IdentifierLike, decode
from .encoder import encode
from .layout import CANONICAL_LAYOUT, BitLayout


class GeoTemporalCodec:
    """Encoder/decoder pair with injected clock and entropy.

    The codec holds no mutable state, so one instance can be shared freely
    across threads.

    Example:
        >>> from datetime import datetime, timezone
        >>> fixed = datetime(2021, 1, 1, tzinfo=timezone.utc)
        >>> codec = GeoTemporalCodec(CodecConfig(clock=lambda: fixed, entropy=lambda k: 0))
        >>> codec.decode(codec.encode(0.0, 0.0)).timestamp == fixed
        True
    """

    def __init__(
        self, config: CodecConfig | None = None, layout: BitLayout = CANONICAL_LAYOUT
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.layout = layout

    def encode(
        self,
        latitude: float,
        longitude: float,
        timestamp: datetime | None = None,
        random_bits: int | None = None,
    ) -> GeoTemporalUuid:
        """Encode with this codec's clock, entropy and layout. See :func:`encode`."""
        return encode(
            latitude,
            longitude,
            timestamp,
            random_bits,
            config=self.config,
            layout=self.layout,
        )

    def decode(self, identifier: IdentifierLike) -> DecodedFields:
        """Decode with this codec's layout. See :func:`decode`."""
        return decode(identifier, layout=self.layout)

    def now(self) -> datetime:
        """Read this codec's clock."""
        return self.config.clock()

    def __repr__(self) -> str:
        return f"GeoTemporalCodec(config={self.config!r})"
