"""Injected capabilities for the codec.

The encoder reads a clock when no timestamp is given and draws random bits
for the tail segment. Both come from a CodecConfig so tests can pin them.
"""

from __future__ import annotations

import secrets
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CodecConfig:
    """Clock and entropy used by the encoder.

    Attributes:
        clock: Zero-argument callable returning the current instant. Naive
            results are taken to be UTC.
        entropy: Callable taking a bit count ``k`` and returning a uniformly
            distributed integer in ``[0, 2**k)``. ``secrets.randbits`` by
            default; ``random.Random(seed).getrandbits`` gives reproducible
            draws.

    Examples:
        ```python
        import random
        from datetime import datetime, timezone

        from geotemporal_uuid import CodecConfig, GeoTemporalCodec

        fixed = datetime(2021, 1, 1, tzinfo=timezone.utc)
        codec = GeoTemporalCodec(
            CodecConfig(clock=lambda: fixed, entropy=random.Random(7).getrandbits)
        )
        ```
    """

    clock: Callable[[], datetime] = field(default=utc_now)
    entropy: Callable[[int], int] = field(default=secrets.randbits)


DEFAULT_CONFIG = CodecConfig()
