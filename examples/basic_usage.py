#!/usr/bin/env python3
"""Basic usage example for geotemporal_uuid.

This example demonstrates:
1. Encoding a location and instant into an identifier
2. Decoding it back to coordinates and time
3. Time-ordered sorting for one location
4. Deterministic encoding with an injected clock and entropy
"""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

from geotemporal_uuid import CodecConfig, GeoTemporalCodec, GeoTemporalUuid, decode, encode


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("geotemporal_uuid Basic Usage Example")
    print("=" * 60)
    print()

    # Encode a location
    print("1. Encoding the Statue of Liberty at 2021-01-01T00:00:00Z...")
    when = datetime(2021, 1, 1, tzinfo=timezone.utc)
    uid = encode(40.6892, -74.0445, when)
    print(f"   Identifier: {uid}")
    print(f"   Raw bytes:  {uid.bytes.hex(' ')}")
    print()

    # Decode it again
    print("2. Decoding...")
    fields = decode(str(uid))
    print(f"   Latitude:  {fields.latitude:.6f}")
    print(f"   Longitude: {fields.longitude:.6f}")
    print(f"   Time:      {fields.timestamp.isoformat()} ({fields.timestamp_ms} ms)")
    print()

    # Sorting follows time for a fixed location
    print("3. Sorting identifiers minted out of order...")
    instants = [when + timedelta(minutes=m) for m in (30, 5, 55, 0, 15)]
    uids = [encode(40.6892, -74.0445, t) for t in instants]
    for item in sorted(uids):
        print(f"   {item}  {item.decode().timestamp.time()}")
    print()

    # Deterministic output for tests and fixtures
    print("4. Pinning clock and entropy...")
    codec = GeoTemporalCodec(CodecConfig(clock=lambda: when, entropy=random.Random(7).getrandbits))
    first = codec.encode(51.5007, -0.1246)
    print(f"   {first}")
    print(f"   Parsed back equal: {GeoTemporalUuid.from_string(first.hex) == first}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
