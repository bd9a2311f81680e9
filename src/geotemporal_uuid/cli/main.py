"""Main CLI entry point for geotemporal-uuid."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..codec.decoder import decode
from ..codec.encoder import encode
from ..codec.layout import CANONICAL_LAYOUT
from ..exceptions import GeoTemporalError
from ..models.identifier import GeoTemporalUuid
from ..timeparse import resolve_time
from .layout import print_layout

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geotemporal-uuid",
        description="geotemporal-uuid: GeoTemporal UUID Generator & Decoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  geotemporal-uuid generate --lat 40.6892 --lon -74.0445
  geotemporal-uuid generate --lat 40.6892 --lon -74.0445 --time 2021-01-01T00:00:00Z
  geotemporal-uuid decode 017cb0d9-ee00-7d9c-8e1f-4a5b6c7d8e9f
  geotemporal-uuid layout
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"geotemporal-uuid {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser("generate", help="Generate a new GeoTemporal UUID")
    generate.add_argument("--lat", type=float, required=True, help="Latitude (-90 to 90)")
    generate.add_argument("--lon", type=float, required=True, help="Longitude (-180 to 180)")
    generate.add_argument(
        "--time",
        default=None,
        help="Optional timestamp (ms or ISO-8601). Defaults to now.",
    )

    decode_cmd = subparsers.add_parser("decode", help="Decode an existing UUID")
    decode_cmd.add_argument("uuid", help="The UUID string")

    subparsers.add_parser("layout", help="Show the bit layout")

    return parser


def _generate(args: argparse.Namespace) -> int:
    instant = resolve_time(args.time)
    uid = encode(args.lat, args.lon, instant)
    print(uid)
    return 0


def _decode(args: argparse.Namespace) -> int:
    uid = GeoTemporalUuid.from_string(args.uuid)
    fields = decode(uid)
    print(f"UUID: {uid}")
    try:
        when = fields.timestamp.isoformat()
    except GeoTemporalError as e:
        logger.debug("Timestamp not representable: %s", e)
        when = "out of range"
    print(f"Time: {when} ({fields.timestamp_ms})")
    print(f"Lat:  {fields.latitude:.6f}")
    print(f"Lon:  {fields.longitude:.6f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the geotemporal-uuid CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "generate":
            return _generate(args)
        if args.command == "decode":
            return _decode(args)
        if args.command == "layout":
            print_layout(CANONICAL_LAYOUT)
            return 0
    except GeoTemporalError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
