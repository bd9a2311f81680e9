"""Declarative bit layout for 128-bit identifiers.

A layout is plain data: the segments that are interleaved round-robin, the
segments appended as a contiguous tail, and the absolute positions that hold
fixed marker bits. One generic pack/unpack pair consumes it, so the encode
and decode directions always walk the exact same schedule.

Absolute positions count from 0 (most significant bit of the first byte) to
``total_bits - 1``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cached_property

from ..exceptions import LayoutError
from .bitpack import BitPacker, BitUnpacker


@dataclass(frozen=True)
class Segment:
    """A named unsigned integer field of fixed width."""

    name: str
    width: int

    def __post_init__(self) -> None:
        if self.width < 1:
            raise LayoutError(
                f"Segment {self.name!r} must be at least 1 bit wide, got {self.width}"
            )


@dataclass(frozen=True)
class BitLayout:
    """Bit-level description of an identifier.

    Attributes:
        interleaved: Segments emitted one bit per round, MSB first, in this
            order within each round. Every segment's MSB lands in the first
            round; narrower segments run out of bits early.
        tail: Segments appended after the interleaved block, each MSB first.
        reserved: Absolute position -> constant bit written on pack and
            skipped on unpack.
        total_bits: Identifier width (a multiple of 8).

    Example:
        >>> layout = BitLayout(
        ...     interleaved=(Segment("a", 2), Segment("b", 1)),
        ...     tail=(Segment("r", 4),),
        ...     reserved={0: 1},
        ...     total_bits=8,
        ... )
        >>> layout.schedule()[:3]
        (('a', 1), ('b', 0), ('a', 0))
    """

    interleaved: tuple[Segment, ...]
    tail: tuple[Segment, ...] = ()
    reserved: Mapping[int, int] = field(default_factory=dict)
    total_bits: int = 128

    def __post_init__(self) -> None:
        if self.total_bits < 8 or self.total_bits % 8:
            raise LayoutError(f"total_bits must be a positive multiple of 8, got {self.total_bits}")

        names = [segment.name for segment in self.segments]
        if len(set(names)) != len(names):
            raise LayoutError(f"Segment names must be unique, got {names}")

        for position, value in self.reserved.items():
            if not 0 <= position < self.total_bits:
                raise LayoutError(
                    f"Reserved position {position} outside identifier of {self.total_bits} bits"
                )
            if value not in (0, 1):
                raise LayoutError(f"Reserved position {position} must hold 0 or 1, got {value}")

        payload = sum(segment.width for segment in self.segments)
        expected = self.total_bits - len(self.reserved)
        if payload != expected:
            raise LayoutError(
                f"Segments cover {payload} bits but {expected} non-reserved positions exist"
            )

    @property
    def segments(self) -> tuple[Segment, ...]:
        """All segments, interleaved ones first."""
        return self.interleaved + self.tail

    @property
    def payload_bits(self) -> int:
        return self.total_bits - len(self.reserved)

    def width_of(self, name: str) -> int:
        """Return the width of the named segment.

        Raises:
            KeyError: If no segment has that name
        """
        for segment in self.segments:
            if segment.name == name:
                return segment.width
        raise KeyError(name)

    def schedule(self) -> tuple[tuple[str, int], ...]:
        """Return the payload stream as ``(segment name, bit index)`` pairs.

        Bit index 0 is a segment's least significant bit.
        """
        return self._schedule

    @cached_property
    def _schedule(self) -> tuple[tuple[str, int], ...]:
        stream: list[tuple[str, int]] = []

        rounds = max((segment.width for segment in self.interleaved), default=0)
        for i in range(rounds - 1, -1, -1):
            for segment in self.interleaved:
                # Align the segment's MSB with the first round
                index = i - (rounds - segment.width)
                if index >= 0:
                    stream.append((segment.name, index))

        for segment in self.tail:
            for index in range(segment.width - 1, -1, -1):
                stream.append((segment.name, index))

        return tuple(stream)

    def payload_positions(self) -> tuple[int, ...]:
        """Return the absolute positions carrying payload, in stream order."""
        return tuple(p for p in range(self.total_bits) if p not in self.reserved)

    def pack(self, values: Mapping[str, int]) -> bytes:
        """Pack segment values into ``total_bits // 8`` bytes.

        Args:
            values: Unsigned integer per segment name

        Raises:
            KeyError: If a segment value is missing
            ValueError: If a value is negative or wider than its segment
        """
        for segment in self.segments:
            value = values[segment.name]
            if value < 0 or value >> segment.width:
                raise ValueError(
                    f"Segment {segment.name!r}: value {value} does not fit in {segment.width} bits"
                )

        stream = iter(self.schedule())
        packer = BitPacker()
        for position in range(self.total_bits):
            if position in self.reserved:
                packer.write_bool(bool(self.reserved[position]))
                continue
            name, index = next(stream)
            packer.write_bool(bool((values[name] >> index) & 1))

        return packer.to_bytes()

    def unpack(self, data: bytes) -> dict[str, int]:
        """Recover segment values from packed bytes.

        Reserved positions are skipped without inspection, so every input of
        the right length decodes to some set of values.

        Raises:
            ValueError: If data is not ``total_bits // 8`` bytes long
        """
        if len(data) * 8 != self.total_bits:
            raise ValueError(f"Expected {self.total_bits // 8} bytes, got {len(data)}")

        values = {segment.name: 0 for segment in self.segments}
        stream = iter(self.schedule())
        unpacker = BitUnpacker(data)
        for position in range(self.total_bits):
            if position in self.reserved:
                unpacker.skip()
                continue
            name, index = next(stream)
            if unpacker.read_bool():
                values[name] |= 1 << index

        return values

    def describe(self) -> list[tuple[int, str]]:
        """Return ``(absolute position, label)`` for every bit of the layout.

        Payload bits are labelled ``name[index]``; reserved bits ``=0``/``=1``.
        """
        stream = iter(self.schedule())
        rows: list[tuple[int, str]] = []
        for position in range(self.total_bits):
            if position in self.reserved:
                rows.append((position, f"={self.reserved[position]}"))
            else:
                name, index = next(stream)
                rows.append((position, f"{name}[{index}]"))
        return rows


TIMESTAMP_BITS = 48
LONGITUDE_BITS = 25
LATITUDE_BITS = 24
RANDOM_BITS = 25

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)

VERSION_MARKER = {48: 0, 49: 1, 50: 1, 51: 1}
VARIANT_MARKER = {64: 1, 65: 0}

CANONICAL_LAYOUT = BitLayout(
    interleaved=(
        Segment("timestamp", TIMESTAMP_BITS),
        Segment("longitude", LONGITUDE_BITS),
        Segment("latitude", LATITUDE_BITS),
    ),
    tail=(Segment("random", RANDOM_BITS),),
    reserved={**VERSION_MARKER, **VARIANT_MARKER},
)
