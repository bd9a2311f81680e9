"""Unit tests for the declarative bit layout."""

from __future__ import annotations

import pytest

from geotemporal_uuid import CANONICAL_LAYOUT, BitLayout, LayoutError, Segment


def _zeros(**overrides: int) -> dict[str, int]:
    values = {"timestamp": 0, "longitude": 0, "latitude": 0, "random": 0}
    values.update(overrides)
    return values


class TestCanonicalLayout:
    """Test the 48/25/24 + 25 layout."""

    def test_widths(self) -> None:
        assert CANONICAL_LAYOUT.width_of("timestamp") == 48
        assert CANONICAL_LAYOUT.width_of("longitude") == 25
        assert CANONICAL_LAYOUT.width_of("latitude") == 24
        assert CANONICAL_LAYOUT.width_of("random") == 25
        assert CANONICAL_LAYOUT.payload_bits == 122
        assert sum(s.width for s in CANONICAL_LAYOUT.segments) == 122

    def test_reserved_positions(self) -> None:
        assert dict(CANONICAL_LAYOUT.reserved) == {48: 0, 49: 1, 50: 1, 51: 1, 64: 1, 65: 0}

    def test_schedule_starts_round_robin(self) -> None:
        """Every field's MSB appears in the first round."""
        assert CANONICAL_LAYOUT.schedule()[:6] == (
            ("timestamp", 47),
            ("longitude", 24),
            ("latitude", 23),
            ("timestamp", 46),
            ("longitude", 23),
            ("latitude", 22),
        )

    def test_schedule_narrow_fields_run_out(self) -> None:
        """Latitude stops after 24 rounds, longitude after 25."""
        schedule = CANONICAL_LAYOUT.schedule()
        assert schedule[69:76] == (
            ("timestamp", 24),
            ("longitude", 1),
            ("latitude", 0),
            ("timestamp", 23),
            ("longitude", 0),
            ("timestamp", 22),
            ("timestamp", 21),
        )
        assert schedule[96] == ("timestamp", 0)

    def test_schedule_random_tail(self) -> None:
        schedule = CANONICAL_LAYOUT.schedule()
        assert len(schedule) == 122
        assert schedule[97:] == tuple(("random", i) for i in range(24, -1, -1))

    def test_payload_positions(self) -> None:
        positions = CANONICAL_LAYOUT.payload_positions()
        assert len(positions) == 122
        assert positions[47] == 47
        assert positions[48] == 52
        assert positions[59] == 63
        assert positions[60] == 66
        assert positions[-1] == 127

    def test_pack_zeros_keeps_markers(self, marker_bits: int) -> None:
        data = CANONICAL_LAYOUT.pack(_zeros())
        assert data == bytes.fromhex("00000000000070008000000000000000")
        assert int.from_bytes(data, "big") == marker_bits

    def test_pack_all_ones(self) -> None:
        data = CANONICAL_LAYOUT.pack(
            {
                "timestamp": (1 << 48) - 1,
                "longitude": (1 << 25) - 1,
                "latitude": (1 << 24) - 1,
                "random": (1 << 25) - 1,
            }
        )
        assert data == bytes.fromhex("ffffffffffff7fffbfffffffffffffff")

    @pytest.mark.parametrize(
        ("field", "absolute_position"),
        [
            ("timestamp", 102),  # stream 96
            ("longitude", 79),  # stream 73
            ("latitude", 77),  # stream 71
            ("random", 127),  # stream 121
        ],
    )
    def test_pack_least_significant_bits(
        self, field: str, absolute_position: int, marker_bits: int
    ) -> None:
        """The LSB of each field lands after skipping the reserved positions."""
        data = CANONICAL_LAYOUT.pack(_zeros(**{field: 1}))
        assert int.from_bytes(data, "big") == marker_bits | 1 << (127 - absolute_position)

    def test_timestamp_msb_is_first_bit(self, marker_bits: int) -> None:
        data = CANONICAL_LAYOUT.pack(_zeros(timestamp=1 << 47))
        assert int.from_bytes(data, "big") == marker_bits | 1 << 127

    def test_unpack_ignores_reserved_bits(self) -> None:
        """Reserved bits never leak into decoded fields."""
        for text in ("00000000000070008000000000000000", "000000000000f000c000000000000000"):
            assert CANONICAL_LAYOUT.unpack(bytes.fromhex(text)) == _zeros()

    def test_unpack_all_ones(self) -> None:
        values = CANONICAL_LAYOUT.unpack(b"\xff" * 16)
        assert values == {
            "timestamp": (1 << 48) - 1,
            "longitude": (1 << 25) - 1,
            "latitude": (1 << 24) - 1,
            "random": (1 << 25) - 1,
        }

    def test_pack_unpack_mirror(self) -> None:
        values = {
            "timestamp": 1609459200000,
            "longitude": 9_284_721,
            "latitude": 12_177_151,
            "random": 31_337,
        }
        assert CANONICAL_LAYOUT.unpack(CANONICAL_LAYOUT.pack(values)) == values

    def test_pack_rejects_wide_values(self) -> None:
        with pytest.raises(ValueError, match="does not fit"):
            CANONICAL_LAYOUT.pack(_zeros(latitude=1 << 24))

        with pytest.raises(ValueError, match="does not fit"):
            CANONICAL_LAYOUT.pack(_zeros(random=-1))

    def test_pack_requires_every_segment(self) -> None:
        with pytest.raises(KeyError):
            CANONICAL_LAYOUT.pack({"timestamp": 0, "longitude": 0, "latitude": 0})

    def test_unpack_wrong_length(self) -> None:
        with pytest.raises(ValueError, match="Expected 16 bytes"):
            CANONICAL_LAYOUT.unpack(b"\x00" * 15)

    def test_describe(self) -> None:
        rows = CANONICAL_LAYOUT.describe()
        assert len(rows) == 128
        assert rows[0] == (0, "timestamp[47]")
        assert rows[1] == (1, "longitude[24]")
        assert rows[48] == (48, "=0")
        assert rows[49] == (49, "=1")
        assert rows[64] == (64, "=1")
        assert rows[65] == (65, "=0")
        assert rows[127] == (127, "random[0]")


class TestLayoutValidation:
    """Test layout construction errors."""

    def test_small_layout(self) -> None:
        layout = BitLayout(
            interleaved=(Segment("a", 2), Segment("b", 1)),
            tail=(Segment("r", 4),),
            reserved={0: 1},
            total_bits=8,
        )
        assert layout.schedule() == (
            ("a", 1),
            ("b", 0),
            ("a", 0),
            ("r", 3),
            ("r", 2),
            ("r", 1),
            ("r", 0),
        )
        assert layout.pack({"a": 0b10, "b": 1, "r": 0b0110}) == bytes([0b11100110])
        assert layout.unpack(bytes([0b01100110])) == {"a": 0b10, "b": 1, "r": 0b0110}

    def test_width_mismatch(self) -> None:
        with pytest.raises(LayoutError, match="cover"):
            BitLayout(interleaved=(Segment("a", 7),), total_bits=8)

    def test_duplicate_names(self) -> None:
        with pytest.raises(LayoutError, match="unique"):
            BitLayout(interleaved=(Segment("a", 4), Segment("a", 4)), total_bits=8)

    def test_reserved_out_of_range(self) -> None:
        with pytest.raises(LayoutError, match="outside"):
            BitLayout(interleaved=(Segment("a", 7),), reserved={8: 1}, total_bits=8)

    def test_reserved_value(self) -> None:
        with pytest.raises(LayoutError, match="0 or 1"):
            BitLayout(interleaved=(Segment("a", 7),), reserved={0: 2}, total_bits=8)

    def test_total_bits(self) -> None:
        with pytest.raises(LayoutError, match="multiple of 8"):
            BitLayout(interleaved=(Segment("a", 12),), total_bits=12)

    def test_segment_width(self) -> None:
        with pytest.raises(LayoutError, match="at least 1 bit"):
            Segment("a", 0)

    def test_width_of_unknown(self) -> None:
        with pytest.raises(KeyError):
            CANONICAL_LAYOUT.width_of("altitude")
