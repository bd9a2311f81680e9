"""Bit-level packing and unpacking utilities.

Identifiers are built one bit at a time because the payload stream threads
around reserved positions. Everything here is MSB-first and big-endian.
"""

from __future__ import annotations


class BitPacker:
    """Accumulates bits MSB-first and renders them as bytes or an integer.

    Example:
        >>> packer = BitPacker()
        >>> packer.write_bool(True)
        >>> for bit in (0, 1, 0, 1, 0, 1, 0):
        ...     packer.write_bool(bool(bit))
        >>> packer.to_bytes()
        b'\\xaa'
    """

    def __init__(self) -> None:
        self._bits: list[int] = []

    def write_bool(self, value: bool) -> None:
        """Append a single bit (True=1, False=0)."""
        self._bits.append(1 if value else 0)

    def to_int(self) -> int:
        """Return the written bits as one unsigned integer (first bit = MSB)."""
        value = 0
        for bit in self._bits:
            value = (value << 1) | bit
        return value

    def to_bytes(self) -> bytes:
        """Convert the bit buffer to bytes.

        A trailing partial byte is padded with zeros on the LSB side.
        """
        if not self._bits:
            return b""

        padding = (-len(self._bits)) % 8
        return (self.to_int() << padding).to_bytes((len(self._bits) + padding) // 8, "big")


class BitUnpacker:
    """Reads bits MSB-first from a byte buffer.

    Example:
        >>> unpacker = BitUnpacker(b"\\xaa")
        >>> unpacker.read_bool()
        True
        >>> unpacker.skip(5)
        >>> unpacker.read_bool()
        True
    """

    def __init__(self, data: bytes) -> None:
        self._bits: list[int] = []
        for byte in data:
            for i in range(7, -1, -1):
                self._bits.append((byte >> i) & 1)
        self._position = 0

    def read_bool(self) -> bool:
        """Read a single bit.

        Raises:
            IndexError: If no more bits are available
        """
        if self._position >= len(self._bits):
            raise IndexError("Attempted to read past end of bit buffer")

        value = self._bits[self._position] == 1
        self._position += 1
        return value

    def skip(self, num_bits: int = 1) -> None:
        """Advance past ``num_bits`` bits without interpreting them.

        Raises:
            IndexError: If not enough bits are available
        """
        if self._position + num_bits > len(self._bits):
            raise IndexError(
                f"Cannot skip {num_bits} bits, have {len(self._bits) - self._position}"
            )
        self._position += num_bits

