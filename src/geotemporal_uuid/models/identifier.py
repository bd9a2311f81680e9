"""The 128-bit identifier value type."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..exceptions import MalformedInputError

if TYPE_CHECKING:
    from .fields import DecodedFields

IDENTIFIER_BYTES = 16

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{32}")


@dataclass(frozen=True, order=True)
class GeoTemporalUuid:
    """An immutable 16-byte GeoTemporal identifier.

    Ordering and equality follow the big-endian bytes, so sorting identifiers
    sorts them by their packed payload.

    Example:
        >>> uid = GeoTemporalUuid.from_string("0188c2f1-8b4e-7a3c-9d12-0123456789ab")
        >>> str(uid)
        '0188c2f1-8b4e-7a3c-9d12-0123456789ab'
        >>> uid.hex
        '0188c2f18b4e7a3c9d120123456789ab'
    """

    data: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray)):
            raise MalformedInputError(
                f"Identifier requires bytes, got {type(self.data).__name__}"
            )
        if len(self.data) != IDENTIFIER_BYTES:
            raise MalformedInputError(
                f"Identifier must be {IDENTIFIER_BYTES} bytes, got {len(self.data)}"
            )
        if isinstance(self.data, bytearray):
            object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_bytes(cls, data: bytes) -> GeoTemporalUuid:
        """Wrap exactly 16 bytes.

        Raises:
            MalformedInputError: If data is not 16 bytes long
        """
        return cls(data)

    @classmethod
    def from_string(cls, text: str) -> GeoTemporalUuid:
        """Parse the grouped ``8-4-4-4-12`` form or 32 bare hex digits.

        Hyphens are stripped before parsing, so their placement is not
        checked. Upper and lower case hex are both accepted.

        Raises:
            MalformedInputError: If the cleaned string is not 32 hex digits
        """
        cleaned = text.replace("-", "")
        if len(cleaned) != IDENTIFIER_BYTES * 2:
            raise MalformedInputError(
                f"Invalid length: expected 32 hex digits, got {len(cleaned)}"
            )
        if not _HEX_DIGITS.fullmatch(cleaned):
            raise MalformedInputError(f"Invalid hex characters in {text!r}")
        return cls(bytes.fromhex(cleaned))

    @classmethod
    def from_int(cls, value: int) -> GeoTemporalUuid:
        """Build an identifier from its 128-bit unsigned integer value."""
        if not 0 <= value < 1 << (IDENTIFIER_BYTES * 8):
            raise MalformedInputError(f"Integer {value} does not fit in 128 bits")
        return cls(value.to_bytes(IDENTIFIER_BYTES, "big"))

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> GeoTemporalUuid:
        """Convert a standard library :class:`uuid.UUID`."""
        return cls(value.bytes)

    @property
    def bytes(self) -> bytes:
        return self.data

    @property
    def hex(self) -> str:
        return self.data.hex()

    @property
    def int(self) -> int:
        return int.from_bytes(self.data, "big")

    def to_uuid(self) -> uuid.UUID:
        """Return the same 128 bits as a standard library :class:`uuid.UUID`."""
        return uuid.UUID(bytes=self.data)

    def decode(self) -> DecodedFields:
        """Decode with the canonical layout. See :func:`geotemporal_uuid.decode`."""
        from ..codec.decoder import decode

        return decode(self)

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        h = self.data.hex()
        return f"{h[:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:]}"

    def __repr__(self) -> str:
        return f"GeoTemporalUuid('{self}')"
