"""Exception hierarchy for geotemporal_uuid.

All exceptions inherit from GeoTemporalError so callers can catch any
package-specific failure with a single except clause.
"""

from __future__ import annotations


class GeoTemporalError(Exception):
    """Base exception for all geotemporal_uuid errors."""

    pass


class OutOfRangeError(GeoTemporalError):
    """Raised when a value falls outside the domain the codec can represent.

    Examples:
        - Latitude outside [-90, 90] or longitude outside [-180, 180]
        - NaN coordinates
        - Explicit random value wider than the random field
        - Decoded millisecond count beyond ``datetime.max``
    """

    pass


class MalformedInputError(GeoTemporalError):
    """Raised when identifier input cannot be parsed.

    Examples:
        - Byte sequence that is not exactly 16 bytes long
        - String that is not 32 hex digits once hyphens are stripped
        - Non-hex characters
    """

    pass


class TimeFormatError(MalformedInputError):
    """Raised when a time argument cannot be resolved to an instant.

    Examples:
        - String that is neither a millisecond count nor ISO-8601
        - Unsupported argument type (bool, list, ...)
        - Millisecond count outside the ``datetime`` range
    """

    pass


class LayoutError(GeoTemporalError):
    """Raised when a bit layout description is inconsistent.

    Examples:
        - Segment widths do not fill the non-reserved positions
        - Reserved position outside the identifier
        - Duplicate segment names
    """

    pass
