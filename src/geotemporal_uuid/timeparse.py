"""Resolution of loosely typed time arguments.

Command lines and host bindings receive time as nothing at all, a number of
milliseconds, a numeric string, or an ISO-8601 string. This module turns
any of those into one aware UTC datetime before the codec sees it.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Literal

from pydantic import TypeAdapter, ValidationError

from .codec.config import utc_now
from .exceptions import OutOfRangeError, TimeFormatError
from .models.fields import UNIX_EPOCH, millis_to_datetime

TimeKind = Literal["now", "datetime", "millis", "iso"]

_MILLIS = re.compile(r"[+-]?\d+")
_ISO_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}")

_DATETIME_ADAPTER: TypeAdapter[datetime] = TypeAdapter(datetime)


@dataclass(frozen=True)
class TimeInput:
    """A time argument tagged with how it should be interpreted.

    Attributes:
        kind: ``now`` (no value), ``datetime``, ``millis`` (int or float
            milliseconds since the Unix epoch) or ``iso`` (ISO-8601 string)
        value: The payload for that kind
    """

    kind: TimeKind
    value: Any = None

    @classmethod
    def classify(cls, value: Any) -> TimeInput:
        """Tag a raw argument without interpreting it yet.

        Raises:
            TimeFormatError: If the argument type is not supported
        """
        if value is None:
            return cls("now")
        if isinstance(value, datetime):
            return cls("datetime", value)
        # bool is an int subclass but never a meaningful instant
        if isinstance(value, bool):
            raise TimeFormatError(f"Invalid time argument: {value!r}")
        if isinstance(value, (int, float)):
            return cls("millis", value)
        if isinstance(value, str):
            text = value.strip()
            if _MILLIS.fullmatch(text):
                try:
                    return cls("millis", int(text))
                except ValueError as err:
                    # int() refuses strings past sys.get_int_max_str_digits()
                    raise TimeFormatError(
                        f"Millisecond timestamp of {len(text)} characters is out of range"
                    ) from err
            return cls("iso", text)
        raise TimeFormatError(
            "Invalid time argument. Expected number (ms), string (ISO/ms), None or datetime, "
            f"got {type(value).__name__}"
        )

    def resolve(self, clock: Callable[[], datetime] = utc_now) -> datetime:
        """Interpret the tagged value as an aware UTC datetime.

        Raises:
            TimeFormatError: If the value cannot be parsed or lies outside the
                ``datetime`` range
        """
        if self.kind == "now":
            return _as_utc(clock())
        if self.kind == "datetime":
            return _as_utc(self.value)
        if self.kind == "millis":
            return _from_millis(self.value)
        return _from_iso(self.value)


def resolve_time(value: Any, clock: Callable[[], datetime] = utc_now) -> datetime:
    """Resolve ``None``, milliseconds, a numeric string or an ISO-8601 string.

    Args:
        value: The raw time argument
        clock: Source of the current instant when value is None

    Returns:
        Aware UTC datetime

    Raises:
        TimeFormatError: If value cannot be interpreted

    Examples:
        >>> resolve_time(1609459200000).isoformat()
        '2021-01-01T00:00:00+00:00'
        >>> resolve_time("2021-01-01T02:00:00+02:00").isoformat()
        '2021-01-01T00:00:00+00:00'
    """
    return TimeInput.classify(value).resolve(clock)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError as err:
        raise TimeFormatError(f"Timestamp {value.isoformat()} is out of range in UTC") from err


def _from_millis(ms: int | float) -> datetime:
    if isinstance(ms, float):
        if not math.isfinite(ms):
            raise TimeFormatError(f"Invalid millisecond timestamp: {ms}")
        try:
            return UNIX_EPOCH + timedelta(milliseconds=ms)
        except OverflowError as err:
            raise TimeFormatError(f"Millisecond timestamp {ms} is out of range") from err
    try:
        return millis_to_datetime(ms)
    except OutOfRangeError as err:
        raise TimeFormatError(f"Millisecond timestamp {ms} is out of range") from err


def _from_iso(text: str) -> datetime:
    # pydantic also reads bare numbers as unix seconds; only dates get through
    if not _ISO_PREFIX.match(text):
        raise TimeFormatError(f"Invalid ISO timestamp format: {text!r}")
    try:
        parsed = _DATETIME_ADAPTER.validate_python(text)
    except ValidationError as err:
        raise TimeFormatError(f"Invalid ISO timestamp format: {text!r}") from err
    return _as_utc(parsed)
