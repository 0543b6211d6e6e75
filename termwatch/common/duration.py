"""Duration parsing and formatting."""

import re
from collections.abc import Iterable

_SECONDS_ONLY = re.compile(r"\d+", re.ASCII)
_MINUTES_SECONDS = re.compile(r"(\d+):(\d{2})", re.ASCII)
_HOURS_MINUTES_SECONDS = re.compile(r"(\d+):(\d{2}):(\d{2})", re.ASCII)

# longest digit run accepted in a single field
_MAX_FIELD_DIGITS = 18


class DurationError(ValueError):
    """Raised for a duration string that cannot be turned into seconds."""


def _to_int(digits: str) -> int:
    if len(digits) > _MAX_FIELD_DIGITS:
        raise DurationError("duration is too large")
    return int(digits)


def _check_fields(seconds: int, minutes: int = 0) -> None:
    """Reject second/minute fields that are not less than 60."""
    fields = []
    if seconds >= 60:
        fields.append("second's")
    if minutes >= 60:
        fields.append("minute's")
    if fields:
        raise DurationError(f"{' and '.join(fields)} field must be less than 60")


def parse_duration(text: str) -> int:
    """Return the total number of seconds in text, which must be of format [[hh:]mm:]ss.

    The minutes field may exceed 59 when no hours field is given.
    """
    if _SECONDS_ONLY.fullmatch(text):
        return _to_int(text)

    if m := _MINUTES_SECONDS.fullmatch(text):
        minutes, seconds = _to_int(m.group(1)), _to_int(m.group(2))
        _check_fields(seconds)
        return minutes * 60 + seconds

    if m := _HOURS_MINUTES_SECONDS.fullmatch(text):
        hours, minutes, seconds = (_to_int(g) for g in m.groups())
        _check_fields(seconds, minutes)
        return hours * 3600 + minutes * 60 + seconds

    raise DurationError("duration must be in [[hh:]mm:]ss format")


def parse_durations(texts: Iterable[str]) -> list[int]:
    """Parse every duration, rejecting zero-length ones."""
    durations = []
    for text in texts:
        seconds = parse_duration(text)
        if seconds == 0:
            raise DurationError("0 not allowed; only positive integers")
        durations.append(seconds)
    return durations


def decompose_seconds(s: int) -> tuple[int, int, int]:
    """Split seconds into hours, minutes and seconds."""
    return s // 3600, (s // 60) % 60, s % 60


def format_seconds(s: int) -> str:
    """Format seconds as hh:mm:ss."""
    hrs, mins, secs = decompose_seconds(s)
    return f"{hrs:02d}:{mins:02d}:{secs:02d}"


def format_seconds_letters(s: int) -> str:
    """Format seconds as e.g. ``1h 02m 03s``, omitting leading zero fields."""
    hrs, mins, secs = decompose_seconds(s)
    if hrs:
        return f"{hrs}h {mins:02d}m {secs:02d}s"
    if mins:
        return f"{mins}m {secs:02d}s"
    return f"{secs}s"
