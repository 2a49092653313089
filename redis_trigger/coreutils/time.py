import re
from datetime import datetime, timedelta, timezone

from redis_trigger.exceptions import TriggerTimeError

# YYYY-MM-DDTHH:MM:SS[(.|,)fraction](Z|+HH:MM|-HH:MM)
RFC3339_PATTERN = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:[.,](?P<fraction>\d+))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})$"
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_offset(offset: str) -> timezone:
    if offset == "Z":
        return timezone.utc

    sign = -1 if offset[0] == "-" else 1
    hours, minutes = int(offset[1:3]), int(offset[4:6])
    if hours > 23 or minutes > 59:
        raise ValueError(f"offset out of range: {offset}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_rfc3339_nano(value: str) -> datetime:
    """Parse an RFC 3339 timestamp with up to nanosecond precision

    Digits past microseconds are truncated since datetime stops there.

    Args:
        value: timestamp such as "2025-01-02T03:04:05.123456789+09:00"

    Returns:
        Timezone-aware datetime

    Raises:
        TriggerTimeError: if the value is not a valid RFC 3339 timestamp
    """
    match = RFC3339_PATTERN.match(value)
    if match is None:
        raise TriggerTimeError(
            f"Failed to parse TRIGGER_TIME: {value!r} is not an RFC3339 timestamp"
        )

    fraction = (match.group("fraction") or "").ljust(6, "0")[:6]
    try:
        return datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            int(fraction),
            tzinfo=_parse_offset(match.group("offset")),
        )
    except ValueError as e:
        raise TriggerTimeError(f"Failed to parse TRIGGER_TIME: {value!r}: {e}") from e


def format_rfc3339_nano(dt: datetime) -> str:
    """Format a datetime as RFC 3339 with trailing fractional zeros trimmed."""
    text = dt.strftime("%Y-%m-%dT%H:%M:%S")
    if dt.microsecond:
        text += "." + f"{dt.microsecond:06d}".rstrip("0")

    offset = dt.utcoffset()
    if offset is None or offset == timedelta(0):
        return text + "Z"

    total_minutes = int(offset.total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


def format_duration(seconds: float) -> str:
    """Render seconds rounded to the nearest second, e.g. "1h2m3s" or "45s"."""
    total = int(seconds + 0.5) if seconds >= 0 else -int(-seconds + 0.5)
    sign = "-" if total < 0 else ""
    total = abs(total)

    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    return f"{sign}{secs}s"
