import re
from datetime import timedelta

from timedtext.config import HOUR_BIAS, HOUR_BIAS_THRESHOLD
from timedtext.errors import TimestampParseError

# HH:MM:SS.fff, fraction is read as a decimal part of a second
TTML_CLOCK_TIME = re.compile(r'^(\d{2,}):([0-5]\d):([0-5]\d)\.(\d{1,3})$')


def parse_ttml_time(time_str):
    """Convert a TTML clock time (HH:MM:SS.fff) to a timedelta."""
    match = TTML_CLOCK_TIME.match(time_str.strip()) if time_str is not None else None
    if not match:
        raise TimestampParseError(f"Invalid TTML time expression: {time_str!r}")

    hours, minutes, seconds, fraction = match.groups()
    # ".5" and ".50" are both half a second
    milliseconds = int(fraction.ljust(3, '0'))
    return timedelta(hours=int(hours), minutes=int(minutes), seconds=int(seconds),
                     milliseconds=milliseconds)


def adjust_time_zone_bias(value):
    """Return value with the 10 hour upstream offset removed, if it carries one."""
    if value // timedelta(hours=1) >= HOUR_BIAS_THRESHOLD:
        return value - timedelta(hours=HOUR_BIAS)
    return value


def format_srt_time(value):
    """Convert a timedelta to SRT time format (HH:MM:SS,mmm)."""
    total_ms = value // timedelta(milliseconds=1)
    hours, rest = divmod(total_ms, 3600000)
    minutes, rest = divmod(rest, 60000)
    seconds, millis = divmod(rest, 1000)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"
