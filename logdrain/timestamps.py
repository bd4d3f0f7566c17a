import re
from datetime import datetime, timezone

from dateutil import parser as dtp

from .errors import InvalidTimestamp

# RFC3339 with optional fractional seconds (up to nanoseconds) and a mandatory offset.
# Hours stop at 23; isoparse would roll "24:00:00" over to the next day.
RFC3339_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}T(?:[01]\d|2[0-3]):[0-5]\d:[0-5]\d(?:\.\d{1,9})?(?:Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def parse_timestamp(word: str) -> datetime:
    """
    Parse a strict RFC3339 timestamp and return it as an aware UTC datetime.
    Fractional digits past microseconds are truncated.
    """
    if not RFC3339_RE.fullmatch(word):
        raise InvalidTimestamp(f"{word!r} is not an RFC3339 timestamp")
    try:
        ts = dtp.isoparse(word)
    except (ValueError, OverflowError) as exc:
        raise InvalidTimestamp(f"{word!r}: {exc}") from exc
    return ts.astimezone(timezone.utc)
