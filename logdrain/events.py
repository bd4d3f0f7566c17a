# logdrain/events.py
from __future__ import annotations

import hashlib
import json
import re
from typing import Any

from .base import LogEntry, NormalizedEvent

# "<APP-NAME>[<PROCID>]: " prefix that parse() puts on every message
PREFIX_RE = re.compile(r"^(?P<app>[^\[\s]+)\[(?P<procid>[^\]\s]+)\]: ")


def to_event(
    entry: LogEntry, source_path: str, line_number: int, raw: str = ""
) -> NormalizedEvent:
    """Map a parsed entry onto the normalized event schema used for storage."""
    attrs: dict[str, Any] = {}
    m = PREFIX_RE.match(entry.message)
    if m:
        attrs = m.groupdict()
    return NormalizedEvent(
        source_path=source_path,
        source_type="heroku",
        line_number=line_number,
        event_time=entry.time.isoformat(),
        level="",
        message=entry.message,
        attrs=attrs,
        raw_excerpt=raw[:500],
    )


def content_hash(ev: dict[str, Any]) -> str:
    """
    Key for spotting the same drain entry delivered twice.
    Only what the log line says counts; where and on which line it was read does not.
    """
    key = [ev.get("source_type"), ev.get("event_time"), ev.get("message")]
    return hashlib.sha256(json.dumps(key).encode("utf-8")).hexdigest()
