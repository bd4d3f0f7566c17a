# logdrain/syslog.py
"""
Parser for Heroku syslog lines delivered by an HTTPS log drain.

One line looks like:

    89 <45>1 2016-10-15T08:59:08.723822+00:00 host heroku web.1 - State changed

i.e. `<frame-len> <PRI>VERSION TIMESTAMP HOSTNAME APP-NAME PROCID MSGID MSG`.
Only TIMESTAMP, APP-NAME, PROCID and MSG are kept; the other fields are
skipped by counting spaces and never inspected.
"""

import logging

from . import router
from .base import LogEntry, register
from .errors import ParseError, UnexpectedEndOfInput
from .timestamps import parse_timestamp

logger = logging.getLogger(__name__)

SPACE = 0x20
ROUTER_PROCID = "router"


class _Cursor:
    """Position over a borrowed line buffer, scoped to one parse() call."""

    def __init__(self, buf: memoryview):
        self.buf = buf
        self.pos = 0
        self.len = len(buf)

    def skip(self, num: int) -> None:
        """Advance past exactly `num` spaces, stopping right after the last one."""
        skipped = 0
        while self.pos < self.len:
            is_space = self.buf[self.pos] == SPACE
            self.pos += 1
            if is_space:
                skipped += 1
                if skipped == num:
                    return
        raise UnexpectedEndOfInput("unexpected EOF")

    def next_word(self) -> str:
        """Return the bytes up to the next space and move past that space."""
        start = self.pos
        self.skip(1)
        return _decode(self.buf[start : self.pos - 1])

    def rest(self) -> str:
        return _decode(self.buf[self.pos :])


def _decode(chunk: memoryview) -> str:
    return bytes(chunk).decode("utf-8", errors="replace")


def _scan(cur: _Cursor) -> LogEntry:
    try:
        cur.skip(2)
    except ParseError as e:
        raise e.at("skip to TIMESTAMP") from e

    try:
        ts = parse_timestamp(cur.next_word())
    except ParseError as e:
        raise e.at("parse TIMESTAMP") from e

    try:
        cur.skip(1)
    except ParseError as e:
        raise e.at("skip to APP-NAME") from e

    try:
        app = cur.next_word()
    except ParseError as e:
        raise e.at("read APP-NAME") from e

    try:
        procid = cur.next_word()
    except ParseError as e:
        raise e.at("read PROCID") from e

    try:
        cur.skip(1)
    except ParseError as e:
        raise e.at("skip to MSG") from e

    msg = cur.rest()
    if procid == ROUTER_PROCID:
        try:
            msg = router.normalize(msg)
        except ParseError as e:
            raise e.at("normalize router MSG") from e

    return LogEntry(time=ts, message=f"{app}[{procid}]: {msg}")


@register("heroku")
def parse(line: bytes | bytearray | memoryview | str) -> LogEntry:
    """
    Parse one raw drain line (no trailing newline) into a LogEntry.

    Raises a ParseError subclass naming the field that could not be read;
    nothing is returned for a line that fails anywhere.
    """
    if isinstance(line, str):
        line = line.encode("utf-8")
    try:
        return _scan(_Cursor(memoryview(line)))
    except ParseError as e:
        logger.debug("Could not parse drain line: %s", e)
        raise
