# logdrain/router.py
import logging

from . import config
from .errors import InvalidRouterToken

logger = logging.getLogger(__name__)

QUOTED_KEYS = frozenset({"host", "request_id", "dyno"})
# Values like "3375ms"; the two-letter unit is dropped.
TIMING_KEYS = frozenset({"connect", "service"})
UNIT_LEN = 2


def _malformed(token: str, reason: str, strict: bool) -> str:
    if strict:
        raise InvalidRouterToken(f"{token!r}: {reason}")
    logger.debug("Passing router token %r through unchanged: %s", token, reason)
    return token


def _rewrite(token: str, strict: bool) -> str:
    key, sep, value = token.partition("=")
    if not sep:
        return _malformed(token, "missing '='", strict)

    if key in QUOTED_KEYS:
        return f'"{value}"'
    if key in TIMING_KEYS:
        if len(value) <= UNIT_LEN or not value[-UNIT_LEN:].isalpha():
            return _malformed(token, "expected a value with a 2-letter unit", strict)
        return value[:-UNIT_LEN]
    return value


def normalize(body: str, strict: bool | None = None) -> str:
    """
    Drop the keys from the key=value pairs of a router log message.

    at=info method=GET host=example.com connect=1ms  ->  info GET "example.com" 1
    """
    if strict is None:
        strict = config.ROUTER_STRICT
    return " ".join(_rewrite(token, strict) for token in body.split())
