# logdrain/base.py
from collections.abc import Callable
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class LogEntry(BaseModel):
    """A single parsed drain line: when it happened and what was logged."""

    model_config = ConfigDict(frozen=True)

    time: datetime
    message: str


class NormalizedEvent(dict[str, Any]):
    """
    Dict with normalized keys:
    - source_path: str
    - source_type: str ("heroku")
    - line_number: int
    - event_time: str (ISO 8601, UTC)
    - level: str
    - message: str
    - attrs: dict
    - raw_excerpt: str
    """


# A ParseFunc receives one raw (unparsed) line and returns the parsed entry,
# raising ParseError when the line cannot be parsed.
ParseFunc = Callable[[bytes], LogEntry]

REGISTRY: dict[str, ParseFunc] = {}


def register(name: str):
    """
    Decorator to register a parse function under a given name.

    Args:
        name (str): Identifier for the log source (e.g. "heroku").
    """

    def decorator(func: ParseFunc) -> ParseFunc:
        REGISTRY[name.lower()] = func
        return func

    return decorator


def get_parser(name: str) -> ParseFunc:
    """Look up a registered parse function; raises KeyError if unknown."""
    try:
        return REGISTRY[name.lower()]
    except KeyError:
        raise KeyError(f"No parser registered for {name!r}") from None
