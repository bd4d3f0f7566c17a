# Import parser modules for their side effects (they register themselves).
# Mark as intentionally unused to satisfy Ruff.
from . import syslog as _syslog  # noqa: F401

# Explicit re-exports for library users.
from . import config as config
from .base import (
    REGISTRY as REGISTRY,
)
from .base import (
    LogEntry as LogEntry,
)
from .base import (
    ParseFunc as ParseFunc,
)
from .base import (
    get_parser as get_parser,
)
from .errors import (
    InvalidRouterToken as InvalidRouterToken,
)
from .errors import (
    InvalidTimestamp as InvalidTimestamp,
)
from .errors import (
    ParseError as ParseError,
)
from .errors import (
    UnexpectedEndOfInput as UnexpectedEndOfInput,
)
from .router import normalize as normalize
from .syslog import parse as parse

__all__ = [
    "REGISTRY",
    "config",
    "InvalidRouterToken",
    "InvalidTimestamp",
    "LogEntry",
    "ParseError",
    "ParseFunc",
    "UnexpectedEndOfInput",
    "get_parser",
    "normalize",
    "parse",
]
