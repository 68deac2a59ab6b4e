"""
Bridge between the standard logging module and the player's own log.

Every module logs with logging.getLogger(__name__). When the player hands
us a `msg` facility, records are forwarded there; when it does not (or only
partially does), they fall back to the console so nothing is lost.
"""

import logging
import sys
from typing import Any, Optional

ROOT_LOGGER = "ytplay"

# player method name per level, most specific first
_HOST_METHODS = {
    logging.ERROR: ("err", "error"),
    logging.WARNING: ("warn", "warning"),
    logging.INFO: ("info",),
    logging.DEBUG: ("dbg", "debug"),
}

class HostLogHandler(logging.Handler):
    def __init__(self, msg: Optional[Any] = None, stream=None):
        super().__init__()
        self.msg = msg
        self.fallback = logging.StreamHandler(stream or sys.stderr)
        self.fallback.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    def _host_method(self, levelno: int):
        if self.msg is None:
            return None
        for level in sorted(_HOST_METHODS, reverse=True):
            if levelno >= level:
                for name in _HOST_METHODS[level]:
                    fn = getattr(self.msg, name, None)
                    if callable(fn):
                        return fn
                return None
        return None

    def emit(self, record: logging.LogRecord) -> None:
        fn = self._host_method(record.levelno)
        if fn is None:
            self.fallback.handle(record)
            return
        try:
            fn(self.format(record))
        except Exception:
            # player side blew up, keep the message anyway
            self.fallback.handle(record)

def setup_logging(level: str = "INFO", host: Optional[Any] = None, stream=None) -> HostLogHandler:
    """Install (or replace) the ytplay handler. Safe to call more than once."""
    logger = logging.getLogger(ROOT_LOGGER)
    for h in list(logger.handlers):
        if isinstance(h, HostLogHandler):
            logger.removeHandler(h)

    handler = HostLogHandler(getattr(host, "msg", None), stream=stream)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    logger.propagate = False
    return handler
