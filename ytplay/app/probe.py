import logging
import re

from ytplay.core.interfaces import Host

logger = logging.getLogger(__name__)

PROBE_SCHEMES = ("http", "https")
DOCTYPE = b"<!doctype"
_WHITESPACE = re.compile(rb"\s")

def peek_significant(host: Host, count: int = len(DOCTYPE)) -> bytes:
    """
    Peek until `count` non-whitespace bytes are available, growing the peek
    one byte at a time from `count`.

    Returns fewer than `count` bytes only when the resource ends first.
    """
    size = count
    while True:
        data = host.peek(size)
        significant = _WHITESPACE.sub(b"", data).lower()
        if len(significant) >= count:
            return significant[:count]
        if len(data) < size:
            return significant
        size += 1

def probe(host: Host) -> bool:
    """
    Decide whether the player should hand this URL to us.

    Only http/https are considered; anything else is rejected without
    reading. The check accepts resources that open with a doctype
    declaration, which is how web pages for video sites start.
    """
    if host.access not in PROBE_SCHEMES:
        return False
    head = peek_significant(host)
    matched = head == DOCTYPE
    logger.debug("Probe %s: %r -> %s", host.url, head, matched)
    return matched
