import logging
from typing import Any, Optional, Tuple

import requests

from ytplay.core.interfaces import Host

logger = logging.getLogger(__name__)

HTTP_SCHEMES = ("http", "https")
PEEK_CHUNK_SIZE = 1024
DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,*/*;q=0.8",
}

def split_url(url: str) -> Tuple[str, str]:
    """'https://host/x' -> ('https', 'host/x')"""
    access, sep, path = url.partition("://")
    if not sep or not access:
        raise ValueError(f"Not an absolute URL: {url!r}")
    return access.lower(), path

class HttpHost(Host):
    """
    Stand-alone host for running outside the player.

    The resource is fetched lazily with a streaming GET the first time it is
    peeked at, and the bytes read so far are kept so that longer peeks only
    read what is missing.
    """

    def __init__(self, url: str, session: Optional[requests.Session] = None, timeout=(10, 30),
                 msg: Optional[Any] = None):
        self._access, self._path = split_url(url)
        self._session = session
        self._owns_session = session is None
        self.timeout = timeout
        self.msg = msg

        self._response = None
        self._chunks = None
        self._buffer = b""
        self._eof = False

    @property
    def access(self) -> str:
        return self._access

    @property
    def path(self) -> str:
        return self._path

    def _open(self):
        if self._session is None:
            self._session = requests.Session()
        logger.debug("Opening %s for peeking", self.url)
        self._response = self._session.get(self.url, stream=True, timeout=self.timeout, headers=DEFAULT_HEADERS)
        if not self._response.ok:
            logger.debug("%s answered %s, peeking at the body anyway", self.url, self._response.status_code)
        self._chunks = self._response.iter_content(chunk_size=PEEK_CHUNK_SIZE)

    def peek(self, size: int) -> bytes:
        if self._access not in HTTP_SCHEMES:
            return b""
        if len(self._buffer) < size and not self._eof:
            if self._response is None:
                self._open()
            while len(self._buffer) < size:
                chunk = next(self._chunks, None)
                if chunk is None:
                    self._eof = True
                    break
                self._buffer += chunk
        return self._buffer[:size]

    def close(self):
        if self._response is not None:
            self._response.close()
            self._response = None
            self._chunks = None
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
