from abc import ABC, abstractmethod
from typing import Any, Optional

class Host(ABC):
    """
    The media player side of a playlist request.

    The player tells us the access scheme and the rest of the URL, and lets
    us peek at the first bytes of the resource. `msg` is the player's
    logging facility (an object with info/warn/err callables) or None.
    """
    msg: Optional[Any] = None

    @property
    @abstractmethod
    def access(self) -> str:
        pass

    @property
    @abstractmethod
    def path(self) -> str:
        pass

    @abstractmethod
    def peek(self, size: int) -> bytes:
        """Returns up to `size` bytes from the start of the resource, without consuming them."""
        pass

    @property
    def url(self) -> str:
        return f"{self.access}://{self.path}"

class FileDownloader(ABC):
    @abstractmethod
    def download(self, url: str, local_path: str) -> bool:
        """Fetch `url` into `local_path`. Returns True only if a non-empty file landed there."""
        pass
