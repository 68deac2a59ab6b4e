import logging
import os
import subprocess
from typing import List, Optional

from ytplay.core.interfaces import FileDownloader

logger = logging.getLogger(__name__)

class CurlDownloader(FileDownloader):
    """
    Downloads with an external curl.

    -L follows redirects, -sS is silent but still reports errors. We block
    until curl exits and trust its exit status before looking at the file.
    """

    def __init__(self, executable: str = "curl", timeout: Optional[float] = None):
        self.executable = executable
        self.timeout = timeout

    def command(self, url: str, local_path: str) -> List[str]:
        return [self.executable, "-L", "-sS", "-o", local_path, url]

    def download(self, url: str, local_path: str) -> bool:
        cmd = self.command(url, local_path)
        logger.info("Attempting to download URL: %s to %s", url, local_path)
        try:
            proc = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                stdin=subprocess.DEVNULL,
                text=True,
                errors="replace",
                timeout=self.timeout,
            )
        except FileNotFoundError:
            logger.error("Downloader not found: %s", self.executable)
            return False
        except subprocess.TimeoutExpired:
            logger.error("Download timed out after %ss: %s", self.timeout, url)
            self._discard(local_path)
            return False
        except OSError as e:
            logger.error("Failed to execute %s: %s", subprocess.list2cmdline(cmd), e)
            return False

        if proc.returncode != 0:
            logger.error("%s exited with status %s: %s", self.executable, proc.returncode, (proc.stderr or "").strip())
            self._discard(local_path)
            return False

        return self.verify(local_path)

    def verify(self, local_path: str) -> bool:
        """The file must exist and be non-empty. Empty leftovers are removed."""
        try:
            size = os.path.getsize(local_path)
        except OSError:
            logger.error("Downloaded file not found or not readable after download: %s", local_path)
            return False

        if size > 0:
            logger.info("File downloaded successfully: %s (Size: %d bytes)", local_path, size)
            return True

        logger.error("Downloaded file is empty: %s", local_path)
        self._discard(local_path)
        return False

    @staticmethod
    def _discard(local_path: str) -> None:
        try:
            os.remove(local_path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Could not remove %s: %s", local_path, e)
