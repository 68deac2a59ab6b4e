import logging
import os
import tempfile
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

PROBE_FILENAME = ".ytplay_write_test.tmp"

def is_writable_dir(directory: str) -> bool:
    """Create and remove a probe file in `directory`."""
    probe_path = os.path.join(directory, PROBE_FILENAME)
    try:
        with open(probe_path, "w") as f:
            f.write("")
        os.remove(probe_path)
        return True
    except OSError as e:
        logger.debug("Directory not writable: %s (%s)", directory, e)
        return False

def _temp_dir(env: Mapping[str, str]) -> str:
    return env.get("TEMP") or env.get("TMP") or tempfile.gettempdir()

def get_download_directory(env: Optional[Mapping[str, str]] = None, override: Optional[str] = None) -> str:
    """
    Pick a writable directory for downloaded subtitles.

    Order: explicit override, Windows Documents, Unix Documents, then the
    temp directory. Never raises; probing problems are only logged.
    """
    if env is None:
        env = os.environ

    if override:
        try:
            os.makedirs(override, exist_ok=True)
        except OSError as e:
            logger.warning("Could not create download directory %s: %s", override, e)
        if is_writable_dir(override):
            logger.info("Using configured download directory: %s", override)
            return override
        logger.warning("Configured download directory is not writable: %s", override)

    userprofile = env.get("USERPROFILE")
    if userprofile:
        documents = os.path.join(userprofile, "Documents")
        if is_writable_dir(documents):
            logger.info("Using Windows Documents directory: %s", documents)
            return documents

    home = env.get("HOME")
    if home:
        documents = os.path.join(home, "Documents")
        if is_writable_dir(documents):
            logger.info("Using Documents directory: %s", documents)
            return documents

    temp_dir = _temp_dir(env)
    logger.warning("Could not determine writable Documents directory. Falling back to temporary directory: %s", temp_dir)
    return temp_dir
