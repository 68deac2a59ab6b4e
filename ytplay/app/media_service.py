import logging
from typing import List, Optional

from ytplay.app.formats import select_stream
from ytplay.app.playlist import build_item
from ytplay.app.probe import probe
from ytplay.app.subtitles import SubtitleService
from ytplay.core.entities import PlaylistItem
from ytplay.core.hostlog import setup_logging
from ytplay.core.interfaces import Host
from ytplay.extractors.registry import ExtractorRegistry
from ytplay.extractors.ytdl.extractor import ExtractorUnavailableError

logger = logging.getLogger(__name__)

class MediaService:
    """
    Answers the player's two questions about a URL.

    RESPONSIBILITIES:
    - probe(): should we handle this URL at all.
    - parse(): Extraction -> stream selection -> subtitle -> playlist items.
    """

    def __init__(self, registry: ExtractorRegistry, subtitles: Optional[SubtitleService] = None,
                 log_level: str = "INFO"):
        self.registry = registry
        self.subtitles = subtitles
        self.log_level = log_level

    def _attach_host_log(self, host: Host):
        """Send our log records to the player when it exposes a `msg` facility."""
        if getattr(host, "msg", None) is not None:
            setup_logging(self.log_level, host)

    def probe(self, host: Host) -> bool:
        self._attach_host_log(host)
        return probe(host)

    def parse(self, host: Host) -> List[PlaylistItem]:
        """
        Build the playlist for the host's URL.

        Raises:
            ExtractorUnavailableError: no extractor could handle the URL.
        """
        self._attach_host_log(host)
        url = host.url
        extractor = self.registry.get_extractor(url)
        if extractor is None:
            raise ExtractorUnavailableError(f"No extractor supports {url}")

        result = extractor.extract(url)

        items = []
        for record in result.records:
            selection = select_stream(record)
            if selection is None:
                logger.info("No playable URL for entry %s, skipping", record.id)
                continue

            subtitle_path = self.subtitles.fetch(record) if self.subtitles else None
            if subtitle_path:
                logger.info("Added subtitle file to item options: %s", subtitle_path)

            items.append(build_item(record, selection, url, subtitle_path))

        return items
