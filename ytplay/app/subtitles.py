import logging
import os
import re
from typing import List, Mapping, Optional

from ytplay.core.download_dir import get_download_directory
from ytplay.core.interfaces import FileDownloader
from ytplay.extractors.ytdl.models import ExtractorRecord, SubtitleTrack

logger = logging.getLogger(__name__)

PREFERRED_EXT = "vtt"
FALLBACK_EXT = "srt"

def _pick_track(tracks: List[SubtitleTrack]) -> Optional[SubtitleTrack]:
    """First vtt track, else the first srt track. Other formats are ignored."""
    fallback = None
    for track in tracks:
        logger.debug("Checking subtitle track: ext=%s, url=%s", track.ext, track.url)
        if track.ext == PREFERRED_EXT:
            return track
        if track.ext == FALLBACK_EXT and fallback is None:
            fallback = track
    return fallback

def select_subtitle(record: ExtractorRecord, language: str = "en") -> Optional[SubtitleTrack]:
    """
    Choose a subtitle track in `language`.

    Manual subtitles win over automatic captions whenever the language is
    listed there, even if none of its tracks turn out to be usable.
    """
    if language in record.subtitles:
        logger.info("Selected %s subtitles", language)
        tracks = record.subtitles[language]
    elif language in record.automatic_captions:
        logger.info("Selected automatic %s captions", language)
        tracks = record.automatic_captions[language]
    else:
        return None

    track = _pick_track(tracks)
    if track is None:
        logger.info("No suitable %s subtitle (.vtt or .srt) found", language)
    return track

def subtitle_filename(record_id: Optional[str], ext: str) -> str:
    """<id>_<ext>.<ext>, with characters unsafe for filenames replaced."""
    stem = re.sub(r'[<>:"/\\|?*\x00-\x1f]', '_', record_id or "subtitle").strip(". ") or "subtitle"
    return f"{stem}_{ext}.{ext}"

class SubtitleService:
    """
    Selects and downloads a subtitle for a record.

    Download problems never propagate: the item is simply produced without
    a subtitle.
    """

    def __init__(self, downloader: FileDownloader, language: str = "en", download_dir: Optional[str] = None,
                 env: Optional[Mapping[str, str]] = None):
        self.downloader = downloader
        self.language = language
        self.download_dir = download_dir
        self.env = env

    def local_path_for(self, record: ExtractorRecord, track: SubtitleTrack) -> str:
        directory = get_download_directory(self.env, override=self.download_dir)
        return os.path.join(directory, subtitle_filename(record.id, track.ext))

    def fetch(self, record: ExtractorRecord) -> Optional[str]:
        """Returns the local subtitle path, or None."""
        track = select_subtitle(record, self.language)
        if track is None or not track.url:
            return None

        local_path = self.local_path_for(record, track)
        logger.info("Downloading subtitle from: %s (ext: %s)", track.url, track.ext)
        if not self.downloader.download(track.url, local_path):
            logger.warning("Failed to download subtitle file from %s", track.url)
            return None

        logger.info("Subtitle downloaded to: %s", local_path)
        return local_path
