from dataclasses import dataclass
from typing import Optional

from ytplay.extractors.ytdl.models import ExtractorRecord
from ytplay.sources.resolver import resolve_url

@dataclass(frozen=True)
class StreamSelection:
    """The stream chosen for one record."""
    url: str
    includes_audio: bool = True
    audio_url: Optional[str] = None

    @property
    def slave_url(self) -> Optional[str]:
        """Separate audio to attach as an input slave, if the video lacks it."""
        if self.includes_audio or not self.audio_url or self.audio_url == self.url:
            return None
        return self.audio_url

def select_stream(record: ExtractorRecord) -> Optional[StreamSelection]:
    """
    Pick the playable URL for a record.

    Order: the record's own URL, then the requested (video+audio) formats,
    then the plain format list. Within a list the last match wins; the
    extractor already orders formats worst to best.

    Returns None when nothing playable is found.
    """
    url = record.direct_url
    includes_audio = True
    audio_url = None

    if not url:
        if record.requested_formats is not None:
            for fmt in record.requested_formats:
                if fmt.has_video:
                    url = fmt.stream_url
                    includes_audio = fmt.has_audio
                if fmt.has_audio:
                    audio_url = fmt.stream_url
        elif record.formats:
            url = record.formats[-1].stream_url
            for fmt in record.formats:
                if fmt.has_video and fmt.has_audio:
                    url = fmt.stream_url

    if not url:
        return None

    return StreamSelection(resolve_url(record, url), includes_audio, audio_url)
