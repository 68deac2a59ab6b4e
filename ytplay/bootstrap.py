from typing import Optional

from ytplay.app.media_service import MediaService
from ytplay.app.subtitles import SubtitleService
from ytplay.core.config import Settings, load_settings
from ytplay.extractors.registry import ExtractorRegistry
from ytplay.extractors.ytdl.extractor import YtdlExtractor
from ytplay.infra.network.curl import CurlDownloader

def create_container(settings: Optional[Settings] = None) -> dict:
    # 1. Config
    if settings is None:
        settings = load_settings()

    # 2. Infra
    downloader = CurlDownloader(settings.downloader, timeout=settings.tool_timeout)

    # 3. Extractors
    registry = ExtractorRegistry()
    registry.register(YtdlExtractor(settings.tools, settings.format_selector, timeout=settings.tool_timeout))

    # 4. Services
    subtitles = SubtitleService(downloader, language=settings.subtitle_language, download_dir=settings.download_dir)
    media_service = MediaService(registry, subtitles=subtitles, log_level=settings.log_level)

    return {
        "settings": settings,
        "downloader": downloader,
        "registry": registry,
        "subtitles": subtitles,
        "media_service": media_service,
    }
