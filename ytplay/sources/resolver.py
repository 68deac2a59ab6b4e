from .detector import detect_platform

YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v="

def resolve_url(record, url: str) -> str:
    """
    Resolve a record's selected URL to its canonical form.

    youtube-dl hands out bare video ids for flat playlist entries, yt-dlp
    full watch URLs; only bare ids are rewritten.

    Args:
        record: The ExtractorRecord the URL was selected from.
        url: The selected URL (or platform id).

    Returns:
        The resolved URL.
    """
    if detect_platform(record) == "youtube" and "://" not in url:
        return YOUTUBE_WATCH_URL + url
    return url
