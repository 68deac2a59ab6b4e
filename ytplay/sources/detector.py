YOUTUBE_IE_KEY = "Youtube"
REFERENCE_TYPES = ("url", "url_transparent")

def detect_platform(record):
    """
    Identify the platform a record points at.

    Only reference entries (flat playlist items) are recognised; their `url`
    is a platform-specific id rather than something playable.

    Returns:
        A platform identifier (e.g. 'youtube') or None.
    """
    if record.type in REFERENCE_TYPES and record.ie_key == YOUTUBE_IE_KEY:
        return "youtube"
    return None
