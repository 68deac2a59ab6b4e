from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

NO_CODEC = "none"

def _text(value) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)

def _dict_list(value) -> List[dict]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, dict)]

@dataclass
class MediaFormat:
    """One stream variant as listed under `formats` / `requested_formats`."""
    url: Optional[str] = None
    manifest_url: Optional[str] = None
    vcodec: Optional[str] = None
    acodec: Optional[str] = None
    format_id: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict) -> "MediaFormat":
        return cls(
            url=_text(data.get("url")),
            manifest_url=_text(data.get("manifest_url")),
            vcodec=_text(data.get("vcodec")),
            acodec=_text(data.get("acodec")),
            format_id=_text(data.get("format_id")),
        )

    @property
    def stream_url(self) -> Optional[str]:
        # prefer streaming manifests
        return self.manifest_url or self.url

    @property
    def has_video(self) -> bool:
        """False only for an explicit "none" codec."""
        return self.vcodec != NO_CODEC

    @property
    def has_audio(self) -> bool:
        return self.acodec != NO_CODEC

@dataclass
class SubtitleTrack:
    ext: Optional[str] = None
    url: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict) -> "SubtitleTrack":
        return cls(ext=_text(data.get("ext")), url=_text(data.get("url")), name=_text(data.get("name")))

def _tracks_by_language(value) -> Dict[str, List[SubtitleTrack]]:
    if not isinstance(value, dict):
        return {}
    return {
        str(lang): [SubtitleTrack.from_json(t) for t in _dict_list(tracks)]
        for lang, tracks in value.items()
        if tracks is not None
    }

@dataclass
class ExtractorRecord:
    """
    One decoded line of extractor output.

    Only the fields the stream and subtitle logic depend on are typed; the
    full object stays in `raw` for metadata mapping.
    """
    raw: Dict[str, Any] = field(default_factory=dict)
    id: Optional[str] = None
    type: Optional[str] = None
    ie_key: Optional[str] = None
    url: Optional[str] = None
    manifest_url: Optional[str] = None
    requested_formats: Optional[List[MediaFormat]] = None
    formats: Optional[List[MediaFormat]] = None
    subtitles: Dict[str, List[SubtitleTrack]] = field(default_factory=dict)
    automatic_captions: Dict[str, List[SubtitleTrack]] = field(default_factory=dict)
    categories: List[Any] = field(default_factory=list)
    release_year: Optional[Any] = None
    release_date: Optional[str] = None
    upload_date: Optional[str] = None
    thumbnails: List[dict] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict) -> "ExtractorRecord":
        requested = data.get("requested_formats")
        formats = data.get("formats")
        categories = data.get("categories")
        return cls(
            raw=data,
            id=_text(data.get("id")),
            type=_text(data.get("_type")),
            ie_key=_text(data.get("ie_key")),
            url=_text(data.get("url")),
            manifest_url=_text(data.get("manifest_url")),
            requested_formats=[MediaFormat.from_json(f) for f in _dict_list(requested)] if isinstance(requested, list) else None,
            formats=[MediaFormat.from_json(f) for f in _dict_list(formats)] if isinstance(formats, list) else None,
            subtitles=_tracks_by_language(data.get("subtitles")),
            automatic_captions=_tracks_by_language(data.get("automatic_captions")),
            categories=categories if isinstance(categories, list) else [],
            release_year=data.get("release_year"),
            release_date=_text(data.get("release_date")),
            upload_date=_text(data.get("upload_date")),
            thumbnails=_dict_list(data.get("thumbnails")),
        )

    @property
    def direct_url(self) -> Optional[str]:
        return self.manifest_url or self.url
