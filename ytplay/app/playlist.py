import json
from typing import Any, Dict, Mapping, Optional

from ytplay.core.entities import INPUT_SLAVE_OPTION, START_TIME_OPTION, SUB_FILE_OPTION, PlaylistItem
from ytplay.extractors.ytdl.models import ExtractorRecord
from ytplay.app.formats import StreamSelection

def to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, ensure_ascii=False, sort_keys=True)
    return str(value)

def stringify_metadata(raw: Mapping[str, Any]) -> Dict[str, str]:
    """Every value as text; null values are treated as absent."""
    return {str(k): to_text(v) for k, v in raw.items() if v is not None}

def _coalesce(*values):
    """First value that is not None; empty strings count."""
    for value in values:
        if value is not None:
            return value
    return None

def _first(meta: Mapping[str, str], *keys: str) -> Optional[str]:
    return _coalesce(*(meta.get(key) for key in keys))

def derive_year(record: ExtractorRecord) -> Optional[str]:
    if record.release_year is not None:
        return to_text(record.release_year)
    if record.release_date is not None:
        return record.release_date[:4]
    if record.upload_date is not None:
        return record.upload_date[:4]
    return None

def derive_category(record: ExtractorRecord) -> Optional[str]:
    if record.categories and record.categories[0] is not None:
        return to_text(record.categories[0])
    return None

def derive_thumbnail(record: ExtractorRecord) -> Optional[str]:
    if record.thumbnails:
        url = record.thumbnails[-1].get("url")
        return to_text(url) if url is not None else None
    return None

def build_item(record: ExtractorRecord, selection: StreamSelection, source_url: str,
               subtitle_path: Optional[str] = None) -> PlaylistItem:
    """
    Map one extractor record onto a playlist item.

    Pure: the same record, selection and paths always give an equal item.
    """
    meta = stringify_metadata(record.raw)

    item = PlaylistItem(
        path=selection.url,
        name=meta.get("title"),
        duration=meta.get("duration"),
        title=_first(meta, "track", "title"),
        artist=_first(meta, "artist", "creator", "uploader", "playlist_uploader"),
        genre=_coalesce(meta.get("genre"), derive_category(record)),
        copyright=meta.get("license"),
        album=_first(meta, "album", "playlist_title", "playlist"),
        tracknum=_first(meta, "track_number", "playlist_index"),
        description=meta.get("description"),
        rating=meta.get("average_rating"),
        date=derive_year(record),
        url=_coalesce(meta.get("webpage_url"), source_url),
        arturl=_coalesce(meta.get("thumbnail"), derive_thumbnail(record)),
        trackid=_first(meta, "track_id", "episode_id", "id"),
        tracktotal=meta.get("n_entries"),
        season=_first(meta, "season", "season_number", "season_id"),
        episode=_first(meta, "episode", "episode_number"),
        show_name=meta.get("series"),
        meta=meta,
        options=[START_TIME_OPTION + meta.get("start_time", "0")],
    )

    if selection.slave_url:
        item.add_option(INPUT_SLAVE_OPTION + selection.slave_url)

    if subtitle_path:
        item.add_option(SUB_FILE_OPTION + subtitle_path)

    return item
