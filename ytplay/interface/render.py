import json
from typing import Iterable, List

from ytplay.core.entities import PlaylistItem

M3U_HEADER = "#EXTM3U"

def _extinf_duration(duration) -> int:
    try:
        return int(float(duration))
    except (TypeError, ValueError):
        return -1

def _display_title(item: PlaylistItem) -> str:
    title = item.title or item.name or item.path
    if item.artist:
        title = f"{item.artist} - {title}"
    # EXTINF is a single line
    return " ".join(title.split())

def render_json(items: Iterable[PlaylistItem]) -> str:
    return json.dumps([item.to_dict() for item in items], indent=2, ensure_ascii=False)

def render_m3u(items: Iterable[PlaylistItem]) -> str:
    """Extended M3U; per-item options become #EXTVLCOPT lines."""
    lines: List[str] = [M3U_HEADER]
    for item in items:
        lines.append(f"#EXTINF:{_extinf_duration(item.duration)},{_display_title(item)}")
        for option in item.options:
            lines.append(f"#EXTVLCOPT:{option.lstrip(':')}")
        lines.append(item.path)
    return "\n".join(lines) + "\n"

RENDERERS = {
    "json": render_json,
    "m3u": render_m3u,
}
