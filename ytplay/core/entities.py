from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional

START_TIME_OPTION = "start-time="
INPUT_SLAVE_OPTION = ":input-slave="
SUB_FILE_OPTION = ":sub-file="

@dataclass
class PlaylistItem:
    """
    One entry handed back to the media player.

    Field names follow the player's playlist-item table (see vlc's
    modules/lua/libs/sd.c). Values are text, as the player expects.
    """
    path: str
    name: Optional[str] = None
    duration: Optional[str] = None
    title: Optional[str] = None
    artist: Optional[str] = None
    genre: Optional[str] = None
    copyright: Optional[str] = None
    album: Optional[str] = None
    tracknum: Optional[str] = None
    description: Optional[str] = None
    rating: Optional[str] = None
    date: Optional[str] = None
    url: Optional[str] = None
    arturl: Optional[str] = None
    trackid: Optional[str] = None
    tracktotal: Optional[str] = None
    season: Optional[str] = None
    episode: Optional[str] = None
    show_name: Optional[str] = None

    meta: Dict[str, str] = field(default_factory=dict)
    options: List[str] = field(default_factory=list)

    def add_option(self, option: str) -> None:
        self.options.append(option)

    @property
    def sub_file(self) -> Optional[str]:
        """Local subtitle path attached to this item, if any."""
        for option in self.options:
            if option.startswith(SUB_FILE_OPTION):
                return option[len(SUB_FILE_OPTION):]
        return None

    @property
    def input_slaves(self) -> List[str]:
        return [o[len(INPUT_SLAVE_OPTION):] for o in self.options if o.startswith(INPUT_SLAVE_OPTION)]

    def to_dict(self) -> dict:
        """Serializable view, unset fields omitted."""
        out = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, list):
                value = list(value)
            elif isinstance(value, dict):
                value = dict(value)
            out[f.name] = value
        return out
