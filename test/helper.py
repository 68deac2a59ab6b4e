import json

from ytplay.core.interfaces import FileDownloader, Host
from ytplay.extractors.ytdl.models import ExtractorRecord

VIDEO_URL = "https://cdn.example.com/video-1080.mp4"
AUDIO_URL = "https://cdn.example.com/audio-140.m4a"

class FakeHost(Host):
    def __init__(self, url, content=b"", msg=None):
        self._access, _, self._path = url.partition("://")
        self.content = content
        self.msg = msg
        self.peeks = []

    @property
    def access(self):
        return self._access

    @property
    def path(self):
        return self._path

    def peek(self, size):
        self.peeks.append(size)
        return self.content[:size]

class FakeMsg:
    def __init__(self):
        self.calls = []

    def info(self, text):
        self.calls.append(("info", text))

    def warn(self, text):
        self.calls.append(("warn", text))

    def err(self, text):
        self.calls.append(("err", text))

class FakeDownloader(FileDownloader):
    def __init__(self, result=True):
        self.result = result
        self.calls = []

    def download(self, url, local_path):
        self.calls.append((url, local_path))
        return self.result

def video_format(url=VIDEO_URL, **kwargs):
    return {"format_id": "137", "url": url, "vcodec": "avc1.640028", "acodec": "none", **kwargs}

def audio_format(url=AUDIO_URL, **kwargs):
    return {"format_id": "140", "url": url, "vcodec": "none", "acodec": "mp4a.40.2", **kwargs}

def make_entry(**kwargs):
    entry = {
        "id": "dQw4w9WgXcQ",
        "title": "Test Video",
        "duration": 212,
        "uploader": "Test Channel",
        "webpage_url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "requested_formats": [video_format(), audio_format()],
        "subtitles": {},
        "automatic_captions": {},
    }
    entry.update(kwargs)
    return entry

def make_record(**kwargs):
    return ExtractorRecord.from_json(make_entry(**kwargs))

def json_lines(*entries):
    return "".join(json.dumps(e) + "\n" for e in entries)
