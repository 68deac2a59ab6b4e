import os
from dataclasses import dataclass, field, asdict
from typing import List, Mapping, Optional

from dotenv import load_dotenv

DEFAULT_TOOLS = ("youtube-dl", "yt-dlp")
DEFAULT_FORMAT = "bestvideo[height<=1080]+bestaudio/best[height<=1080]"

ENV_PREFIX = "YTPLAY_"

class ConfigError(ValueError):
    pass

@dataclass
class Settings:
    """
    Runtime settings.

    Read from the environment (and a .env file, if present) with the
    YTPLAY_ prefix, e.g. YTPLAY_TOOLS=yt-dlp,youtube-dl.
    """
    tools: List[str] = field(default_factory=lambda: list(DEFAULT_TOOLS))
    format_selector: str = DEFAULT_FORMAT
    subtitle_language: str = "en"
    downloader: str = "curl"
    download_dir: Optional[str] = None
    tool_timeout: Optional[float] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "Settings":
        settings = cls()

        tools = env.get(ENV_PREFIX + "TOOLS")
        if tools is not None:
            settings.tools = [t.strip() for t in tools.split(",") if t.strip()]
            if not settings.tools:
                raise ConfigError(f"{ENV_PREFIX}TOOLS must name at least one extractor tool")

        settings.format_selector = env.get(ENV_PREFIX + "FORMAT") or settings.format_selector
        settings.subtitle_language = env.get(ENV_PREFIX + "SUB_LANG") or settings.subtitle_language
        settings.downloader = env.get(ENV_PREFIX + "DOWNLOADER") or settings.downloader
        settings.download_dir = env.get(ENV_PREFIX + "DOWNLOAD_DIR") or None
        settings.log_level = (env.get(ENV_PREFIX + "LOG_LEVEL") or settings.log_level).upper()

        timeout = env.get(ENV_PREFIX + "TOOL_TIMEOUT")
        if timeout:
            try:
                settings.tool_timeout = float(timeout)
            except ValueError:
                raise ConfigError(f"{ENV_PREFIX}TOOL_TIMEOUT is not a number: {timeout!r}")
            if settings.tool_timeout <= 0:
                raise ConfigError(f"{ENV_PREFIX}TOOL_TIMEOUT must be positive, got {timeout!r}")

        return settings

    def as_dict(self) -> dict:
        return asdict(self)

def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Load .env (never overriding real environment variables) and build Settings."""
    load_dotenv(dotenv_path)
    return Settings.from_env(os.environ)
