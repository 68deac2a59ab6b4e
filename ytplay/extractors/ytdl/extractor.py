import json
import logging
import subprocess
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence
from urllib.parse import urlsplit

from ..base import BaseExtractor
from ..result import ExtractResult
from ...core.config import DEFAULT_FORMAT, DEFAULT_TOOLS
from .models import ExtractorRecord

logger = logging.getLogger(__name__)

class ExtractorUnavailableError(RuntimeError):
    """None of the extractor tools produced any output."""

@dataclass(frozen=True)
class ToolInvocation:
    tool: str
    args: tuple

    @property
    def argv(self) -> List[str]:
        return [self.tool, *self.args]

    def __str__(self):
        return subprocess.list2cmdline(self.argv)

@dataclass
class ToolOutput:
    invocation: ToolInvocation
    stdout: str
    attempts: List[str] = field(default_factory=list)  # tools tried before this one

    def lines(self) -> List[str]:
        return self.stdout.splitlines()

def build_invocation(tool: str, url: str, format_selector: str = DEFAULT_FORMAT) -> ToolInvocation:
    """One JSON object per entry, flat playlists, subtitle URLs included."""
    return ToolInvocation(tool, (
        "-j",
        "--flat-playlist",
        "--write-subs",
        "--write-auto-subs",
        "-f", format_selector,
        url,
    ))

def _run(invocation: ToolInvocation, timeout: Optional[float]) -> Optional[str]:
    """Returns stdout, or None if the tool is missing, crashed early or said nothing."""
    try:
        proc = subprocess.run(
            invocation.argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            stdin=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except FileNotFoundError:
        logger.warning("Extractor tool not found: %s", invocation.tool)
        return None
    except subprocess.TimeoutExpired:
        logger.warning("Extractor tool timed out after %ss: %s", timeout, invocation.tool)
        return None
    except OSError as e:
        logger.warning("Failed to execute %s: %s", invocation.tool, e)
        return None

    if not proc.stdout:
        stderr = (proc.stderr or "").strip()
        logger.warning("%s produced no output (exit %s)%s", invocation.tool, proc.returncode,
                       f": {stderr.splitlines()[-1]}" if stderr else "")
        return None

    if proc.returncode != 0:
        # partial playlists still carry usable lines
        logger.info("%s exited with status %s", invocation.tool, proc.returncode)
    return proc.stdout

def run_with_fallback(url: str, tools: Sequence[str] = DEFAULT_TOOLS, format_selector: str = DEFAULT_FORMAT,
                      timeout: Optional[float] = None) -> ToolOutput:
    """
    Run each tool in turn with identical arguments; the first one that
    produces output wins.

    Raises:
        ExtractorUnavailableError: if every tool was missing or silent.
    """
    tried = []
    for tool in tools:
        invocation = build_invocation(tool, url, format_selector)
        logger.debug("Running %s", invocation)
        stdout = _run(invocation, timeout)
        if stdout is not None:
            if tried:
                logger.info("Falling back to %s after %s", tool, ", ".join(tried))
            return ToolOutput(invocation, stdout, attempts=tried)
        tried.append(tool)

    raise ExtractorUnavailableError(f"All extractor tools failed to execute: {', '.join(tools)}")

def iter_records(lines: Iterable[str]) -> Iterator[ExtractorRecord]:
    """
    Decode one JSON object per line.

    An empty line or one that is not a JSON object ends the stream; what was
    decoded before it is kept.
    """
    for line in lines:
        line = line.strip()
        if not line:
            break
        try:
            data = json.loads(line)
        except ValueError:
            logger.debug("Stopping at undecodable line: %.80s", line)
            break
        if not isinstance(data, dict):
            break
        yield ExtractorRecord.from_json(data)

class YtdlExtractor(BaseExtractor):
    """Runs youtube-dl, or yt-dlp when youtube-dl is unavailable."""

    SCHEMES = ("http", "https")

    def __init__(self, tools: Sequence[str] = DEFAULT_TOOLS, format_selector: str = DEFAULT_FORMAT,
                 timeout: Optional[float] = None):
        self.tools = list(tools)
        self.format_selector = format_selector
        self.timeout = timeout

    def supports(self, url: str) -> bool:
        return urlsplit(url).scheme.lower() in self.SCHEMES

    def extract(self, url: str) -> ExtractResult:
        output = run_with_fallback(url, self.tools, self.format_selector, self.timeout)
        records = list(iter_records(output.lines()))
        logger.info("%s returned %d entr%s for %s", output.invocation.tool, len(records),
                    "y" if len(records) == 1 else "ies", url)
        return ExtractResult(source_url=url, invocation=output.invocation, records=records)
