from dataclasses import dataclass, field
from typing import Any, List, Optional

@dataclass
class ExtractResult:
    """
    Unified result contract for extractors.

    Holds what the extraction produced, not what the player gets: stream
    selection and item assembly happen later.
    """
    source_url: str
    invocation: Optional[Any] = None  # The tool invocation that produced the output
    records: List[Any] = field(default_factory=list)  # ExtractorRecord per emitted line

    @property
    def is_collection(self) -> bool:
        return len(self.records) > 1
