from abc import ABC, abstractmethod
from .result import ExtractResult

class BaseExtractor(ABC):
    """
    Abstract base class for media extractors.

    An extractor turns a web URL into decoded per-entry records.

    CRITICAL BOUNDARIES:
    - Extractors ONLY run the extraction and decode its output.
    - Extractors do NOT pick streams or subtitles.
    - Extractors do NOT download anything to disk.
    """

    @abstractmethod
    def supports(self, url: str) -> bool:
        """
        Check if this extractor supports the given URL.

        Args:
            url: The URL to check.

        Returns:
            True if supported, False otherwise.
        """
        pass

    @abstractmethod
    def extract(self, url: str) -> ExtractResult:
        """
        Extract entry records for the given URL.

        Args:
            url: The URL to extract from.

        Returns:
            ExtractResult: records in the order the tool emitted them.
        """
        pass
