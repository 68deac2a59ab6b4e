from typing import List, Optional
from .base import BaseExtractor

class ExtractorRegistry:
    """
    Registry for managing available extractors.
    """

    def __init__(self):
        self._extractors: List[BaseExtractor] = []

    def register(self, extractor: BaseExtractor):
        """Register an extractor instance. Earlier registrations win."""
        self._extractors.append(extractor)

    def get_extractor(self, url: str) -> Optional[BaseExtractor]:
        """
        Find an extractor that supports the given URL.

        Returns:
            The first matching extractor or None.
        """
        for extractor in self._extractors:
            if extractor.supports(url):
                return extractor
        return None

    def __len__(self):
        return len(self._extractors)
