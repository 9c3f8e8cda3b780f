"""
Source resolution for sentiment-analyser.

This module coordinates the acquisition pipeline by:
- Reading text files directly
- Routing HTML sources to the file reader or the remote fetcher
- Extracting the text found at the requested selector
"""

import logging
from typing import Optional

from .config import Settings
from .html_extractor import extract_text
from .loader import ContentFetcher, read_file
from .sources import HtmlSource, SourceSpec, TextSource, is_remote

logger = logging.getLogger(__name__)


class SourceResolver:
    """Turn a SourceSpec into the plain text handed to the scorer."""

    def __init__(self, settings: Optional[Settings] = None,
                 fetcher: Optional[ContentFetcher] = None):
        self.settings = settings or Settings()
        self.fetcher = fetcher or ContentFetcher(self.settings)

    def resolve(self, spec: SourceSpec) -> str:
        """
        Resolve a source into text.

        Args:
            spec: TextSource or HtmlSource

        Returns:
            Plain text of the source

        Raises:
            AnalyserError: Any loader or extraction failure, unchanged
        """
        if isinstance(spec, TextSource):
            return read_file(spec.path)

        if isinstance(spec, HtmlSource):
            html_content = self._load_document(spec.path)
            return extract_text(html_content, spec.selector)

        raise TypeError(f"Unsupported source: {type(spec).__name__}")

    def _load_document(self, path: str) -> str:
        if is_remote(path):
            return self.fetcher.fetch(path)
        logger.debug(f"Treating {path} as a local file")
        return read_file(path)


def resolve(spec: SourceSpec, settings: Optional[Settings] = None) -> str:
    """Resolve a single source with a fresh resolver."""
    return SourceResolver(settings).resolve(spec)
