"""Error types raised while resolving a source into text."""

from typing import Optional


class AnalyserError(Exception):
    """Base class for every failure surfaced by source resolution."""

    prefix = "Error"

    def __init__(self, detail: str, target: Optional[str] = None):
        self.detail = detail
        self.target = target
        super().__init__(self._format())

    def _format(self) -> str:
        return f"{self.prefix}. {self.detail}"


class RequestError(AnalyserError):
    """Transport failure or non-2xx status while fetching a URL."""

    def __init__(self, target: str, detail: str):
        super().__init__(detail, target=target)

    def _format(self) -> str:
        return f"Error making request to '{self.target}'. {self.detail}"


class DecodeError(AnalyserError):
    """Response body could not be decoded as text."""

    prefix = "Error decoding HTML"


class ReadError(AnalyserError):
    """Local file could not be read."""

    prefix = "Error importing file from file system"


class ParseError(AnalyserError):
    """Selector was invalid or matched no text."""

    prefix = "Error parsing HTML"
