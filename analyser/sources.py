"""Source specifications and remote/local classification."""

from dataclasses import dataclass
from typing import Union
from urllib.parse import urlparse

REMOTE_PREFIXES = ('http://', 'https://')


@dataclass(frozen=True)
class TextSource:
    """A plain-text file, read verbatim."""
    path: str

    def __post_init__(self):
        if not self.path:
            raise ValueError("path must not be empty")


@dataclass(frozen=True)
class HtmlSource:
    """An HTML document (file or URL) and the selector holding its text."""
    path: str
    selector: str

    def __post_init__(self):
        if not self.path:
            raise ValueError("path must not be empty")
        if not self.selector:
            raise ValueError("selector must not be empty")


SourceSpec = Union[TextSource, HtmlSource]


def is_remote(path: str) -> bool:
    """True when path is an http(s) URL with a host; anything else is a local file.

    The scheme prefix is matched case-sensitively, so "HTTP://host/" is a
    local path. A filename that merely starts with "http" stays local.
    """
    if not path.startswith(REMOTE_PREFIXES):
        return False
    return bool(urlparse(path).netloc)
