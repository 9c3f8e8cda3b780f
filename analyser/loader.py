"""
Content loading for sentiment-analyser.

Two sources are supported:
- Local files, read whole as UTF-8 text
- Remote documents, fetched with a single blocking HTTP GET
"""

import logging
from typing import Optional

import requests

from .config import Settings
from .errors import DecodeError, ReadError, RequestError

logger = logging.getLogger(__name__)


def read_file(path: str) -> str:
    """
    Read a local file verbatim.

    Args:
        path: Filesystem path to read

    Returns:
        The file's full text, line endings untouched

    Raises:
        ReadError: If the file is missing, unreadable or not valid UTF-8
    """
    logger.debug(f"Reading file: {path}")

    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(str(e)) from e


class ContentFetcher:
    """Fetch remote documents as text."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.headers = {
            'User-Agent': self.settings.user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        }

    def fetch(self, url: str) -> str:
        """
        Fetch a URL and return its body as text.

        Args:
            url: Absolute http(s) URL

        Returns:
            Decoded response body

        Raises:
            RequestError: On transport failure or a non-2xx status
            DecodeError: If the body is not valid text in its declared charset
        """
        logger.info(f"Fetching {url}")

        try:
            response = requests.get(
                url,
                headers=self.headers,
                timeout=self.settings.request_timeout,
            )
        except requests.RequestException as e:
            raise RequestError(url, str(e)) from e

        if not 200 <= response.status_code < 300:
            raise RequestError(url, f"request failed with code {response.status_code}")

        logger.debug(f"Received {len(response.content)} bytes from {url}")
        return self._decode_body(response)

    def _decode_body(self, response: requests.Response) -> str:
        """Strictly decode a body using the declared charset, else UTF-8."""
        content_type = response.headers.get('Content-Type', '')
        if 'charset=' in content_type.lower() and response.encoding:
            encoding = response.encoding
        else:
            encoding = 'utf-8'

        try:
            return response.content.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise DecodeError(str(e)) from e
