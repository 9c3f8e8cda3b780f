"""
Source resolution and sentiment scoring for sentiment-analyser.

This package turns a text file, an HTML file or a web page scoped by a CSS
selector into plain text, and hands that text to a VADER sentiment scorer.
"""

from analyser.errors import AnalyserError, DecodeError, ParseError, ReadError, RequestError
from analyser.resolver import SourceResolver, resolve
from analyser.sources import HtmlSource, SourceSpec, TextSource, is_remote

__version__ = "0.1.0"

__all__ = [
    "AnalyserError",
    "DecodeError",
    "HtmlSource",
    "ParseError",
    "ReadError",
    "RequestError",
    "SourceResolver",
    "SourceSpec",
    "TextSource",
    "is_remote",
    "resolve",
]
