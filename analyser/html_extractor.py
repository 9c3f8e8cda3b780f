"""
HTML text extraction for sentiment-analyser.

Selects the first element matching a CSS selector and returns the text of
that element and all of its descendants, joined with no separator.

Documents are parsed with the html5lib tree builder so that the tree follows
HTML5 parsing rules (implied end tags, foster parenting) and text nodes keep
their whitespace exactly as written.
"""

import logging
from typing import Iterator

import soupsieve
from bs4 import BeautifulSoup
from bs4.element import CData, NavigableString, PreformattedString, Tag

from .errors import ParseError

logger = logging.getLogger(__name__)

NO_TEXT_MESSAGE = "no text available at selector"
TREE_BUILDER = 'html5lib'


def compile_selector(selector: str) -> soupsieve.SoupSieve:
    """Compile a CSS selector, raising ParseError if it is malformed."""
    try:
        return soupsieve.compile(selector)
    except (soupsieve.SelectorSyntaxError, NotImplementedError, ValueError) as e:
        raise ParseError(f"unable to parse selector: {e}") from e


def text_nodes(element: Tag) -> Iterator[str]:
    """Yield every text node below element in document order.

    Script, style and template content count as text; comments, doctypes
    and processing instructions do not.
    """
    for node in element.descendants:
        if not isinstance(node, NavigableString):
            continue
        if isinstance(node, PreformattedString) and not isinstance(node, CData):
            continue
        yield str(node)


def extract_text(html_content: str, selector: str) -> str:
    """
    Extract the text found at a selector.

    Args:
        html_content: Raw HTML document
        selector: CSS selector identifying the text-bearing element

    Returns:
        Concatenated text of the first matching element

    Raises:
        ParseError: If the selector is invalid, nothing matches, or the
            matching element holds no text
    """
    pattern = compile_selector(selector)
    soup = BeautifulSoup(html_content, TREE_BUILDER)

    element = pattern.select_one(soup)
    if element is None:
        logger.debug(f"No element matches selector {selector!r}")
        raise ParseError(NO_TEXT_MESSAGE)

    text = ''.join(text_nodes(element))
    if not text:
        logger.debug(f"Element at selector {selector!r} holds no text")
        raise ParseError(NO_TEXT_MESSAGE)

    return text
