"""
Command-line interface for sentiment-analyser.

Usage:
  sentiment-analyser analyse text --path notes.txt
  sentiment-analyser analyse html --path https://example.com --selector "article p"
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import Settings
from .errors import AnalyserError
from .observability import setup_logging
from .report import render_scores
from .resolver import SourceResolver
from .sentiment import SentimentScorer
from .sources import HtmlSource, SourceSpec, TextSource

logger = logging.getLogger("analyser")

EXIT_OK = 0
EXIT_FAILURE = 1


def make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        "sentiment-analyser",
        description="A CLI tool to perform simple sentiment analysis on provided text",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--json", action="store_true", help="Print scores as JSON instead of a table")

    commands = p.add_subparsers(dest="command", required=True)
    analyse = commands.add_parser("analyse", help="Analyse the sentiment of a source")
    formats = analyse.add_subparsers(dest="format", required=True)

    html = formats.add_parser("html", help="Performs sentiment analysis on provided HTML")
    html.add_argument(
        "--path", "-p",
        required=True,
        help="A path to an HTML document (this can be a path to a local file or a URL)",
    )
    html.add_argument(
        "--selector", "-s",
        required=True,
        help="A CSS selector for an HTML element containing text",
    )

    text = formats.add_parser("text", help="Performs sentiment analysis on provided text")
    text.add_argument("--path", "-p", required=True, help="A path to a file containing text")
    return p


def spec_from_args(args: argparse.Namespace) -> SourceSpec:
    if args.format == "html":
        return HtmlSource(path=args.path, selector=args.selector)
    return TextSource(path=args.path)


def main(argv: Optional[List[str]] = None,
         console: Optional[Console] = None,
         err_console: Optional[Console] = None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)

    console = console or Console()
    err_console = err_console or Console(stderr=True)

    settings = Settings()
    setup_logging(settings, level="DEBUG" if args.verbose else None)

    try:
        spec = spec_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        text = SourceResolver(settings).resolve(spec)
        scores = SentimentScorer().score(text)
    except AnalyserError as e:
        err_console.print(f"[bold red]error:[/] {escape(str(e))}", highlight=False)
        return EXIT_FAILURE

    logger.debug("Scored %d characters: %s", len(text), scores.model_dump())
    render_scores(scores, console, as_json=args.json)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
