"""Terminal rendering of polarity scores."""

from __future__ import annotations

import json

from rich.console import Console
from rich.table import Table

from .sentiment import PolarityScores

# VADER's conventional cut-offs for the compound score
POSITIVE_THRESHOLD = 0.05
NEGATIVE_THRESHOLD = -0.05


def compound_style(compound: float) -> str:
    if compound >= POSITIVE_THRESHOLD:
        return "green"
    if compound <= NEGATIVE_THRESHOLD:
        return "red"
    return "yellow"


def build_table(scores: PolarityScores) -> Table:
    table = Table(title="Sentiment Analysis")
    table.add_column("Positive", justify="right")
    table.add_column("Negative", justify="right")
    table.add_column("Neutral", justify="right")
    table.add_column("Compound", justify="right")

    table.add_row(
        f"{scores.pos:.3f}",
        f"{scores.neg:.3f}",
        f"{scores.neu:.3f}",
        f"[{compound_style(scores.compound)}]{scores.compound:.3f}[/]",
    )
    return table


def render_scores(scores: PolarityScores, console: Console, as_json: bool = False) -> None:
    """Print scores as a table, or as a JSON object when as_json is set."""
    if as_json:
        console.print_json(json.dumps(scores.model_dump()))
        return
    console.print(build_table(scores))
