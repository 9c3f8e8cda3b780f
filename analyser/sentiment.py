"""Adapter around the VADER sentiment analyzer."""

from pydantic import BaseModel
from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer


class PolarityScores(BaseModel):
    neg: float
    neu: float
    pos: float
    compound: float


class SentimentScorer:
    """Score plain text with VADER; values are passed through as returned."""

    def __init__(self, analyzer: SentimentIntensityAnalyzer | None = None) -> None:
        self.analyzer = analyzer or SentimentIntensityAnalyzer()

    def score(self, text: str) -> PolarityScores:
        return PolarityScores(**self.analyzer.polarity_scores(text))
