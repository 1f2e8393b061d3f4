"""
Keyword-based sentiment check for incoming chat messages.
"""
from dataclasses import dataclass
from enum import Enum

from shopchat.parsing.lexicon import NEGATIVE_WORDS

NEGATIVE_SCORE = 0.9
POSITIVE_SCORE = 0.7


class SentimentLabel(str, Enum):
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"


@dataclass(frozen=True)
class SentimentResult:
    label: SentimentLabel
    score: float

    @property
    def is_negative(self) -> bool:
        return self.label == SentimentLabel.NEGATIVE


def analyze_sentiment(text: str) -> SentimentResult:
    """Label a message NEGATIVE if it contains any negative-lexicon term."""
    text_lower = (text or "").lower()
    if any(word in text_lower for word in NEGATIVE_WORDS):
        return SentimentResult(SentimentLabel.NEGATIVE, NEGATIVE_SCORE)
    return SentimentResult(SentimentLabel.POSITIVE, POSITIVE_SCORE)
