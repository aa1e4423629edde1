"""Journal sentiment classification service.

Lexicon-based classifier for free-text journal entries. Maps text to a
sentiment label, a 0.0–1.0 score and a mood tag, and maps a mood to a
workout recommendation.

Features:
- Punctuation stripped from anywhere inside a token (apostrophes kept)
- Negation by substring containment over the whole text; an odd number of
  distinct markers swaps the positive/negative counts
- Score rounded half-up to 2 decimals; mood thresholds use the unrounded score
- Pure and total: no I/O, no shared state, never raises on string input
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from .contracts import (
    DEFAULT_RECOMMENDATION,
    MOOD_RECOMMENDATIONS,
    NEGATION_MARKERS,
    NEGATIVE_WORDS,
    NEUTRAL_SCORE,
    POSITIVE_WORDS,
    SENTIMENT_NEGATIVE,
    SENTIMENT_NEUTRAL,
    SENTIMENT_POSITIVE,
    STRIPPED_PUNCTUATION,
    AnalysisResult,
)

logger = logging.getLogger(__name__)

_PUNCTUATION_TABLE = str.maketrans("", "", STRIPPED_PUNCTUATION)
_SCORE_QUANTUM = Decimal("0.01")

# marker -> longer markers that contain it ("no" -> ("not",))
_ENCLOSING_MARKERS: dict[str, tuple[str, ...]] = {
    marker: tuple(other for other in NEGATION_MARKERS if len(other) > len(marker) and marker in other)
    for marker in NEGATION_MARKERS
}


def _clean_tokens(lowered: str) -> list[str]:
    return [raw.translate(_PUNCTUATION_TABLE) for raw in lowered.split()]


def _count_negations(lowered: str) -> int:
    """Count distinct negation markers present in *lowered*.

    A marker found only inside a longer marker (the "no" in "not") is not
    counted on its own.
    """
    count = 0
    for marker in NEGATION_MARKERS:
        haystack = lowered
        for enclosing in _ENCLOSING_MARKERS[marker]:
            haystack = haystack.replace(enclosing, " ")
        if marker in haystack:
            count += 1
    return count


def _round_score(score: float) -> float:
    return float(Decimal(score).quantize(_SCORE_QUANTUM, rounding=ROUND_HALF_UP))


def _derive_mood(sentiment: str, score: float) -> str:
    if sentiment == SENTIMENT_POSITIVE:
        if score > 0.8:
            return "enthusiastic"
        if score > 0.65:
            return "motivated"
        return "positive"
    if sentiment == SENTIMENT_NEGATIVE:
        if score < 0.2:
            return "frustrated"
        if score < 0.35:
            return "tired"
        return "concerned"
    return "neutral"


def analyze_text(text: Optional[str]) -> AnalysisResult:
    """Classify *text* and return sentiment, score and mood.

    Empty or ``None`` input returns a neutral result without a mood.
    """
    if not text:
        return AnalysisResult(sentiment=SENTIMENT_NEUTRAL, score=NEUTRAL_SCORE)

    lowered = text.lower()

    positive_score = 0
    negative_score = 0
    for token in _clean_tokens(lowered):
        if token in POSITIVE_WORDS:
            positive_score += 1
        if token in NEGATIVE_WORDS:
            negative_score += 1

    negation_count = _count_negations(lowered)
    if negation_count % 2 != 0:
        positive_score, negative_score = negative_score, positive_score

    total = positive_score + negative_score
    if total == 0:
        sentiment, score = SENTIMENT_NEUTRAL, NEUTRAL_SCORE
    elif positive_score > negative_score:
        sentiment, score = SENTIMENT_POSITIVE, 0.5 + positive_score / (2 * total)
    elif negative_score > positive_score:
        sentiment, score = SENTIMENT_NEGATIVE, 0.5 - negative_score / (2 * total)
    else:
        sentiment, score = SENTIMENT_NEUTRAL, NEUTRAL_SCORE

    mood = _derive_mood(sentiment, score)
    logger.debug(
        "Sentiment: positive=%s negative=%s negations=%s -> %s %.4f %s",
        positive_score,
        negative_score,
        negation_count,
        sentiment,
        score,
        mood,
    )
    return AnalysisResult(sentiment=sentiment, score=_round_score(score), mood=mood)


def get_mood_recommendation(mood: object) -> str:
    """Return the workout recommendation for *mood*, or the default one."""
    if not isinstance(mood, str):
        return DEFAULT_RECOMMENDATION
    return MOOD_RECOMMENDATIONS.get(mood, DEFAULT_RECOMMENDATION)
