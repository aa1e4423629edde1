"""Journal sentiment classifier — text to sentiment, score, mood and recommendation."""

from __future__ import annotations

from .contracts import (
    DEFAULT_RECOMMENDATION,
    MOOD_RECOMMENDATIONS,
    VALID_MOODS,
    VALID_SENTIMENTS,
    AnalysisResult,
)
from .service import analyze_text, get_mood_recommendation

__all__ = [
    "AnalysisResult",
    "DEFAULT_RECOMMENDATION",
    "MOOD_RECOMMENDATIONS",
    "VALID_MOODS",
    "VALID_SENTIMENTS",
    "analyze_text",
    "get_mood_recommendation",
]
