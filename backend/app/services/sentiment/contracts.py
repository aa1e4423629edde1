"""Contracts for journal sentiment classification: lexicons, labels and results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

SENTIMENT_POSITIVE = "positive"
SENTIMENT_NEGATIVE = "negative"
SENTIMENT_NEUTRAL = "neutral"

VALID_SENTIMENTS = frozenset({SENTIMENT_POSITIVE, SENTIMENT_NEGATIVE, SENTIMENT_NEUTRAL})

VALID_MOODS = frozenset(
    {
        "enthusiastic",
        "motivated",
        "positive",
        "neutral",
        "concerned",
        "tired",
        "frustrated",
    }
)

NEUTRAL_SCORE = 0.5

POSITIVE_WORDS = frozenset(
    {
        "happy", "excited", "motivated", "great", "good", "awesome", "excellent", "amazing",
        "wonderful", "fantastic", "terrific", "enthusiastic", "energetic", "positive",
        "productive", "strong", "confident", "determined", "proud", "accomplished",
        "successful", "inspired", "hopeful", "grateful", "thankful", "blessed",
        "love", "enjoy", "like", "fun", "pleased", "satisfied", "progress", "improving",
        "better", "best", "achievement", "gain", "win", "victory", "succeed",
    }
)

NEGATIVE_WORDS = frozenset(
    {
        "sad", "tired", "exhausted", "frustrated", "angry", "upset", "disappointed",
        "depressed", "unmotivated", "anxious", "stressed", "worried", "overwhelmed",
        "discouraged", "unhappy", "bad", "terrible", "horrible", "awful", "weak",
        "difficult", "hard", "tough", "challenging", "pain", "sore", "hurt",
        "failure", "fail", "lose", "lost", "worse", "worst", "hate", "dislike",
        "struggle", "suffering", "sick", "ill", "ache", "concerned",
        "doubt", "uncertain", "confused", "lazy", "procrastinating", "quit",
    }
)

# Matched by substring containment; each marker counts at most once.
NEGATION_MARKERS: tuple[str, ...] = (
    "not",
    "no",
    "don't",
    "doesn't",
    "didn't",
    "won't",
    "can't",
    "couldn't",
    "shouldn't",
    "isn't",
    "aren't",
    "wasn't",
    "weren't",
)

STRIPPED_PUNCTUATION = ".,/#!$%^&*;:{}=-_`~()"

DEFAULT_RECOMMENDATION = (
    "Stay consistent with your routine. Every workout brings you closer to your goals."
)

MOOD_RECOMMENDATIONS: dict[str, str] = {
    "enthusiastic": "Your enthusiasm is perfect for a high-intensity workout today!",
    "motivated": "Great motivation! Challenge yourself with increasing weights or reps today.",
    "positive": "Your positive attitude will help you maintain good form during your workout.",
    "frustrated": "Channel your frustration into a strength training session - it can be therapeutic.",
    "tired": "Consider a lighter workout today, focusing on form rather than intensity.",
    "concerned": "A mindful workout with deep breathing can help ease your concerns.",
}


@dataclass(frozen=True)
class AnalysisResult:
    """Immutable sentiment classification result."""

    sentiment: str  # positive | negative | neutral
    score: float  # 0.0–1.0, two decimals
    mood: Optional[str] = None  # absent only for empty input

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"sentiment": self.sentiment, "score": self.score}
        if self.mood is not None:
            data["mood"] = self.mood
        return data
