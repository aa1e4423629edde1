"""Journal sentiment endpoints — analyze-sentiment, mood-recommendation."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from app.core.feature_flags import ensure_mood_recommendation_enabled, ensure_sentiment_api_enabled
from app.schemas.sentiment import (
    AnalyzeSentimentRequest,
    AnalyzeSentimentResponse,
    MoodRecommendationResponse,
    SentimentAnalysis,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/analyze-sentiment",
    response_model=AnalyzeSentimentResponse,
    response_model_exclude_none=True,
    summary="Classify the sentiment and mood of a journal entry",
)
async def analyze_sentiment_endpoint(body: AnalyzeSentimentRequest):
    ensure_sentiment_api_enabled()

    if not body.text or not isinstance(body.text, str):
        raise HTTPException(400, "Text is required")

    from app.services.sentiment.service import analyze_text

    try:
        result = analyze_text(body.text)
    except Exception:
        logger.exception("Sentiment analysis failed for text of length %s", len(body.text))
        raise HTTPException(500, "Failed to analyze sentiment")

    return AnalyzeSentimentResponse(sentiment=SentimentAnalysis(**result.to_dict()))


@router.get(
    "/mood-recommendation",
    response_model=MoodRecommendationResponse,
    summary="Workout recommendation for a mood",
)
async def mood_recommendation_endpoint(mood: Optional[str] = Query(default=None)):
    ensure_mood_recommendation_enabled()

    if not mood:
        raise HTTPException(400, "Mood is required")

    from app.services.sentiment.service import get_mood_recommendation

    return MoodRecommendationResponse(mood=mood, recommendation=get_mood_recommendation(mood))
