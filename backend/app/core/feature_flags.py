from fastapi import HTTPException

from app.core.config import get_settings


def ensure_sentiment_api_enabled() -> None:
    settings = get_settings()
    if not settings.enable_sentiment_api:
        raise HTTPException(status_code=404, detail="Not found")


def ensure_mood_recommendation_enabled() -> None:
    settings = get_settings()
    if not settings.enable_mood_recommendation:
        raise HTTPException(status_code=404, detail="Not found")
