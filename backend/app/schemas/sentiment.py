from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


class AnalyzeSentimentRequest(BaseModel):
    text: Any = None


class SentimentAnalysis(BaseModel):
    sentiment: Literal["positive", "negative", "neutral"]
    score: float = Field(ge=0.0, le=1.0)
    mood: Optional[
        Literal["enthusiastic", "motivated", "positive", "neutral", "concerned", "tired", "frustrated"]
    ] = None


class AnalyzeSentimentResponse(BaseModel):
    sentiment: SentimentAnalysis


class MoodRecommendationResponse(BaseModel):
    mood: str
    recommendation: str
