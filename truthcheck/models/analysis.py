from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class Classification(str, Enum):
    REAL = "REAL"
    FAKE = "FAKE"
    UNCERTAIN = "UNCERTAIN"


class Sentiment(str, Enum):
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"
    NEUTRAL = "NEUTRAL"


class Bias(str, Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    CENTER = "CENTER"
    NEUTRAL = "NEUTRAL"


class Citation(BaseModel):
    """A web source returned by the search grounding tool."""
    uri: str
    title: str


class AnalysisResult(BaseModel):
    """Normalized outcome of one claim evaluation."""
    classification: Classification = Classification.UNCERTAIN
    reasoning: str = ""
    topic: Optional[str] = None
    keywords: Optional[List[str]] = None
    confidence: Optional[int] = Field(default=None, ge=0, le=100)
    sentiment: Optional[Sentiment] = None
    bias: Optional[Bias] = None
    sources: List[Citation] = []


class AnalyzeRequest(BaseModel):
    """Request body for /analyze."""
    claim: str

    @field_validator("claim")
    @classmethod
    def claim_not_blank(cls, v: str) -> str:
        from truthcheck.utils.validation import InputValidator

        return InputValidator.sanitize_claim(v)

    model_config = {
        "json_schema_extra": {
            "example": {
                "claim": "The Great Wall of China is visible from space with the naked eye."
            }
        }
    }
