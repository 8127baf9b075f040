from .analysis import (
    Classification,
    Sentiment,
    Bias,
    Citation,
    AnalysisResult,
    AnalyzeRequest,
)
from .responses import (
    GroundingChunk,
    GeminiCompletion,
    ErrorResponse,
)

__all__ = [
    "Classification",
    "Sentiment",
    "Bias",
    "Citation",
    "AnalysisResult",
    "AnalyzeRequest",

    "GroundingChunk",
    "GeminiCompletion",
    "ErrorResponse",
]
