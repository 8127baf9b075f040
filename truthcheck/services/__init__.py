from .llm import call_gemini, parse_completion
from .analysis import AnalysisClient, build_analysis_result, parse_analysis_payload

__all__ = [
    "call_gemini",
    "parse_completion",
    "AnalysisClient",
    "build_analysis_result",
    "parse_analysis_payload",
]
