from .parsing import (
    strip_code_fence,
    parse_classification,
    parse_sentiment,
    parse_bias,
    normalize_confidence,
    normalize_keywords,
    extract_citations,
)
from .validation import InputValidator, ValidationError, is_bare_url

__all__ = [
    "strip_code_fence",
    "parse_classification",
    "parse_sentiment",
    "parse_bias",
    "normalize_confidence",
    "normalize_keywords",
    "extract_citations",
    "InputValidator",
    "ValidationError",
    "is_bare_url",
]
