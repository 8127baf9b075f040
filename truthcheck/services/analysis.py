import json
from typing import Any, Dict, Optional

import httpx

from truthcheck.config import DISPLAY_CONFIG, Settings, logger
from truthcheck.exceptions import (
    ConfigurationException,
    EmptyResponseException,
    MalformedResponseException,
)
from truthcheck.models.analysis import AnalysisResult
from truthcheck.models.responses import GeminiCompletion
from truthcheck.prompts import build_fact_check_prompt
from truthcheck.utils.parsing import (
    extract_citations,
    normalize_confidence,
    normalize_keywords,
    optional_text,
    parse_bias,
    parse_classification,
    parse_sentiment,
    strip_code_fence,
)
from .llm import call_gemini


def parse_analysis_payload(text: str) -> Dict[str, Any]:
    """Strip fences from completion text and decode the JSON object inside."""
    json_text = strip_code_fence(text)
    if not json_text:
        raise EmptyResponseException()
    try:
        payload = json.loads(json_text)
    except json.JSONDecodeError as e:
        logger.error("Could not parse analysis JSON: %s. Text: %s", e, json_text[:500])
        raise MalformedResponseException(str(e))
    if not isinstance(payload, dict):
        logger.error("Analysis JSON was a %s, not an object.", type(payload).__name__)
        raise MalformedResponseException(f"expected a JSON object, got {type(payload).__name__}")
    return payload


def build_analysis_result(completion: GeminiCompletion) -> AnalysisResult:
    """
    Normalize a completion into an AnalysisResult.
    Unknown sentiment or bias values are dropped rather than rejected.
    """
    data = parse_analysis_payload(completion.get("text", ""))

    sentiment = parse_sentiment(data.get("sentiment"))
    bias = parse_bias(data.get("bias"))
    if data.get("sentiment") is not None and sentiment is None:
        logger.info("Dropping unrecognized sentiment value: %r", data.get("sentiment"))
    if data.get("bias") is not None and bias is None:
        logger.info("Dropping unrecognized bias value: %r", data.get("bias"))

    return AnalysisResult(
        classification=parse_classification(data.get("classification")),
        reasoning=optional_text(data.get("reasoning")) or "",
        topic=optional_text(data.get("topic")),
        keywords=normalize_keywords(data.get("keywords")),
        confidence=normalize_confidence(data.get("confidence")),
        sentiment=sentiment,
        bias=bias,
        sources=extract_citations(completion.get("grounding_chunks")),
    )


class AnalysisClient:
    """Fact-checks a single claim against Gemini with search grounding."""

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self.http_client = http_client

    async def analyze(self, claim: str) -> AnalysisResult:
        if not self.settings.GEMINI_API_KEY:
            logger.critical("GEMINI_API_KEY not configured.")
            raise ConfigurationException("GEMINI_API_KEY")

        logger.info("Analyzing claim '%s...'", claim[:DISPLAY_CONFIG.LOG_CLAIM_PREVIEW])
        prompt = build_fact_check_prompt(claim)
        completion = await call_gemini(prompt, self.settings, self.http_client)

        result = build_analysis_result(completion)
        logger.info(
            "Claim classified as %s with %d sources.",
            result.classification.value,
            len(result.sources),
        )
        return result
