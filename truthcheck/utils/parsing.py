import math
import re
from typing import Any, Iterable, List, Optional

from truthcheck.config.constants import LLM_CONFIG
from truthcheck.models.analysis import Bias, Citation, Classification, Sentiment

FENCE = "```"
_OPENING_FENCE = re.compile(r"^```[\w+-]*[ \t]*\r?\n?")


def strip_code_fence(text: Optional[str]) -> str:
    """Remove one surrounding fenced code block from model output.

    The opening fence may carry a language tag (```json). A missing closing
    fence is tolerated. Text that is not fenced is only trimmed.
    """
    if not text:
        return ""
    stripped = text.strip()
    if not stripped.startswith(FENCE):
        return stripped

    body = _OPENING_FENCE.sub("", stripped, count=1)
    if body.endswith(FENCE):
        body = body[: -len(FENCE)]
    return body.strip()


def parse_classification(raw: Any) -> Classification:
    if not raw or not isinstance(raw, str):
        return Classification.UNCERTAIN
    lowered = raw.lower()
    if "real" in lowered or "true" in lowered:
        return Classification.REAL
    if "fake" in lowered or "false" in lowered:
        return Classification.FAKE
    return Classification.UNCERTAIN


def parse_sentiment(raw: Any) -> Optional[Sentiment]:
    """Return the matching Sentiment, or None for anything unrecognized."""
    if not isinstance(raw, str):
        return None
    try:
        return Sentiment(raw)
    except ValueError:
        return None


def parse_bias(raw: Any) -> Optional[Bias]:
    """Return the matching Bias, or None for anything unrecognized."""
    if not isinstance(raw, str):
        return None
    try:
        return Bias(raw)
    except ValueError:
        return None


def normalize_confidence(raw: Any) -> Optional[int]:
    """Coerce a confidence score to an int clamped to [0, 100]."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(str(raw).strip().rstrip("%"))
    except (ValueError, TypeError):
        return None
    if not math.isfinite(value):
        return None
    value = int(round(value))
    return max(LLM_CONFIG.MIN_CONFIDENCE, min(LLM_CONFIG.MAX_CONFIDENCE, value))


def normalize_keywords(raw: Any) -> Optional[List[str]]:
    if not isinstance(raw, list):
        return None
    return [item if isinstance(item, str) else str(item) for item in raw if item is not None]


def optional_text(raw: Any) -> Optional[str]:
    if raw is None:
        return None
    return raw if isinstance(raw, str) else str(raw)


def extract_citations(chunks: Optional[Iterable[Any]]) -> List[Citation]:
    """Keep grounding chunks that carry a web reference, in order."""
    citations: List[Citation] = []
    for chunk in chunks or []:
        if not isinstance(chunk, dict):
            continue
        web = chunk.get("web")
        if not isinstance(web, dict):
            continue
        citations.append(Citation(uri=str(web.get("uri") or ""), title=str(web.get("title") or "")))
    return citations
