from typing import Dict, Any, List, Optional
import httpx

from truthcheck.config import Settings, LLM_CONFIG, logger
from truthcheck.exceptions import ConfigurationException, LLMException
from truthcheck.models.responses import GeminiCompletion, GroundingChunk

SEARCH_TOOL = {"google_search": {}}


def build_request_body(prompt: str) -> Dict[str, Any]:
    # responseSchema / responseMimeType are rejected when a search tool is enabled.
    return {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "tools": [SEARCH_TOOL],
        "generationConfig": {"candidateCount": LLM_CONFIG.CANDIDATE_COUNT},
    }


def _service_error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
        message = payload.get("error", {}).get("message")
        if message:
            return f"HTTP {response.status_code}: {message}"
    except (ValueError, AttributeError):
        pass
    return f"HTTP {response.status_code}"


def parse_completion(data: Any) -> GeminiCompletion:
    """Pull completion text and grounding chunks out of a generateContent payload."""
    text = ""
    chunks: List[GroundingChunk] = []
    try:
        if isinstance(data, dict):
            candidates = data.get("candidates", [])
            if isinstance(candidates, list) and candidates:
                candidate = candidates[0] or {}
                parts = (candidate.get("content") or {}).get("parts", [])
                if isinstance(parts, list):
                    text = "".join(
                        part.get("text", "") for part in parts
                        if isinstance(part, dict) and not part.get("thought")
                    )
                metadata = candidate.get("groundingMetadata") or {}
                raw_chunks = metadata.get("groundingChunks") or []
                if isinstance(raw_chunks, list):
                    chunks = raw_chunks
    except (AttributeError, IndexError, TypeError) as e:
        logger.error("Error parsing Gemini response structure: %s. Response: %s", e, data)
    return {"text": text, "grounding_chunks": chunks}


async def call_gemini(
    prompt: str,
    settings: Settings,
    client: Optional[httpx.AsyncClient] = None,
) -> GeminiCompletion:
    """Send one grounded generateContent request. No retries."""
    if not settings.GEMINI_API_KEY:
        logger.critical("GEMINI_API_KEY not configured.")
        raise ConfigurationException("GEMINI_API_KEY")

    headers = {"Content-Type": "application/json", "x-goog-api-key": settings.GEMINI_API_KEY}
    body = build_request_body(prompt)

    try:
        if client is not None:
            response = await client.post(settings.GEMINI_ENDPOINT, headers=headers, json=body)
        else:
            async with httpx.AsyncClient(timeout=LLM_CONFIG.REQUEST_TIMEOUT) as new_client:
                response = await new_client.post(settings.GEMINI_ENDPOINT, headers=headers, json=body)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as e:
        logger.error("Gemini HTTP error %s: %s", e.response.status_code, e.response.text)
        raise LLMException(_service_error_message(e.response), status=e.response.status_code)
    except httpx.RequestError as e:
        logger.error("Gemini request error for model %s: %s", settings.GEMINI_MODEL, str(e))
        raise LLMException(str(e) or e.__class__.__name__)
    except ValueError as e:
        logger.error("Gemini returned a non-JSON body: %s", e)
        raise LLMException("Service returned an unreadable response")

    return parse_completion(data)
