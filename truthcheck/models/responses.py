from typing import TypedDict, Any, Dict, List


class WebReference(TypedDict, total=False):
    uri: str
    title: str


class GroundingChunk(TypedDict, total=False):
    """One entry of ``groundingMetadata.groundingChunks``."""
    web: WebReference


class GeminiCompletion(TypedDict):
    """Text and grounding data pulled out of a generateContent response."""
    text: str
    grounding_chunks: List[GroundingChunk]


class ErrorResponse(TypedDict):
    """JSON body returned for any failed request."""
    error: str
    message: str
    details: Dict[str, Any]
