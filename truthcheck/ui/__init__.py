from .state import ClaimSession, classification_label, confidence_color, share_text
from .translations import EXAMPLE_CLAIMS, TRANSLATIONS, get_translations

__all__ = [
    "ClaimSession",
    "classification_label",
    "confidence_color",
    "share_text",
    "EXAMPLE_CLAIMS",
    "TRANSLATIONS",
    "get_translations",
]
