"""UI strings for the Streamlit front-end."""

from typing import Dict

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "title": "TruthCheck AI",
        "subtitle": "Paste a claim and get a grounded, source-backed verdict.",
        "textareaPlaceholder": "e.g., The Great Wall of China is visible from space with the naked eye.",
        "checkButton": "Check Truth",
        "loadingText": "Searching the web and analyzing the claim...",
        "examplesTitle": "Or try an example:",
        "errorTitle": "Analysis Failed",
        "resultReal": "Likely Real",
        "resultFake": "Likely Fake",
        "resultUncertain": "Uncertain",
        "reasoning": "Reasoning",
        "topic": "Topic",
        "keywords": "Keywords",
        "analysisDetails": "Analysis Details",
        "confidence": "Confidence",
        "sentiment": "Sentiment",
        "sentimentPositive": "Positive",
        "sentimentNegative": "Negative",
        "sentimentNeutral": "Neutral",
        "bias": "Potential Bias",
        "biasLeft": "Left-leaning",
        "biasRight": "Right-leaning",
        "biasCenter": "Center",
        "biasNeutral": "Neutral",
        "sources": "Sources",
        "noSources": "No web sources were returned for this analysis.",
        "shareResult": "Share Result",
        "urlAlertTitle": "Looks like you pasted a link",
        "urlAlertBody": "TruthCheck analyzes claims, not web pages. Paste the statement you want checked instead of {url}.",
        "urlAlertDismiss": "Got it",
        "language": "Language",
        "footerText": "AI analysis can be wrong. Always verify important information with trusted sources.",
    },
    "es": {
        "title": "TruthCheck IA",
        "subtitle": "Pega una afirmación y obtén un veredicto respaldado por fuentes.",
        "textareaPlaceholder": "p. ej., La Gran Muralla China es visible desde el espacio a simple vista.",
        "checkButton": "Verificar",
        "loadingText": "Buscando en la web y analizando la afirmación...",
        "examplesTitle": "O prueba un ejemplo:",
        "errorTitle": "El análisis falló",
        "resultReal": "Probablemente real",
        "resultFake": "Probablemente falso",
        "resultUncertain": "Incierto",
        "reasoning": "Razonamiento",
        "topic": "Tema",
        "keywords": "Palabras clave",
        "analysisDetails": "Detalles del análisis",
        "confidence": "Confianza",
        "sentiment": "Sentimiento",
        "sentimentPositive": "Positivo",
        "sentimentNegative": "Negativo",
        "sentimentNeutral": "Neutral",
        "bias": "Sesgo potencial",
        "biasLeft": "Izquierda",
        "biasRight": "Derecha",
        "biasCenter": "Centro",
        "biasNeutral": "Neutral",
        "sources": "Fuentes",
        "noSources": "No se devolvieron fuentes web para este análisis.",
        "shareResult": "Compartir resultado",
        "urlAlertTitle": "Parece que pegaste un enlace",
        "urlAlertBody": "TruthCheck analiza afirmaciones, no páginas web. Pega la afirmación que quieres verificar en lugar de {url}.",
        "urlAlertDismiss": "Entendido",
        "language": "Idioma",
        "footerText": "El análisis de IA puede equivocarse. Verifica siempre la información importante con fuentes confiables.",
    },
}

LANGUAGE_NAMES = {"en": "English", "es": "Español"}

EXAMPLE_CLAIMS = [
    "The Great Wall of China is visible from space with the naked eye.",
    "Drinking eight glasses of water a day is medically required.",
    "The Eiffel Tower grows taller in the summer.",
    "Humans only use 10% of their brains.",
]


def get_translations(language: str) -> Dict[str, str]:
    """Strings for ``language``; missing keys fall back to English."""
    base = TRANSLATIONS["en"]
    return {**base, **TRANSLATIONS.get(language, {})}
