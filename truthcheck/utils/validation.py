import re
from typing import Optional
from urllib.parse import urlparse


class ValidationError(ValueError):
    pass


class InputValidator:

    CONTROL_CHARS_PATTERN = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')

    @staticmethod
    def sanitize_claim(claim: Optional[str]) -> str:
        claim = InputValidator.CONTROL_CHARS_PATTERN.sub('', claim or '').strip()

        if not claim:
            raise ValidationError("Claim cannot be empty")

        return claim


def is_bare_url(text: Optional[str]) -> bool:
    """True when the whole trimmed text is an absolute http(s) URL."""
    if not text:
        return False
    candidate = text.strip()
    if not candidate or any(ch.isspace() for ch in candidate):
        return False
    try:
        parsed = urlparse(candidate)
        # Accessing .port validates the port component.
        parsed.port
    except ValueError:
        return False
    return parsed.scheme.lower() in ("http", "https") and bool(parsed.hostname)
