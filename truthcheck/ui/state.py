from dataclasses import dataclass
from typing import Dict, Optional, Protocol

from truthcheck.config import DISPLAY_CONFIG, logger
from truthcheck.exceptions import TruthCheckException
from truthcheck.models.analysis import AnalysisResult, Classification
from truthcheck.utils.validation import is_bare_url

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


class Analyzer(Protocol):
    async def analyze(self, claim: str) -> AnalysisResult: ...


@dataclass
class ClaimSession:
    """
    UI state for one browser session.

    Exactly one of the prompt, loading, error, or result views is active at
    a time, and at most one analysis runs at once.
    """
    claim: str = ""
    result: Optional[AnalysisResult] = None
    loading: bool = False
    error: Optional[str] = None
    url_alert: Optional[str] = None
    language: str = DISPLAY_CONFIG.DEFAULT_LANGUAGE

    def set_claim(self, text: str) -> None:
        self.claim = text
        self.url_alert = text.strip() if is_bare_url(text) else None

    def use_example(self, text: str) -> None:
        self.claim = text
        self.url_alert = None

    def dismiss_url_alert(self) -> None:
        self.url_alert = None

    @property
    def can_submit(self) -> bool:
        return bool(self.claim.strip()) and not self.loading

    @property
    def view(self) -> str:
        if self.loading:
            return "loading"
        if self.error:
            return "error"
        if self.result is not None:
            return "result"
        return "prompt"

    async def submit(self, client: Analyzer) -> bool:
        """Run one analysis. Returns False when the submit was ignored."""
        if not self.can_submit:
            return False

        self.loading = True
        self.error = None
        self.result = None
        try:
            self.result = await client.analyze(self.claim)
        except TruthCheckException as e:
            self.error = e.message
        except Exception as e:
            logger.exception("Unexpected error while analyzing claim.")
            self.error = str(e) or UNEXPECTED_ERROR_MESSAGE
        finally:
            self.loading = False
        return True


def classification_label(classification: Classification, t: Dict[str, str]) -> str:
    return {
        Classification.REAL: t["resultReal"],
        Classification.FAKE: t["resultFake"],
        Classification.UNCERTAIN: t["resultUncertain"],
    }[classification]


def confidence_color(score: int) -> str:
    if score > DISPLAY_CONFIG.HIGH_CONFIDENCE:
        return "green"
    if score > DISPLAY_CONFIG.MEDIUM_CONFIDENCE:
        return "orange"
    return "red"


def share_text(result: AnalysisResult, t: Dict[str, str]) -> str:
    label = classification_label(result.classification, t)
    return f'TruthCheck AI classified this as "{label}": {result.reasoning}'
