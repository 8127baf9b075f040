from typing import Optional, Dict, Any

MALFORMED_RESPONSE_MESSAGE = "The AI returned a malformed analysis. Please try again."
EMPTY_RESPONSE_MESSAGE = "Received an empty response from the AI."


class TruthCheckException(Exception):
    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class ConfigurationException(TruthCheckException):
    status_code = 500

    def __init__(self, setting: str):
        super().__init__(
            f"{setting} environment variable not set.",
            {"setting": setting}
        )


class LLMException(TruthCheckException):
    status_code = 502

    def __init__(self, reason: str, status: Optional[int] = None):
        super().__init__(
            f"Failed to get a response from the AI: {reason}",
            {"reason": reason, "status": status}
        )


class MalformedResponseException(LLMException):
    def __init__(self, reason: str):
        TruthCheckException.__init__(
            self,
            MALFORMED_RESPONSE_MESSAGE,
            {"reason": reason}
        )


class EmptyResponseException(LLMException):
    def __init__(self):
        TruthCheckException.__init__(self, EMPTY_RESPONSE_MESSAGE)
