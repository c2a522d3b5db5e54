"""Error types and upstream failure classification.

classify_error() looks at the typed fields of a GeminiError first (HTTP
code, Google status, detail reason) and falls back to the message text,
checked in this order: "API_KEY", "model", "quota" / "limit".
"""

from enum import Enum

from gemini_client import GeminiError
from schemas import ErrorResponse

MISSING_INPUT_MESSAGE = "Either a URL or a title is required."
AUTH_MESSAGE = (
    "Invalid or missing Gemini API key. Please check your environment configuration."
)
MODEL_CONFIG_MESSAGE = "Invalid model configuration. Please check the Gemini model name."
RATE_LIMIT_MESSAGE = "API quota exceeded. Please try again later."
GENERIC_MESSAGE = (
    "Failed to analyze the input. Please check your URL or title and try again later."
)


class UpstreamErrorKind(str, Enum):
    AUTH = "auth"
    MODEL_CONFIG = "model_config"
    RATE_LIMIT = "rate_limit"
    UNKNOWN = "unknown"


# kind -> (http status, client message)
_RESPONSES = {
    UpstreamErrorKind.AUTH: (500, AUTH_MESSAGE),
    UpstreamErrorKind.MODEL_CONFIG: (500, MODEL_CONFIG_MESSAGE),
    UpstreamErrorKind.RATE_LIMIT: (429, RATE_LIMIT_MESSAGE),
    UpstreamErrorKind.UNKNOWN: (500, GENERIC_MESSAGE),
}


class FactCheckError(Exception):
    http_status = 500

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> dict:
        return ErrorResponse(error=self.message, details=self.details).model_dump(
            exclude_none=True
        )


class InvalidInputError(FactCheckError):
    http_status = 400

    def __init__(self, message: str = MISSING_INPUT_MESSAGE):
        super().__init__(message)


class UpstreamError(FactCheckError):
    def __init__(self, kind: UpstreamErrorKind, details: str | None = None):
        status_code, message = _RESPONSES[kind]
        super().__init__(message, details=details)
        self.kind = kind
        self.http_status = status_code


def _classify_typed(exc: GeminiError) -> UpstreamErrorKind | None:
    if exc.reason == "API_KEY_INVALID" or exc.status_code in (401, 403):
        return UpstreamErrorKind.AUTH
    if exc.status_code == 429 or exc.status == "RESOURCE_EXHAUSTED":
        return UpstreamErrorKind.RATE_LIMIT
    if exc.status_code == 404 and exc.status == "NOT_FOUND":
        return UpstreamErrorKind.MODEL_CONFIG
    return None


def classify_message(message: str) -> UpstreamErrorKind:
    if "API_KEY" in message:
        return UpstreamErrorKind.AUTH
    if "model" in message:
        return UpstreamErrorKind.MODEL_CONFIG
    if "quota" in message or "limit" in message:
        return UpstreamErrorKind.RATE_LIMIT
    return UpstreamErrorKind.UNKNOWN


def classify_error(exc: Exception) -> UpstreamErrorKind:
    if isinstance(exc, GeminiError):
        kind = _classify_typed(exc)
        if kind is not None:
            return kind
    return classify_message(str(exc))


def upstream_error(exc: Exception, expose_details: bool = False) -> UpstreamError:
    """Map any exception from the upstream call to the error sent to the client.

    Only the generic branch carries the raw text, and only if expose_details.
    """
    kind = classify_error(exc)
    details = str(exc) if expose_details and kind is UpstreamErrorKind.UNKNOWN else None
    return UpstreamError(kind, details=details)
