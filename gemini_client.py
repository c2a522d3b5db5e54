import json
import logging

import httpx

logger = logging.getLogger(__name__)


class GeminiError(Exception):
    """Error raised for any failed generateContent call.

    status_code / status / reason come from the Google error envelope
    ({"error": {"code", "message", "status", "details": [{"reason"}]}})
    when the API answered with one.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        status: str | None = None,
        reason: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.status = status
        self.reason = reason


def _error_from_response(response: httpx.Response) -> GeminiError:
    message = f"Gemini API returned HTTP {response.status_code}"
    status = None
    reason = None
    try:
        body = response.json()
    except ValueError:
        body = None

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        message = error.get("message") or message
        status = error.get("status")
        for detail in error.get("details") or []:
            if isinstance(detail, dict) and detail.get("reason"):
                reason = detail["reason"]
                break

    return GeminiError(
        message, status_code=response.status_code, status=status, reason=reason
    )


def _extract_text(data: dict) -> str:
    try:
        return data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        block_reason = (data.get("promptFeedback") or {}).get("blockReason")
        if block_reason:
            raise GeminiError(f"Gemini blocked the prompt: {block_reason}")
        raise GeminiError("Gemini response contained no candidate text")


class GeminiClient:
    """Thin async client for the Gemini generateContent REST endpoint.

    One instance is created in the app lifespan and shared by all requests;
    it holds no per-request state.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str,
        http_client: httpx.AsyncClient,
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
    ):
        self.api_key = api_key
        self.model = model
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate_json(self, prompt: str, response_schema: dict) -> dict:
        """
        Send a single user message and return the parsed JSON answer.
        - responseMimeType forces JSON output
        - responseSchema restricts the shape of that JSON
        """
        if not self.api_key:
            raise GeminiError("GEMINI_API_KEY is not set in the environment.")

        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": response_schema,
            },
        }

        try:
            response = await self.http_client.post(
                self.endpoint, headers=headers, json=payload
            )
        except httpx.RequestError as e:
            logger.error("Gemini request failed: %s", e)
            raise GeminiError(f"Gemini request failed: {e}") from e

        if response.is_error:
            raise _error_from_response(response)

        text = _extract_text(response.json())
        return json.loads(text)
