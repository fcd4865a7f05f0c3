import logging
from typing import Dict, List, Optional

import requests

from access_copilot.errors import UpstreamTransportError
from access_copilot.inference.base import LLMClient

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Failed to generate analysis."


def _provider_error(response: Optional[requests.Response]) -> Dict:
    """Return the provider's {"error": {...}} payload, or {} if there is none."""
    if response is None:
        return {}
    try:
        body = response.json()
    except ValueError:
        return {}
    if not isinstance(body, dict):
        return {}
    error = body.get("error")
    if isinstance(error, dict):
        return error
    if isinstance(error, str):
        return {"message": error}
    return {}


class ChatCompletionsClient(LLMClient):
    """OpenAI-compatible /chat/completions client. Immutable once built."""

    def __init__(
        self,
        base_url: str,
        model: str,
        api_key: str = "",
        temperature: float = 0.2,
        timeout: float = 300,
        json_mode: bool = True,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.api_key = api_key
        self.temperature = temperature
        self.timeout = timeout
        self.json_mode = json_mode

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def generate(self, messages: List[Dict]) -> str:
        url = f"{self.base_url}/chat/completions"

        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
        }
        if self.json_mode:
            payload["response_format"] = {"type": "json_object"}

        try:
            response = requests.post(
                url,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            error = _provider_error(e.response)
            raise UpstreamTransportError(
                message=error.get("message") or str(e) or FALLBACK_ERROR_MESSAGE,
                status_code=e.response.status_code if e.response is not None else None,
                error_type=error.get("type") or error.get("code") or type(e).__name__,
            ) from e
        except requests.RequestException as e:
            raise UpstreamTransportError(
                message=str(e) or FALLBACK_ERROR_MESSAGE,
                error_type=type(e).__name__,
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamTransportError(
                message="Provider returned a non-JSON response body.",
                status_code=response.status_code,
                error_type="invalid_response",
            ) from e

        choices = data.get("choices") if isinstance(data, dict) else None
        first = choices[0] if choices else {}
        message = first.get("message") if isinstance(first, dict) else None
        content = (message or {}).get("content") or ""

        if not content:
            logger.warning("Completion from %s had no content", self.model)
            return ""

        return content
