from typing import Optional


class CopilotError(Exception):
    """Base error. Carries the HTTP status and the message shown to callers."""

    status_code: int = 500
    public_message: str = "Failed to generate analysis."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.public_message)
        if message:
            self.public_message = message


class ValidationError(CopilotError):
    status_code = 400
    public_message = "callType and notes are required."


class UpstreamParseError(CopilotError):
    public_message = "Model output was not valid JSON."

    def __init__(self, raw: str):
        super().__init__()
        self.raw = raw


class UpstreamTransportError(CopilotError):
    """The chat-completions call itself failed (network, auth, rate limit...)."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_type: Optional[str] = None,
    ):
        self.upstream_status = status_code
        self.message = message
        self.error_type = error_type
        super().__init__(
            f"OpenAI error ({status_code if status_code is not None else 'unknown'}): {message}"
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> "UpstreamTransportError":
        """Best-effort status and message from an arbitrary client exception."""
        response = getattr(exc, "response", None)
        status = getattr(exc, "status_code", None) or getattr(exc, "status", None)
        if status is None and response is not None:
            status = getattr(response, "status_code", None)

        message = None
        body = getattr(exc, "body", None)
        if isinstance(body, dict):
            error = body.get("error", body)
            if isinstance(error, dict):
                message = error.get("message")
        message = message or str(exc) or "Failed to generate analysis."

        return cls(
            message=message,
            status_code=status if isinstance(status, int) else None,
            error_type=type(exc).__name__,
        )
