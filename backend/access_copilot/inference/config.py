from fastapi import Request

from access_copilot import config
from .base import LLMClient
from .chat_completions_client import ChatCompletionsClient


def build_llm_client() -> ChatCompletionsClient:
    return ChatCompletionsClient(
        base_url=config.OPENAI_BASE_URL,
        model=config.TEXT_MODEL,
        api_key=config.OPENAI_API_KEY,
        temperature=config.LLM_TEMPERATURE,
        timeout=config.LLM_TIMEOUT_SECONDS,
    )


def get_llm_client(request: Request) -> LLMClient:
    """FastAPI dependency: the client built once at startup."""
    return request.app.state.llm_client
