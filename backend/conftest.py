import pytest
from fastapi.testclient import TestClient

from access_copilot.inference.base import LLMClient
from access_copilot.inference.config import get_llm_client
from access_copilot.main import app


class StubLLMClient(LLMClient):
    """Records every call; returns `reply` or raises `error`."""

    def __init__(self, reply: str = "{}", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def stub_llm():
    return StubLLMClient()


@pytest.fixture
def client(stub_llm):
    app.dependency_overrides[get_llm_client] = lambda: stub_llm
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def scenario():
    return {
        "callType": "Radiology w/ Pre-Auth",
        "notes": "Patient needs MRI, auth pending 5 days, referring MD upset.",
        "persona": "Chona",
        "goal": "Cut days to appointment below 3.",
    }
