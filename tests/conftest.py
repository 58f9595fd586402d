import pytest

from app import create_app
from core.models import generator


class FakeMessage:
    def __init__(self, content):
        self.content = content


class FakeLLM:
    """Stands in for ChatOpenAI: records prompts, returns canned text or raises."""

    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def invoke(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return FakeMessage(self.text)


class FlaskTransport:
    """Routes BlogWriterView requests through Flask's test client."""

    def __init__(self, client):
        self.client = client
        self.calls = []

    def post_json(self, path, payload):
        self.calls.append((path, payload))
        resp = self.client.post(path, json=payload)
        return resp.status_code, resp.get_json(silent=True) or {}


@pytest.fixture(autouse=True)
def _no_credentials(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_BASE_URL", raising=False)
    monkeypatch.setattr(generator, "_LLM", None)
    monkeypatch.setattr(generator, "_LLM_KEY", None)


@pytest.fixture()
def app():
    return create_app()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def use_llm(monkeypatch):
    """Install a fake LLM as the configured upstream."""
    def _install(llm):
        monkeypatch.setattr(generator, "get_llm", lambda: llm)
        return llm
    return _install
