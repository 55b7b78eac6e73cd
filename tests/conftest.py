"""Test configuration and fixtures."""
import pytest
import sys
import os

# Add parent directory to path so we can import the project packages
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from unittest.mock import Mock

# Dummy key so constructing an OpenAI client never needs a real one
if not os.environ.get("OPENAI_API_KEY"):
    os.environ["OPENAI_API_KEY"] = "test-key-12345"

from exchange_agent.agents.exchange import build_exchange_agent, EXCHANGE_AGENT_ID
from exchange_agent.agents.registry import AgentRegistry
from exchange_agent.ai.model_client import ModelClient, ModelResponse
from exchange_agent.server import create_app
from rates_sdk.client import RatesClient


class ScriptedModelClient(ModelClient):
    """Model client that returns a fixed response and records what it was given."""

    def __init__(self, text="", tool_results=None, error=None):
        self.text = text
        self.tool_results = tool_results or []
        self.error = error
        self.calls = []

    def generate(self, messages, tools=(), instructions=None):
        self.calls.append({
            "messages": messages,
            "tools": list(tools),
            "instructions": instructions,
        })
        if self.error is not None:
            raise self.error
        return ModelResponse(text=self.text, tool_results=list(self.tool_results))


JAPAN_TOOL_RESULT = {
    "toolCallId": "call_1",
    "toolName": "get-exchange-rate",
    "args": {"country": "Japan", "baseCurrency": "USD"},
    "result": {
        "country": "Japan",
        "base": "USD",
        "target": "JPY",
        "rate": 151.2,
        "currencyName": "Japanese yen",
        "lastUpdated": "Mon, 01 Jan 2024 00:02:31 +0000",
        "success": True
    }
}


@pytest.fixture
def model_client():
    """Model client answering with a Japan rate and one tool result."""
    return ScriptedModelClient(
        text="1 USD = 151.2 JPY (Japanese yen).",
        tool_results=[JAPAN_TOOL_RESULT],
    )


@pytest.fixture
def rates_client():
    """RatesClient stand-in; no network calls."""
    return Mock(spec=RatesClient)


@pytest.fixture
def registry(model_client, rates_client):
    """Registry with the exchange agent backed by scripted collaborators."""
    return AgentRegistry([build_exchange_agent(model_client, rates_client)])


@pytest.fixture
def app(registry):
    """Create and configure a test Flask app."""
    app = create_app(registry)
    app.config.update({
        "TESTING": True,
    })
    yield app


@pytest.fixture
def client(app):
    """Create a test client for the Flask app."""
    return app.test_client()


@pytest.fixture
def agent_id():
    return EXCHANGE_AGENT_ID
