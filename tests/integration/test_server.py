"""Tests for core server endpoints - A2A protocol."""
import json
import pytest

from exchange_agent.agents.exchange import build_exchange_agent
from exchange_agent.agents.registry import AgentRegistry
from exchange_agent.server import create_app
from tests.conftest import ScriptedModelClient


class TestHealthEndpoint:
    """Tests for health check endpoint."""

    def test_health_check_returns_200(self, client):
        """Health check should return 200 OK."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_check_returns_json(self, client):
        """Health check should return JSON with status and hosted agents."""
        data = json.loads(client.get("/health").data)
        assert data["status"] == "healthy"
        assert "version" in data
        assert data["agents"] == ["exchangeAgent"]


class TestA2ADiscovery:
    """Tests for A2A discovery endpoints."""

    def test_agent_cards_endpoint(self, client):
        """Agent cards should be available at the well-known URL."""
        response = client.get("/.well-known/a2a.json")
        assert response.status_code == 200

        agents = json.loads(response.data)["agents"]
        assert len(agents) == 1
        assert agents[0]["name"] == "Exchange Rate Agent"
        assert agents[0]["url"].endswith("/a2a/agent/exchangeAgent")

    def test_single_agent_card(self, client):
        response = client.get("/a2a/agent/exchangeAgent/.well-known/agent.json")
        assert response.status_code == 200
        assert json.loads(response.data)["skills"][0]["id"] == "get-exchange-rate"

    def test_single_agent_card_unknown(self, client):
        response = client.get("/a2a/agent/ghost/.well-known/agent.json")
        assert response.status_code == 404


class TestA2AAgentEndpoint:
    """Tests for POST /a2a/agent/<agentId>."""

    def test_scenario_japan_exchange_rate(self, client):
        """Should return a completed task for a single user message."""
        response = client.post("/a2a/agent/exchangeAgent", json={
            "jsonrpc": "2.0",
            "id": 1,
            "params": {
                "message": {
                    "role": "user",
                    "parts": [{"kind": "text", "text": "Japan exchange rate"}],
                    "messageId": "m1",
                    "taskId": "t1"
                }
            }
        })
        assert response.status_code == 200

        data = json.loads(response.data)
        assert data["jsonrpc"] == "2.0"
        assert data["id"] == 1
        result = data["result"]
        assert result["id"] == "t1"
        assert result["status"]["state"] == "completed"
        assert result["artifacts"][0]["name"] == "exchangeAgentResponse"
        assert result["artifacts"][0]["parts"][0]["text"] == "1 USD = 151.2 JPY (Japanese yen)."
        assert result["artifacts"][1]["name"] == "ToolResults"
        assert result["artifacts"][1]["parts"][0]["data"]["result"]["target"] == "JPY"
        assert len(result["history"]) == 2
        assert result["history"][0]["messageId"] == "m1"
        assert result["history"][1]["role"] == "agent"

    def test_jsonrpc_1_0_rejected(self, client):
        """Should reject a JSON-RPC 1.0 envelope with 400 and -32600."""
        response = client.post("/a2a/agent/exchangeAgent", json={
            "jsonrpc": "1.0",
            "id": 1,
            "params": {}
        })
        assert response.status_code == 400

        data = json.loads(response.data)
        assert data["error"]["code"] == -32600
        assert data["id"] == 1

    def test_missing_id_rejected(self, client):
        response = client.post("/a2a/agent/exchangeAgent", json={"jsonrpc": "2.0", "params": {}})
        assert response.status_code == 400

        data = json.loads(response.data)
        assert data["error"]["code"] == -32600
        assert data["id"] is None

    def test_unknown_agent(self, client):
        """Should return 404 with -32602 naming the agent."""
        response = client.post("/a2a/agent/weatherAgent", json={
            "jsonrpc": "2.0",
            "id": "abc",
            "params": {}
        })
        assert response.status_code == 404

        data = json.loads(response.data)
        assert data["id"] == "abc"
        assert data["error"]["code"] == -32602
        assert "weatherAgent" in data["error"]["message"]

    @pytest.mark.parametrize("payload", ["{not json", ""])
    def test_unparseable_body(self, client, payload):
        """Should answer malformed JSON with a parse error instead of crashing."""
        response = client.post(
            "/a2a/agent/exchangeAgent",
            data=payload,
            content_type="application/json",
        )
        assert response.status_code == 400

        data = json.loads(response.data)
        assert data["error"]["code"] == -32700
        assert data["id"] is None

    def test_non_object_body(self, client):
        """Should reject a JSON array body as an invalid request."""
        response = client.post("/a2a/agent/exchangeAgent", json=[1, 2, 3])
        assert response.status_code == 400
        assert json.loads(response.data)["error"]["code"] == -32600

    def test_internal_error(self, rates_client):
        """Should return 500 with -32603 and the failure details."""
        registry = AgentRegistry([
            build_exchange_agent(ScriptedModelClient(error=ValueError("upstream exploded")), rates_client)
        ])
        client = create_app(registry).test_client()

        response = client.post("/a2a/agent/exchangeAgent", json={
            "jsonrpc": "2.0",
            "id": 9,
            "params": {"message": {"role": "user", "parts": [{"kind": "text", "text": "hi"}]}}
        })
        assert response.status_code == 500

        data = json.loads(response.data)
        assert data["id"] is None
        assert data["error"] == {
            "code": -32603,
            "message": "Internal error",
            "data": {"details": "upstream exploded"}
        }

    def test_multi_turn_messages(self, client, model_client):
        """Should pass every message to the model and copy each into history."""
        response = client.post("/a2a/agent/exchangeAgent", json={
            "jsonrpc": "2.0",
            "id": 2,
            "params": {
                "contextId": "ctx-1",
                "messages": [
                    {"role": "user", "parts": [{"kind": "text", "text": "Japan rate"}], "messageId": "m1"},
                    {"role": "agent", "parts": [{"kind": "text", "text": "151 JPY"}], "messageId": "m2"},
                    {"role": "user", "parts": [{"kind": "text", "text": "and in EUR?"},
                                               {"kind": "data", "data": {"base": "EUR"}}], "messageId": "m3"}
                ]
            }
        })
        assert response.status_code == 200

        result = json.loads(response.data)["result"]
        assert result["contextId"] == "ctx-1"
        assert [m["messageId"] for m in result["history"][:3]] == ["m1", "m2", "m3"]
        assert result["history"][2]["parts"] == [{"kind": "text", "text": "and in EUR?"}]
        assert len(result["history"]) == 4
        assert model_client.calls[0]["messages"][2]["content"] == 'and in EUR?\n{"base":"EUR"}'


class TestDefaultApp:
    """The app builds its own registry when none is injected."""

    def test_create_app_default_registry(self):
        app = create_app()
        assert app.config["AGENT_REGISTRY"].ids() == ["exchangeAgent"]
