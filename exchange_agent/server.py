"""Main Flask server for the Exchange Rate Agent with A2A protocol."""
from flask import Flask, jsonify, request
from typing import Optional
import logging

from exchange_agent.agents.registry import AgentRegistry
from exchange_agent.config import get_settings

# Import A2A handlers
from exchange_agent.a2a import (
    get_agent_cards,
    handle_agent_request,
    parse_error_response,
)

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def create_app(registry: Optional[AgentRegistry] = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        registry: Agents to serve. Defaults to the exchange agent wired to
            OpenAI and the public rate APIs.
    """
    app = Flask(__name__)
    settings = get_settings()

    if registry is None:
        from exchange_agent.agents.exchange import build_default_registry
        registry = build_default_registry(settings)

    app.config["AGENT_REGISTRY"] = registry
    logger.info(f"Serving agents: {', '.join(registry.ids()) or 'none'}")

    @app.route("/health", methods=["GET"])
    def health_check():
        """Health check endpoint."""
        return jsonify({
            "status": "healthy",
            "version": VERSION,
            "agents": registry.ids()
        })

    # ===== A2A (Agent-to-Agent) Endpoints =====

    @app.route("/.well-known/a2a.json", methods=["GET"])
    def a2a_discovery():
        """A2A discovery endpoint listing the Agent Card of every hosted agent."""
        return jsonify(get_agent_cards(registry, settings.public_base_url))

    @app.route("/a2a/agent/<agent_id>/.well-known/agent.json", methods=["GET"])
    def a2a_agent_card(agent_id: str):
        """Agent Card for a single agent."""
        agent = registry.get(agent_id)
        if agent is None:
            return jsonify({"error": f"Agent '{agent_id}' not found"}), 404
        return jsonify(agent.card(settings.public_base_url))

    @app.route("/a2a/agent/<agent_id>", methods=["POST"])
    def a2a_agent(agent_id: str):
        """Handle A2A JSON-RPC 2.0 task requests for one agent."""
        request_data = request.get_json(force=True, silent=True)
        if request_data is None:
            logger.warning(f"Unparseable A2A request body for agent '{agent_id}'")
            body, status = parse_error_response()
            return jsonify(body), status

        body, status = handle_agent_request(agent_id, request_data, registry)
        return jsonify(body), status

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True, port=5000)
