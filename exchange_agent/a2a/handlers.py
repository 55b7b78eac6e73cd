"""A2A JSON-RPC handlers for the agent task endpoint."""

import logging
from typing import Any, Dict, List, Optional, Tuple

from exchange_agent.agents.registry import AgentRegistry
from exchange_agent.exceptions import AgentNotFoundError, InvalidRequestError

from .normalizer import normalize_messages
from .task_builder import build_task_result

logger = logging.getLogger(__name__)

JSONRPC_VERSION = "2.0"

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


def jsonrpc_error(request_id: Any, code: int, message: str, data: Optional[Any] = None) -> Dict[str, Any]:
    error: Dict[str, Any] = {
        "code": code,
        "message": message
    }
    if data is not None:
        error["data"] = data
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": request_id,
        "error": error
    }


def parse_error_response() -> Tuple[Dict[str, Any], int]:
    return jsonrpc_error(None, PARSE_ERROR, "Parse error - invalid JSON"), 400


def validate_envelope(request_data: Any) -> None:
    """
    Check the JSON-RPC 2.0 envelope.

    Raises:
        InvalidRequestError: if the body is not an object, ``jsonrpc`` is not
            exactly "2.0", or ``id`` is missing or null
    """
    if not isinstance(request_data, dict):
        raise InvalidRequestError("Invalid Request: body must be a JSON object")
    if request_data.get("jsonrpc") != JSONRPC_VERSION or request_data.get("id") is None:
        raise InvalidRequestError('Invalid Request: jsonrpc must be "2.0" and id is required')


def extract_messages(params: Dict[str, Any]) -> List[Dict[str, Any]]:
    """A single ``message`` wins over a ``messages`` list; neither means no messages."""
    message = params.get("message")
    if message:
        return [message]
    messages = params.get("messages")
    if isinstance(messages, list):
        return messages
    return []


def resolve_agent(registry: AgentRegistry, agent_id: str):
    agent = registry.get(agent_id)
    if agent is None:
        raise AgentNotFoundError(agent_id)
    return agent


def handle_agent_request(
    agent_id: str,
    request_data: Any,
    registry: AgentRegistry,
) -> Tuple[Dict[str, Any], int]:
    """
    Handle a JSON-RPC task request addressed to one agent.

    Args:
        agent_id: Agent id taken from the request path
        request_data: Decoded JSON-RPC request body
        registry: Agents this server can route to

    Returns:
        Tuple of (JSON-RPC response, HTTP status)
    """
    request_id = request_data.get("id") if isinstance(request_data, dict) else None

    try:
        validate_envelope(request_data)
    except InvalidRequestError as e:
        logger.warning(f"Rejected A2A request for '{agent_id}': {e}")
        return jsonrpc_error(request_id, INVALID_REQUEST, str(e)), 400

    try:
        agent = resolve_agent(registry, agent_id)
    except AgentNotFoundError as e:
        logger.warning(str(e))
        return jsonrpc_error(request_id, INVALID_PARAMS, str(e)), 404

    try:
        params = request_data.get("params")
        if not isinstance(params, dict):
            params = {}

        messages = extract_messages(params)
        context_id = params.get("contextId")
        task_id = params.get("taskId")

        logger.info(f"A2A request {request_id!r} for agent '{agent_id}' with {len(messages)} message(s)")

        response = agent.generate(normalize_messages(messages))

        task = build_task_result(
            agent_id=agent_id,
            messages=messages,
            text=response.text,
            tool_results=response.tool_results,
            context_id=context_id,
            task_id=task_id,
        )

        return {
            "jsonrpc": JSONRPC_VERSION,
            "id": request_id,
            "result": task.to_dict()
        }, 200

    except Exception as e:
        logger.error(f"Internal error handling A2A request for '{agent_id}': {e}", exc_info=True)
        return jsonrpc_error(None, INTERNAL_ERROR, "Internal error", {"details": str(e)}), 500


def get_agent_cards(registry: AgentRegistry, base_url: str) -> Dict[str, Any]:
    """Discovery document listing the card of every registered agent."""
    return {
        "agents": [agent.card(base_url) for agent in registry]
    }
