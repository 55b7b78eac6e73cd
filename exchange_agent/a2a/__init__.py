"""A2A (Agent-to-Agent) protocol implementation for the Exchange Rate Agent."""

from .handlers import (
    get_agent_cards,
    handle_agent_request,
    parse_error_response,
)
from .normalizer import normalize_messages
from .task_builder import build_task_result

__all__ = [
    'get_agent_cards',
    'handle_agent_request',
    'parse_error_response',
    'normalize_messages',
    'build_task_result',
]
