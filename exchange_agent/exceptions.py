"""Custom exceptions for the Exchange Rate Agent."""


class ExchangeAgentError(Exception):
    """Base exception for the Exchange Rate Agent."""
    pass


class InvalidRequestError(ExchangeAgentError):
    """Raised when a JSON-RPC envelope is malformed."""
    pass


class AgentNotFoundError(ExchangeAgentError):
    """Raised when a request targets an agent that is not registered."""

    def __init__(self, agent_id: str):
        self.agent_id = agent_id
        super().__init__(f"Agent '{agent_id}' not found")


class ValidationError(ExchangeAgentError):
    """Raised when tool input validation fails."""
    pass
