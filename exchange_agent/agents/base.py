"""Agent capability object: instructions, a model and the tools it may call."""
import logging
from typing import Any, Dict, List, Optional, Sequence

from exchange_agent.ai.model_client import ModelClient, ModelResponse
from exchange_agent.tools.base import BaseTool

logger = logging.getLogger(__name__)

AGENT_VERSION = "1.0.0"


class Agent:
    """A named agent that answers role/content messages through its model."""

    def __init__(
        self,
        agent_id: str,
        name: str,
        instructions: str,
        model_client: ModelClient,
        tools: Optional[Sequence[BaseTool]] = None,
        description: str = "",
    ):
        self.agent_id = agent_id
        self.name = name
        self.instructions = instructions
        self.model_client = model_client
        self.tools: List[BaseTool] = list(tools or [])
        self.description = description

    def generate(self, messages: List[Dict[str, Any]]) -> ModelResponse:
        """Run the model over ``messages`` with this agent's instructions and tools."""
        logger.info(f"Agent '{self.agent_id}' generating reply for {len(messages)} message(s)")
        return self.model_client.generate(
            messages,
            tools=self.tools,
            instructions=self.instructions,
        )

    def card(self, base_url: str) -> Dict[str, Any]:
        """A2A Agent Card used for discovery."""
        return {
            "name": self.name,
            "description": self.description,
            "url": f"{base_url.rstrip('/')}/a2a/agent/{self.agent_id}",
            "version": AGENT_VERSION,
            "capabilities": {
                "streaming": False,
                "pushNotifications": False,
                "stateTransitionHistory": False
            },
            "defaultInputModes": ["text", "data"],
            "defaultOutputModes": ["text", "data"],
            "skills": [
                {
                    "id": tool.name,
                    "name": tool.name,
                    "description": tool.description
                }
                for tool in self.tools
            ]
        }
