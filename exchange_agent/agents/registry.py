"""Registry of agents that can be addressed by id over A2A."""
from typing import Dict, Iterable, List, Optional

from .base import Agent


class AgentRegistry:
    """Maps agent ids to agents. Passed explicitly to the app and handlers."""

    def __init__(self, agents: Optional[Iterable[Agent]] = None):
        self._agents: Dict[str, Agent] = {}
        for agent in agents or []:
            self.register(agent)

    def register(self, agent: Agent) -> None:
        self._agents[agent.agent_id] = agent

    def get(self, agent_id: str) -> Optional[Agent]:
        """
        Get an agent by its id.

        Returns:
            Agent instance if registered, None otherwise
        """
        return self._agents.get(agent_id)

    def ids(self) -> List[str]:
        return list(self._agents)

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._agents

    def __iter__(self):
        return iter(self._agents.values())

    def __len__(self) -> int:
        return len(self._agents)
