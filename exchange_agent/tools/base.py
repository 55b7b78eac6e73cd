"""Base class for agent tools."""
from abc import ABC, abstractmethod
from typing import Dict, Any


class BaseTool(ABC):
    """Base class for all tools an agent can offer to the model."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the tool name."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Get the tool description."""
        pass

    @abstractmethod
    def get_schema(self) -> Dict[str, Any]:
        """Get the tool's input schema."""
        pass

    @abstractmethod
    def validate_input(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and process input data."""
        pass

    @abstractmethod
    def execute(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Execute the tool with the arguments chosen by the model."""
        pass

    def to_function_def(self) -> Dict[str, Any]:
        """Function tool definition in the shape the Responses API expects."""
        return {
            "type": "function",
            "name": self.name,
            "description": self.description,
            "parameters": self.get_schema(),
            # Length constraints in the schema are not allowed in strict mode
            "strict": False,
        }
