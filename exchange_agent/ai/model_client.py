"""Model invocation: messages in, generated text and tool results out."""
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from openai import OpenAI

import exchange_agent.ai.openai_utils as openai_utils
from exchange_agent.config import DEFAULT_MODEL
from exchange_agent.tools.base import BaseTool

logger = logging.getLogger(__name__)


@dataclass
class ModelResponse:
    text: str = ""
    tool_results: List[Dict[str, Any]] = field(default_factory=list)


class ModelClient(ABC):
    """Language model behind an agent."""

    @abstractmethod
    def generate(
        self,
        messages: List[Dict[str, Any]],
        tools: Sequence[BaseTool] = (),
        instructions: Optional[str] = None,
    ) -> ModelResponse:
        """Generate a reply, running any tools the model calls along the way."""
        pass


class OpenAIModelClient(ModelClient):
    """Runs the Responses API function-calling loop against OpenAI."""

    def __init__(
        self,
        openai_client=None,
        model: str = DEFAULT_MODEL,
        max_tool_rounds: int = 5,
        api_key: Optional[str] = None,
    ):
        self.client = openai_client or OpenAI(api_key=api_key)
        self.model = model
        self.max_tool_rounds = max_tool_rounds

    def generate(
        self,
        messages: List[Dict[str, Any]],
        tools: Sequence[BaseTool] = (),
        instructions: Optional[str] = None,
    ) -> ModelResponse:
        tools_by_name = {tool.name: tool for tool in tools}
        input_items = openai_utils.build_responses_input(instructions, messages)
        tool_results: List[Dict[str, Any]] = []
        text = ""

        for round_number in range(self.max_tool_rounds + 1):
            params: Dict[str, Any] = {
                "model": self.model,
                "input": input_items,
            }
            if tools_by_name:
                params["tools"] = [tool.to_function_def() for tool in tools_by_name.values()]
            params.update(openai_utils.get_reasoning_params(self.model))

            data = openai_utils.response_to_dict(self.client.responses.create(**params))
            text = openai_utils.extract_output_text(data)
            calls = openai_utils.extract_function_calls(data)
            if not calls:
                return ModelResponse(text=text, tool_results=tool_results)

            if round_number == self.max_tool_rounds:
                logger.warning(f"Stopping after {self.max_tool_rounds} tool rounds with calls still pending")
                break

            for call in calls:
                args = openai_utils.parse_arguments(call["arguments"])
                result = self._run_tool(tools_by_name, call["name"], args)
                tool_results.append({
                    "toolCallId": call["call_id"],
                    "toolName": call["name"],
                    "args": args,
                    "result": result,
                })
                input_items.append({
                    "type": "function_call",
                    "call_id": call["call_id"],
                    "name": call["name"],
                    "arguments": call["arguments"],
                })
                input_items.append({
                    "type": "function_call_output",
                    "call_id": call["call_id"],
                    "output": json.dumps(result),
                })

        return ModelResponse(text=text, tool_results=tool_results)

    def _run_tool(self, tools_by_name: Dict[str, BaseTool], name: str, args: Dict[str, Any]) -> Dict[str, Any]:
        tool = tools_by_name.get(name)
        if tool is None:
            logger.warning(f"Model requested unknown tool: {name}")
            return {"success": False, "error": f"Tool not found: {name}"}

        logger.info(f"Executing tool '{name}' with args {args}")
        return tool.execute(args)
