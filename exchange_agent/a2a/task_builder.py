"""Assemble agent output into an A2A task with artifacts and history."""
import uuid
from typing import Any, Dict, List, Optional

from .types import (
    Artifact,
    DataPart,
    Identifier,
    Message,
    StatusMessage,
    Task,
    TaskStatus,
    TextPart,
    TASK_STATE_COMPLETED,
    parse_part,
)

TOOL_RESULTS_ARTIFACT = "ToolResults"


def new_id() -> str:
    return str(uuid.uuid4())


def caller_id(value: Any) -> Optional[Identifier]:
    """Caller-supplied id as given, or None when it is absent or empty."""
    if value is None or value == "":
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return str(value)
    return value


def resolve_task_id(messages: List[Dict[str, Any]], task_id: Optional[Identifier] = None) -> Identifier:
    """
    Pick the task id for a request.

    The request-level ``taskId`` comes first, then the first input message
    carrying its own ``taskId``, then a freshly generated one.
    """
    task_id = caller_id(task_id)
    if task_id is not None:
        return task_id
    for message in messages:
        own = caller_id(message.get("taskId")) if isinstance(message, dict) else None
        if own is not None:
            return own
    return new_id()


def build_artifacts(agent_id: str, text: str, tool_results: Optional[List[Any]] = None) -> List[Artifact]:
    """One text artifact for the reply, plus a ToolResults artifact when tools ran."""
    artifacts = [
        Artifact(
            artifactId=new_id(),
            name=f"{agent_id}Response",
            parts=[TextPart(text=text)],
        )
    ]

    if tool_results:
        artifacts.append(
            Artifact(
                artifactId=new_id(),
                name=TOOL_RESULTS_ARTIFACT,
                parts=[DataPart(data=result) for result in tool_results],
            )
        )

    return artifacts


def history_message(message: Dict[str, Any], task_id: Identifier) -> Message:
    """Copy an incoming message into history, keeping only its text parts."""
    parts = [parse_part(part) for part in message.get("parts") or []]
    message_id = caller_id(message.get("messageId"))
    own_task_id = caller_id(message.get("taskId"))
    return Message(
        role=str(message.get("role") or "user"),
        parts=[part for part in parts if isinstance(part, TextPart)],
        messageId=new_id() if message_id is None else message_id,
        taskId=task_id if own_task_id is None else own_task_id,
    )


def build_history(messages: List[Dict[str, Any]], text: str, task_id: Identifier) -> List[Message]:
    history = [history_message(message, task_id) for message in messages]
    history.append(
        Message(
            role="agent",
            parts=[TextPart(text=text)],
            messageId=new_id(),
            taskId=task_id,
        )
    )
    return history


def build_task_result(
    agent_id: str,
    messages: List[Dict[str, Any]],
    text: str,
    tool_results: Optional[List[Any]] = None,
    context_id: Optional[Identifier] = None,
    task_id: Optional[Identifier] = None,
) -> Task:
    """
    Build the completed task returned for a single request.

    Args:
        agent_id: Registry id of the agent that produced the reply
        messages: The raw protocol messages from the request
        text: Final text generated by the agent
        tool_results: Tool call results, if any tools ran
        context_id: Caller-supplied context id, generated when absent
        task_id: Caller-supplied task id; falls back to the first input
            message's own taskId, then to a generated one

    Returns:
        Task with status "completed", response artifacts and history
    """
    text = text or ""
    task_id = resolve_task_id(messages, task_id)
    context_id = caller_id(context_id)

    return Task(
        id=task_id,
        contextId=new_id() if context_id is None else context_id,
        status=TaskStatus(
            state=TASK_STATE_COMPLETED,
            message=StatusMessage(
                messageId=new_id(),
                parts=[TextPart(text=text)],
            ),
        ),
        artifacts=build_artifacts(agent_id, text, tool_results),
        history=build_history(messages, text, task_id),
    )
