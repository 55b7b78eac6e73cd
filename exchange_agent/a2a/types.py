"""A2A protocol objects: parts, messages, artifacts and tasks."""
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from exchange_agent.timeutils import utc_timestamp

TASK_STATE_COMPLETED = "completed"

# Caller-supplied ids are echoed back with their JSON type intact
Identifier = Union[str, int, float]


class TextPart(BaseModel):
    # Caller fields such as metadata survive the copy into history
    model_config = ConfigDict(extra="allow")

    kind: Literal["text"] = "text"
    text: str


class DataPart(BaseModel):
    kind: Literal["data"] = "data"
    data: Any = None


Part = Union[TextPart, DataPart]


def parse_part(raw: Any) -> Optional[Part]:
    """
    Parse a raw part dict into its typed form.

    Returns None for anything that is not a recognized text or data part, so
    callers can skip part kinds this server does not understand.
    """
    if not isinstance(raw, dict):
        return None
    kind = raw.get("kind")
    if kind == "text":
        text = raw.get("text")
        return TextPart.model_validate({**raw, "text": text if isinstance(text, str) else ""})
    if kind == "data":
        return DataPart(data=raw.get("data"))
    return None


class Message(BaseModel):
    kind: Literal["message"] = "message"
    role: str
    parts: List[TextPart] = Field(default_factory=list)
    messageId: Identifier
    taskId: Identifier


class StatusMessage(BaseModel):
    """Agent message attached to a task status. Carries no taskId."""
    messageId: str
    role: str = "agent"
    parts: List[TextPart] = Field(default_factory=list)
    kind: Literal["message"] = "message"


class Artifact(BaseModel):
    artifactId: str
    name: str
    parts: List[Part] = Field(default_factory=list)


class TaskStatus(BaseModel):
    state: str = TASK_STATE_COMPLETED
    timestamp: str = Field(default_factory=utc_timestamp)
    message: Optional[StatusMessage] = None


class Task(BaseModel):
    id: Identifier
    contextId: Identifier
    status: TaskStatus
    artifacts: List[Artifact] = Field(default_factory=list)
    history: List[Message] = Field(default_factory=list)
    kind: Literal["task"] = "task"

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
