"""Flatten A2A messages into role/content pairs for model input."""
import json
from typing import Any, Dict, List, Union

from .types import DataPart, TextPart, parse_part


def part_to_text(raw_part: Any) -> str:
    """Textual form of a single part; unknown kinds contribute an empty string."""
    part = parse_part(raw_part)
    if isinstance(part, TextPart):
        return part.text
    if isinstance(part, DataPart):
        # Compact separators so the output matches JSON.stringify
        return json.dumps(part.data, separators=(",", ":"), ensure_ascii=False)
    return ""


def normalize_message(message: Dict[str, Any]) -> Dict[str, Any]:
    parts = message.get("parts") or []
    return {
        "role": message.get("role"),
        "content": "\n".join(part_to_text(part) for part in parts),
    }


def normalize_messages(messages: Union[Dict[str, Any], List[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    """
    Convert protocol messages into ``{"role", "content"}`` pairs.

    Accepts a single message or a list of them. Each message's parts are joined
    with newlines: text parts verbatim, data parts as JSON. Order is preserved.
    """
    if isinstance(messages, dict):
        messages = [messages]
    return [normalize_message(message) for message in messages]
