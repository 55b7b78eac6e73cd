"""Helpers for the OpenAI Responses API with function tools."""
from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)

_ALLOWED_EFFORT = {"minimal", "low", "medium", "high"}

# A2A roles mapped onto the roles the Responses API accepts as message input
_ROLE_MAP = {
    "user": "user",
    "agent": "assistant",
    "assistant": "assistant",
    "system": "system",
    "developer": "developer",
}


def _get_env_effort() -> Optional[str]:
    effort = os.getenv("OPENAI_REASONING_EFFORT_DEFAULT", "").strip().lower()
    return effort if effort in _ALLOWED_EFFORT else None


def _get_env_max_output_tokens() -> Optional[int]:
    raw = os.getenv("OPENAI_MAX_OUTPUT_TOKENS", "").strip()
    if not raw:
        return None
    try:
        val = int(raw)
        return val if val > 0 else None
    except ValueError:
        return None


def get_reasoning_params(
    model: str,
    desired_effort: Optional[str] = None,
    max_output_tokens: Optional[int] = None,
) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    mot = max_output_tokens if (isinstance(max_output_tokens, int) and max_output_tokens > 0) else _get_env_max_output_tokens()
    if mot:
        params["max_output_tokens"] = mot

    # Reasoning effort is only understood by reasoning models
    if not (model and (model.startswith("gpt-5") or model.startswith("o"))):
        return params

    effort = (desired_effort or "").lower()
    if effort not in _ALLOWED_EFFORT:
        effort = _get_env_effort()
    if effort:
        params["reasoning"] = {"effort": effort}
    return params


def build_responses_input(instructions: Optional[str], messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Turn role/content pairs into Responses API input items."""
    items: List[Dict[str, Any]] = []
    if instructions:
        items.append({"role": "system", "content": instructions})
    for message in messages:
        role = _ROLE_MAP.get(str(message.get("role") or "").lower(), "user")
        items.append({"role": role, "content": message.get("content") or ""})
    return items


def response_to_dict(resp: Any) -> Dict[str, Any]:
    if isinstance(resp, dict):
        return resp
    data = (
        resp.model_dump() if hasattr(resp, "model_dump") else resp.to_dict() if hasattr(resp, "to_dict") else json.loads(resp.json())
    )
    try:
        logger.debug("OpenAI Responses raw: %s", json.dumps(data, default=str)[:2000])
    except (TypeError, ValueError):
        pass
    return data


def parse_arguments(raw: Any) -> Dict[str, Any]:
    if isinstance(raw, dict):
        return raw
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError:
            return {"text": raw}
        return parsed if isinstance(parsed, dict) else {"value": parsed}
    return {}


def extract_function_calls(data: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Pull function calls out of a Responses API payload.

    Returns a list of ``{"call_id", "name", "arguments"}`` with arguments kept as
    the raw JSON string the model produced.
    """
    calls = []
    for item in data.get("output", []) or []:
        if item.get("type") != "function_call":
            continue
        arguments = item.get("arguments")
        if isinstance(arguments, dict):
            arguments = json.dumps(arguments)
        calls.append({
            "call_id": item.get("call_id") or item.get("id"),
            "name": item.get("name"),
            "arguments": arguments or "{}",
        })
    return calls


def extract_output_text(data: Dict[str, Any]) -> str:
    """Concatenate the assistant's output_text content blocks."""
    chunks = []
    for item in data.get("output", []) or []:
        if item.get("type") != "message":
            continue
        for content in item.get("content", []) or []:
            if content.get("type") == "output_text" and content.get("text"):
                chunks.append(content["text"])
    if chunks:
        return "".join(chunks)
    # Some SDK versions also expose a flattened output_text
    text = data.get("output_text")
    return text if isinstance(text, str) else ""
