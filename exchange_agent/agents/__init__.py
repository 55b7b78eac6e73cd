"""Agents hosted by this server."""

from .base import Agent
from .registry import AgentRegistry

__all__ = ['Agent', 'AgentRegistry']
