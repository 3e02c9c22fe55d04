"""Tool surface over the timeline functions."""

from __future__ import annotations

from .registry import ToolFunction, call_tool, get_tools, register_tool

# Import tool modules so decorators run at module import time.
from . import timeline  # noqa: F401

__all__ = ["ToolFunction", "call_tool", "get_tools", "register_tool"]
