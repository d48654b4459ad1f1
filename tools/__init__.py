from __future__ import annotations

from typing import Optional

from core.config import ApiContext
from .catalogue import get_tool, list_tools
from .engine import DispatchEngine

_ENGINE: Optional[DispatchEngine] = None


def get_engine() -> DispatchEngine:
    """Process-wide engine bound to the environment's credentials."""
    global _ENGINE
    if _ENGINE is None:
        _ENGINE = DispatchEngine(ApiContext.from_env())
    return _ENGINE


__all__ = ["DispatchEngine", "get_engine", "get_tool", "list_tools"]
