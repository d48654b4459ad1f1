from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import Field

from core.config import SERVICE_NAME, VERSION
from core.errors import ConfigurationError, DispatchError
from tools import DispatchEngine, get_engine

log = logging.getLogger(__name__)


def result_text(result: Any) -> str:
    return json.dumps(result, indent=2, ensure_ascii=False)


async def call_tool(engine: DispatchEngine, name: str, arguments: Optional[Dict[str, Any]]) -> Any:
    """Run one call off the event loop and map failures to MCP tool errors."""
    try:
        return await asyncio.to_thread(engine.execute, name, arguments or {})
    except ConfigurationError as e:
        log.error(f"{name}: {e.message}")
        raise ToolError(e.message) from e
    except DispatchError as e:
        log.warning(f"{name} failed kind={e.kind} error={e.message}")
        raise ToolError(f"Tool execution failed: {e.message}") from e


class CatalogueTool(Tool):
    """MCP tool whose schema comes from the catalogue and whose calls go to the engine."""

    engine: Any = Field(default=None, exclude=True, repr=False)

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        result = await call_tool(self.engine, self.name, arguments)
        return ToolResult(content=[TextContent(type="text", text=result_text(result))])


def create_mcp(engine: Optional[DispatchEngine] = None) -> FastMCP:
    engine = engine or get_engine()
    mcp = FastMCP(name=SERVICE_NAME, version=VERSION)
    for definition in engine.list_tools():
        mcp.add_tool(
            CatalogueTool(
                name=definition.name,
                description=definition.description,
                parameters=definition.input_schema(),
                engine=engine,
            )
        )
    log.info(f"Registered {len(engine.list_tools())} tools on {SERVICE_NAME}")
    return mcp
