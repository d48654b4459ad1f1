import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import MCP_HTTP_PATH, SERVICE_NAME, VERSION
from core.errors import ConfigurationError, DispatchError
from server import create_mcp
from tools import DispatchEngine, get_engine

log = logging.getLogger(__name__)


def utc_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def create_app(engine: Optional[DispatchEngine] = None) -> FastAPI:
    engine = engine or get_engine()

    # -----------------------------
    # MCP over streamable HTTP
    # -----------------------------
    mcp = create_mcp(engine)
    mcp_app = mcp.http_app(path=MCP_HTTP_PATH)

    app = FastAPI(title=SERVICE_NAME, version=VERSION, lifespan=mcp_app.lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        return {
            "ok": True,
            "message": "Vavicky MCP HTTPS server is running",
            "service": SERVICE_NAME,
            "version": VERSION,
            "ts": utc_iso(),
            "mcp": MCP_HTTP_PATH,
        }

    @app.get("/health")
    def health():
        return {"ok": True, "ts": utc_iso(), "service": SERVICE_NAME, "version": VERSION}

    @app.get("/tools")
    def tools():
        return {"tools": [t.to_mcp() for t in engine.list_tools()]}

    @app.post("/call-tool")
    async def call_tool(request: Request):
        try:
            payload = await request.json()
        except ValueError:
            payload = None
        if not isinstance(payload, dict):
            payload = {}
        tool_name = payload.get("toolName")
        args = payload.get("args")
        if not isinstance(tool_name, str) or not tool_name or not isinstance(args, dict):
            return JSONResponse(status_code=400, content={"error": "toolName and args are required"})

        try:
            result = await asyncio.to_thread(engine.execute, tool_name, args)
        except DispatchError as e:
            if isinstance(e, ConfigurationError):
                log.error(f"call-tool {tool_name}: {e.message}")
            else:
                log.warning(f"call-tool {tool_name} failed kind={e.kind} error={e.message}")
            return JSONResponse(status_code=e.http_status, content={"success": False, "error": e.to_dict()})

        return {"success": True, "result": result}

    app.mount("/", mcp_app)
    return app
