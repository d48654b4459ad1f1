from __future__ import annotations

import argparse
import logging
import os
import sys

from core.config import API_KEY_ENV, HOST, PORT, SSL_CERTFILE, SSL_KEYFILE, ApiContext
from core.logging_setup import setup_logging

log = logging.getLogger(__name__)


def run_stdio() -> None:
    from server import create_mcp

    mcp = create_mcp()
    log.info("Vavicky MCP server running on stdio")
    mcp.run()


def run_http(host: str, port: int) -> None:
    import uvicorn

    ssl = {}
    if SSL_KEYFILE and SSL_CERTFILE and os.path.isfile(SSL_KEYFILE) and os.path.isfile(SSL_CERTFILE):
        ssl = {"ssl_keyfile": SSL_KEYFILE, "ssl_certfile": SSL_CERTFILE}
        log.info(f"Vavicky MCP HTTPS server running on port {port}")
    else:
        log.warning(f"TLS files not found ({SSL_KEYFILE}, {SSL_CERTFILE}); serving plain HTTP on port {port}")

    uvicorn.run("app:create_app", factory=True, host=host, port=port, **ssl)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="vavicky-mcp", description="Vavicky MCP gateway")
    parser.add_argument("--log-level", default=None)
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("stdio", help="serve MCP over stdio (default)")
    http = sub.add_parser("http", help="serve /call-tool and MCP over HTTP(S)")
    http.add_argument("--host", default=HOST)
    http.add_argument("--port", type=int, default=PORT)

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if not ApiContext.from_env().has_credentials:
        log.warning(f"{API_KEY_ENV} is not set; every tool call will fail until it is")

    if args.command == "http":
        run_http(args.host, args.port)
    else:
        run_stdio()
    return 0


if __name__ == "__main__":
    sys.exit(main())
