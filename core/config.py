from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def env(key: str, default: str | None = None) -> str | None:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


# --- Vavicky backend ---
DEFAULT_BASE_URL = "https://backend.vavicky.com/vavicky/api"
API_KEY_ENV = "VAVICKY_API_KEY"

# --- Service ---
SERVICE_NAME = env("SERVICE_NAME", "vavicky-mcp-server")
VERSION = env("VERSION", "1.0.0")
LOG_LEVEL = env("LOG_LEVEL", "INFO")

# --- HTTP listener ---
HOST = env("HOST", "0.0.0.0")
PORT = int(env("PORT", "443"))
SSL_KEYFILE = env("SSL_KEYFILE", "./certs/key.pem")
SSL_CERTFILE = env("SSL_CERTFILE", "./certs/cert.pem")
MCP_HTTP_PATH = env("MCP_HTTP_PATH", "/mcp")


@dataclass(frozen=True)
class ApiContext:
    """Credentials and endpoint shared by every outbound request."""

    api_key: Optional[str]
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 60.0

    @staticmethod
    def from_env() -> "ApiContext":
        return ApiContext(
            api_key=env(API_KEY_ENV),
            base_url=(env("VAVICKY_BASE_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL).rstrip("/"),
            timeout=float(env("VAVICKY_TIMEOUT_SECONDS", "60")),
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_key.strip())
