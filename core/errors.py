"""
Failure kinds raised by the dispatch engine.

Every error carries a stable ``kind``, a readable message and a details dict
that transports can serialize as-is.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class DispatchError(Exception):
    kind = "dispatch_error"
    http_status = 500

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        message = message.strip() if isinstance(message, str) else ""
        super().__init__(message or "Unknown dispatch error")
        self.message = message or "Unknown dispatch error"
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "message": self.message, "details": self.details}


class ConfigurationError(DispatchError):
    """Credential context is missing; every call fails until it is set."""

    kind = "configuration_error"
    http_status = 500


class UnknownToolError(DispatchError):
    kind = "unknown_tool"
    http_status = 404

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}", details={"tool": tool_name})
        self.tool_name = tool_name


class ValidationError(DispatchError):
    """A required argument is missing/empty or an argument has the wrong type."""

    kind = "validation_error"
    http_status = 400


class UpstreamError(DispatchError):
    """The backend answered with a non-2xx status (or an unreadable 2xx body)."""

    kind = "upstream_error"
    http_status = 502

    def __init__(self, status: int, status_text: str, body: str) -> None:
        super().__init__(
            f"API request failed: {status} {status_text} - {body}",
            details={"status": status, "status_text": status_text, "body": body},
        )
        self.status = status
        self.status_text = status_text
        self.body = body


class TransportError(DispatchError):
    """The request never reached the backend (DNS, connection, timeout)."""

    kind = "transport_error"
    http_status = 502
