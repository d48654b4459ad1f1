from __future__ import annotations
from typing import Any, Dict, Optional

import requests

from core.config import ApiContext
from core.errors import ConfigurationError, TransportError, UpstreamError
from core.request_spec import RequestSpec


class VavickyAPI:
    def __init__(self, context: ApiContext, session: Optional[Any] = None) -> None:
        if not context.has_credentials:
            raise ConfigurationError("VAVICKY_API_KEY environment variable is required")
        self.context = context
        self.headers: Dict[str, str] = {
            "Authorization": f"Bearer {context.api_key.strip()}",
            "Content-Type": "application/json",
        }
        # anything with requests' request(method, url, **kwargs) signature
        self._http = session or requests

    def send(self, spec: RequestSpec) -> Any:
        kwargs: Dict[str, Any] = {"headers": dict(self.headers), "timeout": self.context.timeout}
        if spec.body is not None:
            kwargs["json"] = spec.body
        if spec.query:
            kwargs["params"] = list(spec.query)

        url = f"{self.context.base_url.rstrip('/')}{spec.path}"
        try:
            r = self._http.request(spec.method, url, **kwargs)
        except requests.RequestException as e:
            raise TransportError(
                f"Request to {spec.method} {spec.path} failed: {e}",
                details={"method": spec.method, "path": spec.path, "reason": str(e)},
            ) from e

        if not 200 <= r.status_code < 300:
            raise UpstreamError(r.status_code, r.reason or "", r.text or "")

        if not (r.text or "").strip():
            return None
        try:
            return r.json()
        except ValueError as e:
            raise UpstreamError(r.status_code, "Invalid JSON in response", r.text) from e
