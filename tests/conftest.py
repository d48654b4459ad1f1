import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
import requests

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.config import ApiContext  # noqa: E402
from tools.engine import DispatchEngine  # noqa: E402

BASE_URL = "https://backend.test/vavicky/api"


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, reason: str = "OK", text: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        if text is None:
            text = "" if body is None else json.dumps(body)
        self.text = text

    def json(self) -> Any:
        return json.loads(self.text)


class FakeSession:
    """Records every request and answers with a canned response (or raises)."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None):
        self.response = response or FakeResponse(200, {"ok": True})
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def context() -> ApiContext:
    return ApiContext(api_key="test-key", base_url=BASE_URL, timeout=5)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def engine(context, session) -> DispatchEngine:
    return DispatchEngine(context, session=session)


@pytest.fixture
def connection_error() -> Exception:
    return requests.ConnectionError("connection reset by peer")
