from typing import Any, Dict, List, Optional

import pytest
import requests
from fastapi.testclient import TestClient

from string_service_api.app.main import app
from string_service_api.app.api.v1.endpoints import nonprofits
from string_service_api.app.services.nonprofit_service import NonprofitSearchClient


SEARCH_URL = "https://nonprofits.example.test/search.json"


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, payload: Any = None, status_code: int = 200, raw: Optional[str] = None) -> None:
        self.payload = payload
        self.status_code = status_code
        self.raw = raw

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self) -> Any:
        if self.raw is not None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """Records GET calls and replays a canned response or exception."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None) -> None:
        self.response = response
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, params: Optional[Dict[str, Any]] = None, timeout: Optional[float] = None) -> FakeResponse:
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def upstream(monkeypatch):
    """Point ``POST /fetch`` at a fake upstream.

    Returns a function taking ``FakeSession`` keyword arguments and
    returning the installed session.
    """

    def install(**kwargs) -> FakeSession:
        session = FakeSession(**kwargs)
        fake_client = NonprofitSearchClient(base_url=SEARCH_URL, timeout=3.0, session=session)
        monkeypatch.setattr(nonprofits.search_service, "client", fake_client)
        return session

    return install
