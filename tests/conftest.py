# shared fakes so no test ever touches the network

import json
from pathlib import Path

import pytest
import requests

DATA_DIR = Path(__file__).parent / "data"


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        if self._payload is None:
            # same behaviour as requests on an unparseable body
            return json.loads(self.text)
        return self._payload


class FakeSession:
    # records calls and returns a canned response (or raises a canned error)
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def daily_payload():
    return json.loads((DATA_DIR / "open_meteo_daily.json").read_text(encoding="utf-8"))


@pytest.fixture
def make_session():
    def _make(status_code=200, payload=None, text=None, error=None):
        if error is not None:
            return FakeSession(error=error)
        return FakeSession(FakeResponse(status_code, payload, text))
    return _make


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # a developer's shell or .env must not change what the tests see
    for name in ("OPEN_METEO_URL", "FORECAST_TIMEOUT", "FORECAST_MAX_RETRIES", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
