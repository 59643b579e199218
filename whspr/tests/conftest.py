"""Shared fixtures for whspr tests."""

import hashlib

import pytest
import requests

from whspr.models import catalog
from whspr.models import store
from whspr.models.catalog import ModelDescriptor
from whspr.models.store import ModelAcquirer

MODEL_BYTES = b"ggml model payload " * 4096


class FakeResponse:
    """Minimal stand-in for a streamed requests.Response."""

    def __init__(self, status_code=200, body=b"", error=None):
        self.status_code = status_code
        self.body = body
        self.error = error

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def iter_content(self, chunk_size=1):
        for start in range(0, len(self.body), chunk_size):
            yield self.body[start:start + chunk_size]
        if self.error is not None:
            raise self.error


class FakeSession:
    """Records GET requests and replays queued responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def queue(self, response):
        self.responses.append(response)

    def get(self, url, stream=False, timeout=None):
        self.calls.append({"url": url, "stream": stream, "timeout": timeout})
        if not self.responses:
            raise AssertionError(f"Unexpected request to {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def model_bytes():
    return MODEL_BYTES


@pytest.fixture
def fake_model(monkeypatch):
    """Replace the "tiny" catalog entry with one matching MODEL_BYTES."""
    model = ModelDescriptor(
        name="tiny",
        sha256=hashlib.sha256(MODEL_BYTES).hexdigest(),
        size_mb=0.1,
    )

    def fake_lookup(name):
        if name == model.name:
            return model
        return catalog.lookup(name)

    monkeypatch.setattr(store, "lookup", fake_lookup)
    return model


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def acquirer(tmp_path, session):
    return ModelAcquirer(
        cache_dir=tmp_path / "data" / "whspr" / "models",
        base_url="https://host.example/models",
        session=session,
        chunk_size=4096,
    )


@pytest.fixture
def ok_response():
    return FakeResponse(200, MODEL_BYTES)


@pytest.fixture
def make_response():
    return FakeResponse


@pytest.fixture
def connection_error():
    return requests.exceptions.ConnectionError("connection refused")
