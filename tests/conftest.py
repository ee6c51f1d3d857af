"""Shared fixtures: an AivenClient wired to an in-memory httpx transport."""

import json
import pathlib
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from aiven_client import AivenClient

TESTDATA = pathlib.Path(__file__).parent / "testdata"

BASE_URL = "https://api.aiven.test"


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(
        self,
        status_code: int = 200,
        json_body: Any = None,
        content: bytes | str | None = None,
        exc: type[httpx.RequestError] | None = None,
    ):
        self.status_code = status_code
        self.json_body = json_body
        self.content = content
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            msg = "simulated failure"
            raise self.exc(msg, request=request)
        if self.json_body is not None:
            return httpx.Response(self.status_code, json=self.json_body)
        return httpx.Response(self.status_code, content=self.content or b"")

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def load_json() -> Callable[[str], Any]:
    """Read a JSON document from tests/testdata."""

    def _load(name: str) -> Any:
        return json.loads((TESTDATA / name).read_text())

    return _load


@pytest.fixture
def make_client() -> Callable[..., tuple[AivenClient, RecordingHandler]]:
    """Build an AivenClient whose requests are answered by a RecordingHandler."""

    def _make(
        status_code: int = 200,
        json_body: Any = None,
        content: bytes | str | None = None,
        exc: type[httpx.RequestError] | None = None,
        token: str | None = "test-token",
    ) -> tuple[AivenClient, RecordingHandler]:
        handler = RecordingHandler(status_code, json_body, content, exc)
        client = AivenClient(
            BASE_URL,
            token=token,
            transport=httpx.MockTransport(handler),
        )
        return client, handler

    return _make
