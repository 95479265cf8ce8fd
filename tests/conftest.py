"""
Shared fixtures: a fake Timeular API behind httpx.MockTransport and an ASGI
client for the gateway wired to it.
"""

import json
import logging

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from timeular_gateway.deps import AppState
from timeular_gateway.main import create_app
from timeular_gateway.timeular import TimeularClient

BASE_URL = "https://timeular.test/api/v2"
TOKEN = "test-jwt"

ACTIVITIES = [
    {"id": "a1", "name": "Coding", "color": "#a1b2c3", "integration": "zei"},
    {"id": "a2", "name": "Meeting", "color": "#000000", "integration": "zei"},
]


class FakeTimeular:
    """Records every request and answers from a small routing table."""

    def __init__(self):
        self.requests = []
        self.activities = [dict(a) for a in ACTIVITIES]
        self.fail_with = None  # exception instance or status code

    def bodies(self):
        return [json.loads(r.content) if r.content else None for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.fail_with, Exception):
            raise self.fail_with
        if isinstance(self.fail_with, int):
            return httpx.Response(self.fail_with, text="upstream says no")
        if request.headers.get("Authorization") != f"Bearer {TOKEN}":
            return httpx.Response(401, json={"message": "unauthorized"})

        path = request.url.path.removeprefix("/api/v2")
        if path == "/activities" and request.method == "GET":
            return httpx.Response(200, json={"activities": self.activities})
        if path == "/activities" and request.method == "POST":
            body = json.loads(request.content)
            return httpx.Response(200, json={"id": "a3", "spaceId": "s1", **body})
        if path.startswith("/activities/") and request.method == "PATCH":
            activity_id = path.rsplit("/", 1)[1]
            current = next(a for a in self.activities if a["id"] == activity_id)
            return httpx.Response(200, json={**current, **json.loads(request.content)})
        if path.startswith("/activities/") and request.method == "DELETE":
            return httpx.Response(200, json={"errors": []})
        return httpx.Response(404)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def upstream():
    return FakeTimeular()


@pytest.fixture
def timeular_client(upstream):
    return TimeularClient(TOKEN, base_url=BASE_URL, transport=upstream.transport)


@pytest.fixture
async def client(timeular_client):
    state = AppState(
        jwt=TOKEN,
        client=timeular_client,
        log=logging.getLogger("timeular_gateway.test"),
    )
    app = create_app(state)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
