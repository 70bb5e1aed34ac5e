"""
Shared fixtures for client tests.

Tests talk to an in-process aiohttp application standing in for Prometheus. Each test registers
the replies it needs on the `prometheus` fixture and inspects the requests it recorded.
"""

import asyncio
from collections.abc import AsyncGenerator
from dataclasses import dataclass
import json
import logging
from typing import Any
from urllib.parse import parse_qsl

from aiohttp import web
from aiohttp.test_utils import TestServer
from prometheus_client import CollectorRegistry
import pytest
import pytest_asyncio

from prometheus_query.clients.client import PromClient

LOGGER = logging.getLogger(__name__)

@dataclass
class RecordedRequest:
    method: str
    raw_path: str
    query_string: str
    body: str
    headers: dict[str, str]

    @property
    def query(self) -> list[tuple[str, str]]:
        return parse_qsl(self.query_string, keep_blank_values=True)

    @property
    def form(self) -> list[tuple[str, str]]:
        return parse_qsl(self.body, keep_blank_values=True)

@dataclass
class CannedReply:
    status: int
    body: bytes
    content_type: str
    delay: float = 0

class FakePrometheus:
    """
    Answers registered (method, raw path) pairs; anything else gets Prometheus's plain-text 404.
    """

    def __init__(self):
        self.url: str = ""
        self.requests: list[RecordedRequest] = []
        self.replies: dict[tuple[str, str], CannedReply] = {}
        self.request_seen = asyncio.Event()
        self.app = web.Application()
        self.app.router.add_route("*", "/{tail:.*}", self.handle)

    def reply(
        self, method: str, raw_path: str, payload: Any=None, status: int=200,
        body: bytes | None=None, content_type: str="application/json", delay: float=0,
    ):
        if body is None:
            body = json.dumps(payload).encode("utf-8")
        self.replies[(method, raw_path)] = CannedReply(status, body, content_type, delay)

    def success(self, method: str, raw_path: str, data: Any=None, warnings: list[str] | None=None, **kwargs):
        payload: dict[str, Any] = {"status": "success"}
        if data is not None:
            payload["data"] = data
        if warnings is not None:
            payload["warnings"] = warnings
        self.reply(method, raw_path, payload, **kwargs)

    def error(self, method: str, raw_path: str, error_type: str, error: str, status: int=400, **kwargs):
        self.reply(method, raw_path, {"status": "error", "errorType": error_type, "error": error}, status=status, **kwargs)

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]

    async def handle(self, request: web.Request) -> web.StreamResponse:
        body = await request.read()
        raw_path = request.rel_url.raw_path
        self.requests.append(RecordedRequest(
            method=request.method,
            raw_path=raw_path,
            query_string=request.rel_url.raw_query_string,
            body=body.decode("utf-8"),
            headers=dict(request.headers),
        ))
        self.request_seen.set()
        reply = self.replies.get((request.method, raw_path))
        if reply is None:
            return web.Response(status=404, text="404 page not found\n")
        if reply.delay:
            await asyncio.sleep(reply.delay)
        if reply.status == 204:
            return web.Response(status=204)
        return web.Response(status=reply.status, body=reply.body, content_type=reply.content_type)

@pytest_asyncio.fixture
async def prometheus() -> AsyncGenerator[FakePrometheus, None]:
    fake = FakePrometheus()
    server = TestServer(fake.app)
    await server.start_server()
    fake.url = str(server.make_url("/"))
    try:
        yield fake
    finally:
        await server.close()

@pytest.fixture
def registry() -> CollectorRegistry:
    return CollectorRegistry()

@pytest_asyncio.fixture
async def prom_client(prometheus: FakePrometheus, registry: CollectorRegistry) -> AsyncGenerator[PromClient, None]:
    """
    Provides a PromClient against the fake server with async cleanup.
    """
    client = PromClient(prometheus.url, timeout=5, registry=registry)
    try:
        yield client
    finally:
        await client.close()
