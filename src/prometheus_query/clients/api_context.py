import asyncio
import base64
import http
import logging
import ssl as _ssl

import aiohttp
from prometheus_client import REGISTRY, CollectorRegistry
from yarl import URL

from prometheus_query.clients.instrumentation import RequestMetrics, get_request_metrics
from prometheus_query.clients.utils import _encode_params
from prometheus_query.exceptions import PrometheusTransportException
from prometheus_query.models.errors import TransportErrorKind

LOGGER = logging.getLogger(__name__)

class _ApiContextManager:
    """
    Holds the Prometheus base URL, request headers and the aiohttp session (connection pool)
    shared by every API client.

    A session passed in by the caller is used as-is and left open on close().
    """

    def __init__(
        self, prometheus_host: str, timeout: float=60, headers: dict[str, str] | None=None,
        basic_auth: tuple[str, str] | None=None, bearer_token: str | None=None,
        ssl: bool | _ssl.SSLContext=True, session: aiohttp.ClientSession | None=None,
        connector_limit: int=100, registry: CollectorRegistry=REGISTRY,
    ):
        if not prometheus_host.startswith(("http://", "https://")):
            raise ValueError(f"Prometheus host must start with http:// or https://: {prometheus_host}")
        if basic_auth and bearer_token:
            raise ValueError("Use either basic_auth or bearer_token, not both.")
        self.prometheus_host = prometheus_host.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.ssl = ssl
        self.connector_limit = connector_limit
        self.metrics: RequestMetrics = get_request_metrics(registry)

        self.headers: dict[str, str] = {"Accept": "application/json"}
        if basic_auth:
            username, password = basic_auth
            credentials = base64.b64encode(f"{username}:{password}".encode("latin1")).decode("ascii")
            self.headers["Authorization"] = f"Basic {credentials}"
        elif bearer_token:
            self.headers["Authorization"] = f"Bearer {bearer_token}"
        if headers:
            self.headers.update(headers)

        self.session = session
        self._created_session = False

    def build_url(self, api: str) -> str:
        return f"{self.prometheus_host}{api}"

    async def _get_session(self) -> aiohttp.ClientSession:
        if not self.session:
            self.session = aiohttp.ClientSession(
                connector=aiohttp.TCPConnector(limit=self.connector_limit, ssl=self.ssl),
                timeout=self.timeout,
            )
            self._created_session = True
        return self.session

    async def handle_request(
        self, request_type: http.HTTPMethod, url: str, headers: dict[str, str],
        params: list[tuple[str, str]] | None=None, data: list[tuple[str, str]] | None=None,
    ) -> tuple[int, bytes]:
        """
        Send one request and return the status code and raw body.

        `params` are sent as the query string and `data` as an urlencoded form body; both are
        encoded here, so `url` must already be percent-encoded. Connection failures and timeouts
        raise PrometheusTransportException. No retries are made.
        """
        if params:
            url = f"{url}?{_encode_params(params)}"
        body = None
        if data is not None:
            headers = {**headers, "Content-Type": "application/x-www-form-urlencoded"}
            body = _encode_params(data).encode("ascii")

        session = await self._get_session()
        try:
            async with session.request(
                request_type, URL(url, encoded=True), headers=headers, data=body, timeout=self.timeout
            ) as response:
                content = await response.read()
                status = response.status
        except asyncio.TimeoutError as e:
            LOGGER.warning(f"[{request_type} {url}] timed out after {self.timeout.total}s.")
            raise PrometheusTransportException(
                TransportErrorKind.TIMEOUT, f"Request timed out after {self.timeout.total}s"
            ) from e
        except aiohttp.ClientError as e:
            LOGGER.error(f"[{request_type} {url}] connection failed: {e}")
            raise PrometheusTransportException(TransportErrorKind.CONNECTION_FAILED, str(e)) from e
        LOGGER.debug(f"[{request_type} {url}] {status}")
        return status, content

    async def close(self):
        if (session := self.session) and self._created_session:
            await session.close()
        self.session = None
        self._created_session = False

__all__ = [
    "_ApiContextManager",
]
