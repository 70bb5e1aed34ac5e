import ssl as _ssl

import aiohttp
from prometheus_client import REGISTRY, CollectorRegistry

from prometheus_query.clients.api_clients.admin import _AdminApiClient
from prometheus_query.clients.api_clients.metadata import _MetadataApiClient
from prometheus_query.clients.api_clients.query import _QueryApiClient
from prometheus_query.clients.api_clients.status import _StatusApiClient
from prometheus_query.clients.api_clients.targets import _TargetsApiClient
from prometheus_query.clients.api_context import _ApiContextManager


class PromClient(_ApiContextManager):
    """
    Asynchronous client for the Prometheus HTTP V1 API.

    Every call returns a `(response, error)` tuple where exactly one side is set. Calls are
    independent and may run concurrently over the shared connection pool.

    ```python
    async with PromClient("http://localhost:9090") as client:
        response, error = await client.query_api.instant_query(InstantQueryRequest(query="up"))
    ```
    """

    def __init__(
        self, prometheus_host: str, timeout: float=60, headers: dict[str, str] | None=None,
        basic_auth: tuple[str, str] | None=None, bearer_token: str | None=None,
        ssl: bool | _ssl.SSLContext=True, session: aiohttp.ClientSession | None=None,
        connector_limit: int=100, registry: CollectorRegistry=REGISTRY,
    ):
        super().__init__(
            prometheus_host, timeout=timeout, headers=headers, basic_auth=basic_auth, bearer_token=bearer_token,
            ssl=ssl, session=session, connector_limit=connector_limit, registry=registry,
        )
        self.query_api = _QueryApiClient(self)
        self.metadata_api = _MetadataApiClient(self)
        self.targets_api = _TargetsApiClient(self)
        self.status_api = _StatusApiClient(self)
        self.admin_api = _AdminApiClient(self)

    async def __aenter__(self) -> "PromClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

__all__ = [
    "PromClient"
]
