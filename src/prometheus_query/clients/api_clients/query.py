from prometheus_query.clients.api_clients.base import _ApiClient
from prometheus_query.clients.res_processors.query import (
    _process_instant_query_response,
    _process_range_query_response,
)
from prometheus_query.models.generics import _PromClientResponse
from prometheus_query.models.query import (
    InstantQueryRequest,
    InstantQueryResponse,
    RangeQueryRequest,
    RangeQueryResponse,
)

class _QueryApiClient(_ApiClient):

    async def instant_query(self, request: InstantQueryRequest) -> _PromClientResponse[InstantQueryResponse]:
        """
        GET /api/v1/query
        """
        return await self._dispatch("instant_query", request, _process_instant_query_response)

    async def range_query(self, request: RangeQueryRequest) -> _PromClientResponse[RangeQueryResponse]:
        """
        GET /api/v1/query_range

        Rejected without a request if `step` is not positive or `end` precedes `start`.
        """
        return await self._dispatch("range_query", request, _process_range_query_response)

__all__ = [
    "_QueryApiClient"
]
