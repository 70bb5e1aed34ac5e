import functools

from prometheus_query.clients.api_clients.base import _ApiClient
from prometheus_query.clients.res_processors.status import (
    _process_flags_response,
    _process_status_response,
)
from prometheus_query.models.generics import _PromClientResponse
from prometheus_query.models.status import (
    FlagsRequest,
    FlagsResponse,
    StatusRequest,
    StatusResponse,
)

class _StatusApiClient(_ApiClient):

    async def get_status(self, request: StatusRequest) -> _PromClientResponse[StatusResponse]:
        """
        GET /api/v1/status/{component}
        """
        processor = functools.partial(_process_status_response, component=request.component)
        return await self._dispatch("status", request, processor)

    async def get_flags(self) -> _PromClientResponse[FlagsResponse]:
        """
        GET /api/v1/status/flags
        """
        return await self._dispatch("flags", FlagsRequest(), _process_flags_response)

__all__ = [
    "_StatusApiClient"
]
