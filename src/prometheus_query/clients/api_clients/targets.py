from prometheus_query.clients.api_clients.base import _ApiClient
from prometheus_query.clients.res_processors.targets import (
    _process_alertmanagers_response,
    _process_targets_response,
)
from prometheus_query.models.generics import _PromClientResponse
from prometheus_query.models.targets import (
    AlertmanagersRequest,
    AlertmanagersResponse,
    TargetsRequest,
    TargetsResponse,
)

class _TargetsApiClient(_ApiClient):

    async def get_targets(self, request: TargetsRequest | None=None) -> _PromClientResponse[TargetsResponse]:
        """
        GET /api/v1/targets
        """
        return await self._dispatch("targets", request or TargetsRequest(), _process_targets_response)

    async def get_alertmanagers(self) -> _PromClientResponse[AlertmanagersResponse]:
        """
        GET /api/v1/alertmanagers
        """
        return await self._dispatch("alertmanagers", AlertmanagersRequest(), _process_alertmanagers_response)

__all__ = [
    "_TargetsApiClient"
]
