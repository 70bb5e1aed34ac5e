from prometheus_query.clients.api_clients.base import _ApiClient
from prometheus_query.clients.res_processors.metadata import (
    _process_label_names_response,
    _process_label_values_response,
    _process_series_response,
)
from prometheus_query.models.generics import _PromClientResponse
from prometheus_query.models.metadata import (
    LabelNamesRequest,
    LabelNamesResponse,
    LabelValuesRequest,
    LabelValuesResponse,
    SeriesRequest,
    SeriesResponse,
)

class _MetadataApiClient(_ApiClient):

    async def get_series(self, request: SeriesRequest) -> _PromClientResponse[SeriesResponse]:
        """
        GET /api/v1/series
        """
        return await self._dispatch("series", request, _process_series_response)

    async def get_label_names(self, request: LabelNamesRequest | None=None) -> _PromClientResponse[LabelNamesResponse]:
        """
        GET /api/v1/labels
        """
        return await self._dispatch("label_names", request or LabelNamesRequest(), _process_label_names_response)

    async def get_label_values(self, request: LabelValuesRequest) -> _PromClientResponse[LabelValuesResponse]:
        """
        GET /api/v1/label/{label}/values
        """
        return await self._dispatch("label_values", request, _process_label_values_response)

__all__ = [
    "_MetadataApiClient"
]
