from prometheus_query.clients.api_clients.base import _ApiClient
from prometheus_query.clients.res_processors.admin import (
    _process_clean_tombstones_response,
    _process_delete_series_response,
    _process_snapshot_response,
)
from prometheus_query.models.admin import (
    CleanTombstonesRequest,
    CleanTombstonesResponse,
    DeleteSeriesRequest,
    DeleteSeriesResponse,
    SnapshotRequest,
    SnapshotResponse,
)
from prometheus_query.models.generics import _PromClientResponse

class _AdminApiClient(_ApiClient):
    """
    TSDB admin API. Prometheus answers with an `unavailable` error unless started with --web.enable-admin-api.
    """

    async def delete_series(self, request: DeleteSeriesRequest) -> _PromClientResponse[DeleteSeriesResponse]:
        """
        POST /api/v1/admin/tsdb/delete_series
        """
        return await self._dispatch("delete_series", request, _process_delete_series_response)

    async def clean_tombstones(self) -> _PromClientResponse[CleanTombstonesResponse]:
        """
        POST /api/v1/admin/tsdb/clean_tombstones
        """
        return await self._dispatch("clean_tombstones", CleanTombstonesRequest(), _process_clean_tombstones_response)

    async def snapshot(self, request: SnapshotRequest | None=None) -> _PromClientResponse[SnapshotResponse]:
        """
        POST /api/v1/admin/tsdb/snapshot
        """
        return await self._dispatch("snapshot", request or SnapshotRequest(), _process_snapshot_response)

__all__ = [
    "_AdminApiClient"
]
