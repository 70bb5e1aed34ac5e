"""
TSDB admin commands. These are only served when Prometheus runs with `--web.enable-admin-api`.
"""
import http

from pydantic import Field

from prometheus_query.models.base import PrometheusRequest, PrometheusResponse, RenderedRequest
from prometheus_query.models.selectors import (
    Selector,
    Timestamp,
    check_selectors,
    check_time_range,
    render_timestamp,
)


class DeleteSeriesRequest(PrometheusRequest):
    matchers: list[Selector] = Field(..., description="Series selectors; at least one is required.")
    start: Timestamp | None = Field(None)
    end: Timestamp | None = Field(None)

    def render(self) -> RenderedRequest:
        params = [("match[]", s) for s in check_selectors("matchers", self.matchers, True)]
        check_time_range(self.start, self.end)
        if self.start is not None:
            params.append(("start", render_timestamp(self.start)))
        if self.end is not None:
            params.append(("end", render_timestamp(self.end)))
        return RenderedRequest(http.HTTPMethod.POST, "/api/v1/admin/tsdb/delete_series", params, form=True)

class DeleteSeriesResponse(PrometheusResponse):
    pass

class CleanTombstonesRequest(PrometheusRequest):

    def render(self) -> RenderedRequest:
        return RenderedRequest(http.HTTPMethod.POST, "/api/v1/admin/tsdb/clean_tombstones", [], form=True)

class CleanTombstonesResponse(PrometheusResponse):
    pass

class SnapshotRequest(PrometheusRequest):
    skip_head: bool | None = Field(None, description="Skip data present in the head block.")

    def render(self) -> RenderedRequest:
        params = []
        if self.skip_head is not None:
            params.append(("skip_head", "true" if self.skip_head else "false"))
        return RenderedRequest(http.HTTPMethod.POST, "/api/v1/admin/tsdb/snapshot", params, form=True)

class SnapshotResponse(PrometheusResponse):
    name: str = Field(..., description="Snapshot directory name under <data-dir>/snapshots.")

__all__ = [
    "DeleteSeriesRequest",
    "DeleteSeriesResponse",
    "CleanTombstonesRequest",
    "CleanTombstonesResponse",
    "SnapshotRequest",
    "SnapshotResponse",
]
