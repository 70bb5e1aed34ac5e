import http
from urllib.parse import quote

from pydantic import Field

from prometheus_query.exceptions import PrometheusValidationException
from prometheus_query.models.base import PrometheusRequest, PrometheusResponse, RenderedRequest
from prometheus_query.models.selectors import (
    Selector,
    Timestamp,
    check_limit,
    check_selectors,
    check_time_range,
    render_timestamp,
)


def _metadata_params(
    selectors: list[Selector], required: bool, start: Timestamp | None, end: Timestamp | None, limit: int | None
) -> list[tuple[str, str]]:
    params = [("match[]", s) for s in check_selectors("matchers", selectors, required)]
    check_time_range(start, end)
    if start is not None:
        params.append(("start", render_timestamp(start)))
    if end is not None:
        params.append(("end", render_timestamp(end)))
    if limit is not None:
        params.append(("limit", check_limit(limit)))
    return params

class SeriesRequest(PrometheusRequest):
    matchers: list[Selector] = Field(..., description="Series selectors; at least one is required.")
    start: Timestamp | None = Field(None)
    end: Timestamp | None = Field(None)
    limit: int | None = Field(None)

    def render(self) -> RenderedRequest:
        params = _metadata_params(self.matchers, True, self.start, self.end, self.limit)
        return RenderedRequest(http.HTTPMethod.GET, "/api/v1/series", params)

class SeriesResponse(PrometheusResponse):
    data: list[dict[str, str]] = Field(..., description="Label sets of the matching series.")

class LabelNamesRequest(PrometheusRequest):
    matchers: list[Selector] = Field(default_factory=list)
    start: Timestamp | None = Field(None)
    end: Timestamp | None = Field(None)
    limit: int | None = Field(None)

    def render(self) -> RenderedRequest:
        params = _metadata_params(self.matchers, False, self.start, self.end, self.limit)
        return RenderedRequest(http.HTTPMethod.GET, "/api/v1/labels", params)

class LabelNamesResponse(PrometheusResponse):
    data: list[str] = Field(...)

class LabelValuesRequest(PrometheusRequest):
    label: str = Field(..., description="Label name; interpolated into the request path.")
    matchers: list[Selector] = Field(default_factory=list)
    start: Timestamp | None = Field(None)
    end: Timestamp | None = Field(None)
    limit: int | None = Field(None)

    def render(self) -> RenderedRequest:
        if not self.label:
            raise PrometheusValidationException("label", "label name must not be empty")
        params = _metadata_params(self.matchers, False, self.start, self.end, self.limit)
        path = f"/api/v1/label/{quote(self.label, safe='')}/values"
        return RenderedRequest(http.HTTPMethod.GET, path, params)

class LabelValuesResponse(PrometheusResponse):
    data: list[str] = Field(...)

__all__ = [
    "SeriesRequest",
    "SeriesResponse",
    "LabelNamesRequest",
    "LabelNamesResponse",
    "LabelValuesRequest",
    "LabelValuesResponse",
]
