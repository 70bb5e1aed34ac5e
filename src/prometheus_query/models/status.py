import http
from typing import Any, Literal

from pydantic import Field

from prometheus_query.models.base import PrometheusRequest, PrometheusResponse, RenderedRequest

StatusComponent = Literal["config", "runtimeinfo", "buildinfo", "tsdb", "walreplay"]

class StatusRequest(PrometheusRequest):
    component: StatusComponent = Field(..., description="Status page to fetch; flags have their own request.")

    def render(self) -> RenderedRequest:
        return RenderedRequest(http.HTTPMethod.GET, f"/api/v1/status/{self.component}", [])

class StatusResponse(PrometheusResponse):
    component: StatusComponent = Field(...)
    data: dict[str, Any] = Field(...)

class FlagsRequest(PrometheusRequest):

    def render(self) -> RenderedRequest:
        return RenderedRequest(http.HTTPMethod.GET, "/api/v1/status/flags", [])

class FlagsResponse(PrometheusResponse):
    data: dict[str, str] = Field(...)

__all__ = [
    "StatusComponent",
    "StatusRequest",
    "StatusResponse",
    "FlagsRequest",
    "FlagsResponse",
]
