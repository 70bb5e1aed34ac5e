import http
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class RenderedRequest(NamedTuple):
    """
    HTTP method, path and ordered parameters for a single Prometheus API call.

    When `form` is set the parameters travel as an urlencoded request body,
    otherwise as the query string.
    """
    method: http.HTTPMethod
    path: str
    params: list[tuple[str, str]]
    form: bool = False

class PrometheusRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    def render(self) -> RenderedRequest:
        """
        Validate the request and render it for the transport.

        Raises PrometheusValidationException on a violated precondition.
        """
        raise NotImplementedError

class PrometheusResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    warnings: list[str] = Field(default_factory=list)
    infos: list[str] = Field(default_factory=list)

class PrometheusErrorResponse(BaseModel):
    model_config = ConfigDict(frozen=True)
    error: str = Field(...)
    status: int | None = Field(None, description="HTTP status code, if a response was received.")

__all__ = [
    "RenderedRequest",
    "PrometheusRequest",
    "PrometheusResponse",
    "PrometheusErrorResponse",
]
