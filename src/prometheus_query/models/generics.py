from typing import TypeVar

from prometheus_query.models.base import PrometheusErrorResponse, PrometheusResponse

ResponseT = TypeVar("ResponseT", bound=PrometheusResponse)

# exactly one side is set: (response, None) on success, (None, error) otherwise.
_PromClientResponse = tuple[ResponseT | None, PrometheusErrorResponse | None]

__all__ = [
    "ResponseT",
    "_PromClientResponse",
]
