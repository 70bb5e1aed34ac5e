"""
Async client for the Prometheus HTTP V1 API.
"""
from prometheus_query.clients.client import PromClient
from prometheus_query.models.base import PrometheusErrorResponse, PrometheusResponse
from prometheus_query.models.errors import (
    ApiErrorKind,
    ApiErrorResponse,
    DecodeErrorKind,
    DecodeErrorResponse,
    TransportErrorKind,
    TransportErrorResponse,
    ValidationErrorResponse,
)
from prometheus_query.models.selectors import MatchOp, Matcher, SeriesSelector

__all__ = [
    "PromClient",
    "PrometheusResponse",
    "PrometheusErrorResponse",
    "ApiErrorKind",
    "ApiErrorResponse",
    "DecodeErrorKind",
    "DecodeErrorResponse",
    "TransportErrorKind",
    "TransportErrorResponse",
    "ValidationErrorResponse",
    "MatchOp",
    "Matcher",
    "SeriesSelector",
]
