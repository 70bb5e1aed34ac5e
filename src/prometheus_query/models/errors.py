"""
Error models returned in place of a response.
"""
from enum import StrEnum

from pydantic import Field

from prometheus_query.models.base import PrometheusErrorResponse


class TransportErrorKind(StrEnum):
    CONNECTION_FAILED = "connection_failed"
    TIMEOUT = "timeout"
    NON_JSON_RESPONSE = "non_json_response"
    UNEXPECTED_STATUS_CODE = "unexpected_status_code"

class ApiErrorKind(StrEnum):
    BAD_DATA = "bad_data"
    TIMEOUT = "timeout"
    CANCELED = "canceled"
    EXECUTION = "execution"
    INTERNAL = "internal"
    UNAVAILABLE = "unavailable"
    NOT_FOUND = "not_found"
    NOT_ACCEPTABLE = "not_acceptable"
    UNKNOWN = "unknown"

    @classmethod
    def from_error_type(cls, error_type: str) -> "ApiErrorKind":
        try:
            kind = cls(error_type)
        except ValueError:
            return cls.UNKNOWN
        return kind

class DecodeErrorKind(StrEnum):
    SHAPE_MISMATCH = "shape_mismatch"

class ValidationErrorResponse(PrometheusErrorResponse):
    field: str = Field(..., description="Name of the offending request field.")

class TransportErrorResponse(PrometheusErrorResponse):
    kind: TransportErrorKind = Field(...)

class ApiErrorResponse(PrometheusErrorResponse):
    kind: ApiErrorKind = Field(...)
    error_type: str = Field(..., description="errorType exactly as sent by Prometheus.")
    warnings: list[str] = Field(default_factory=list)
    infos: list[str] = Field(default_factory=list)

class DecodeErrorResponse(PrometheusErrorResponse):
    kind: DecodeErrorKind = Field(DecodeErrorKind.SHAPE_MISMATCH)
    operation: str = Field(..., description="Name of the operation whose payload did not decode.")

__all__ = [
    "TransportErrorKind",
    "ApiErrorKind",
    "DecodeErrorKind",
    "ValidationErrorResponse",
    "TransportErrorResponse",
    "ApiErrorResponse",
    "DecodeErrorResponse",
]
