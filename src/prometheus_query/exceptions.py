from prometheus_query.models.base import PrometheusErrorResponse
from prometheus_query.models.errors import (
    ApiErrorResponse,
    DecodeErrorResponse,
    TransportErrorKind,
    TransportErrorResponse,
    ValidationErrorResponse,
)


class PrometheusClientException(Exception):
    """
    Raised inside the client pipeline; carries the error model that is handed back to the caller.
    """
    outcome = "error"

    def __init__(self, response: PrometheusErrorResponse):
        super().__init__(response.error)
        self.response = response

class PrometheusValidationException(PrometheusClientException):
    outcome = "validation_error"

    def __init__(self, field: str, message: str):
        super().__init__(ValidationErrorResponse(field=field, error=message))
        self.field = field

class PrometheusTransportException(PrometheusClientException):
    outcome = "transport_error"

    def __init__(self, kind: TransportErrorKind, message: str, status: int | None=None):
        super().__init__(TransportErrorResponse(kind=kind, error=message, status=status))
        self.kind = kind

class PrometheusApiException(PrometheusClientException):
    outcome = "api_error"
    response: ApiErrorResponse

class PrometheusDecodeException(PrometheusClientException):
    outcome = "decode_error"
    response: DecodeErrorResponse

__all__ = [
    "PrometheusClientException",
    "PrometheusValidationException",
    "PrometheusTransportException",
    "PrometheusApiException",
    "PrometheusDecodeException",
]
