import logging
from typing import Any, Callable, Literal
from urllib.parse import quote_plus

from pydantic import BaseModel, Field, ValidationError

from prometheus_query.exceptions import (
    PrometheusApiException,
    PrometheusDecodeException,
    PrometheusTransportException,
)
from prometheus_query.models.errors import (
    ApiErrorKind,
    ApiErrorResponse,
    DecodeErrorResponse,
    TransportErrorKind,
)
from prometheus_query.models.generics import ResponseT

LOGGER = logging.getLogger(__name__)

class _Envelope(BaseModel):
    """
    The `{status, data, errorType, error, warnings}` wrapper shared by every V1 API response.
    """
    status: Literal["success", "error"] = Field(...)
    data: Any = Field(None)
    error_type: str | None = Field(None, validation_alias="errorType")
    error: str | None = Field(None)
    warnings: list[str] = Field(default_factory=list)
    infos: list[str] = Field(default_factory=list)

def _encode_params(params: list[tuple[str, str]]) -> str:
    """
    Urlencode each pair independently. `match[]` keys are kept literal.
    """
    return "&".join(f"{quote_plus(k, safe='[]')}={quote_plus(v)}" for k, v in params)

def _parse_envelope(content: bytes, status: int) -> _Envelope:
    if status not in (200, 204) and not 400 <= status < 600:
        raise PrometheusTransportException(
            TransportErrorKind.UNEXPECTED_STATUS_CODE, f"Unexpected HTTP status code {status}.", status=status
        )
    # admin endpoints answer 204 without a body.
    if status == 204 and not content.strip():
        return _Envelope(status="success")
    try:
        return _Envelope.model_validate_json(content)
    except ValidationError as e:
        snippet = content[:120].decode("utf-8", errors="replace")
        raise PrometheusTransportException(
            TransportErrorKind.NON_JSON_RESPONSE,
            f"Response (status {status}) is not a Prometheus API envelope: {snippet!r}",
            status=status,
        ) from e

def _build_err_response(envelope: _Envelope, status: int | None) -> ApiErrorResponse:
    error_type = envelope.error_type or ""
    return ApiErrorResponse(
        kind=ApiErrorKind.from_error_type(error_type),
        error_type=error_type,
        error=envelope.error or "",
        status=status,
        warnings=envelope.warnings,
        infos=envelope.infos,
    )

def _annotations(envelope: _Envelope) -> dict[str, list[str]]:
    return {"warnings": envelope.warnings, "infos": envelope.infos}

def _require_object(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object as data, got {type(data).__name__}")
    return data

def _decode_response(
    content: bytes, status: int, operation: str, processor: Callable[[_Envelope], ResponseT]
) -> ResponseT:
    """
    Decode an HTTP response body into the operation's response model.

    Raises PrometheusTransportException if the body is not an envelope, PrometheusApiException
    for `status: "error"`, and PrometheusDecodeException if `data` does not fit the operation.
    """
    envelope = _parse_envelope(content, status)
    if envelope.status == "error":
        error = _build_err_response(envelope, status)
        LOGGER.debug(f"[{operation}] Prometheus returned {error.error_type}: {error.error}")
        raise PrometheusApiException(error)
    try:
        response = processor(envelope)
    except ValueError as e:
        # pydantic's ValidationError is a ValueError.
        raise PrometheusDecodeException(DecodeErrorResponse(operation=operation, error=str(e), status=status)) from e
    if envelope.warnings:
        LOGGER.info(f"[{operation}] Prometheus warnings: {envelope.warnings}")
    return response

__all__ = [
    "_Envelope",
    "_encode_params",
    "_parse_envelope",
    "_build_err_response",
    "_annotations",
    "_require_object",
    "_decode_response",
]
