from prometheus_query.clients.utils import _Envelope, _annotations
from prometheus_query.models.status import FlagsResponse, StatusComponent, StatusResponse

def _process_status_response(envelope: _Envelope, component: StatusComponent) -> StatusResponse:
    return StatusResponse.model_validate({"component": component, "data": envelope.data, **_annotations(envelope)})

def _process_flags_response(envelope: _Envelope) -> FlagsResponse:
    return FlagsResponse.model_validate({"data": envelope.data, **_annotations(envelope)})

__all__ = [
    "_process_status_response",
    "_process_flags_response",
]
