from prometheus_query.clients.utils import _Envelope, _annotations, _require_object
from prometheus_query.models.targets import AlertmanagersResponse, TargetsResponse

def _process_targets_response(envelope: _Envelope) -> TargetsResponse:
    return TargetsResponse.model_validate({**_require_object(envelope.data), **_annotations(envelope)})

def _process_alertmanagers_response(envelope: _Envelope) -> AlertmanagersResponse:
    return AlertmanagersResponse.model_validate({**_require_object(envelope.data), **_annotations(envelope)})

__all__ = [
    "_process_targets_response",
    "_process_alertmanagers_response",
]
