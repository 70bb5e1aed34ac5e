from prometheus_query.clients.utils import _Envelope, _annotations
from prometheus_query.models.query import InstantQueryResponse, RangeQueryResponse

def _process_instant_query_response(envelope: _Envelope) -> InstantQueryResponse:
    return InstantQueryResponse.model_validate({"data": envelope.data, **_annotations(envelope)})

def _process_range_query_response(envelope: _Envelope) -> RangeQueryResponse:
    return RangeQueryResponse.model_validate({"data": envelope.data, **_annotations(envelope)})

__all__ = [
    "_process_instant_query_response",
    "_process_range_query_response",
]
