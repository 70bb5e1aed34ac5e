from prometheus_query.clients.utils import _Envelope, _annotations
from prometheus_query.models.metadata import LabelNamesResponse, LabelValuesResponse, SeriesResponse

def _process_series_response(envelope: _Envelope) -> SeriesResponse:
    return SeriesResponse.model_validate({"data": envelope.data, **_annotations(envelope)})

def _process_label_names_response(envelope: _Envelope) -> LabelNamesResponse:
    return LabelNamesResponse.model_validate({"data": envelope.data, **_annotations(envelope)})

def _process_label_values_response(envelope: _Envelope) -> LabelValuesResponse:
    return LabelValuesResponse.model_validate({"data": envelope.data, **_annotations(envelope)})

__all__ = [
    "_process_series_response",
    "_process_label_names_response",
    "_process_label_values_response",
]
