from prometheus_query.clients.utils import _Envelope, _annotations, _require_object
from prometheus_query.models.admin import CleanTombstonesResponse, DeleteSeriesResponse, SnapshotResponse

def _process_delete_series_response(envelope: _Envelope) -> DeleteSeriesResponse:
    # no payload; any data sent along is ignored.
    return DeleteSeriesResponse(**_annotations(envelope))

def _process_clean_tombstones_response(envelope: _Envelope) -> CleanTombstonesResponse:
    return CleanTombstonesResponse(**_annotations(envelope))

def _process_snapshot_response(envelope: _Envelope) -> SnapshotResponse:
    return SnapshotResponse.model_validate({**_require_object(envelope.data), **_annotations(envelope)})

__all__ = [
    "_process_delete_series_response",
    "_process_clean_tombstones_response",
    "_process_snapshot_response",
]
