import pytest

from prometheus_query.clients.client import PromClient
from prometheus_query.models.errors import ApiErrorKind, ApiErrorResponse, ValidationErrorResponse
from prometheus_query.models.metadata import LabelNamesRequest, LabelValuesRequest, SeriesRequest
from prometheus_query.models.selectors import Matcher, SeriesSelector

from .conftest import FakePrometheus


@pytest.mark.asyncio
async def test_get_series(prometheus: FakePrometheus, prom_client: PromClient):
    prometheus.success("GET", "/api/v1/series", [
        {"__name__": "up", "job": "prometheus", "instance": "localhost:9090"},
        {"__name__": "up", "job": "node", "instance": "localhost:9091"},
    ])

    request = SeriesRequest(
        matchers=["up", SeriesSelector.of(Matcher(name="__name__", value="process_start_time_seconds"), Matcher(name="job", value="prometheus"))],
        start=1435781430.781,
        end=1435781460.781,
    )
    response, error = await prom_client.metadata_api.get_series(request)
    assert not error, f"Series query failed: {error}"
    assert [s["job"] for s in response.data] == ["prometheus", "node"]
    assert prometheus.last_request.query == [
        ("match[]", "up"),
        ("match[]", '{__name__="process_start_time_seconds",job="prometheus"}'),
        ("start", "1435781430.781"),
        ("end", "1435781460.781"),
    ]

@pytest.mark.asyncio
async def test_get_series_without_selectors_is_not_sent(prometheus: FakePrometheus, prom_client: PromClient):
    response, error = await prom_client.metadata_api.get_series(SeriesRequest(matchers=[]))
    assert response is None
    assert isinstance(error, ValidationErrorResponse)
    assert error.field == "matchers"
    assert prometheus.requests == []

@pytest.mark.asyncio
async def test_get_label_names(prometheus: FakePrometheus, prom_client: PromClient):
    prometheus.success("GET", "/api/v1/labels", ["__name__", "instance", "job"])

    response, error = await prom_client.metadata_api.get_label_names()
    assert not error, f"Label names failed: {error}"
    assert response.data == ["__name__", "instance", "job"]
    assert prometheus.last_request.query_string == ""

    response, error = await prom_client.metadata_api.get_label_names(LabelNamesRequest(matchers=['up{job="node"}']))
    assert not error, f"Label names failed: {error}"
    assert prometheus.last_request.query == [("match[]", 'up{job="node"}')]

@pytest.mark.asyncio
async def test_get_label_values(prometheus: FakePrometheus, prom_client: PromClient):
    prometheus.success("GET", "/api/v1/label/job/values", ["node", "prometheus"])

    response, error = await prom_client.metadata_api.get_label_values(LabelValuesRequest(label="job"))
    assert not error, f"Label values failed: {error}"
    assert response.data == ["node", "prometheus"]

@pytest.mark.asyncio
async def test_get_label_values_escapes_label_in_path(prometheus: FakePrometheus, prom_client: PromClient):
    prometheus.success("GET", "/api/v1/label/a%2Fb/values", [])

    response, error = await prom_client.metadata_api.get_label_values(LabelValuesRequest(label="a/b"))
    assert not error, f"Label values failed: {error}"
    assert response.data == []
    assert prometheus.last_request.raw_path == "/api/v1/label/a%2Fb/values"

@pytest.mark.asyncio
async def test_get_label_values_unknown_error_type(prometheus: FakePrometheus, prom_client: PromClient):
    prometheus.error("GET", "/api/v1/label/job/values", "Seriously Bad", "Major", status=500)

    response, error = await prom_client.metadata_api.get_label_values(LabelValuesRequest(label="job"))
    assert response is None
    assert isinstance(error, ApiErrorResponse)
    assert error.kind == ApiErrorKind.UNKNOWN
    assert error.error_type == "Seriously Bad"
    assert error.error == "Major"
    assert error.status == 500

@pytest.mark.asyncio
async def test_get_label_names_negative_limit_is_not_sent(prometheus: FakePrometheus, prom_client: PromClient):
    response, error = await prom_client.metadata_api.get_label_names(LabelNamesRequest(limit=-1))
    assert response is None
    assert isinstance(error, ValidationErrorResponse)
    assert error.field == "limit"
    assert prometheus.requests == []
