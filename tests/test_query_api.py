import asyncio
import logging

import pytest

from prometheus_query.clients.client import PromClient
from prometheus_query.models.errors import (
    ApiErrorKind,
    ApiErrorResponse,
    DecodeErrorResponse,
    ValidationErrorResponse,
)
from prometheus_query.models.query import InstantQueryRequest, RangeQueryRequest, VectorResult

from .conftest import FakePrometheus

LOGGER = logging.getLogger(__name__)

@pytest.mark.asyncio
async def test_instant_query_empty_vector(prometheus: FakePrometheus, prom_client: PromClient):
    prometheus.success("GET", "/api/v1/query", {"resultType": "vector", "result": []})

    response, error = await prom_client.query_api.instant_query(InstantQueryRequest(query="up"))
    assert not error, f"Instant query failed: {error}"
    assert isinstance(response.data, VectorResult)
    assert response.result == []
    assert response.warnings == []

    request = prometheus.last_request
    assert request.method == "GET"
    assert request.query == [("query", "up")]
    assert request.headers["Accept"] == "application/json"

@pytest.mark.asyncio
async def test_instant_query_with_time_and_timeout(prometheus: FakePrometheus, prom_client: PromClient):
    prometheus.success("GET", "/api/v1/query", {"resultType": "scalar", "result": [1435781451.781, "2"]})

    request = InstantQueryRequest(query="1 + 1", time=1435781451.781, timeout="5s")
    response, error = await prom_client.query_api.instant_query(request)
    assert not error, f"Instant query failed: {error}"
    assert response.result.value == 2.0
    assert prometheus.last_request.query == [("query", "1 + 1"), ("time", "1435781451.781"), ("timeout", "5s")]

@pytest.mark.asyncio
async def test_instant_query_vector_result(prometheus: FakePrometheus, prom_client: PromClient):
    prometheus.success("GET", "/api/v1/query", {
        "resultType": "vector",
        "result": [
            {"metric": {"__name__": "up", "job": "prometheus", "instance": "localhost:9090"}, "value": [1435781451.781, "1"]},
        ],
    })

    response, error = await prom_client.query_api.instant_query(InstantQueryRequest(query='up{job="prometheus"}'))
    assert not error, f"Instant query failed: {error}"
    (sample,) = response.result
    assert sample.metric["instance"] == "localhost:9090"
    assert sample.value.timestamp == 1435781451.781
    assert sample.value.value == 1.0
    assert prometheus.last_request.query_string == "query=up%7Bjob%3D%22prometheus%22%7D"

@pytest.mark.asyncio
async def test_instant_query_bad_data(prometheus: FakePrometheus, prom_client: PromClient):
    prometheus.error("GET", "/api/v1/query", "bad_data", 'parse error at char 3: unexpected "}"')

    response, error = await prom_client.query_api.instant_query(InstantQueryRequest(query="up}"))
    assert response is None
    assert isinstance(error, ApiErrorResponse)
    assert error.kind == ApiErrorKind.BAD_DATA
    assert error.error_type == "bad_data"
    assert error.status == 400

@pytest.mark.asyncio
async def test_range_query(prometheus: FakePrometheus, prom_client: PromClient):
    prometheus.success("GET", "/api/v1/query_range", {
        "resultType": "matrix",
        "result": [
            {"metric": {"__name__": "up", "job": "node"}, "values": [[1435781430.781, "1"], [1435781445.781, "0"]]},
        ],
    }, warnings=["w1", "w2"])

    request = RangeQueryRequest(query="up", start=1435781430.781, end=1435781460.781, step="15s")
    response, error = await prom_client.query_api.range_query(request)
    assert not error, f"Range query failed: {error}"
    (series,) = response.result
    assert [s.value for s in series.values] == [1.0, 0.0]
    assert response.warnings == ["w1", "w2"]
    assert prometheus.last_request.query == [
        ("query", "up"), ("start", "1435781430.781"), ("end", "1435781460.781"), ("step", "15s"),
    ]

@pytest.mark.asyncio
async def test_range_query_vector_payload_is_decode_error(prometheus: FakePrometheus, prom_client: PromClient):
    prometheus.success("GET", "/api/v1/query_range", {"resultType": "vector", "result": []})

    request = RangeQueryRequest(query="up", start=0, end=60, step=15)
    response, error = await prom_client.query_api.range_query(request)
    assert response is None
    assert isinstance(error, DecodeErrorResponse)
    assert error.operation == "range_query"

@pytest.mark.asyncio
async def test_range_query_zero_step_is_not_sent(prometheus: FakePrometheus, prom_client: PromClient):
    request = RangeQueryRequest(query="up", start=0, end=60, step=0)
    response, error = await prom_client.query_api.range_query(request)
    assert response is None
    assert isinstance(error, ValidationErrorResponse)
    assert error.field == "step"
    assert prometheus.requests == []

@pytest.mark.asyncio
async def test_range_query_inverted_range_is_not_sent(prometheus: FakePrometheus, prom_client: PromClient):
    request = RangeQueryRequest(query="up", start=120, end=60, step=15)
    response, error = await prom_client.query_api.range_query(request)
    assert response is None
    assert isinstance(error, ValidationErrorResponse)
    assert error.field == "end"
    assert prometheus.requests == []

@pytest.mark.asyncio
async def test_concurrent_queries_get_their_own_results(prometheus: FakePrometheus, prom_client: PromClient):
    prometheus.success("GET", "/api/v1/query", {"resultType": "scalar", "result": [1, "1"]})
    prometheus.success("GET", "/api/v1/query_range", {"resultType": "matrix", "result": []})

    tasks = []
    for i in range(20):
        if i % 2:
            tasks.append(prom_client.query_api.instant_query(InstantQueryRequest(query=f"vector({i})")))
        else:
            tasks.append(prom_client.query_api.range_query(RangeQueryRequest(query=f"vector({i})", start=0, end=60, step=15)))
    results = await asyncio.gather(*tasks)

    for i, (response, error) in enumerate(results):
        assert not error, f"Query {i} failed: {error}"
        if i % 2:
            assert response.result_type == "scalar"
        else:
            assert response.result == []
    queries = sorted(dict(r.query)["query"] for r in prometheus.requests)
    assert queries == sorted(f"vector({i})" for i in range(20))

@pytest.mark.asyncio
async def test_negative_limit_is_not_sent(prometheus: FakePrometheus, prom_client: PromClient):
    response, error = await prom_client.query_api.instant_query(InstantQueryRequest(query="up", limit=-1))
    assert response is None
    assert isinstance(error, ValidationErrorResponse)
    assert error.field == "limit"
    assert prometheus.requests == []
