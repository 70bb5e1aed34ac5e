import pytest

from prometheus_query.clients.client import PromClient
from prometheus_query.models.errors import DecodeErrorResponse
from prometheus_query.models.status import StatusRequest

from .conftest import FakePrometheus


@pytest.mark.asyncio
async def test_get_buildinfo(prometheus: FakePrometheus, prom_client: PromClient):
    prometheus.success("GET", "/api/v1/status/buildinfo", {
        "version": "2.13.1",
        "revision": "cb7cbad5f9a2823a622aaa668833ca04f50a0ea7",
        "branch": "master",
        "buildUser": "julius@desktop",
        "buildDate": "20191102-16:19:59",
        "goVersion": "go1.13.1",
    })

    response, error = await prom_client.status_api.get_status(StatusRequest(component="buildinfo"))
    assert not error, f"Get status failed: {error}"
    assert response.component == "buildinfo"
    assert response.data["version"] == "2.13.1"

@pytest.mark.asyncio
async def test_get_config(prometheus: FakePrometheus, prom_client: PromClient):
    yaml = "global:\n  scrape_interval: 15s\n"
    prometheus.success("GET", "/api/v1/status/config", {"yaml": yaml})

    response, error = await prom_client.status_api.get_status(StatusRequest(component="config"))
    assert not error, f"Get config failed: {error}"
    assert response.data == {"yaml": yaml}

@pytest.mark.asyncio
async def test_get_status_array_payload(prometheus: FakePrometheus, prom_client: PromClient):
    prometheus.success("GET", "/api/v1/status/tsdb", ["unexpected"])

    response, error = await prom_client.status_api.get_status(StatusRequest(component="tsdb"))
    assert response is None
    assert isinstance(error, DecodeErrorResponse)
    assert error.operation == "status"

@pytest.mark.asyncio
async def test_get_flags(prometheus: FakePrometheus, prom_client: PromClient):
    prometheus.success("GET", "/api/v1/status/flags", {
        "alertmanager.notification-queue-capacity": "10000",
        "alertmanager.timeout": "10s",
        "log.level": "info",
        "query.lookback-delta": "5m",
        "query.max-concurrency": "20",
    })

    response, error = await prom_client.status_api.get_flags()
    assert not error, f"Get flags failed: {error}"
    assert response.data["query.lookback-delta"] == "5m"
    assert len(response.data) == 5
