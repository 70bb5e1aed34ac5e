import http
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator, model_validator

from prometheus_query.exceptions import PrometheusValidationException
from prometheus_query.models.base import PrometheusRequest, PrometheusResponse, RenderedRequest
from prometheus_query.models.selectors import (
    Duration,
    Timestamp,
    check_duration,
    check_limit,
    check_time_range,
    render_duration,
    render_timestamp,
)

# >>>>> SAMPLES >>>>>

class _SamplePair(BaseModel):
    """
    A `[<unix_time>, "<value>"]` pair.
    """
    model_config = ConfigDict(frozen=True)
    timestamp: float = Field(...)

    @model_validator(mode="before")
    @classmethod
    def from_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(f"sample must be a [timestamp, value] pair, got {len(data)} elements")
            return {"timestamp": data[0], "value": data[1]}
        return data

class Sample(_SamplePair):
    value: float = Field(...)

    @field_validator("value", mode="before")
    @classmethod
    def parse_value(cls, v: Any) -> Any:
        # Prometheus encodes sample values as strings, including "Inf", "-Inf" and "NaN".
        if not isinstance(v, str):
            raise ValueError("sample value must be a string")
        return float(v)

class StringSample(_SamplePair):
    value: str = Field(...)

class VectorSample(BaseModel):
    model_config = ConfigDict(frozen=True)
    metric: dict[str, str] = Field(...)
    value: Sample = Field(...)

class MatrixSeries(BaseModel):
    model_config = ConfigDict(frozen=True)
    metric: dict[str, str] = Field(...)
    values: list[Sample] = Field(...)

# <<<<< SAMPLES <<<<<

# >>>>> RESULTS >>>>>

class ScalarResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    result_type: Literal["scalar"] = Field("scalar", alias="resultType")
    result: Sample = Field(...)

class StringResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    result_type: Literal["string"] = Field("string", alias="resultType")
    result: StringSample = Field(...)

class VectorResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    result_type: Literal["vector"] = Field("vector", alias="resultType")
    result: list[VectorSample] = Field(...)

class MatrixResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    result_type: Literal["matrix"] = Field("matrix", alias="resultType")
    result: list[MatrixSeries] = Field(...)

def _result_type_of(data: Any) -> str | None:
    if isinstance(data, dict):
        return data.get("resultType")
    return getattr(data, "result_type", None)

QueryResult = Annotated[
    Union[
        Annotated[ScalarResult, Tag("scalar")],
        Annotated[StringResult, Tag("string")],
        Annotated[VectorResult, Tag("vector")],
        Annotated[MatrixResult, Tag("matrix")],
    ],
    Discriminator(_result_type_of),
]

# <<<<< RESULTS <<<<<

# >>>>> QUERY >>>>>

def _check_query(query: str) -> None:
    if not query.strip():
        raise PrometheusValidationException("query", "query expression must not be empty")

def _optional_params(timeout: Duration | None, limit: int | None) -> list[tuple[str, str]]:
    params: list[tuple[str, str]] = []
    if timeout is not None:
        check_duration("timeout", timeout)
        params.append(("timeout", render_duration(timeout)))
    if limit is not None:
        params.append(("limit", check_limit(limit)))
    return params

class InstantQueryRequest(PrometheusRequest):
    query: str = Field(..., description="PromQL expression.")
    time: Timestamp | None = Field(None, description="Evaluation timestamp; server time if omitted.")
    timeout: Duration | None = Field(None, description="Evaluation timeout.")
    limit: int | None = Field(None, description="Maximum number of returned series.")

    def render(self) -> RenderedRequest:
        _check_query(self.query)
        params = [("query", self.query)]
        if self.time is not None:
            params.append(("time", render_timestamp(self.time)))
        params.extend(_optional_params(self.timeout, self.limit))
        return RenderedRequest(http.HTTPMethod.GET, "/api/v1/query", params)

class InstantQueryResponse(PrometheusResponse):
    data: QueryResult = Field(...)

    @property
    def result_type(self) -> str:
        return self.data.result_type

    @property
    def result(self):
        return self.data.result

class RangeQueryRequest(PrometheusRequest):
    query: str = Field(..., description="PromQL expression.")
    start: Timestamp = Field(...)
    end: Timestamp = Field(...)
    step: Duration = Field(..., description="Query resolution step width.")
    timeout: Duration | None = Field(None)
    limit: int | None = Field(None)

    def render(self) -> RenderedRequest:
        _check_query(self.query)
        check_duration("step", self.step)
        check_time_range(self.start, self.end)
        params = [
            ("query", self.query),
            ("start", render_timestamp(self.start)),
            ("end", render_timestamp(self.end)),
            ("step", render_duration(self.step)),
        ]
        params.extend(_optional_params(self.timeout, self.limit))
        return RenderedRequest(http.HTTPMethod.GET, "/api/v1/query_range", params)

class RangeQueryResponse(PrometheusResponse):
    data: MatrixResult = Field(...)

    @property
    def result(self) -> list[MatrixSeries]:
        return self.data.result

# <<<<< QUERY <<<<<

__all__ = [
    "Sample",
    "StringSample",
    "VectorSample",
    "MatrixSeries",
    "ScalarResult",
    "StringResult",
    "VectorResult",
    "MatrixResult",
    "QueryResult",
    "InstantQueryRequest",
    "InstantQueryResponse",
    "RangeQueryRequest",
    "RangeQueryResponse",
]
