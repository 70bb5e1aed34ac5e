from datetime import datetime
from enum import StrEnum
import http
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from prometheus_query.exceptions import PrometheusValidationException
from prometheus_query.models.base import PrometheusRequest, PrometheusResponse, RenderedRequest

_FRACTION_RE = re.compile(r"(\.\d{6})\d+")

TARGET_STATES = ("active", "dropped", "any")


class TargetHealth(StrEnum):
    UP = "up"
    DOWN = "down"
    UNKNOWN = "unknown"

class ActiveTarget(BaseModel):
    model_config = ConfigDict(frozen=True)
    discovered_labels: dict[str, str] = Field(..., validation_alias="discoveredLabels")
    labels: dict[str, str] = Field(...)
    scrape_pool: str | None = Field(None, validation_alias="scrapePool")
    scrape_url: str = Field(..., validation_alias="scrapeUrl")
    global_url: str | None = Field(None, validation_alias="globalUrl")
    last_error: str | None = Field(None, validation_alias="lastError")
    last_scrape: datetime | None = Field(None, validation_alias="lastScrape")
    last_scrape_duration: float | None = Field(None, validation_alias="lastScrapeDuration")
    health: TargetHealth = Field(TargetHealth.UNKNOWN)

    @field_validator("last_error", mode="before")
    @classmethod
    def empty_error_is_none(cls, v: Any) -> Any:
        if v == "":
            return None
        return v

    @field_validator("last_scrape", mode="before")
    @classmethod
    def parse_rfc3339(cls, v: Any) -> Any:
        # RFC3339 with nanosecond precision; datetime holds microseconds at most.
        if isinstance(v, str):
            return datetime.fromisoformat(_FRACTION_RE.sub(r"\1", v))
        return v

    @field_validator("health", mode="before")
    @classmethod
    def parse_health(cls, v: Any) -> Any:
        if v in (TargetHealth.UP.value, TargetHealth.DOWN.value):
            return v
        return TargetHealth.UNKNOWN

class DroppedTarget(BaseModel):
    model_config = ConfigDict(frozen=True)
    discovered_labels: dict[str, str] = Field(..., validation_alias="discoveredLabels")

class TargetsRequest(PrometheusRequest):
    state: str | None = Field(None, description="Filter targets by state: active, dropped or any.")

    def render(self) -> RenderedRequest:
        params = []
        if self.state is not None:
            if self.state not in TARGET_STATES:
                raise PrometheusValidationException("state", f"state must be one of {', '.join(TARGET_STATES)}, got {self.state!r}")
            params.append(("state", self.state))
        return RenderedRequest(http.HTTPMethod.GET, "/api/v1/targets", params)

class TargetsResponse(PrometheusResponse):
    active_targets: list[ActiveTarget] = Field(..., validation_alias="activeTargets")
    dropped_targets: list[DroppedTarget] = Field(..., validation_alias="droppedTargets")

class AlertmanagerRecord(BaseModel):
    model_config = ConfigDict(frozen=True)
    url: str = Field(...)

class AlertmanagersRequest(PrometheusRequest):

    def render(self) -> RenderedRequest:
        return RenderedRequest(http.HTTPMethod.GET, "/api/v1/alertmanagers", [])

class AlertmanagersResponse(PrometheusResponse):
    active_alertmanagers: list[AlertmanagerRecord] = Field(..., validation_alias="activeAlertmanagers")
    dropped_alertmanagers: list[AlertmanagerRecord] = Field(..., validation_alias="droppedAlertmanagers")

__all__ = [
    "TARGET_STATES",
    "TargetHealth",
    "ActiveTarget",
    "DroppedTarget",
    "TargetsRequest",
    "TargetsResponse",
    "AlertmanagerRecord",
    "AlertmanagersRequest",
    "AlertmanagersResponse",
]
