"""
Series selectors, timestamps and durations as they appear in Prometheus API parameters.
"""
from datetime import datetime, timedelta
from enum import StrEnum
import math
import re
import time
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from prometheus_query.exceptions import PrometheusValidationException

# label names per the Prometheus data model
_LABEL_NAME_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

# e.g. "1h30m", "15s", "500ms"
_DURATION_RE = re.compile(r"^((\d+)y)?((\d+)w)?((\d+)d)?((\d+)h)?((\d+)m)?((\d+)s)?((\d+)ms)?$")
_DURATION_UNITS = (365 * 86400, 7 * 86400, 86400, 3600, 60, 1, 0.001)

class MatchOp(StrEnum):
    EQUAL = "="
    NOT_EQUAL = "!="
    REGEX_MATCH = "=~"
    REGEX_NO_MATCH = "!~"

class Matcher(BaseModel):
    model_config = ConfigDict(frozen=True)
    name: str = Field(..., description="Label name.")
    value: str = Field(...)
    op: MatchOp = Field(MatchOp.EQUAL)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not _LABEL_NAME_RE.match(v):
            raise ValueError(f"invalid label name: {v!r}")
        return v

    def __str__(self) -> str:
        return f'{self.name}{self.op.value}"{_escape_label_value(self.value)}"'

class SeriesSelector(BaseModel):
    """
    An ordered, non-empty set of matchers selecting time series, e.g. `{__name__="up",job=~"node.*"}`.
    """
    model_config = ConfigDict(frozen=True)
    matchers: tuple[Matcher, ...] = Field(..., min_length=1)

    @classmethod
    def of(cls, *matchers: Matcher) -> "SeriesSelector":
        return cls(matchers=matchers)

    def __str__(self) -> str:
        return "{" + ",".join(str(m) for m in self.matchers) + "}"

# a raw selector string is passed through untouched.
Selector = SeriesSelector | Matcher | str
Timestamp = float | int | datetime | Literal["now"]
Duration = float | int | timedelta | str

def _escape_label_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")

def _format_seconds(seconds: float) -> str:
    if float(seconds).is_integer():
        return str(int(seconds))
    return repr(float(seconds))

def render_selector(selector: Selector) -> str:
    if isinstance(selector, Matcher):
        return str(SeriesSelector.of(selector))
    return str(selector)

def timestamp_to_seconds(ts: Timestamp) -> float:
    if isinstance(ts, str):
        if ts != "now":
            raise ValueError(f"unsupported timestamp literal: {ts!r}")
        return time.time()
    if isinstance(ts, datetime):
        return ts.timestamp()
    return float(ts)

def render_timestamp(ts: Timestamp) -> str:
    return _format_seconds(timestamp_to_seconds(ts))

def duration_to_seconds(duration: Duration) -> float:
    """
    Convert a duration to seconds. Strings follow the Prometheus duration syntax or are plain float seconds.
    """
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    if isinstance(duration, str):
        text = duration.strip()
        try:
            return float(text)
        except ValueError:
            pass
        match = _DURATION_RE.match(text)
        if not text or not match:
            raise ValueError(f"invalid duration: {duration!r}")
        groups = match.groups()[1::2]
        return sum(int(g) * unit for g, unit in zip(groups, _DURATION_UNITS) if g)
    return float(duration)

def render_duration(duration: Duration) -> str:
    if isinstance(duration, str):
        return duration.strip()
    return _format_seconds(duration_to_seconds(duration))

def check_duration(field: str, duration: Duration, allow_zero: bool=False) -> float:
    try:
        seconds = duration_to_seconds(duration)
    except ValueError as e:
        raise PrometheusValidationException(field, str(e)) from e
    if not math.isfinite(seconds) or seconds < 0 or (seconds == 0 and not allow_zero):
        raise PrometheusValidationException(field, f"{field} must be a positive, finite duration, got {duration!r}")
    return seconds

def check_limit(limit: int) -> str:
    if limit < 0:
        raise PrometheusValidationException("limit", f"limit must not be negative, got {limit}")
    return str(limit)

def check_time_range(start: Timestamp | None, end: Timestamp | None) -> None:
    """
    Both bounds are optional; when both are given `end` must not precede `start`.
    """
    bounds: dict[str, float] = {}
    for field, ts in (("start", start), ("end", end)):
        if ts is None:
            continue
        try:
            bounds[field] = timestamp_to_seconds(ts)
        except ValueError as e:
            raise PrometheusValidationException(field, str(e)) from e
    if "start" in bounds and "end" in bounds and bounds["end"] < bounds["start"]:
        raise PrometheusValidationException("end", f"end ({render_timestamp(end)}) must not be before start ({render_timestamp(start)})")

def check_selectors(field: str, selectors: list[Selector], required: bool) -> list[str]:
    if required and not selectors:
        raise PrometheusValidationException(field, "at least one series selector is required")
    rendered = [render_selector(s) for s in selectors]
    for s in rendered:
        if not s.strip():
            raise PrometheusValidationException(field, "series selector must not be empty")
    return rendered

__all__ = [
    "MatchOp",
    "Matcher",
    "SeriesSelector",
    "Selector",
    "Timestamp",
    "Duration",
    "render_selector",
    "render_timestamp",
    "render_duration",
    "timestamp_to_seconds",
    "duration_to_seconds",
    "check_duration",
    "check_limit",
    "check_time_range",
    "check_selectors",
]
