"""
`prom-query` command line front-end.
"""

import argparse
import asyncio
import logging
import os
import sys

from prometheus_query.clients.client import PromClient
from prometheus_query.models.admin import DeleteSeriesRequest, SnapshotRequest
from prometheus_query.models.base import PrometheusErrorResponse, PrometheusResponse
from prometheus_query.models.errors import (
    ApiErrorResponse,
    DecodeErrorResponse,
    TransportErrorResponse,
    ValidationErrorResponse,
)
from prometheus_query.models.metadata import LabelNamesRequest, LabelValuesRequest, SeriesRequest
from prometheus_query.models.query import InstantQueryRequest, RangeQueryRequest
from prometheus_query.models.status import StatusRequest
from prometheus_query.models.targets import TargetsRequest

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VALIDATION_ERROR = 2
EXIT_TRANSPORT_ERROR = 3
EXIT_API_ERROR = 4
EXIT_DECODE_ERROR = 5
EXIT_INTERRUPTED = 130

def exit_code_for(error: PrometheusErrorResponse | None) -> int:
    match error:
        case None:
            return EXIT_OK
        case ValidationErrorResponse():
            return EXIT_VALIDATION_ERROR
        case TransportErrorResponse():
            return EXIT_TRANSPORT_ERROR
        case ApiErrorResponse():
            return EXIT_API_ERROR
        case DecodeErrorResponse():
            return EXIT_DECODE_ERROR
    return 1

def format_error(error: PrometheusErrorResponse) -> str:
    match error:
        case ValidationErrorResponse():
            return f"invalid argument '{error.field}': {error.error}"
        case TransportErrorResponse():
            return f"transport error ({error.kind}): {error.error}"
        case ApiErrorResponse():
            return f"Prometheus rejected the request: {error.error_type}: {error.error}"
        case DecodeErrorResponse():
            return f"unexpected {error.operation} payload: {error.error}"
    return error.error

def _timestamp(value: str) -> float | str:
    if value == "now":
        return value
    return float(value)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prom-query", description="Query the Prometheus HTTP V1 API.")
    parser.add_argument("--url", default=os.getenv("PROMETHEUS_URL", "http://localhost:9090"), help="Prometheus base URL")
    parser.add_argument("--timeout", type=float, default=float(os.getenv("PROMETHEUS_TIMEOUT", "60")), help="HTTP timeout in seconds")
    parser.add_argument("--bearer-token", default=os.getenv("PROMETHEUS_BEARER_TOKEN"), help="Bearer token for authentication")

    subparsers = parser.add_subparsers(dest="command", required=True)

    instant_parser = subparsers.add_parser("instant", help="Instant query")
    instant_parser.add_argument("query", help="PromQL expression")
    instant_parser.add_argument("--time", type=_timestamp, help="Evaluation time (unix seconds or 'now')")
    instant_parser.add_argument("--query-timeout", help="Evaluation timeout, e.g. 30s")

    range_parser = subparsers.add_parser("range", help="Range query")
    range_parser.add_argument("query", help="PromQL expression")
    range_parser.add_argument("--start", type=_timestamp, required=True)
    range_parser.add_argument("--end", type=_timestamp, required=True)
    range_parser.add_argument("--step", required=True, help="Step, e.g. 15s or 15")
    range_parser.add_argument("--query-timeout", help="Evaluation timeout, e.g. 30s")

    series_parser = subparsers.add_parser("series", help="Find series by label matchers")
    series_parser.add_argument("match", nargs="+", help="Series selector, e.g. 'up{job=\"node\"}'")
    series_parser.add_argument("--start", type=_timestamp)
    series_parser.add_argument("--end", type=_timestamp)

    labels_parser = subparsers.add_parser("labels", help="List label names")
    labels_parser.add_argument("match", nargs="*")

    label_values_parser = subparsers.add_parser("label-values", help="List values of a label")
    label_values_parser.add_argument("label")
    label_values_parser.add_argument("match", nargs="*")

    targets_parser = subparsers.add_parser("targets", help="List scrape targets")
    targets_parser.add_argument("--state", choices=["active", "dropped", "any"])

    subparsers.add_parser("alertmanagers", help="List alertmanagers")

    status_parser = subparsers.add_parser("status", help="Show a status page")
    status_parser.add_argument("component", choices=["config", "runtimeinfo", "buildinfo", "tsdb", "walreplay"])

    subparsers.add_parser("flags", help="Show command line flags")

    delete_parser = subparsers.add_parser("delete", help="Delete series (admin API)")
    delete_parser.add_argument("match", nargs="+")
    delete_parser.add_argument("--start", type=_timestamp, help="Start time from which to delete series data")
    delete_parser.add_argument("--end", type=_timestamp, help="End time up to which to delete series data")

    snapshot_parser = subparsers.add_parser("snapshot", help="Snapshot the TSDB (admin API)")
    snapshot_parser.add_argument("--skip-head", action="store_true")

    subparsers.add_parser("clean-tombstones", help="Remove deleted data from disk (admin API)")
    return parser

async def run(args: argparse.Namespace) -> tuple[PrometheusResponse | None, PrometheusErrorResponse | None]:
    async with PromClient(args.url, timeout=args.timeout, bearer_token=args.bearer_token) as client:
        match args.command:
            case "instant":
                request = InstantQueryRequest(query=args.query, time=args.time, timeout=args.query_timeout)
                return await client.query_api.instant_query(request)
            case "range":
                request = RangeQueryRequest(
                    query=args.query, start=args.start, end=args.end, step=args.step, timeout=args.query_timeout
                )
                return await client.query_api.range_query(request)
            case "series":
                request = SeriesRequest(matchers=args.match, start=args.start, end=args.end)
                return await client.metadata_api.get_series(request)
            case "labels":
                return await client.metadata_api.get_label_names(LabelNamesRequest(matchers=args.match))
            case "label-values":
                request = LabelValuesRequest(label=args.label, matchers=args.match)
                return await client.metadata_api.get_label_values(request)
            case "targets":
                return await client.targets_api.get_targets(TargetsRequest(state=args.state))
            case "alertmanagers":
                return await client.targets_api.get_alertmanagers()
            case "status":
                return await client.status_api.get_status(StatusRequest(component=args.component))
            case "flags":
                return await client.status_api.get_flags()
            case "delete":
                request = DeleteSeriesRequest(matchers=args.match, start=args.start, end=args.end)
                return await client.admin_api.delete_series(request)
            case "snapshot":
                return await client.admin_api.snapshot(SnapshotRequest(skip_head=args.skip_head))
            case "clean-tombstones":
                return await client.admin_api.clean_tombstones()
    raise ValueError(f"Unknown command: {args.command}")

def console(argv: list[str] | None=None) -> int:
    if log_level := os.getenv("LOGLEVEL"):
        log_level = log_level.upper()
        if log_level not in {"INFO", "DEBUG", "WARNING", "ERROR"}:
            print(f"Invalid log level: {log_level}.", file=sys.stderr)
            return 1
    else:
        log_level = "WARNING"
    logging.basicConfig(level=log_level)

    args = build_parser().parse_args(argv)
    try:
        response, error = asyncio.run(run(args))
    except KeyboardInterrupt:
        print("\nExiting...", file=sys.stderr)
        return EXIT_INTERRUPTED

    if error:
        print(format_error(error), file=sys.stderr)
        return exit_code_for(error)
    for warning in response.warnings:
        print(f"warning: {warning}", file=sys.stderr)
    print(response.model_dump_json(indent=2, exclude={"warnings", "infos"}))
    return EXIT_OK

def main():
    sys.exit(console())

__all__ = [
    "EXIT_OK",
    "EXIT_VALIDATION_ERROR",
    "EXIT_TRANSPORT_ERROR",
    "EXIT_API_ERROR",
    "EXIT_DECODE_ERROR",
    "exit_code_for",
    "format_error",
    "build_parser",
    "run",
    "console",
    "main",
]
