# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tracing transport for outbound search-engine requests."""

from searchtrace.config import TraceConfig, load_trace_config
from searchtrace.exceptions import ConfigError, ResponseDecodeError, SearchTraceError
from searchtrace.trace import OpenTelemetryTracer, Span, Tracer, bind_request_context
from searchtrace.transport import (
    AsyncTracingTransport,
    TraceOptions,
    TracingTransport,
    new_async_transport,
    new_transport,
    round_tripper,
    traced_async_client,
    traced_client,
    with_logger,
    with_tag_error_type,
    with_tag_query,
    with_tag_total_hits,
    with_tag_total_shards,
    with_transport,
    with_whitelist_query_params,
)

__version__ = "0.1.0"

__all__ = [
    "AsyncTracingTransport",
    "ConfigError",
    "OpenTelemetryTracer",
    "ResponseDecodeError",
    "SearchTraceError",
    "Span",
    "TraceConfig",
    "TraceOptions",
    "Tracer",
    "TracingTransport",
    "bind_request_context",
    "load_trace_config",
    "new_async_transport",
    "new_transport",
    "round_tripper",
    "traced_async_client",
    "traced_client",
    "with_logger",
    "with_tag_error_type",
    "with_tag_query",
    "with_tag_total_hits",
    "with_tag_total_shards",
    "with_transport",
    "with_whitelist_query_params",
]
