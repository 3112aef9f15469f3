# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tracing transports for search-engine requests."""

from searchtrace.transport.factory import (
    new_async_transport,
    new_transport,
    traced_async_client,
    traced_client,
)
from searchtrace.transport.options import (
    TraceOpt,
    TraceOptions,
    TransportSettings,
    apply_options,
    round_tripper,
    with_logger,
    with_tag_error_type,
    with_tag_query,
    with_tag_total_hits,
    with_tag_total_shards,
    with_transport,
    with_whitelist_query_params,
)
from searchtrace.transport.tracing import (
    TAG_QUERY,
    TAG_TOTAL_HITS,
    TAG_TOTAL_SHARDS,
    AsyncTracingTransport,
    TracingTransport,
)

__all__ = [
    "AsyncTracingTransport",
    "TAG_QUERY",
    "TAG_TOTAL_HITS",
    "TAG_TOTAL_SHARDS",
    "TraceOpt",
    "TraceOptions",
    "TracingTransport",
    "TransportSettings",
    "apply_options",
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
