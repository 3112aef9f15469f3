# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Constructors for tracing transports and traced clients."""

from __future__ import annotations

from typing import Any

import httpx

from searchtrace.transport.options import TraceOpt
from searchtrace.transport.tracing import AsyncTracingTransport, TracingTransport


def new_transport(tracer: Any, *opts: TraceOpt) -> TracingTransport:
    """Return a transport tracing search-engine calls.

    ``tracer`` is a ``searchtrace.trace.Tracer`` or an OpenTelemetry tracer.
    Without ``with_transport`` a default ``httpx.HTTPTransport`` is wrapped.
    """
    return TracingTransport(tracer, *opts)


def new_async_transport(tracer: Any, *opts: TraceOpt) -> AsyncTracingTransport:
    return AsyncTracingTransport(tracer, *opts)


def traced_client(tracer: Any, *opts: TraceOpt, **client_kwargs: Any) -> httpx.Client:
    """Create an ``httpx.Client`` whose requests are traced.

    Usage:
        with traced_client(tracer, with_tag_total_hits(), base_url=es_url) as client:
            client.post("/idx/_search", json=query)
    """
    return httpx.Client(transport=new_transport(tracer, *opts), **client_kwargs)


def traced_async_client(
    tracer: Any, *opts: TraceOpt, **client_kwargs: Any
) -> httpx.AsyncClient:
    """Async counterpart of :func:`traced_client`."""
    return httpx.AsyncClient(transport=new_async_transport(tracer, *opts), **client_kwargs)
