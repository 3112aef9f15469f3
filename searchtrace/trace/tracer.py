# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tracer collaborator contract and its OpenTelemetry adapter.

The transport only needs three things from a span: renaming, string tags and
finishing. ``Tracer`` and ``Span`` describe that surface, and
``OpenTelemetryTracer`` provides it on top of an OpenTelemetry tracer.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from opentelemetry import trace as otel_trace
from opentelemetry.context import Context
from opentelemetry.trace import SpanKind, Status, StatusCode

TAG_HTTP_METHOD = "http.method"
TAG_HTTP_PATH = "http.path"
TAG_HTTP_STATUS_CODE = "http.status_code"
TAG_ERROR = "error"


@runtime_checkable
class Span(Protocol):
    """Span handle owned by a single request."""

    def set_name(self, name: str) -> None: ...

    def tag(self, key: str, value: str) -> None: ...

    def finish(self) -> None: ...


@runtime_checkable
class Tracer(Protocol):
    """Starts spans; returns None when the request is not traced."""

    def start_span(
        self, context: Optional[Context], name: str, kind: SpanKind
    ) -> Optional[Span]: ...


class OpenTelemetrySpan:
    """Span handle backed by an OpenTelemetry span."""

    def __init__(self, span: otel_trace.Span):
        self._span = span

    @property
    def raw(self) -> otel_trace.Span:
        return self._span

    def set_name(self, name: str) -> None:
        self._span.update_name(name)

    def tag(self, key: str, value: str) -> None:
        self._span.set_attribute(key, value)
        if key == TAG_ERROR:
            self._span.set_status(Status(StatusCode.ERROR, value))

    def finish(self) -> None:
        self._span.end()


class OpenTelemetryTracer:
    """Tracer adapter over ``opentelemetry.trace.Tracer``.

    Non-recording spans (tracing disabled or the request not sampled) are
    ended right away and reported as no span at all.
    """

    def __init__(self, tracer: Optional[otel_trace.Tracer] = None):
        self._tracer = tracer or otel_trace.get_tracer("searchtrace")

    def start_span(
        self, context: Optional[Context], name: str, kind: SpanKind = SpanKind.CLIENT
    ) -> Optional[OpenTelemetrySpan]:
        span = self._tracer.start_span(name, context=context, kind=kind)
        if not span.is_recording():
            span.end()
            return None
        return OpenTelemetrySpan(span)


def as_tracer(tracer: Any) -> Tracer:
    """Coerce an OpenTelemetry tracer into the ``Tracer`` contract."""
    if isinstance(tracer, otel_trace.Tracer):
        return OpenTelemetryTracer(tracer)
    if isinstance(tracer, Tracer):
        return tracer
    raise TypeError(f"Unsupported tracer type: {type(tracer).__name__}")
