# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tracer collaborator contract and request context helpers."""

from .context import TRACE_CONTEXT_EXTENSION, bind_request_context, get_request_context
from .tracer import (
    TAG_ERROR,
    TAG_HTTP_METHOD,
    TAG_HTTP_PATH,
    TAG_HTTP_STATUS_CODE,
    OpenTelemetryTracer,
    Span,
    SpanKind,
    Tracer,
    as_tracer,
)

__all__ = [
    "OpenTelemetryTracer",
    "Span",
    "SpanKind",
    "TAG_ERROR",
    "TAG_HTTP_METHOD",
    "TAG_HTTP_PATH",
    "TAG_HTTP_STATUS_CODE",
    "TRACE_CONTEXT_EXTENSION",
    "Tracer",
    "as_tracer",
    "bind_request_context",
    "get_request_context",
]
