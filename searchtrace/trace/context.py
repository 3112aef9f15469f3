# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Parent-context lookup for outbound requests."""

from __future__ import annotations

import httpx
from opentelemetry import context as otel_context
from opentelemetry.context import Context

TRACE_CONTEXT_EXTENSION = "trace_context"


def get_request_context(request: httpx.Request) -> Context:
    """Get the context a request's span should be parented under.

    A context bound with :func:`bind_request_context` wins; otherwise the
    current context of the calling task or thread is used.
    """
    bound = request.extensions.get(TRACE_CONTEXT_EXTENSION)
    if bound is not None:
        return bound
    return otel_context.get_current()


def bind_request_context(request: httpx.Request, ctx: Context) -> httpx.Request:
    """Bind a parent context to a request and return the request."""
    request.extensions[TRACE_CONTEXT_EXTENSION] = ctx
    return request
