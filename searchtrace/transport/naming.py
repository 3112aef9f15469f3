# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Span naming and query-parameter tagging for search-engine requests."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import httpx

BACKEND_PREFIX = "es"

_RENAMED_METHODS = ("GET", "POST")
_TASKS_SEGMENTS = ("tasks", "_tasks")


def base_span_name(method: str) -> str:
    return f"{BACKEND_PREFIX}/{method}"


def query_param_tag(name: str) -> str:
    return f"{BACKEND_PREFIX}.query_params.{name}"


def path_segments(path: str) -> List[str]:
    """Split a URL path on ``/`` without the empty leading/trailing pieces."""
    return path.strip("/").split("/")


def endpoint_span_name(method: str, path: str) -> Optional[str]:
    """Return the endpoint-specific span name for a request, if any.

    Only GET and POST requests are renamed. Task API calls all share
    ``es/_tasks``; otherwise a trailing ``_``-prefixed segment such as
    ``_search`` or ``_count`` names the span.
    """
    if method not in _RENAMED_METHODS:
        return None
    segments = path_segments(path)
    if segments[0] in _TASKS_SEGMENTS:
        return f"{BACKEND_PREFIX}/_tasks"
    last = segments[-1]
    if last.startswith("_"):
        return f"{BACKEND_PREFIX}/{last}"
    return None


def whitelisted_query_params(
    url: httpx.URL, whitelist: Iterable[str]
) -> List[Tuple[str, str]]:
    """Return ``(tag key, value)`` pairs for whitelisted, non-empty params."""
    tags: List[Tuple[str, str]] = []
    params = url.params
    for name in whitelist:
        value = params.get(name)
        if value:
            tags.append((query_param_tag(name), value))
    return tags
