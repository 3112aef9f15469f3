# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Buffer-and-rewrap helpers for one-shot httpx body streams.

Every helper reads a body stream to the end, closes the original stream and
puts an ``httpx.ByteStream`` carrying the same bytes back in its place, so
whoever reads the body next sees it unconsumed and unchanged. On a read
failure the original stream is closed and the error propagates.
"""

from __future__ import annotations

import httpx


def buffer_request_body(request: httpx.Request) -> bytes:
    """Read the request body and restore a replayable stream."""
    stream = request.stream
    try:
        body = b"".join(stream)
    except Exception:
        stream.close()
        raise
    stream.close()
    request.stream = httpx.ByteStream(body)
    return body


async def abuffer_request_body(request: httpx.Request) -> bytes:
    """Async counterpart of :func:`buffer_request_body`."""
    stream = request.stream
    try:
        body = b"".join([chunk async for chunk in stream])
    except Exception:
        await stream.aclose()
        raise
    await stream.aclose()
    request.stream = httpx.ByteStream(body)
    return body


def buffer_response_body(response: httpx.Response) -> bytes:
    """Read the raw response body and restore a replayable stream.

    The returned bytes are still content-encoded; use :func:`decode_body` to
    get what the caller would see as ``response.content``.
    """
    stream = response.stream
    try:
        raw = b"".join(stream)
    except Exception:
        stream.close()
        raise
    stream.close()
    response.stream = httpx.ByteStream(raw)
    return raw


async def abuffer_response_body(response: httpx.Response) -> bytes:
    """Async counterpart of :func:`buffer_response_body`."""
    stream = response.stream
    try:
        raw = b"".join([chunk async for chunk in stream])
    except Exception:
        await stream.aclose()
        raise
    await stream.aclose()
    response.stream = httpx.ByteStream(raw)
    return raw


def decode_body(response: httpx.Response, raw: bytes) -> bytes:
    """Undo the response's Content-Encoding on a buffered raw body."""
    if "content-encoding" not in response.headers:
        return raw
    return httpx.Response(response.status_code, headers=response.headers, content=raw).read()
