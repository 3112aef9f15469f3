# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0

import gzip

import httpx
import pytest

from searchtrace.transport.body import (
    abuffer_request_body,
    buffer_request_body,
    buffer_response_body,
    decode_body,
)


class ClosingStream(httpx.SyncByteStream):
    def __init__(self, chunks, fail=False):
        self._chunks = chunks
        self._fail = fail
        self.closed = False

    def __iter__(self):
        yield from self._chunks
        if self._fail:
            raise httpx.ReadError("boom")

    def close(self):
        self.closed = True


def test_buffer_request_body_replays_same_bytes():
    stream = ClosingStream([b"ab", b"cd"])
    request = httpx.Request("POST", "http://es:9200/_bulk", stream=stream)

    assert buffer_request_body(request) == b"abcd"
    assert stream.closed
    assert request.read() == b"abcd"


def test_buffer_request_body_failure_closes_stream():
    stream = ClosingStream([b"ab"], fail=True)
    request = httpx.Request("POST", "http://es:9200/_bulk", stream=stream)

    with pytest.raises(httpx.ReadError):
        buffer_request_body(request)
    assert stream.closed
    assert request.stream is stream


@pytest.mark.asyncio
async def test_abuffer_request_body():
    async def chunks():
        yield b'{"size"'
        yield b":1}"

    request = httpx.Request("POST", "http://es:9200/idx/_search", content=chunks())

    assert await abuffer_request_body(request) == b'{"size":1}'
    assert await request.aread() == b'{"size":1}'


def test_buffer_response_body_replays_same_bytes():
    response = httpx.Response(200, stream=ClosingStream([b"{", b"}"]))

    assert buffer_response_body(response) == b"{}"
    assert response.read() == b"{}"


def test_decode_body_gzip():
    raw = gzip.compress(b'{"hits":{"total":1}}')
    response = httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=raw)

    assert decode_body(response, raw) == b'{"hits":{"total":1}}'


def test_decode_body_identity():
    response = httpx.Response(200, content=b"{}")
    assert decode_body(response, b"{}") == b"{}"
