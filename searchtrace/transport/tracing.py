# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Tracing transports for search-engine HTTP clients.

Wrap an httpx transport so every request gets a client span tagged with
request and response metadata. Requests and responses are passed through
unchanged; bodies that are inspected are buffered and replayed.

Usage:
    from searchtrace import TracingTransport, with_tag_total_hits

    transport = TracingTransport(tracer, with_tag_total_hits())
    client = httpx.Client(transport=transport, base_url="http://localhost:9200")
    client.post("/idx/_search", json={"size": 25})  # traced as es/_search
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
from opentelemetry.trace import SpanKind

from searchtrace.exceptions import ResponseDecodeError
from searchtrace.trace import (
    TAG_ERROR,
    TAG_HTTP_METHOD,
    TAG_HTTP_PATH,
    TAG_HTTP_STATUS_CODE,
    Span,
    as_tracer,
    get_request_context,
)
from searchtrace.transport.body import (
    abuffer_request_body,
    abuffer_response_body,
    buffer_request_body,
    buffer_response_body,
    decode_body,
)
from searchtrace.transport.naming import (
    BACKEND_PREFIX,
    base_span_name,
    endpoint_span_name,
    whitelisted_query_params,
)
from searchtrace.transport.options import TraceOpt, TransportSettings, apply_options
from searchtrace.transport.responses import parse_error_type, parse_result_counts
from searchtrace.utils.logger import get_logger

logger = get_logger(__name__)

TAG_QUERY = f"{BACKEND_PREFIX}.query"
TAG_TOTAL_HITS = f"{BACKEND_PREFIX}.hits.total"
TAG_TOTAL_SHARDS = f"{BACKEND_PREFIX}.shards.total"


def _is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


class _TracingBase:
    """Tagging logic shared by the sync and async transports."""

    def __init__(self, tracer: Any, settings: TransportSettings):
        self._tracer = as_tracer(tracer)
        self._transport = settings.transport
        self._logger = settings.logger or logger
        self.options = settings.freeze()

    @property
    def transport(self) -> Any:
        return self._transport

    def _start_span(self, request: httpx.Request) -> Optional[Span]:
        return self._tracer.start_span(
            get_request_context(request), base_span_name(request.method), SpanKind.CLIENT
        )

    def _tag_request(self, span: Span, request: httpx.Request) -> None:
        span.tag(TAG_HTTP_METHOD, request.method)
        span.tag(TAG_HTTP_PATH, request.url.path)

        if self.options.whitelist_query_params:
            for key, value in whitelisted_query_params(
                request.url, self.options.whitelist_query_params
            ):
                span.tag(key, value)

        name = endpoint_span_name(request.method, request.url.path)
        if name is not None:
            span.set_name(name)

    def _should_tag_query(self, request: httpx.Request) -> bool:
        return self.options.tag_query and request.method != "GET"

    def _tag_query(self, span: Span, body: bytes) -> None:
        if body:
            span.tag(TAG_QUERY, body.decode("utf-8", errors="replace"))

    def _tag_error_type(self, span: Span, response: httpx.Response, raw: bytes) -> None:
        try:
            error_type = parse_error_type(decode_body(response, raw))
        except ResponseDecodeError as e:
            e.response = response
            raise
        except httpx.DecodingError as e:
            raise ResponseDecodeError(str(e), response=response) from e
        span.tag(TAG_ERROR, error_type)

    def _tag_result_counts(self, span: Span, response: httpx.Response, raw: bytes) -> None:
        try:
            counts = parse_result_counts(
                decode_body(response, raw),
                self.options.tag_total_hits,
                self.options.tag_total_shards,
            )
        except ResponseDecodeError as e:
            e.response = response
            raise
        except httpx.DecodingError as e:
            raise ResponseDecodeError(str(e), response=response) from e

        if counts.get("shards", 0) > 0:
            span.tag(TAG_TOTAL_SHARDS, str(counts["shards"]))
        if counts.get("hits", 0) > 0:
            span.tag(TAG_TOTAL_HITS, str(counts["hits"]))


class TracingTransport(_TracingBase, httpx.BaseTransport):
    """httpx transport that traces every request sent through it."""

    def __init__(self, tracer: Any, *opts: TraceOpt):
        settings = apply_options(TransportSettings(), opts)
        if settings.transport is None:
            settings.transport = httpx.HTTPTransport()
        super().__init__(tracer, settings)

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        span = self._start_span(request)
        if span is None:
            return self._transport.handle_request(request)
        try:
            return self._traced_request(span, request)
        finally:
            span.finish()

    def _traced_request(self, span: Span, request: httpx.Request) -> httpx.Response:
        self._tag_request(span, request)

        if self._should_tag_query(request):
            try:
                body = buffer_request_body(request)
            except Exception as e:
                self._logger.warning("failed to read the request body to tag the query: %s", e)
                raise
            self._tag_query(span, body)

        try:
            response = self._transport.handle_request(request)
        except Exception as e:
            span.tag(TAG_ERROR, str(e))
            raise
        span.tag(TAG_HTTP_STATUS_CODE, str(response.status_code))

        if not _is_success(response.status_code):
            if self.options.tag_error_type:
                raw = self._read_response(
                    response, "failed to read the response body to tag the error: %s"
                )
                self._tag_error_type(span, response, raw)
            else:
                span.tag(TAG_ERROR, str(response.status_code))
            return response

        if self.options.tag_result_counts:
            raw = self._read_response(
                response, "failed to read the response body to tag the response values: %s"
            )
            self._tag_result_counts(span, response, raw)

        return response

    def _read_response(self, response: httpx.Response, message: str) -> bytes:
        try:
            return buffer_response_body(response)
        except Exception as e:
            self._logger.warning(message, e)
            raise

    def close(self) -> None:
        self._transport.close()


class AsyncTracingTransport(_TracingBase, httpx.AsyncBaseTransport):
    """Async counterpart of :class:`TracingTransport`."""

    def __init__(self, tracer: Any, *opts: TraceOpt):
        settings = apply_options(TransportSettings(), opts)
        if settings.transport is None:
            settings.transport = httpx.AsyncHTTPTransport()
        super().__init__(tracer, settings)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        span = self._start_span(request)
        if span is None:
            return await self._transport.handle_async_request(request)
        try:
            return await self._traced_request(span, request)
        finally:
            span.finish()

    async def _traced_request(self, span: Span, request: httpx.Request) -> httpx.Response:
        self._tag_request(span, request)

        if self._should_tag_query(request):
            try:
                body = await abuffer_request_body(request)
            except Exception as e:
                self._logger.warning("failed to read the request body to tag the query: %s", e)
                raise
            self._tag_query(span, body)

        try:
            response = await self._transport.handle_async_request(request)
        except Exception as e:
            span.tag(TAG_ERROR, str(e))
            raise
        span.tag(TAG_HTTP_STATUS_CODE, str(response.status_code))

        if not _is_success(response.status_code):
            if self.options.tag_error_type:
                raw = await self._read_response(
                    response, "failed to read the response body to tag the error: %s"
                )
                self._tag_error_type(span, response, raw)
            else:
                span.tag(TAG_ERROR, str(response.status_code))
            return response

        if self.options.tag_result_counts:
            raw = await self._read_response(
                response, "failed to read the response body to tag the response values: %s"
            )
            self._tag_result_counts(span, response, raw)

        return response

    async def _read_response(self, response: httpx.Response, message: str) -> bytes:
        try:
            return await abuffer_response_body(response)
        except Exception as e:
            self._logger.warning(message, e)
            raise

    async def aclose(self) -> None:
        await self._transport.aclose()
