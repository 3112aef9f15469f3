# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0

import httpx
import pytest

from searchtrace.transport.naming import (
    base_span_name,
    endpoint_span_name,
    path_segments,
    whitelisted_query_params,
)


def test_base_span_name():
    assert base_span_name("DELETE") == "es/DELETE"


@pytest.mark.parametrize(
    "method, path, expected",
    [
        ("GET", "/idx/_search", "es/_search"),
        ("POST", "/idx/_count/", "es/_count"),
        ("POST", "/_msearch", "es/_msearch"),
        ("GET", "/tasks", "es/_tasks"),
        ("GET", "/tasks/node:1/_cancel", "es/_tasks"),
        ("POST", "/_tasks/node:1", "es/_tasks"),
        ("GET", "/idx/_doc/_1", "es/_1"),
        ("GET", "/idx/doc", None),
        ("GET", "/", None),
        ("GET", "", None),
        ("GET", "//", None),
        ("PUT", "/idx/_mapping", None),
        ("DELETE", "/tasks/1", None),
    ],
)
def test_endpoint_span_name(method, path, expected):
    assert endpoint_span_name(method, path) == expected


def test_path_segments_drop_outer_slashes():
    assert path_segments("/a/b/") == ["a", "b"]
    assert path_segments("/") == [""]


def test_whitelisted_query_params_keep_order_and_skip_empty():
    url = httpx.URL("http://es:9200/idx/_search?b=2&a=1&c=&a=3")

    tags = whitelisted_query_params(url, ["a", "b", "c", "d"])

    assert tags == [("es.query_params.a", "1"), ("es.query_params.b", "2")]
