# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Exceptions raised by searchtrace."""

from __future__ import annotations

from typing import Optional

import httpx


class SearchTraceError(Exception):
    """Base class for searchtrace errors."""


class ResponseDecodeError(SearchTraceError):
    """A response body could not be decoded into the expected shape.

    The response is kept on the exception with its body restored, so callers
    can still inspect it.
    """

    def __init__(self, message: str, response: Optional[httpx.Response] = None, shape: str = ""):
        super().__init__(message)
        self.response = response
        self.shape = shape


class ConfigError(SearchTraceError):
    """Invalid tracing configuration."""
