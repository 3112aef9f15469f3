# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Trace options and the option functions that build them.

A transport is configured by applying option functions, in the order given,
to a ``TransportSettings`` builder. Later options overwrite earlier ones that
touch the same field. The resulting ``TraceOptions`` is frozen.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class TraceOptions:
    """Immutable tagging options held by a tracing transport."""

    whitelist_query_params: Tuple[str, ...] = ()
    tag_query: bool = False
    tag_error_type: bool = False
    tag_total_hits: bool = False
    tag_total_shards: bool = False

    @property
    def tag_result_counts(self) -> bool:
        return self.tag_total_hits or self.tag_total_shards


@dataclass
class TransportSettings:
    """Mutable builder target for option functions."""

    transport: Any = None
    logger: Optional[logging.Logger] = None
    whitelist_query_params: List[str] = field(default_factory=list)
    tag_query: bool = False
    tag_error_type: bool = False
    tag_total_hits: bool = False
    tag_total_shards: bool = False

    def freeze(self) -> TraceOptions:
        return TraceOptions(
            whitelist_query_params=tuple(self.whitelist_query_params),
            tag_query=self.tag_query,
            tag_error_type=self.tag_error_type,
            tag_total_hits=self.tag_total_hits,
            tag_total_shards=self.tag_total_shards,
        )


TraceOpt = Callable[[TransportSettings], None]


def apply_options(settings: TransportSettings, opts: Iterable[TraceOpt]) -> TransportSettings:
    """Apply option functions in order and return the settings."""
    for opt in opts:
        opt(settings)
    return settings


def with_transport(transport: Any) -> TraceOpt:
    """Replace the wrapped transport.

    Never pass a tracing transport here, otherwise every request is traced
    twice.
    """

    def apply(settings: TransportSettings) -> None:
        settings.transport = transport

    return apply


round_tripper = with_transport


def with_logger(logger: logging.Logger) -> TraceOpt:
    """Use ``logger`` for warnings about unreadable bodies."""

    def apply(settings: TransportSettings) -> None:
        settings.logger = logger

    return apply


def with_whitelist_query_params(*names: str) -> TraceOpt:
    """Tag these query parameters when present, e.g. ``"routing"``."""

    def apply(settings: TransportSettings) -> None:
        settings.whitelist_query_params = list(names)

    return apply


def with_tag_query() -> TraceOpt:
    """Tag the request body sent in non-GET requests."""

    def apply(settings: TransportSettings) -> None:
        settings.tag_query = True

    return apply


def with_tag_error_type() -> TraceOpt:
    """Tag the error type from the body of non-2xx responses."""

    def apply(settings: TransportSettings) -> None:
        settings.tag_error_type = True

    return apply


def with_tag_total_hits() -> TraceOpt:
    """Tag the total hits of a successful response."""

    def apply(settings: TransportSettings) -> None:
        settings.tag_total_hits = True

    return apply


def with_tag_total_shards() -> TraceOpt:
    """Tag the total shards queried by a successful response."""

    def apply(settings: TransportSettings) -> None:
        settings.tag_total_shards = True

    return apply
