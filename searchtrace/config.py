# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""File and environment configuration for tracing transports."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from searchtrace.exceptions import ConfigError
from searchtrace.transport.options import (
    TraceOpt,
    with_tag_error_type,
    with_tag_query,
    with_tag_total_hits,
    with_tag_total_shards,
    with_whitelist_query_params,
)
from searchtrace.utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_FILE_ENV = "SEARCHTRACE_CONFIG_FILE"


class TraceConfig(BaseModel):
    """Serializable form of the tagging options."""

    model_config = ConfigDict(extra="forbid")

    whitelist_query_params: List[str] = []
    tag_query: bool = False
    tag_error_type: bool = False
    tag_total_hits: bool = False
    tag_total_shards: bool = False

    def to_options(self) -> List[TraceOpt]:
        opts: List[TraceOpt] = []
        if self.whitelist_query_params:
            opts.append(with_whitelist_query_params(*self.whitelist_query_params))
        if self.tag_query:
            opts.append(with_tag_query())
        if self.tag_error_type:
            opts.append(with_tag_error_type())
        if self.tag_total_hits:
            opts.append(with_tag_total_hits())
        if self.tag_total_shards:
            opts.append(with_tag_total_shards())
        return opts


def load_trace_config(path: Optional[Union[str, Path]] = None) -> TraceConfig:
    """Load tracing config from ``path`` or ``$SEARCHTRACE_CONFIG_FILE``.

    Returns the defaults when neither is set.
    """
    if path is None:
        path = os.environ.get(CONFIG_FILE_ENV)
    if not path:
        return TraceConfig()

    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigError(f"Failed to read trace config {config_path}: {e}") from e

    try:
        config = TraceConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid trace config {config_path}: {e}") from e

    logger.debug("Loaded trace config from %s", config_path)
    return config
