# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Logging helpers."""

import logging
import os
import sys

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_configured = False


def _env_level() -> int:
    level = logging.getLevelName(os.environ.get("SEARCHTRACE_LOG_LEVEL", "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    root = logging.getLogger("searchtrace")
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(_env_level())
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``searchtrace`` hierarchy.

    Handlers are attached once to the ``searchtrace`` root logger, so loggers
    returned here share its level (``SEARCHTRACE_LOG_LEVEL``, default WARNING).
    """
    _configure_root()
    if not name.startswith("searchtrace"):
        name = f"searchtrace.{name}"
    return logging.getLogger(name)

