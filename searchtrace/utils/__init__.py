# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Utility functions and helpers."""

from searchtrace.utils.logger import get_logger

__all__ = [
    "get_logger",
]
