# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0

import logging

import pytest

from searchtrace.utils import logger as logger_module


@pytest.fixture
def fresh_root(monkeypatch):
    monkeypatch.setattr(logger_module, "_configured", False)
    root = logging.getLogger("searchtrace")
    level = root.level
    yield root
    root.setLevel(level)


def test_log_level_from_env(fresh_root, monkeypatch):
    monkeypatch.setenv("SEARCHTRACE_LOG_LEVEL", "debug")
    logger_module.get_logger("transport")
    assert fresh_root.level == logging.DEBUG


def test_invalid_log_level_falls_back_to_warning(fresh_root, monkeypatch):
    monkeypatch.setenv("SEARCHTRACE_LOG_LEVEL", "chatty")
    log = logger_module.get_logger("transport")
    assert fresh_root.level == logging.WARNING
    assert log.name == "searchtrace.transport"
