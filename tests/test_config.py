# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0

import json

import pytest

from searchtrace.config import CONFIG_FILE_ENV, TraceConfig, load_trace_config
from searchtrace.exceptions import ConfigError
from searchtrace.transport import TransportSettings, apply_options


def test_defaults_without_file(monkeypatch):
    monkeypatch.delenv(CONFIG_FILE_ENV, raising=False)
    config = load_trace_config()
    assert config == TraceConfig()
    assert config.to_options() == []


def test_load_from_env(tmp_path, monkeypatch):
    path = tmp_path / "trace.json"
    path.write_text(
        json.dumps(
            {
                "whitelist_query_params": ["routing"],
                "tag_query": True,
                "tag_total_hits": True,
            }
        )
    )
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))

    config = load_trace_config()
    options = apply_options(TransportSettings(), config.to_options()).freeze()

    assert options.whitelist_query_params == ("routing",)
    assert options.tag_query
    assert options.tag_total_hits
    assert not options.tag_total_shards
    assert not options.tag_error_type


def test_explicit_path_wins(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_FILE_ENV, str(tmp_path / "missing.json"))
    path = tmp_path / "trace.json"
    path.write_text('{"tag_error_type": true, "tag_total_shards": true}')

    config = load_trace_config(path)

    assert config.tag_error_type and config.tag_total_shards


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "trace.json"
    path.write_text('{"tag_everything": true}')

    with pytest.raises(ConfigError):
        load_trace_config(path)


def test_unreadable_file(tmp_path):
    with pytest.raises(ConfigError):
        load_trace_config(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(ConfigError):
        load_trace_config(bad)
