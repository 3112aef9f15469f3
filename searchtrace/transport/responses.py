# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Response shapes read by the tracing transport."""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Type, Union

from pydantic import BaseModel, Field, StrictInt, ValidationError, field_validator

from searchtrace.exceptions import ResponseDecodeError


class _Hits(BaseModel):
    total: Optional[StrictInt] = None

    @field_validator("total", mode="before")
    @classmethod
    def _unwrap_total(cls, value: Any) -> Any:
        # Newer engines report {"value": N, "relation": "eq"}
        if isinstance(value, dict):
            return value.get("value")
        return value


class _Shards(BaseModel):
    total: Optional[StrictInt] = None


class HitsResponse(BaseModel):
    hits: Optional[_Hits] = None

    @property
    def total_hits(self) -> int:
        if self.hits is None or self.hits.total is None:
            return 0
        return self.hits.total


class ShardsResponse(BaseModel):
    shards: Optional[_Shards] = Field(default=None, alias="_shards")

    @property
    def total_shards(self) -> int:
        if self.shards is None or self.shards.total is None:
            return 0
        return self.shards.total


class HitsAndShardsResponse(HitsResponse, ShardsResponse):
    pass


class _ErrorDetail(BaseModel):
    type: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error body of a non-2xx response.

    Uses the top-level ``type`` when present, else ``error.type`` of the
    engine's error envelope.
    """

    type: Optional[str] = None
    error: Optional[Union[_ErrorDetail, str]] = None

    @field_validator("error", mode="before")
    @classmethod
    def _drop_unknown_error(cls, value: Any) -> Any:
        # Only the envelope form or a plain message carry meaning here
        if isinstance(value, str):
            return value
        if isinstance(value, dict):
            error_type = value.get("type")
            return {"type": error_type} if isinstance(error_type, str) else {}
        return None

    @property
    def error_type(self) -> str:
        if self.type is not None:
            return self.type
        if isinstance(self.error, _ErrorDetail):
            return self.error.type or ""
        return ""


_RESULT_SHAPES: Dict[Tuple[bool, bool], Type[BaseModel]] = {
    (True, True): HitsAndShardsResponse,
    (True, False): HitsResponse,
    (False, True): ShardsResponse,
}


def _decode(shape: Type[BaseModel], body: bytes) -> Any:
    try:
        return shape.model_validate_json(body)
    except ValidationError as e:
        raise ResponseDecodeError(
            f"failed to decode {shape.__name__}: {e}", shape=shape.__name__
        ) from e


def parse_error_type(body: bytes) -> str:
    """Decode an error body and return its error type."""
    return _decode(ErrorResponse, body).error_type


def parse_result_counts(
    body: bytes, tag_total_hits: bool, tag_total_shards: bool
) -> Dict[str, int]:
    """Decode a success body with the shape matching the enabled toggles.

    Returns the counts for the enabled toggles only, keyed ``"hits"`` and
    ``"shards"``. Missing counts read as 0.
    """
    shape = _RESULT_SHAPES.get((tag_total_hits, tag_total_shards))
    if shape is None:
        return {}
    parsed = _decode(shape, body)
    counts: Dict[str, int] = {}
    if isinstance(parsed, ShardsResponse):
        counts["shards"] = parsed.total_shards
    if isinstance(parsed, HitsResponse):
        counts["hits"] = parsed.total_hits
    return counts
