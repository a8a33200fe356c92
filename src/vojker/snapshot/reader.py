"""Snapshot decoding.

Decoding is lenient on purpose: a missing or malformed string field becomes
``None`` and a missing or malformed number becomes NaN. Nothing here raises;
the guard chain turns those gaps into NO_GO outcomes.
"""

from __future__ import annotations

import json
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from vojker.utils.logging_setup import get_logger

_LOG = get_logger(__name__)

NAN = float("nan")


def _as_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return NAN
    try:
        return float(value)
    except OverflowError:
        return NAN


def _parse_int(token: str) -> int | float:
    # Integers past the interpreter's digit limit degrade this one field only
    try:
        return int(token)
    except ValueError:
        return NAN


def _as_epoch_seconds(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return 0


class Snapshot(BaseModel):
    """One market bar as seen by the guard chain."""

    model_config = ConfigDict(frozen=True)

    symbol: str | None = None
    timeframe: str | None = None
    timestamp: int = 0
    open: float = NAN
    close: float = NAN
    volume: float = NAN

    @field_validator("symbol", "timeframe", mode="before")
    @classmethod
    def _coerce_text(cls, value: object) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("timestamp", mode="before")
    @classmethod
    def _coerce_timestamp(cls, value: object) -> int:
        return _as_epoch_seconds(value)

    @field_validator("open", "close", "volume", mode="before")
    @classmethod
    def _coerce_number(cls, value: object) -> float:
        return _as_float(value)


_FIELDS = ("symbol", "timeframe", "timestamp", "open", "close", "volume")


def _decode_object(raw: bytes) -> dict[str, Any]:
    text = raw.decode("utf-8-sig", errors="replace")
    try:
        # NaN/Infinity literals are not JSON numbers; treat them as malformed
        payload = json.loads(text, parse_int=_parse_int, parse_constant=lambda _token: None)
    except (ValueError, RecursionError) as exc:
        _LOG.debug("snapshot input is not valid JSON: %s", exc)
        return {}
    if not isinstance(payload, dict):
        _LOG.debug("snapshot input is not a JSON object: %s", type(payload).__name__)
        return {}
    return payload


def read_snapshot(raw: bytes) -> Snapshot:
    """Decode the six snapshot fields from raw input bytes."""
    payload = _decode_object(raw)
    fields = {name: payload[name] for name in _FIELDS if name in payload}
    missing = [name for name in _FIELDS if name not in fields]
    if missing:
        _LOG.debug("snapshot fields missing: %s", ",".join(missing))
    return Snapshot.model_validate(fields)
