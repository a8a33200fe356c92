from __future__ import annotations

import json
import math

import pytest
from pydantic import ValidationError

from vojker.snapshot.reader import Snapshot, read_snapshot


def _raw(payload: object) -> bytes:
    return json.dumps(payload).encode("utf-8")


def test_reads_all_six_fields(bar):
    snap = read_snapshot(_raw(bar))

    assert snap.symbol == "EURUSD"
    assert snap.timeframe == "M1"
    assert snap.timestamp == 1700000000
    assert snap.open == 1.1
    assert snap.close == 1.095
    assert snap.volume == 10.0


def test_missing_fields_degrade_without_raising():
    snap = read_snapshot(b"{}")

    assert snap.symbol is None
    assert snap.timeframe is None
    assert snap.timestamp == 0
    assert math.isnan(snap.open)
    assert math.isnan(snap.close)
    assert math.isnan(snap.volume)


@pytest.mark.parametrize(
    "raw",
    [
        b"",
        b"not json",
        b'{"symbol": "EURUSD",',
        b"[1, 2, 3]",
        b'"EURUSD"',
        b"\xff\xfe\x00garbage",
    ],
)
def test_undecodable_input_yields_empty_snapshot(raw):
    snap = read_snapshot(raw)

    assert snap.symbol is None
    assert snap.timeframe is None
    assert math.isnan(snap.open)


def test_wrong_types_become_absent_or_nan():
    snap = read_snapshot(
        _raw(
            {
                "symbol": 42,
                "timeframe": ["M1"],
                "timestamp": "1700000000",
                "open": "1.1",
                "close": True,
                "volume": None,
            }
        )
    )

    assert snap.symbol is None
    assert snap.timeframe is None
    assert snap.timestamp == 0
    assert math.isnan(snap.open)
    assert math.isnan(snap.close)
    assert math.isnan(snap.volume)


def test_nan_and_infinity_literals_are_not_numbers():
    snap = read_snapshot(b'{"open": NaN, "close": Infinity, "volume": -Infinity, "timestamp": NaN}')

    assert math.isnan(snap.open)
    assert math.isnan(snap.close)
    assert math.isnan(snap.volume)
    assert snap.timestamp == 0


def test_float_timestamp_truncates_toward_zero():
    assert read_snapshot(b'{"timestamp": 1700000000.9}').timestamp == 1700000000
    assert read_snapshot(b'{"timestamp": -1.5}').timestamp == -1


def test_huge_integer_price_is_nan():
    snap = read_snapshot(b'{"open": 1' + b"0" * 400 + b"}")

    assert math.isnan(snap.open)


def test_string_escapes_are_decoded():
    snap = read_snapshot(b'{"symbol": "EUR\\"USD", "timeframe": "M\\u0031"}')

    assert snap.symbol == 'EUR"USD'
    assert snap.timeframe == "M1"


def test_utf8_bom_is_accepted(bar):
    snap = read_snapshot(b"\xef\xbb\xbf" + _raw(bar))

    assert snap.symbol == "EURUSD"


def test_snapshot_is_immutable(bar):
    snap = read_snapshot(_raw(bar))

    with pytest.raises(ValidationError):
        snap.symbol = "GBPUSD"  # type: ignore[misc]
    assert isinstance(snap, Snapshot)


def test_oversized_integer_degrades_only_its_field():
    raw = b'{"symbol": "EURUSD", "timeframe": "M1", "open": 1.1, "close": 1.2, "volume": 1' + b"0" * 5000 + b"}"

    snap = read_snapshot(raw)

    assert snap.symbol == "EURUSD"
    assert snap.timeframe == "M1"
    assert snap.open == 1.1
    assert math.isnan(snap.volume)


def test_oversized_integer_timestamp_becomes_epoch():
    snap = read_snapshot(b'{"symbol": "EURUSD", "timestamp": 1' + b"0" * 5000 + b"}")

    assert snap.symbol == "EURUSD"
    assert snap.timestamp == 0
