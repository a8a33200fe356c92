"""Audit record rendering.

The record layout is fixed, field by field::

    schema, snapshot_hash, pack{name,version}, engine{name,version},
    decision{decision,action,direction}, state_path, reason_codes,
    guard_trace[{guard,pass[,reason]}], meta{run_id,timestamp_utc}

Output is a pure function of its arguments: same inputs give the same bytes
on every platform and every run.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from vojker.audit.canonical import encode_canonical
from vojker.config.schema import AuditIdentity
from vojker.decision.engine import Decision, state_path
from vojker.guards.chain import GuardOutcome

SCHEMA_TAG = "vojker.audit.v1"
RUN_ID_PREFIX = "golden-v1-"


def _civil_from_days(days: int) -> tuple[int, int, int]:
    # Proleptic Gregorian date for a day count relative to 1970-01-01
    z = days + 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def _format_year(year: int) -> str:
    if year > 9999:
        return f"+{year}"
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"


def format_timestamp_utc(seconds: int) -> str:
    """Render epoch seconds as an RFC3339 UTC timestamp, e.g. ``2023-11-14T22:13:20Z``."""
    days, secs = divmod(int(seconds), 86400)
    hour, rem = divmod(secs, 3600)
    minute, second = divmod(rem, 60)
    year, month, day = _civil_from_days(days)
    return f"{_format_year(year)}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}Z"


def _trace_entry(outcome: GuardOutcome) -> dict[str, Any]:
    entry: dict[str, Any] = {"guard": outcome.guard, "pass": outcome.passed}
    if not outcome.passed:
        entry["reason"] = outcome.reason or ""
    return entry


class AuditSerializer:
    """Renders one evaluation into the canonical audit document."""

    def __init__(self, identity: AuditIdentity, *, schema: str = SCHEMA_TAG):
        self.identity = identity
        self.schema = schema

    def build_document(
        self,
        *,
        case_name: str,
        snapshot_hash: str,
        timestamp: int,
        decision: Decision,
        trace: Sequence[GuardOutcome],
    ) -> dict[str, Any]:
        """Return the audit record as a mapping in canonical field order."""
        return {
            "schema": self.schema,
            "snapshot_hash": snapshot_hash,
            "pack": {
                "name": self.identity.pack_name,
                "version": self.identity.pack_version,
            },
            "engine": {
                "name": self.identity.engine_name,
                "version": self.identity.engine_version,
            },
            "decision": {
                "decision": decision.decision,
                "action": decision.action,
                "direction": decision.direction,
            },
            "state_path": list(state_path(decision)),
            "reason_codes": list(decision.reason_codes),
            "guard_trace": [_trace_entry(outcome) for outcome in trace],
            "meta": {
                "run_id": RUN_ID_PREFIX + case_name,
                "timestamp_utc": format_timestamp_utc(timestamp),
            },
        }

    def render(
        self,
        *,
        case_name: str,
        snapshot_hash: str,
        timestamp: int,
        decision: Decision,
        trace: Sequence[GuardOutcome],
    ) -> bytes:
        document = self.build_document(
            case_name=case_name,
            snapshot_hash=snapshot_hash,
            timestamp=timestamp,
            decision=decision,
            trace=trace,
        )
        return encode_canonical(document)
