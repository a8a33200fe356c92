"""Guard predicates.

Each predicate looks at a Snapshot and returns ``None`` when the guard passes,
or the reason code of the failure. Predicates are pure and never raise.
"""

from __future__ import annotations

import math

from vojker.snapshot.reader import Snapshot

VALIDATION_MISSING_SYMBOL = "VALIDATION_MISSING_SYMBOL"
VALIDATION_MISSING_TIMEFRAME = "VALIDATION_MISSING_TIMEFRAME"
VALIDATION_MISSING_OHLC = "VALIDATION_MISSING_OHLC"
POLICY_TIMEFRAME_BLOCKED = "POLICY_TIMEFRAME_BLOCKED"
RISK_VOLUME_ZERO = "RISK_VOLUME_ZERO"
SIGNAL_FLAT_BAR = "SIGNAL_FLAT_BAR"

ALLOWED_TIMEFRAME = "M1"


# Blank means nothing left after trimming code points <= U+0020; other
# Unicode whitespace (U+00A0 etc.) counts as content
_TRIM_CHARS = "".join(map(chr, range(0x21)))


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip(_TRIM_CHARS)


def check_validation(snapshot: Snapshot) -> str | None:
    # Sub-order is fixed: symbol, timeframe, then prices
    if _is_blank(snapshot.symbol):
        return VALIDATION_MISSING_SYMBOL
    if _is_blank(snapshot.timeframe):
        return VALIDATION_MISSING_TIMEFRAME
    if math.isnan(snapshot.open) or math.isnan(snapshot.close):
        return VALIDATION_MISSING_OHLC
    return None


def check_policy(snapshot: Snapshot) -> str | None:
    if snapshot.timeframe != ALLOWED_TIMEFRAME:
        return POLICY_TIMEFRAME_BLOCKED
    return None


def check_risk(snapshot: Snapshot) -> str | None:
    # NaN volume compares False, so it passes here
    if snapshot.volume <= 0:
        return RISK_VOLUME_ZERO
    return None


def check_cooldown(snapshot: Snapshot) -> str | None:  # noqa: ARG001
    """Reserved slot. Always passes, but still shows up in the trace."""
    return None


def check_signal(snapshot: Snapshot) -> str | None:
    if snapshot.close == snapshot.open:
        return SIGNAL_FLAT_BAR
    return None
