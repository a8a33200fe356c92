"""Decision step.

A run ends in exactly one of two variants: ``NoGo`` carrying the failing
guard's reason, or ``Go`` carrying a trade direction. Both expose the same
read-only view (decision/action/direction/reason_codes) for serialization.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from vojker.guards.chain import ChainResult
from vojker.snapshot.reader import Snapshot
from vojker.utils.logging_setup import get_logger

_LOG = get_logger(__name__)

Direction = Literal["LONG", "SHORT"]

CLOSE_BELOW_OPEN = "CLOSE_BELOW_OPEN"
CLOSE_ABOVE_OR_EQUAL_OPEN = "CLOSE_ABOVE_OR_EQUAL_OPEN"

STATE_PATH_NO_GO: tuple[str, ...] = ("IDLE",)
STATE_PATH_GO: tuple[str, ...] = ("IDLE", "ARMED", "ACTION")


@dataclass(frozen=True)
class NoGo:
    reason: str

    decision = "NO_GO"
    action = "DO_NOTHING"
    direction = "NONE"

    @property
    def reason_codes(self) -> tuple[str, ...]:
        return (self.reason,)


@dataclass(frozen=True)
class Go:
    direction: Direction
    reason: str

    decision = "GO"
    action = "OPEN_TRADE"

    @property
    def reason_codes(self) -> tuple[str, ...]:
        return (self.reason,)


Decision = NoGo | Go


def decide(chain: ChainResult, snapshot: Snapshot) -> Decision:
    """Map a terminal guard-chain state to a decision.

    Prices are compared exactly as decoded. ``close == open`` cannot reach this
    point (SignalGuard rejects it) but still maps to LONG with
    CLOSE_ABOVE_OR_EQUAL_OPEN, since existing fixtures carry that reason string.
    """
    failure = chain.failure
    if failure is not None:
        return NoGo(reason=failure.reason or "")

    if snapshot.close < snapshot.open:
        result: Decision = Go(direction="SHORT", reason=CLOSE_BELOW_OPEN)
    else:
        result = Go(direction="LONG", reason=CLOSE_ABOVE_OR_EQUAL_OPEN)
    _LOG.debug("decision GO direction=%s", result.direction)
    return result


def state_path(decision: Decision) -> tuple[str, ...]:
    return STATE_PATH_GO if isinstance(decision, Go) else STATE_PATH_NO_GO
