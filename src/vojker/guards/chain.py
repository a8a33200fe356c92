"""Order-locked, fail-fast guard chain.

The chain is a fixed tuple of named predicates. Guards run in order and the
first failure ends evaluation: every guard up to and including the failing one
appears in the trace, nothing after it does. Trace order is part of the audit
record, so the chain is never reordered or run concurrently.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import NamedTuple

from vojker.guards import rules
from vojker.snapshot.reader import Snapshot
from vojker.utils.logging_setup import get_logger

_LOG = get_logger(__name__)


class Guard(NamedTuple):
    name: str
    check: Callable[[Snapshot], str | None]


GUARD_CHAIN: tuple[Guard, ...] = (
    Guard("ValidationGuard", rules.check_validation),
    Guard("PolicyGuard", rules.check_policy),
    Guard("RiskGuard", rules.check_risk),
    Guard("CooldownGuard", rules.check_cooldown),
    Guard("SignalGuard", rules.check_signal),
)

GUARD_NAMES: tuple[str, ...] = tuple(guard.name for guard in GUARD_CHAIN)


@dataclass(frozen=True)
class GuardOutcome:
    """
    Result of one guard evaluation.

    Attributes:
        guard: Guard name.
        passed: Whether the guard passed.
        reason: Failure reason code; set iff ``passed`` is False.
    """

    guard: str
    passed: bool
    reason: str | None = None

    def __post_init__(self):
        if self.passed and self.reason is not None:
            raise ValueError(f"{self.guard}: passing outcome cannot carry a reason")
        if not self.passed and not self.reason:
            raise ValueError(f"{self.guard}: failing outcome requires a reason")


@dataclass(frozen=True)
class ChainResult:
    trace: tuple[GuardOutcome, ...]

    @property
    def failure(self) -> GuardOutcome | None:
        if self.trace and not self.trace[-1].passed:
            return self.trace[-1]
        return None

    @property
    def passed(self) -> bool:
        return self.failure is None


def run_guard_chain(
    snapshot: Snapshot, guards: Sequence[Guard] = GUARD_CHAIN
) -> ChainResult:
    """Evaluate guards in order, stopping at the first failure."""
    trace: list[GuardOutcome] = []
    for guard in guards:
        reason = guard.check(snapshot)
        trace.append(GuardOutcome(guard=guard.name, passed=reason is None, reason=reason))
        if reason is not None:
            _LOG.debug("guard %s failed: %s", guard.name, reason)
            break
    return ChainResult(trace=tuple(trace))
