from .chain import GUARD_CHAIN, GUARD_NAMES, ChainResult, Guard, GuardOutcome, run_guard_chain

__all__ = ["GUARD_CHAIN", "GUARD_NAMES", "ChainResult", "Guard", "GuardOutcome", "run_guard_chain"]
