from .store import GoldenResult, GoldenStatus, GoldenStore, first_mismatch_index

__all__ = ["GoldenResult", "GoldenStatus", "GoldenStore", "first_mismatch_index"]
