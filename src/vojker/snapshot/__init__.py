from .fingerprint import make_fingerprint, sha256_hex
from .reader import Snapshot, read_snapshot

__all__ = ["Snapshot", "read_snapshot", "make_fingerprint", "sha256_hex"]
