"""Content fingerprints for raw input bytes and rendered audit documents."""

from __future__ import annotations

import hashlib
from collections.abc import Callable

Fingerprint = Callable[[bytes], str]


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def make_fingerprint(algorithm: str = "sha256") -> Fingerprint:
    """Return a hex-digest function for a fixed-length hashlib algorithm.

    Raises:
        ValueError: If the algorithm is unknown or has no fixed digest length.
    """
    name = algorithm.strip().lower()
    if name not in hashlib.algorithms_guaranteed or name.startswith("shake_"):
        raise ValueError(f"unsupported fingerprint algorithm: {algorithm!r}")
    if name == "sha256":
        return sha256_hex

    def _fingerprint(data: bytes) -> str:
        return hashlib.new(name, data).hexdigest()

    return _fingerprint
