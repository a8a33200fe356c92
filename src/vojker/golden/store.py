"""Golden fixture store: bless or compare rendered audit bytes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from vojker.snapshot.fingerprint import Fingerprint, sha256_hex
from vojker.utils.logging_setup import get_logger

_LOG = get_logger(__name__)


class GoldenStatus(str, Enum):
    BLESSED = "BLESSED"
    PASS = "PASS"
    FAIL = "FAIL"


def first_mismatch_index(expected: bytes, actual: bytes) -> int | None:
    """Index of the first differing byte.

    When one sequence is a strict prefix of the other, the length of the shorter
    one is returned. Equal sequences give ``None``.
    """
    if expected == actual:
        return None
    limit = min(len(expected), len(actual))
    for idx in range(limit):
        if expected[idx] != actual[idx]:
            return idx
    return limit


@dataclass(frozen=True)
class GoldenResult:
    status: GoldenStatus
    expected_path: Path
    actual_path: Path
    expected_hash: str
    actual_hash: str
    first_mismatch: int | None = None

    @property
    def exit_code(self) -> int:
        return 1 if self.status is GoldenStatus.FAIL else 0


class GoldenStore:
    """Compares fresh audit bytes against a stored fixture, or writes the fixture.

    The fresh bytes are always written to ``actual_path`` first, whatever the
    outcome, so a failing run leaves both documents on disk for inspection.
    """

    def __init__(
        self,
        expected_path: Path,
        actual_path: Path,
        *,
        fingerprint: Fingerprint = sha256_hex,
    ) -> None:
        self.expected_path = Path(expected_path)
        self.actual_path = Path(actual_path)
        self.fingerprint = fingerprint

    def check(self, actual: bytes, *, bless: bool = False) -> GoldenResult:
        self.actual_path.write_bytes(actual)
        actual_hash = self.fingerprint(actual)

        if bless or not self.expected_path.exists():
            self.expected_path.write_bytes(actual)
            _LOG.info("blessed fixture %s", self.expected_path)
            return GoldenResult(
                status=GoldenStatus.BLESSED,
                expected_path=self.expected_path,
                actual_path=self.actual_path,
                expected_hash=actual_hash,
                actual_hash=actual_hash,
            )

        expected = self.expected_path.read_bytes()
        mismatch = first_mismatch_index(expected, actual)
        status = GoldenStatus.PASS if mismatch is None else GoldenStatus.FAIL
        if mismatch is not None:
            _LOG.info("fixture mismatch at byte %d: %s", mismatch, self.expected_path)
        return GoldenResult(
            status=status,
            expected_path=self.expected_path,
            actual_path=self.actual_path,
            expected_hash=self.fingerprint(expected),
            actual_hash=actual_hash,
            first_mismatch=mismatch,
        )
