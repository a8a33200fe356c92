"""Single-case pipeline: input bytes -> snapshot -> guards -> decision -> audit -> golden."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from vojker.audit.serializer import AuditSerializer
from vojker.config.schema import DEFAULT_FINGERPRINT_ALGORITHM, DEFAULT_IDENTITY, AuditIdentity
from vojker.config.settings import Settings, get_settings
from vojker.decision.engine import Decision, decide, state_path
from vojker.golden.store import GoldenResult, GoldenStore
from vojker.guards.chain import GuardOutcome, run_guard_chain
from vojker.snapshot.fingerprint import make_fingerprint
from vojker.snapshot.reader import Snapshot, read_snapshot
from vojker.utils.logging_setup import get_logger

_LOG = get_logger(__name__)


@dataclass(frozen=True)
class Evaluation:
    trace: tuple[GuardOutcome, ...]
    decision: Decision

    @property
    def state_path(self) -> tuple[str, ...]:
        return state_path(self.decision)


@dataclass(frozen=True)
class CaseReport:
    case_name: str
    snapshot_hash: str
    audit: bytes
    golden: GoldenResult

    @property
    def exit_code(self) -> int:
        return self.golden.exit_code


def evaluate_snapshot(snapshot: Snapshot) -> Evaluation:
    chain = run_guard_chain(snapshot)
    return Evaluation(trace=chain.trace, decision=decide(chain, snapshot))


def case_name_for(case_dir: Path) -> str:
    # "." has an empty name; fall back to the resolved directory name
    return case_dir.name or case_dir.resolve().name


class AuditPipeline:
    """Runs one case directory end to end."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        identity: AuditIdentity = DEFAULT_IDENTITY,
        fingerprint_algorithm: str = DEFAULT_FINGERPRINT_ALGORITHM,
    ):
        self.settings = settings or get_settings()
        self.fingerprint_algorithm = fingerprint_algorithm.strip().lower()
        self.fingerprint = make_fingerprint(self.fingerprint_algorithm)
        self.serializer = AuditSerializer(identity)

    def render(self, raw: bytes, case_name: str) -> tuple[str, bytes]:
        """Return (snapshot hash, canonical audit bytes) for raw input bytes."""
        snapshot_hash = self.fingerprint(raw)
        snapshot = read_snapshot(raw)
        evaluation = evaluate_snapshot(snapshot)
        _LOG.debug(
            "case=%s decision=%s trace=%s",
            case_name,
            evaluation.decision.decision,
            [outcome.guard for outcome in evaluation.trace],
        )
        audit = self.serializer.render(
            case_name=case_name,
            snapshot_hash=snapshot_hash,
            timestamp=snapshot.timestamp,
            decision=evaluation.decision,
            trace=evaluation.trace,
        )
        return snapshot_hash, audit

    def run_case(self, case_dir: Path, *, bless: bool = False) -> CaseReport:
        """Evaluate ``case_dir`` and bless or verify its golden fixture.

        Raises:
            FileNotFoundError: If the case directory or its input file is missing.
            NotADirectoryError: If ``case_dir`` is not a directory.
        """
        case_dir = Path(case_dir)
        if not case_dir.exists():
            raise FileNotFoundError(f"case directory not found: {case_dir}")
        if not case_dir.is_dir():
            raise NotADirectoryError(f"case path is not a directory: {case_dir}")
        input_path = case_dir / self.settings.input_filename
        if not input_path.is_file():
            raise FileNotFoundError(f"input file not found: {input_path}")

        case_name = case_name_for(case_dir)
        snapshot_hash, audit = self.render(input_path.read_bytes(), case_name)

        store = GoldenStore(
            case_dir / self.settings.expected_filename,
            case_dir / self.settings.actual_filename,
            fingerprint=self.fingerprint,
        )
        golden = store.check(audit, bless=bless)
        _LOG.info("case=%s status=%s", case_name, golden.status.value)
        return CaseReport(
            case_name=case_name, snapshot_hash=snapshot_hash, audit=audit, golden=golden
        )


def run_case(
    case_dir: Path,
    *,
    bless: bool = False,
    settings: Settings | None = None,
    identity: AuditIdentity = DEFAULT_IDENTITY,
    fingerprint_algorithm: str = DEFAULT_FINGERPRINT_ALGORITHM,
) -> CaseReport:
    pipeline = AuditPipeline(
        settings, identity=identity, fingerprint_algorithm=fingerprint_algorithm
    )
    return pipeline.run_case(case_dir, bless=bless)
