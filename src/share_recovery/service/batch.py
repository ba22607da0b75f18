"""
Batch reconstruction over share documents.

Each document is an independent problem instance; documents are processed on a
thread pool and a failure in one never affects the others.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Sequence

from ..config import RecoveryConfig
from ..crypto import reconstruct
from ..decoder import decode_document, format_secret
from ..errors import ShareRecoveryError
from ..utils.files import read_mapping
from ..utils.metrics import InMemoryMetrics, MetricsSink

logger = logging.getLogger(__name__)


@dataclass
class RecoveryOutcome:
    """Result of one document: either a secret or the error that stopped it."""

    source: str
    secret: Optional[int] = None
    error: Optional[ShareRecoveryError] = None
    threshold: Optional[int] = None
    share_count: int = 0
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None

    def describe(self) -> str:
        if self.error is not None:
            return f"Error for {self.source}: {self.error.kind}: {self.error}"
        return f"Secret for {self.source}: {format_secret(self.secret)}"


def load_document(path: Path) -> Any:
    return read_mapping(Path(path))


def solve_document(document: Any, source: str, on_invalid_share: str = "abort") -> RecoveryOutcome:
    """Decode and reconstruct one document, capturing recovery errors in the outcome."""
    outcome = RecoveryOutcome(source=source)
    start = time.monotonic()
    try:
        problem = decode_document(document, on_invalid_share=on_invalid_share)
        outcome.threshold = problem.threshold
        outcome.share_count = len(problem.shares)
        outcome.secret = reconstruct(problem)
    except ShareRecoveryError as exc:
        if exc.source is None:
            exc.source = source
        outcome.error = exc
    outcome.elapsed = time.monotonic() - start
    return outcome


class SecretRecoveryRunner:
    """Runs reconstructions for every configured document."""

    def __init__(self, config: Optional[RecoveryConfig] = None, metrics: Optional[MetricsSink] = None) -> None:
        self.config = config or RecoveryConfig()
        self.metrics = metrics if metrics is not None else InMemoryMetrics()

    def _process(self, path: str) -> RecoveryOutcome:
        try:
            document = load_document(Path(path))
        except ShareRecoveryError as exc:
            outcome = RecoveryOutcome(source=path, error=exc)
        else:
            outcome = solve_document(document, source=path, on_invalid_share=self.config.on_invalid_share)
        self._record(outcome)
        return outcome

    def _record(self, outcome: RecoveryOutcome) -> None:
        if outcome.ok:
            self.metrics.emit_counter("reconstructions_total", status="success")
            logger.info(
                f"Reconstructed {outcome.source} from {outcome.threshold} of "
                f"{outcome.share_count} shares in {outcome.elapsed:.4f}s"
            )
        else:
            self.metrics.emit_counter("reconstructions_total", status="failure")
            logger.error(f"Failed to reconstruct {outcome.source}: {outcome.error.kind}: {outcome.error}")
        self.metrics.emit_timer("reconstruction_seconds", outcome.elapsed)

    def run(self, paths: Optional[Sequence[str]] = None) -> List[RecoveryOutcome]:
        """Process documents concurrently; outcomes come back in input order."""
        targets = [str(p) for p in (paths if paths is not None else self.config.inputs)]
        if not targets:
            return []
        workers = min(self.config.max_workers, len(targets))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self._process, targets))
