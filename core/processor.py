"""Baseline orchestration: establish, apply, or refresh the baseline for one set of results."""
import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional

from core import serialize as serializer
from core.baseline import Baseline
from core.build import build_baseline
from core.config import ProcessorConfig
from core.filter import filter_results
from core.fingerprint import Fingerprinter, SourceCache
from core.models import LintResult

logger = logging.getLogger(__name__)


class BaselineState(Enum):
    CREATED = "created"    # no baseline file: snapshot everything, report everything
    APPLIED = "applied"    # existing baseline: report only new findings
    UPDATED = "updated"    # update requested: re-snapshot, report nothing already present


class Processor:
    def __init__(self, config: ProcessorConfig):
        self.config = config
        self.fingerprinter = Fingerprinter(SourceCache(config.cwd))
        self.state: Optional[BaselineState] = None
        self.baseline: Optional[Baseline] = None

    @property
    def baseline_path(self) -> Path:
        return self.config.baseline_path

    def build(self, results: List[LintResult]) -> Baseline:
        return build_baseline(results, self.config.cwd, self.fingerprinter)

    def filter(self, results: List[LintResult], baseline: Baseline) -> List[LintResult]:
        return filter_results(results, baseline, self.config.cwd, self.fingerprinter)

    def load(self) -> Baseline:
        return serializer.deserialize(self.baseline_path.read_text(encoding="utf-8"))

    def save(self, baseline: Baseline) -> None:
        path = self.baseline_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(serializer.serialize(baseline), encoding="utf-8")
        logger.info("Wrote %d violation(s) to %s", len(baseline), path)

    def process(self, results: List[LintResult]) -> List[LintResult]:
        if self.baseline_path.is_file():
            return self._handle_baseline_exists(results)
        return self._handle_baseline_does_not_exist(results)

    def _handle_baseline_exists(self, results: List[LintResult]) -> List[LintResult]:
        if self.config.update_baseline:
            # The old snapshot is discarded without being read.
            baseline = self.build(results)
            self.save(baseline)
            self.state = BaselineState.UPDATED
        else:
            baseline = self.load()
            logger.info("Loaded %d violation(s) from %s", len(baseline), self.baseline_path)
            self.state = BaselineState.APPLIED
        self.baseline = baseline
        filtered = self.filter(results, baseline)
        logger.info(
            "%d of %d finding(s) suppressed by baseline",
            _count(results) - _count(filtered), _count(results),
        )
        return filtered

    def _handle_baseline_does_not_exist(self, results: List[LintResult]) -> List[LintResult]:
        logger.info("No baseline at %s; creating one", self.baseline_path)
        baseline = self.build(results)
        self.save(baseline)
        self.state = BaselineState.CREATED
        self.baseline = baseline
        return results


def _count(results: List[LintResult]) -> int:
    return sum(len(r.messages) for r in results)
