"""Build a Baseline from a set of analyzer results."""
import os
from pathlib import PurePath
from typing import Iterable

from core.baseline import Baseline
from core.fingerprint import Fingerprinter
from core.models import LintResult


def relative_path(file_path: str, cwd: str) -> str:
    """Path of a result relative to cwd, with forward slashes so baselines are portable."""
    rel = os.path.relpath(file_path, cwd) if os.path.isabs(file_path) else file_path
    return PurePath(rel).as_posix()


def build_baseline(results: Iterable[LintResult], cwd: str, fingerprinter: Fingerprinter) -> Baseline:
    baseline = Baseline()
    for result in results:
        file_path = relative_path(result.file_path, cwd)
        for message in result.messages:
            # Messages without a rule (e.g. parse errors) are never baselined
            if not message.rule_id:
                continue
            baseline.add_violation(fingerprinter.violation_for(message, file_path))
    return baseline
