"""Remove baselined findings from analyzer results and recount the summary fields."""
import dataclasses
from typing import Iterable, List

from core.baseline import Baseline
from core.build import relative_path
from core.fingerprint import Fingerprinter
from core.models import SEVERITY_ERROR, SEVERITY_WARNING, LintResult


def filter_results(
    results: Iterable[LintResult],
    baseline: Baseline,
    cwd: str,
    fingerprinter: Fingerprinter,
) -> List[LintResult]:
    new_results: List[LintResult] = []
    for result in results:
        file_path = relative_path(result.file_path, cwd)
        new_result = dataclasses.replace(
            result,
            messages=[],
            error_count=0,
            fatal_error_count=0,
            warning_count=0,
            fixable_error_count=0,
            fixable_warning_count=0,
            extra=dict(result.extra),
        )

        for message in result.messages:
            if message.rule_id:
                violation = fingerprinter.violation_for(message, file_path)
                if baseline.has_file_violation(violation):
                    continue

            if message.severity == SEVERITY_ERROR:
                new_result.error_count += 1
                if message.fix is not None:
                    new_result.fixable_error_count += 1
            elif message.severity == SEVERITY_WARNING:
                new_result.warning_count += 1
                if message.fix is not None:
                    new_result.fixable_warning_count += 1
            if message.fatal:
                new_result.fatal_error_count += 1
            new_result.messages.append(message)

        new_results.append(new_result)
    return new_results
