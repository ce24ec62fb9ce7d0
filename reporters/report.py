"""
Report generator — ESLint-compatible JSON output for the filtered results.
"""
import json
from pathlib import Path
from typing import Dict, List

from core.models import LintResult


def build_report_data(results: List[LintResult]) -> List[Dict]:
    """Same shape `eslint --format json` produces, so downstream tooling keeps working."""
    return [r.to_dict() for r in results]


def render_json(results: List[LintResult], pretty: bool = False) -> str:
    return json.dumps(build_report_data(results), indent=2 if pretty else None, ensure_ascii=False)


def save_json(results: List[LintResult], output_path: str) -> str:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_json(results, pretty=True), encoding="utf-8")
    return str(path)


def summarize(results: List[LintResult]) -> Dict[str, int]:
    return {
        "errors": sum(r.error_count for r in results),
        "warnings": sum(r.warning_count for r in results),
        "fixable_errors": sum(r.fixable_error_count for r in results),
        "fixable_warnings": sum(r.fixable_warning_count for r in results),
    }
