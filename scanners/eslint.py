"""ESLint integration: run the analyzer or load its JSON output into LintResults."""
import json
import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from core.models import LintResult

logger = logging.getLogger(__name__)

# Extra directories to search for the eslint binary
_EXTRA_PATHS = [
    str(Path.home() / ".npm-global" / "bin"),
    str(Path.home() / ".local" / "bin"),
    "/opt/homebrew/bin",
    "/usr/local/bin",
]

# 0 = no errors, 1 = lint errors found; anything else means eslint itself failed
_OK_EXIT_CODES = (0, 1)


class AnalyzerError(RuntimeError):
    pass


def find_eslint(cwd: str, explicit: Optional[str] = None) -> Optional[str]:
    if explicit:
        return explicit
    local = Path(cwd) / "node_modules" / ".bin" / ("eslint.cmd" if sys.platform == "win32" else "eslint")
    if local.is_file():
        return str(local)
    found = shutil.which("eslint")
    if found:
        return found
    for d in _EXTRA_PATHS:
        candidate = Path(d) / "eslint"
        if candidate.is_file() and os.access(str(candidate), os.X_OK):
            return str(candidate)
    return None


def run_eslint(
    files: Sequence[str],
    cwd: str,
    eslint_bin: Optional[str] = None,
    extra_args: Sequence[str] = (),
    timeout: int = 600,
) -> List[LintResult]:
    """Lint `files` from `cwd` and return the parsed per-file results."""
    bin_path = find_eslint(cwd, eslint_bin)
    if not bin_path:
        raise AnalyzerError("eslint not found (install it in the project or pass --eslint)")

    cmd = [bin_path, "--format", "json", *extra_args, *(files or ["."])]
    logger.debug("Running %s in %s", " ".join(cmd), cwd)
    try:
        proc = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, timeout=timeout)
    except subprocess.TimeoutExpired as e:
        raise AnalyzerError(f"eslint timed out after {timeout}s") from e
    except OSError as e:
        raise AnalyzerError(f"Unable to run eslint: {e}") from e

    if proc.returncode not in _OK_EXIT_CODES:
        raise AnalyzerError(
            f"eslint exited with code {proc.returncode}: {proc.stderr.strip() or proc.stdout.strip()}"
        )
    return parse_results(proc.stdout)


def parse_results(text: str) -> List[LintResult]:
    """Parse `eslint --format json` output."""
    if not text.strip():
        raise AnalyzerError("Analyzer produced no output.")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise AnalyzerError(f"Invalid results JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e

    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise AnalyzerError("Results JSON must be a list of per-file result objects.")
    try:
        return [LintResult.from_dict(r) for r in data]
    except (TypeError, ValueError, AttributeError) as e:
        raise AnalyzerError(f"Malformed result entry: {e}") from e


def load_results(source: str) -> List[LintResult]:
    """Read results from a JSON file, or from stdin when `source` is '-'."""
    try:
        raw = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise AnalyzerError(f"Unable to read results file: {e}") from e
    return parse_results(raw)
