"""Fingerprinting: hash the exact source text a finding covers so it survives line drift."""
import hashlib
import logging
import re
from pathlib import Path
from typing import Dict, Optional

from core.models import LintMessage, Range, Violation

logger = logging.getLogger(__name__)

# Physical lines with their terminators kept, so column offsets stay intact.
_LINES_PATTERN = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+\Z")


class SourceCache:
    """Read-once cache of source files. Never invalidated; files must not change during a run."""

    def __init__(self, cwd: Optional[str] = None):
        self._cwd = Path(cwd) if cwd else None
        self._sources: Dict[str, str] = {}

    def read(self, file_path: str) -> str:
        if not file_path:
            return ""
        if file_path in self._sources:
            return self._sources[file_path]

        path = Path(file_path)
        if self._cwd is not None and not path.is_absolute():
            path = self._cwd / path
        if not path.is_file():
            logger.debug("No source for %s; fingerprint unavailable", file_path)
            return ""
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Unable to read %s: %s", path, e)
            return ""
        self._sources[file_path] = source
        return source

    def __contains__(self, file_path: str) -> bool:
        return file_path in self._sources


def get_source_for_range(source: str, span: Range) -> str:
    if not source:
        return ""
    lines = _LINES_PATTERN.findall(source)
    first_line = span.start.line - 1
    last_line = span.end.line - 1
    first_col = span.start.column - 1
    last_col = span.end.column - 1
    if first_line < 0 or first_line >= len(lines):
        return ""

    if first_line == last_line:
        return lines[first_line][first_col:last_col]

    parts = [lines[first_line][first_col:]]
    for idx in range(first_line + 1, min(last_line, len(lines))):
        parts.append(lines[idx])
    if last_line < len(lines):
        parts.append(lines[last_line][:last_col])
    return "".join(parts)


def hash_source_code(source_code: str) -> str:
    return hashlib.sha256(source_code.encode("utf-8")).hexdigest()


class Fingerprinter:
    """Turns analyzer messages into hashed Violations, reading sources through a SourceCache."""

    def __init__(self, cache: SourceCache):
        self.cache = cache

    def fingerprint(self, file_path: str, span: Range) -> Optional[str]:
        source_code = get_source_for_range(self.cache.read(file_path), span)
        # Never hash "": two unhashable findings must not match each other by hash.
        return hash_source_code(source_code) if source_code else None

    def violation_for(self, message: LintMessage, file_path: str) -> Violation:
        if not message.rule_id:
            raise ValueError("Expected message.rule_id to be a non-empty string.")
        span = message.range
        return Violation(
            file_path=file_path,
            start_line=span.start.line,
            start_column=span.start.column,
            end_line=message.end_line,
            end_column=message.end_column,
            rule_id=message.rule_id,
            message=message.message,
            severity=message.severity,
            hash=self.fingerprint(file_path, span),
        )
