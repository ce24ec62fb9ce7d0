import textwrap
from typing import Optional

import pytest

from core.fingerprint import Fingerprinter, SourceCache
from core.models import LintMessage, LintResult

A_JS = textwrap.dedent("""\
    'use strict';

    let total = 1;
    console.log('done');
""")


def make_message(rule_id: Optional[str] = "no-unused-vars", line: int = 3, column: int = 5,
                 end_line: Optional[int] = 3, end_column: Optional[int] = 10,
                 message: str = "'x' is unused.", severity: int = 2, **kwargs) -> LintMessage:
    return LintMessage(rule_id=rule_id, line=line, column=column, end_line=end_line,
                       end_column=end_column, message=message, severity=severity, **kwargs)


def make_result(file_path: str, *messages: LintMessage, **kwargs) -> LintResult:
    errors = sum(1 for m in messages if m.severity == 2)
    warnings = sum(1 for m in messages if m.severity == 1)
    return LintResult(file_path=file_path, messages=list(messages),
                      error_count=errors, warning_count=warnings, **kwargs)


@pytest.fixture
def project(tmp_path):
    """A tiny project with one JS file whose line 3 reads `let total = 1;`."""
    (tmp_path / "a.js").write_text(A_JS, encoding="utf-8")
    return tmp_path


@pytest.fixture
def fingerprinter(project):
    return Fingerprinter(SourceCache(str(project)))
