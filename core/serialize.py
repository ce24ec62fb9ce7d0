"""Baseline file format.

The file is a single JSON document::

    {
      "files": {
        "src/a.js:3:5-3:10": {
          "errors": [
            {"ruleId": "no-unused-vars", "message": "'x' is unused.", "severity": 2, "hash": "..."}
          ]
        }
      }
    }

Keys carry the file path and the full range (the ``-<endLine>:<endColumn>`` suffix only when
the analyzer reported an end); the entries carry everything else.
"""
import json
import re
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, ValidationError

from core.baseline import Baseline
from core.models import Violation

# Anchored at the end so that paths containing ':' still parse.
_KEY_PATTERN = re.compile(r"^(?P<path>.+):(?P<line>\d+):(?P<col>\d+)(?:-(?P<end_line>\d+):(?P<end_col>\d+))?$")


class BaselineFormatError(ValueError):
    pass


class BaselineEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    rule_id: StrictStr = Field(alias="ruleId", min_length=1)
    message: StrictStr
    severity: Union[StrictInt, StrictFloat]
    hash: Optional[StrictStr] = None


class BaselineFile(BaseModel):
    errors: List[BaselineEntry]


class BaselineDocument(BaseModel):
    files: Dict[str, BaselineFile]


def build_key(violation: Violation) -> str:
    key = f"{violation.file_path}:{violation.start_line}:{violation.start_column}"
    if violation.end_line is not None and violation.end_column is not None:
        key += f"-{violation.end_line}:{violation.end_column}"
    return key


def read_key(key: str) -> Tuple[str, int, int, Optional[int], Optional[int]]:
    m = _KEY_PATTERN.match(key)
    if not m:
        raise BaselineFormatError(f"Invalid key: {key}")
    end_line = m.group("end_line")
    end_col = m.group("end_col")
    return (
        m.group("path"),
        int(m.group("line")),
        int(m.group("col")),
        int(end_line) if end_line is not None else None,
        int(end_col) if end_col is not None else None,
    )


def serialize(baseline: Baseline) -> str:
    files: Dict[str, Dict[str, list]] = {}
    for violation in baseline.get_violations():
        entry = BaselineEntry(
            rule_id=violation.rule_id,
            message=violation.message,
            severity=violation.severity,
            hash=violation.hash,
        )
        files.setdefault(build_key(violation), {"errors": []})["errors"].append(
            entry.model_dump(by_alias=True, exclude_none=True)
        )
    return json.dumps({"files": files}, indent=2, ensure_ascii=False)


def deserialize(text: str) -> Baseline:
    try:
        document = BaselineDocument.model_validate(json.loads(text))
    except json.JSONDecodeError as e:
        raise BaselineFormatError(f"Baseline is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    except ValidationError as e:
        raise BaselineFormatError(f"Baseline does not match the expected schema:\n{e}") from e

    baseline = Baseline()
    for key, file in document.files.items():
        file_path, start_line, start_column, end_line, end_column = read_key(key)
        for error in file.errors:
            baseline.add_violation(Violation(
                file_path=file_path,
                start_line=start_line,
                start_column=start_column,
                end_line=end_line,
                end_column=end_column,
                rule_id=error.rule_id,
                message=error.message,
                severity=error.severity,
                hash=error.hash,
            ))
    return baseline
