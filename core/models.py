"""Data models: analyzer results (ESLint JSON shape) and baseline violations."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

SEVERITY_WARNING = 1
SEVERITY_ERROR = 2

_MESSAGE_FIELDS = ("ruleId", "line", "column", "endLine", "endColumn",
                   "message", "severity", "fatal", "fix")
_RESULT_FIELDS = ("filePath", "messages", "errorCount", "fatalErrorCount", "warningCount",
                  "fixableErrorCount", "fixableWarningCount")


@dataclass(frozen=True)
class Location:
    line: int
    column: int


@dataclass(frozen=True)
class Range:
    start: Location
    end: Location


def build_range(start_line: int, start_column: int,
                end_line: Optional[int] = None, end_column: Optional[int] = None) -> Range:
    """Zero-width points get an end equal to their start."""
    return Range(
        start=Location(start_line, start_column),
        end=Location(
            end_line if end_line is not None else start_line,
            end_column if end_column is not None else start_column,
        ),
    )


@dataclass
class LintMessage:
    rule_id: Optional[str]
    line: Optional[int]
    column: Optional[int]
    message: str
    severity: int
    end_line: Optional[int] = None
    end_column: Optional[int] = None
    fatal: Optional[bool] = None
    fix: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def range(self) -> Range:
        # Messages without a location ("File ignored ...") point at the start of the file
        return build_range(self.line or 1, self.column or 1, self.end_line, self.end_column)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LintMessage":
        return cls(
            rule_id=data.get("ruleId"),
            line=data.get("line"),
            column=data.get("column"),
            end_line=data.get("endLine"),
            end_column=data.get("endColumn"),
            message=data.get("message", ""),
            severity=int(data.get("severity", SEVERITY_ERROR)),
            fatal=data.get("fatal"),
            fix=data.get("fix"),
            extra={k: v for k, v in data.items() if k not in _MESSAGE_FIELDS},
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "ruleId": self.rule_id,
            "severity": self.severity,
            "message": self.message,
        }
        if self.line is not None:
            out["line"] = self.line
        if self.column is not None:
            out["column"] = self.column
        if self.end_line is not None:
            out["endLine"] = self.end_line
        if self.end_column is not None:
            out["endColumn"] = self.end_column
        if self.fatal is not None:
            out["fatal"] = self.fatal
        if self.fix is not None:
            out["fix"] = self.fix
        out.update(self.extra)
        return out


@dataclass
class LintResult:
    file_path: str
    messages: List[LintMessage] = field(default_factory=list)
    error_count: int = 0
    fatal_error_count: int = 0
    warning_count: int = 0
    fixable_error_count: int = 0
    fixable_warning_count: int = 0
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LintResult":
        return cls(
            file_path=data.get("filePath", ""),
            messages=[LintMessage.from_dict(m) for m in data.get("messages", [])],
            error_count=int(data.get("errorCount", 0)),
            fatal_error_count=int(data.get("fatalErrorCount", 0)),
            warning_count=int(data.get("warningCount", 0)),
            fixable_error_count=int(data.get("fixableErrorCount", 0)),
            fixable_warning_count=int(data.get("fixableWarningCount", 0)),
            extra={k: v for k, v in data.items() if k not in _RESULT_FIELDS},
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "filePath": self.file_path,
            "messages": [m.to_dict() for m in self.messages],
            "errorCount": self.error_count,
            "fatalErrorCount": self.fatal_error_count,
            "warningCount": self.warning_count,
            "fixableErrorCount": self.fixable_error_count,
            "fixableWarningCount": self.fixable_warning_count,
        }
        out.update(self.extra)
        return out


@dataclass(frozen=True)
class Violation:
    """One accepted finding, recognisable across edits by the hash of its source span."""
    file_path: str
    start_line: int
    start_column: int
    end_line: Optional[int]
    end_column: Optional[int]
    rule_id: str
    message: str
    severity: int
    hash: Optional[str] = None

    def __post_init__(self):
        if not self.rule_id:
            raise ValueError("Violation requires a rule id")

    @property
    def range(self) -> Range:
        return build_range(self.start_line, self.start_column, self.end_line, self.end_column)
