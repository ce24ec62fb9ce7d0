"""Baseline store: accepted violations grouped by file, matched by hash or location+message."""
from typing import Dict, List

from core.models import Violation


def violations_match_by_hash(v1: Violation, v2: Violation) -> bool:
    return bool(v1.hash) and bool(v2.hash) and v1.hash == v2.hash


def violations_match_by_location_and_message(v1: Violation, v2: Violation) -> bool:
    return (
        v1.file_path == v2.file_path
        and v1.start_line == v2.start_line
        and v1.start_column == v2.start_column
        and v1.end_line == v2.end_line
        and v1.end_column == v2.end_column
        and v1.message == v2.message
    )


def violations_match(v1: Violation, v2: Violation) -> bool:
    """Same finding if the flagged source is identical, or, lacking hashes, the same spot and text."""
    return violations_match_by_hash(v1, v2) or violations_match_by_location_and_message(v1, v2)


class Baseline:
    def __init__(self):
        self._violations: Dict[str, List[Violation]] = {}

    def add_violation(self, violation: Violation) -> None:
        self._violations.setdefault(violation.file_path, []).append(violation)

    def has_file_violation(self, violation: Violation) -> bool:
        return any(
            violations_match(v, violation)
            for v in self._violations.get(violation.file_path, ())
        )

    def get_violations(self) -> List[Violation]:
        return [v for vs in self._violations.values() for v in vs]

    def files(self) -> List[str]:
        return list(self._violations)

    def violations_for(self, file_path: str) -> List[Violation]:
        return list(self._violations.get(file_path, ()))

    def __len__(self) -> int:
        return sum(len(vs) for vs in self._violations.values())

