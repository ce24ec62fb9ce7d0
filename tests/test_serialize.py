"""
Unit Tests — Baseline file format
"""
import json

import pytest

from core.baseline import Baseline
from core.models import Violation
from core.serialize import BaselineFormatError, build_key, deserialize, read_key, serialize


def violation(**overrides) -> Violation:
    fields = dict(file_path="a.js", start_line=3, start_column=5, end_line=3, end_column=10,
                  rule_id="no-unused-vars", message="'x' is unused.", severity=2, hash="abc123")
    fields.update(overrides)
    return Violation(**fields)


def test_key_with_and_without_end():
    assert build_key(violation()) == "a.js:3:5-3:10"
    assert build_key(violation(end_line=None, end_column=None)) == "a.js:3:5"
    assert build_key(violation(end_line=4, end_column=None)) == "a.js:3:5"


def test_read_key():
    assert read_key("src/a.js:3:5-3:10") == ("src/a.js", 3, 5, 3, 10)
    assert read_key("src/a.js:3:5") == ("src/a.js", 3, 5, None, None)
    assert read_key("C:/repo/a.js:1:2") == ("C:/repo/a.js", 1, 2, None, None)


@pytest.mark.parametrize("key", ["", "a.js", "a.js:3", ":3:5", "a.js:x:5", "a.js:3:5-3"])
def test_read_key_rejects_malformed(key):
    with pytest.raises(BaselineFormatError):
        read_key(key)


def test_serialize_layout():
    baseline = Baseline()
    baseline.add_violation(violation())
    baseline.add_violation(violation(file_path="b.js", hash=None, end_line=None, end_column=None))
    data = json.loads(serialize(baseline))
    assert data == {
        "files": {
            "a.js:3:5-3:10": {
                "errors": [{"ruleId": "no-unused-vars", "message": "'x' is unused.", "severity": 2, "hash": "abc123"}],
            },
            "b.js:3:5": {
                "errors": [{"ruleId": "no-unused-vars", "message": "'x' is unused.", "severity": 2}],
            },
        },
    }


def test_serialize_is_indented():
    baseline = Baseline()
    baseline.add_violation(violation())
    assert serialize(baseline).startswith('{\n  "files": {\n')


def test_serialize_groups_same_key():
    baseline = Baseline()
    baseline.add_violation(violation(rule_id="first"))
    baseline.add_violation(violation(rule_id="second", hash="other"))
    errors = json.loads(serialize(baseline))["files"]["a.js:3:5-3:10"]["errors"]
    assert [e["ruleId"] for e in errors] == ["first", "second"]


def test_round_trip():
    baseline = Baseline()
    originals = [
        violation(),
        violation(rule_id="eqeqeq", message="Expected '===' and instead saw '=='.", start_line=8, end_line=8, severity=1),
        violation(file_path="lib/util.js", hash=None),
        violation(file_path="lib/util.js", start_line=1, start_column=1, end_line=None, end_column=None),
        violation(file_path="weird:name.js", rule_id="first", message="ünïcödé"),
    ]
    for v in originals:
        baseline.add_violation(v)

    restored = deserialize(serialize(baseline))
    assert sorted(restored.get_violations(), key=repr) == sorted(originals, key=repr)


def test_empty_baseline_round_trip():
    assert serialize(Baseline()) == '{\n  "files": {}\n}'
    assert len(deserialize(serialize(Baseline()))) == 0


def test_unknown_fields_are_ignored():
    text = json.dumps({"version": 2, "files": {"a.js:1:1": {"errors": [
        {"ruleId": "semi", "message": "Missing semicolon.", "severity": 2, "note": "x"},
    ], "extra": True}}})
    [v] = deserialize(text).get_violations()
    assert v.rule_id == "semi"
    assert v.hash is None


@pytest.mark.parametrize("document", [
    {},
    {"files": []},
    {"files": {"a.js:1:1": {}}},
    {"files": {"a.js:1:1": {"errors": [{"message": "m", "severity": 2}]}}},
    {"files": {"a.js:1:1": {"errors": [{"ruleId": "r", "severity": 2}]}}},
    {"files": {"a.js:1:1": {"errors": [{"ruleId": "r", "message": "m"}]}}},
    {"files": {"a.js:1:1": {"errors": [{"ruleId": "r", "message": "m", "severity": "2"}]}}},
    {"files": {"a.js:1:1": {"errors": [{"ruleId": 5, "message": "m", "severity": 2}]}}},
    {"files": {"a.js:1:1": {"errors": [{"ruleId": "r", "message": "m", "severity": 2, "hash": 1}]}}},
    {"files": {"a.js:1:1": {"errors": [{"ruleId": "", "message": "m", "severity": 2}]}}},
    {"files": {"a.js": {"errors": []}}},
])
def test_deserialize_rejects_schema_violations(document):
    with pytest.raises(BaselineFormatError):
        deserialize(json.dumps(document))


def test_deserialize_rejects_invalid_json():
    with pytest.raises(BaselineFormatError, match="not valid JSON"):
        deserialize("{ nope")


def test_float_severity_is_accepted():
    text = json.dumps({"files": {"a.js:1:1": {"errors": [
        {"ruleId": "semi", "message": "Missing semicolon.", "severity": 2.0},
    ]}}})
    [v] = deserialize(text).get_violations()
    assert v.severity == 2


def test_boolean_severity_is_rejected():
    text = json.dumps({"files": {"a.js:1:1": {"errors": [
        {"ruleId": "semi", "message": "Missing semicolon.", "severity": True},
    ]}}})
    with pytest.raises(BaselineFormatError):
        deserialize(text)
