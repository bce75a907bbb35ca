"""
Tests for serialization of scan traces and field reports.

These tests ensure lossless JSON/YAML round-trip of traces using the
explicit serialization functions in `pybag.serialization`.
"""

import json

import pytest
import yaml

from pybag.diagnostics import analyze_fields
from pybag.fields import ScanAction, trace_fields
from pybag.serialization import (
    report_to_dict,
    report_to_json,
    report_to_yaml,
    step_from_dict,
    step_to_dict,
    trace_from_json,
    trace_from_yaml,
    trace_to_json,
    trace_to_yaml,
)


SAMPLE = 'key="a,b",(x,\'y\'),z\\,w'


def test_step_dict_shape():
    step = trace_fields("(", ",")[0]
    d = step_to_dict(step)

    assert d == {
        "index": 0,
        "char": "(",
        "action": "open_paren",
        "paren_depth": 1,
        "in_single_quote": False,
        "in_double_quote": False,
        "pending_escape": False,
        "field_count": 0,
    }


def test_trace_json_roundtrip():
    steps = trace_fields(SAMPLE, ",")
    assert trace_from_json(trace_to_json(steps)) == steps


def test_trace_yaml_roundtrip():
    steps = trace_fields(SAMPLE, ",")
    assert trace_from_yaml(trace_to_yaml(steps)) == steps


def test_unicode_yaml_roundtrip():
    steps = trace_fields("α,β", ",")
    text = trace_to_yaml(steps)

    assert "α" in text
    assert trace_from_yaml(text) == steps


def test_empty_trace():
    assert trace_from_json(trace_to_json([])) == []
    assert trace_from_yaml(trace_to_yaml([])) == []


def test_unknown_action_rejected():
    with pytest.raises(ValueError):
        step_from_dict({"index": 0, "char": "a", "action": "jump"})


def test_step_from_dict_defaults():
    step = step_from_dict({"index": 3, "char": ",", "action": "split"})

    assert step.action == ScanAction.SPLIT
    assert step.paren_depth == 0
    assert step.field_count == 0


def test_report_dict_valid():
    d = report_to_dict(analyze_fields("a,(b,c)", ","))

    assert d["valid"] is True
    assert d["error"] is None
    assert d["fields"] == ["a", "(b,c)"]
    assert d["max_paren_depth"] == 1


def test_report_dict_invalid():
    d = report_to_dict(analyze_fields('a,"b', ","))

    assert d["valid"] is False
    assert d["error"] == "UNBALANCED_DOUBLE_QUOTE"
    assert d["fields"] is None


def test_report_json_and_yaml_agree():
    report = analyze_fields("a,,b", ",")

    assert json.loads(report_to_json(report)) == yaml.safe_load(report_to_yaml(report))
