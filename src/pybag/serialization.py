"""
Serialization helpers for scan traces and field reports.

Provides lossless JSON/YAML round-trip of traces via an intermediate dict
representation. Reports are exported one way only.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

import yaml

from pybag.diagnostics import FieldsReport
from pybag.fields import ScanAction, ScanStep


def step_to_dict(step: ScanStep) -> Dict[str, Any]:
    return {
        "index": step.index,
        "char": step.char,
        "action": step.action.value,
        "paren_depth": step.paren_depth,
        "in_single_quote": step.in_single_quote,
        "in_double_quote": step.in_double_quote,
        "pending_escape": step.pending_escape,
        "field_count": step.field_count,
    }


def step_from_dict(d: Dict[str, Any]) -> ScanStep:
    return ScanStep(
        index=d["index"],
        char=d["char"],
        action=ScanAction(d["action"]),
        paren_depth=d.get("paren_depth", 0),
        in_single_quote=d.get("in_single_quote", False),
        in_double_quote=d.get("in_double_quote", False),
        pending_escape=d.get("pending_escape", False),
        field_count=d.get("field_count", 0),
    )


def trace_to_dicts(steps: List[ScanStep]) -> List[Dict[str, Any]]:
    return [step_to_dict(s) for s in steps]


def trace_from_dicts(items: List[Dict[str, Any]] | None) -> List[ScanStep]:
    return [step_from_dict(d) for d in items or []]


def trace_to_json(steps: List[ScanStep]) -> str:
    return json.dumps(trace_to_dicts(steps), sort_keys=True)


def trace_from_json(s: str) -> List[ScanStep]:
    return trace_from_dicts(json.loads(s))


def trace_to_yaml(steps: List[ScanStep]) -> str:
    return yaml.safe_dump(trace_to_dicts(steps), allow_unicode=True)


def trace_from_yaml(s: str) -> List[ScanStep]:
    return trace_from_dicts(yaml.safe_load(s))


def report_to_dict(r: FieldsReport) -> Dict[str, Any]:
    return {
        "text": r.text,
        "separator": r.separator,
        "valid": r.is_valid,
        "error": r.error.name if r.error is not None else None,
        "fields": r.fields,
        "field_count": r.field_count,
        "empty_fields": r.empty_fields,
        "quoted_fields": r.quoted_fields,
        "max_paren_depth": r.max_paren_depth,
        "min_paren_depth": r.min_paren_depth,
        "escape_count": r.escape_count,
        "suppressed_separators": r.suppressed_separators,
        "warnings": list(r.warnings),
    }


def report_to_json(r: FieldsReport) -> str:
    return json.dumps(report_to_dict(r), sort_keys=True)


def report_to_yaml(r: FieldsReport) -> str:
    return yaml.safe_dump(report_to_dict(r), allow_unicode=True)
