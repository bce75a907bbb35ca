"""
Field Diagnostics — read-only inspection of a delimited string.

Runs the fields() scanner without raising and summarises:
    - Field inventory (count, empty fields, quoted fields)
    - Nesting (max depth, transient negative depth)
    - Escapes and suppressed separators
    - The parse error, if any
    - Warning flags for likely input mistakes

IMPORTANT: This never raises parse errors. Invalid input produces a report
with ``error`` set and ``fields`` left as None.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from pybag.errors import ErrorKind
from pybag.fields import (
    DOUBLE_QUOTE,
    SINGLE_QUOTE,
    ScanAction,
    ScanState,
    ScanStep,
    check_separator,
)


@dataclass
class FieldsReport:
    """Analysis report for one string/separator pair."""

    text: str
    separator: str
    fields: Optional[List[str]] = None
    error: Optional[ErrorKind] = None

    field_count: int = 0
    empty_fields: int = 0
    quoted_fields: int = 0

    max_paren_depth: int = 0
    min_paren_depth: int = 0

    escape_count: int = 0
    suppressed_separators: int = 0

    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def _is_quoted(value: str) -> bool:
    return len(value) >= 2 and value[0] == value[-1] and value[0] in (SINGLE_QUOTE, DOUBLE_QUOTE)


def analyze_fields(text: str, sep: str = ",") -> FieldsReport:
    """
    Inspect how text would be split on sep.

    Returns a FieldsReport with metrics and warnings.
    """
    check_separator(sep)
    report = FieldsReport(text=text, separator=sep)

    state = ScanState()
    steps: List[ScanStep] = []
    for index, char in enumerate(text):
        action = state.step(char, sep)
        steps.append(state.snapshot(index, char, action))

    # Scan metrics
    if steps:
        report.max_paren_depth = max(max(s.paren_depth for s in steps), 0)
        report.min_paren_depth = min(min(s.paren_depth for s in steps), 0)
    report.escape_count = sum(1 for s in steps if s.action == ScanAction.ESCAPE)
    report.suppressed_separators = sum(
        1 for s in steps if s.char == sep and s.action == ScanAction.APPEND
    )

    report.error = state.error()
    if report.error is None:
        report.fields = state.finish()
        report.field_count = len(report.fields)
        report.empty_fields = sum(1 for f in report.fields if f == "")
        report.quoted_fields = sum(1 for f in report.fields if _is_quoted(f))

    # Warning flags
    if report.error is not None:
        report.add_warning(f"Invalid input: {report.error.value}")

    if report.min_paren_depth < 0 and report.error != ErrorKind.TOO_MANY_CLOSING_PARENS:
        first = next(s.index for s in steps if s.paren_depth < 0)
        report.add_warning(
            f"Closing parenthesis at index {first} precedes its opening parenthesis"
        )

    if report.fields:
        empty = [str(i) for i, f in enumerate(report.fields) if f == ""]
        if empty:
            report.add_warning(f"Empty fields at positions: {', '.join(empty)}")

        padded = [str(i) for i, f in enumerate(report.fields) if f and f != f.strip()]
        if padded:
            report.add_warning(f"Fields with surrounding whitespace at positions: {', '.join(padded)}")

    return report


__all__ = ["FieldsReport", "analyze_fields"]
