"""
Demo: Split a few sample strings, print diagnostics and a scan trace.
"""

from pybag import fields, unquote_strings, ParseError
from pybag.diagnostics import analyze_fields
from pybag.fields import trace_fields
from pybag.serialization import trace_to_yaml


SAMPLES = [
    'name="Smith, John",age=42,tags=(a,b,c)',
    "count(x, y),'it''s',z\\,w",
    "a,(b,c",
    "x)(,, y ",
]


def print_report(report):
    """Pretty-print a FieldsReport."""
    print()
    print("=" * 70)
    print(f"FIELDS REPORT: {report.text!r} (sep {report.separator!r})")
    print("=" * 70)
    print()

    print("📊 FIELDS")
    print(f"  Valid:                 {'YES' if report.is_valid else 'NO'}")
    print(f"  Field Count:           {report.field_count}")
    print(f"  Empty Fields:          {report.empty_fields}")
    print(f"  Quoted Fields:         {report.quoted_fields}")
    if report.fields is not None:
        for i, value in enumerate(report.fields):
            print(f"    [{i}] {value!r}")
    print()

    print("📐 SCAN")
    print(f"  Max Paren Depth:       {report.max_paren_depth}")
    print(f"  Min Paren Depth:       {report.min_paren_depth}")
    print(f"  Escapes:               {report.escape_count}")
    print(f"  Suppressed Separators: {report.suppressed_separators}")
    print()

    if report.warnings:
        print("⚠️  WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("✨ NO WARNINGS")
    print()


if __name__ == "__main__":
    for sample in SAMPLES:
        print_report(analyze_fields(sample, ","))

    # Split, then strip the quotes off each value
    pairs = fields('name="Smith, John",city="Oslo"', ",")
    values = [p.partition("=")[2] for p in pairs]
    try:
        print(f"Unquoted values: {unquote_strings(values)}")
    except ParseError as e:
        print(f"Failed: {e}")

    # Full trace of a short input
    print()
    print(trace_to_yaml(trace_fields('a,"b,c"', ",")))
