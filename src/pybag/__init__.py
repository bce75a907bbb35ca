"""
pybag — small generic helpers.

    - fields: split a string on a separator, respecting parentheses,
      quotes and backslash escapes
    - unquote_string / unquote_strings: strip double quotes and resolve
      the escapes inside them
    - ternary, deduplicate, contains, keys: one-line sequence helpers

Every function is pure. Nothing here does I/O or keeps state between calls.
"""

from pybag.errors import ErrorKind, FieldsError, ParseError, UnquoteError
from pybag.fields import fields, trace_fields
from pybag.sequences import contains, deduplicate, keys, ternary
from pybag.unquote import unquote_string, unquote_strings

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "ParseError",
    "FieldsError",
    "UnquoteError",
    "fields",
    "trace_fields",
    "unquote_string",
    "unquote_strings",
    "ternary",
    "deduplicate",
    "contains",
    "keys",
]
