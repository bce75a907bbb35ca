"""
Quote, escape and paren aware field splitting.

Splits a string on a single separator character while treating
parenthesis nesting, single/double quoting and backslash escapes as
suppressors of the separator.

Example:
    fields('a,(b,c),"d,e",f\\,g')

Becomes:
    ['a', '(b,c)', '"d,e"', 'f,g']

Scan rules (one pass, left to right, by code point):
    - An escaped character is copied verbatim, whatever it is
    - An unsuppressed separator closes the current field and is dropped
    - Quote and paren characters are always kept in the field
    - A quote of one kind is inert while the other kind is open
    - Paren characters inside quotes are inert

IMPORTANT:
    Balance is only validated once the whole string has been scanned.
    A ")" that drives the depth negative is not an error if a later
    "(" brings it back to zero.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from pybag.errors import ErrorKind, FieldsError


ESCAPE = "\\"
SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
OPEN_PAREN = "("
CLOSE_PAREN = ")"


class ScanAction(Enum):
    """What the scanner did with one character."""
    ESCAPE = "escape"                # backslash seen, next char is literal
    LITERAL = "literal"              # char consumed verbatim after an escape
    SPLIT = "split"                  # unsuppressed separator closed a field
    TOGGLE_DOUBLE = "toggle_double"
    TOGGLE_SINGLE = "toggle_single"
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"
    APPEND = "append"                # anything else, including inert specials


@dataclass(frozen=True)
class ScanStep:
    """
    Snapshot of the scanner right after consuming one character.

    Properties:
        index: Code point offset of the character in the input
        char: The character itself
        action: ScanAction taken for it
        paren_depth: Depth after the character (may be negative)
        in_single_quote / in_double_quote: Quote flags after the character
        pending_escape: True if the next character will be taken literally
        field_count: Number of fields completed so far
    """

    index: int
    char: str
    action: ScanAction
    paren_depth: int
    in_single_quote: bool
    in_double_quote: bool
    pending_escape: bool
    field_count: int


@dataclass
class ScanState:
    """
    Mutable state of a single fields() scan.

    Created per call, mutated only by step(), discarded afterwards.
    """

    paren_depth: int = 0
    in_single_quote: bool = False
    in_double_quote: bool = False
    pending_escape: bool = False
    current: List[str] = field(default_factory=list)
    output: List[str] = field(default_factory=list)

    @property
    def in_quote(self) -> bool:
        return self.in_single_quote or self.in_double_quote

    @property
    def suppressed(self) -> bool:
        """True when a separator would be copied instead of splitting."""
        return self.paren_depth != 0 or self.in_quote

    def step(self, char: str, sep: str) -> ScanAction:
        """Consume one character and report what was done with it."""
        if self.pending_escape:
            self.current.append(char)
            self.pending_escape = False
            return ScanAction.LITERAL

        if char == ESCAPE:
            self.pending_escape = True
            return ScanAction.ESCAPE

        if char == sep:
            if self.suppressed:
                self.current.append(char)
                return ScanAction.APPEND
            self.output.append("".join(self.current))
            self.current = []
            return ScanAction.SPLIT

        action = ScanAction.APPEND
        if char == DOUBLE_QUOTE:
            if not self.in_single_quote:
                self.in_double_quote = not self.in_double_quote
                action = ScanAction.TOGGLE_DOUBLE
        elif char == SINGLE_QUOTE:
            if not self.in_double_quote:
                self.in_single_quote = not self.in_single_quote
                action = ScanAction.TOGGLE_SINGLE
        elif char == OPEN_PAREN:
            if not self.in_quote:
                self.paren_depth += 1
                action = ScanAction.OPEN_PAREN
        elif char == CLOSE_PAREN:
            if not self.in_quote:
                self.paren_depth -= 1
                action = ScanAction.CLOSE_PAREN

        self.current.append(char)
        return action

    def snapshot(self, index: int, char: str, action: ScanAction) -> ScanStep:
        return ScanStep(
            index=index,
            char=char,
            action=action,
            paren_depth=self.paren_depth,
            in_single_quote=self.in_single_quote,
            in_double_quote=self.in_double_quote,
            pending_escape=self.pending_escape,
            field_count=len(self.output),
        )

    def error(self) -> ErrorKind | None:
        """Return the first end-of-scan violation, or None."""
        if self.pending_escape:
            return ErrorKind.DANGLING_ESCAPE
        if self.paren_depth < 0:
            return ErrorKind.TOO_MANY_CLOSING_PARENS
        if self.paren_depth > 0:
            return ErrorKind.UNBALANCED_PARENS
        if self.in_single_quote:
            return ErrorKind.UNBALANCED_SINGLE_QUOTE
        if self.in_double_quote:
            return ErrorKind.UNBALANCED_DOUBLE_QUOTE
        return None

    def finish(self) -> List[str]:
        """
        Validate the end state and return the completed fields.

        Raises:
            FieldsError: On the first violation, in fixed order
        """
        kind = self.error()
        if kind is not None:
            raise FieldsError(kind)

        if self.current:
            self.output.append("".join(self.current))
            self.current = []
        return self.output


def check_separator(sep: str) -> str:
    """
    Validate a separator argument.

    Raises:
        TypeError: If sep is not a str
        ValueError: If sep is not exactly one code point
    """
    if not isinstance(sep, str):
        raise TypeError(f"separator must be a str, got {type(sep).__name__}")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if sep == ESCAPE:
        warnings.warn(
            "Backslash separator is always consumed as an escape and never splits",
            UserWarning,
            stacklevel=3,
        )
    return sep


def fields(text: str, sep: str = ",") -> List[str]:
    """
    Split text on sep, respecting parentheses, quotes and escapes.

    Args:
        text: String to split
        sep: Single separator character

    Returns:
        List of fields. Quote and paren characters are kept, escape
        backslashes are dropped. Empty input gives an empty list and a
        trailing empty field is not returned.

    Raises:
        FieldsError: If escapes, parentheses or quotes are unbalanced
    """
    check_separator(sep)
    state = ScanState()
    for char in text:
        state.step(char, sep)
    return state.finish()


def trace_fields(text: str, sep: str = ",") -> List[ScanStep]:
    """
    Run the fields() scanner and record its state after every character.

    The end state is not validated, so malformed input can be inspected.
    """
    check_separator(sep)
    state = ScanState()
    steps = []
    for index, char in enumerate(text):
        action = state.step(char, sep)
        steps.append(state.snapshot(index, char, action))
    return steps


__all__ = [
    "ScanAction",
    "ScanStep",
    "ScanState",
    "check_separator",
    "fields",
    "trace_fields",
]
