"""
Error taxonomy for pybag parsing helpers.

Every failure the tokenizer or the unquoter can detect is one ErrorKind.
The kind's value is the fixed, human-readable message.

Callers should match on ``err.kind`` rather than on message text.
"""

from enum import Enum


class ErrorKind(Enum):
    """Terminal parse failures. None of these are retryable as-is."""

    DANGLING_ESCAPE = "dangling escape character at end of string"
    TOO_MANY_CLOSING_PARENS = "too many closing parentheses"
    UNBALANCED_PARENS = "unbalanced parentheses in string"
    UNBALANCED_SINGLE_QUOTE = "unbalanced single quote in string"
    UNBALANCED_DOUBLE_QUOTE = "unbalanced double quote in string"
    ESCAPE_OUTSIDE_QUOTE = "escape character found outside a quote"
    UNTERMINATED_DOUBLE_QUOTE = "unterminated double quote"


class ParseError(ValueError):
    """
    Base class for pybag parse failures.

    Subclasses ValueError so plain ``except ValueError`` handlers still
    catch it.

    Properties:
        kind: The ErrorKind that was detected
    """

    def __init__(self, kind: ErrorKind):
        super().__init__(kind.value)
        self.kind = kind


class FieldsError(ParseError):
    """Raised when a string cannot be split into fields."""
    pass


class UnquoteError(ParseError):
    """Raised when a string cannot be unquoted."""
    pass


__all__ = [
    "ErrorKind",
    "ParseError",
    "FieldsError",
    "UnquoteError",
]
