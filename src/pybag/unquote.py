"""
Double-quote removal.

Removes one layer of double-quote delimiters and resolves the two
escapes that are meaningful inside a quoted region:

    \\"  ->  "
    \\\\  ->  \\

Any other backslash sequence inside quotes is kept as written.
A backslash outside quotes is an error.

Example:
    "foo\\"","bar"

Becomes:
    foo",bar
"""

from typing import Iterable, List

from pybag.errors import ErrorKind, UnquoteError


def unquote_string(text: str) -> str:
    """
    Unquote double quotes in a string.

    Raises:
        UnquoteError: On an escape outside quotes, a dangling escape, or an
            unterminated quote
    """
    out = []
    in_quote = False
    escape = False

    for char in text:
        if escape:
            if char not in ('"', "\\"):
                out.append("\\")
            out.append(char)
            escape = False
        elif char == "\\":
            if not in_quote:
                raise UnquoteError(ErrorKind.ESCAPE_OUTSIDE_QUOTE)
            escape = True
        elif char == '"':
            in_quote = not in_quote
        else:
            out.append(char)

    if escape:
        raise UnquoteError(ErrorKind.DANGLING_ESCAPE)
    if in_quote:
        raise UnquoteError(ErrorKind.UNTERMINATED_DOUBLE_QUOTE)
    return "".join(out)


def unquote_strings(items: Iterable[str]) -> List[str]:
    """
    Unquote every string in items, in order.

    The first failure is raised unchanged and no partial list is returned.
    """
    return [unquote_string(item) for item in items]


__all__ = [
    "unquote_string",
    "unquote_strings",
]
